"""Field descriptors and their per-kind Go code emission.

Every field kind knows how to render four pieces of code for the struct that
owns it:

- ``generate_accessors``: the public accessor methods.
- ``generate_accessors_test``: the unit test for those accessors.
- ``generate_set_with_test_value``: the statements that stamp a test value into
  ``tv`` inside the owner's ``fillTest`` helper.
- ``generate_copy_to_value``: the statements that deep-copy the field from
  ``ms`` into ``dest`` inside the owner's ``CopyTo`` method.

All output is appended to the caller-supplied buffer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, TextIO

from .templating import expand
from .types import FieldKind, NamedStruct

if TYPE_CHECKING:
    from .structs import MessagePtrStruct, MessageValueStruct, SliceStruct


@dataclass(frozen=True, slots=True)
class SliceField:
    """A field holding an ordered sequence of a composite element type."""

    kind: ClassVar[FieldKind] = FieldKind.SLICE

    field_name: str
    origin_field_name: str
    return_slice: SliceStruct

    def placeholders(self, ms: NamedStruct) -> dict[str, str]:
        return {
            "structName": ms.struct_name,
            "fieldName": self.field_name,
            "returnType": self.return_slice.struct_name,
            "originFieldName": self.origin_field_name,
        }

    def templates(self) -> tuple[str, ...]:
        return ("accessors_slice.go.j2", "accessors_slice_test.go.j2")

    def accessor_names(self) -> tuple[str, ...]:
        return (self.field_name,)

    def generate_accessors(self, ms: NamedStruct, sb: TextIO) -> None:
        sb.write(expand("accessors_slice.go.j2", self.placeholders(ms)))

    def generate_accessors_test(self, ms: NamedStruct, sb: TextIO) -> None:
        sb.write(expand("accessors_slice_test.go.j2", self.placeholders(ms)))

    def generate_set_with_test_value(self, sb: TextIO) -> None:
        sb.write(f"\tfillTest{self.return_slice.struct_name}(tv.{self.field_name}())")

    def generate_copy_to_value(self, sb: TextIO) -> None:
        sb.write(f"\tms.{self.field_name}().CopyTo(dest.{self.field_name}())")


@dataclass(frozen=True, slots=True)
class MessagePointerField:
    """A field holding an optional, separately allocated message.

    An empty owner yields a "nil" message until ``InitEmpty`` is called on it.
    """

    kind: ClassVar[FieldKind] = FieldKind.MESSAGE_PTR

    field_name: str
    origin_field_name: str
    return_message: MessagePtrStruct

    def placeholders(self, ms: NamedStruct) -> dict[str, str]:
        return {
            "structName": ms.struct_name,
            "fieldName": self.field_name,
            "lowerFieldName": self.field_name.lower(),
            "returnType": self.return_message.struct_name,
            "originFieldName": self.origin_field_name,
        }

    def templates(self) -> tuple[str, ...]:
        return ("accessors_message_ptr.go.j2", "accessors_message_ptr_test.go.j2")

    def accessor_names(self) -> tuple[str, ...]:
        return (self.field_name,)

    def generate_accessors(self, ms: NamedStruct, sb: TextIO) -> None:
        sb.write(expand("accessors_message_ptr.go.j2", self.placeholders(ms)))

    def generate_accessors_test(self, ms: NamedStruct, sb: TextIO) -> None:
        sb.write(expand("accessors_message_ptr_test.go.j2", self.placeholders(ms)))

    def generate_set_with_test_value(self, sb: TextIO) -> None:
        sb.write(f"\ttv.{self.field_name}().InitEmpty()\n")
        sb.write(f"\tfillTest{self.return_message.struct_name}(tv.{self.field_name}())")

    def generate_copy_to_value(self, sb: TextIO) -> None:
        sb.write(f"\tms.{self.field_name}().CopyTo(dest.{self.field_name}())")


@dataclass(frozen=True, slots=True)
class MessageValueField:
    """A field holding an embedded, always present message."""

    kind: ClassVar[FieldKind] = FieldKind.MESSAGE_VALUE

    field_name: str
    origin_field_name: str
    return_message: MessageValueStruct

    def placeholders(self, ms: NamedStruct) -> dict[str, str]:
        return {
            "structName": ms.struct_name,
            "fieldName": self.field_name,
            "lowerFieldName": self.field_name.lower(),
            "returnType": self.return_message.struct_name,
            "originFieldName": self.origin_field_name,
        }

    def templates(self) -> tuple[str, ...]:
        return ("accessors_message_value.go.j2", "accessors_message_value_test.go.j2")

    def accessor_names(self) -> tuple[str, ...]:
        return (self.field_name,)

    def generate_accessors(self, ms: NamedStruct, sb: TextIO) -> None:
        sb.write(expand("accessors_message_value.go.j2", self.placeholders(ms)))

    def generate_accessors_test(self, ms: NamedStruct, sb: TextIO) -> None:
        sb.write(expand("accessors_message_value_test.go.j2", self.placeholders(ms)))

    def generate_set_with_test_value(self, sb: TextIO) -> None:
        sb.write(f"\tfillTest{self.return_message.struct_name}(tv.{self.field_name}())")

    def generate_copy_to_value(self, sb: TextIO) -> None:
        sb.write(f"\tms.{self.field_name}().CopyTo(dest.{self.field_name}())")


@dataclass(frozen=True, slots=True)
class PrimitiveField:
    """A field holding a builtin scalar, exposed with a getter and a setter.

    ``default_val`` and ``test_val`` are Go literals used by the generated test.
    """

    kind: ClassVar[FieldKind] = FieldKind.PRIMITIVE

    field_name: str
    origin_field_name: str
    return_type: str
    default_val: str
    test_val: str

    def placeholders(self, ms: NamedStruct) -> dict[str, str]:
        return {
            "structName": ms.struct_name,
            "fieldName": self.field_name,
            "lowerFieldName": self.field_name.lower(),
            "returnType": self.return_type,
            "originFieldName": self.origin_field_name,
            "defaultVal": self.default_val,
            "testValue": self.test_val,
        }

    def templates(self) -> tuple[str, ...]:
        return ("accessors_primitive.go.j2", "accessors_primitive_test.go.j2")

    def accessor_names(self) -> tuple[str, ...]:
        return (self.field_name, f"Set{self.field_name}")

    def generate_accessors(self, ms: NamedStruct, sb: TextIO) -> None:
        sb.write(expand("accessors_primitive.go.j2", self.placeholders(ms)))

    def generate_accessors_test(self, ms: NamedStruct, sb: TextIO) -> None:
        sb.write(expand("accessors_primitive_test.go.j2", self.placeholders(ms)))

    def generate_set_with_test_value(self, sb: TextIO) -> None:
        sb.write(f"\ttv.Set{self.field_name}({self.test_val})")

    def generate_copy_to_value(self, sb: TextIO) -> None:
        sb.write(f"\tdest.Set{self.field_name}(ms.{self.field_name}())")


# Types that define a custom Go type (e.g. "type TimestampUnixNano uint64").
@dataclass(frozen=True, slots=True)
class TypedPrimitiveField:
    """A primitive field whose public type is a named type over ``raw_type``.

    With ``manual_setter`` the ``Set`` method is not generated and must be
    written by hand next to the generated code.
    """

    kind: ClassVar[FieldKind] = FieldKind.PRIMITIVE_TYPED

    field_name: str
    origin_field_name: str
    return_type: str
    default_val: str
    test_val: str
    raw_type: str
    manual_setter: bool = False

    def placeholders(self, ms: NamedStruct) -> dict[str, str]:
        return {
            "structName": ms.struct_name,
            "fieldName": self.field_name,
            "lowerFieldName": self.field_name.lower(),
            "returnType": self.return_type,
            "rawType": self.raw_type,
            "originFieldName": self.origin_field_name,
            "defaultVal": self.default_val,
            "testValue": self.test_val,
        }

    def _accessors_template(self) -> str:
        if self.manual_setter:
            return "accessors_primitive_typed_no_setter.go.j2"
        return "accessors_primitive_typed.go.j2"

    def templates(self) -> tuple[str, ...]:
        return (self._accessors_template(), "accessors_primitive_test.go.j2")

    def accessor_names(self) -> tuple[str, ...]:
        if self.manual_setter:
            return (self.field_name,)
        return (self.field_name, f"Set{self.field_name}")

    def generate_accessors(self, ms: NamedStruct, sb: TextIO) -> None:
        sb.write(expand(self._accessors_template(), self.placeholders(ms)))

    def generate_accessors_test(self, ms: NamedStruct, sb: TextIO) -> None:
        sb.write(expand("accessors_primitive_test.go.j2", self.placeholders(ms)))

    def generate_set_with_test_value(self, sb: TextIO) -> None:
        sb.write(f"\ttv.Set{self.field_name}({self.test_val})")

    def generate_copy_to_value(self, sb: TextIO) -> None:
        sb.write(f"\tdest.Set{self.field_name}(ms.{self.field_name}())")


@dataclass(frozen=True, slots=True)
class OneofField:
    """A discriminated union where exactly one alternative is active.

    The alternatives expose their own hand-written accessors, so this kind only
    seeds test data through ``fill_test_name`` and delegates deep copy to the
    hand-written ``copy_func_name``.
    """

    kind: ClassVar[FieldKind] = FieldKind.ONEOF

    copy_func_name: str
    origin_field_name: str
    test_val: str
    fill_test_name: str

    def placeholders(self, ms: NamedStruct) -> dict[str, str]:
        return {}

    def templates(self) -> tuple[str, ...]:
        return ()

    def accessor_names(self) -> tuple[str, ...]:
        return ()

    def generate_accessors(self, ms: NamedStruct, sb: TextIO) -> None:
        pass

    def generate_accessors_test(self, ms: NamedStruct, sb: TextIO) -> None:
        pass

    def generate_set_with_test_value(self, sb: TextIO) -> None:
        sb.write(f"\t(*tv.orig).{self.origin_field_name} = {self.test_val}\n")
        sb.write(f"\ttv.{self.fill_test_name}().InitEmpty()\n")
        sb.write(f"\tfillTest{self.fill_test_name}(tv.{self.fill_test_name}())")

    def generate_copy_to_value(self, sb: TextIO) -> None:
        sb.write(f"\t{self.copy_func_name}((*ms.orig), (*dest.orig))")


Field = (
    SliceField
    | MessagePointerField
    | MessageValueField
    | PrimitiveField
    | TypedPrimitiveField
    | OneofField
)

FIELD_TYPES: tuple[type, ...] = (
    SliceField,
    MessagePointerField,
    MessageValueField,
    PrimitiveField,
    TypedPrimitiveField,
    OneofField,
)
