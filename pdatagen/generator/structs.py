"""Struct descriptors: the wrapper types that own fields and drive their emission."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, TextIO

from .templating import comment_lines, expand
from .types import StructKind

if TYPE_CHECKING:
    from .fields import Field

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MessagePtrStruct:
    """A wrapper over a pointer to an optional origin message.

    The generated type starts "nil" and must be initialized with ``InitEmpty``.
    ``description`` is plain text, emitted as a Go comment above the type.
    """

    kind: ClassVar[StructKind] = StructKind.MESSAGE_PTR

    struct_name: str
    description: str
    origin_full_name: str
    fields: tuple[Field, ...] = ()

    def placeholders(self) -> dict[str, str]:
        return {
            "structName": self.struct_name,
            "originName": self.origin_full_name,
            "description": comment_lines(self.description),
        }

    def generate_struct(self, sb: TextIO) -> None:
        logger.debug("Generating struct %s", self.struct_name)
        sb.write(expand("message_ptr.go.j2", self.placeholders()))
        _write_accessors(self, self.fields, sb)
        sb.write("\n\n")
        sb.write(expand("message_ptr_copy_to.go.j2", self.placeholders()))
        for f in self.fields:
            sb.write("\n")
            f.generate_copy_to_value(sb)
        sb.write("\n}")

    def generate_tests(self, sb: TextIO) -> None:
        sb.write(expand("message_ptr_test.go.j2", self.placeholders()))
        _write_accessors_tests(self, self.fields, sb)

    def generate_test_value_helpers(self, sb: TextIO) -> None:
        sb.write(expand("message_ptr_generate_test.go.j2", self.placeholders()))
        sb.write("\n\n")
        _write_fill_test(self, self.fields, sb)


@dataclass(frozen=True, slots=True)
class MessageValueStruct:
    """A wrapper over an embedded origin message that is always present."""

    kind: ClassVar[StructKind] = StructKind.MESSAGE_VALUE

    struct_name: str
    description: str
    origin_full_name: str
    fields: tuple[Field, ...] = ()

    def placeholders(self) -> dict[str, str]:
        return {
            "structName": self.struct_name,
            "originName": self.origin_full_name,
            "description": comment_lines(self.description),
        }

    def generate_struct(self, sb: TextIO) -> None:
        logger.debug("Generating struct %s", self.struct_name)
        sb.write(expand("message_value.go.j2", self.placeholders()))
        _write_accessors(self, self.fields, sb)
        sb.write("\n\n")
        sb.write(expand("message_value_copy_to.go.j2", self.placeholders()))
        for f in self.fields:
            sb.write("\n")
            f.generate_copy_to_value(sb)
        sb.write("\n}")

    def generate_tests(self, sb: TextIO) -> None:
        sb.write(expand("message_value_test.go.j2", self.placeholders()))
        _write_accessors_tests(self, self.fields, sb)

    def generate_test_value_helpers(self, sb: TextIO) -> None:
        sb.write(expand("message_value_generate_test.go.j2", self.placeholders()))
        sb.write("\n\n")
        _write_fill_test(self, self.fields, sb)


@dataclass(frozen=True, slots=True)
class SliceStruct:
    """A wrapper over a slice of pointers to ``element`` origin messages."""

    kind: ClassVar[StructKind] = StructKind.SLICE

    struct_name: str
    element: MessagePtrStruct

    @property
    def fields(self) -> tuple[Field, ...]:
        return ()

    @property
    def origin_full_name(self) -> str:
        return self.element.origin_full_name

    def placeholders(self) -> dict[str, str]:
        return {
            "structName": self.struct_name,
            "elementName": self.element.struct_name,
            "originName": self.origin_full_name,
        }

    def generate_struct(self, sb: TextIO) -> None:
        logger.debug("Generating slice %s of %s", self.struct_name, self.element.struct_name)
        sb.write(expand("slice.go.j2", self.placeholders()))

    def generate_tests(self, sb: TextIO) -> None:
        sb.write(expand("slice_test.go.j2", self.placeholders()))

    def generate_test_value_helpers(self, sb: TextIO) -> None:
        sb.write(expand("slice_generate_test.go.j2", self.placeholders()))


Struct = MessagePtrStruct | MessageValueStruct | SliceStruct


def _write_accessors(ms: Struct, fields: tuple[Field, ...], sb: TextIO) -> None:
    # Kinds that emit no accessor (oneof) must not leave blank lines behind.
    for f in fields:
        out = io.StringIO()
        f.generate_accessors(ms, out)
        if out.getvalue():
            sb.write("\n\n")
            sb.write(out.getvalue())


def _write_accessors_tests(ms: Struct, fields: tuple[Field, ...], sb: TextIO) -> None:
    for f in fields:
        out = io.StringIO()
        f.generate_accessors_test(ms, out)
        if out.getvalue():
            sb.write("\n\n")
            sb.write(out.getvalue())


def _write_fill_test(ms: Struct, fields: tuple[Field, ...], sb: TextIO) -> None:
    sb.write(expand("fill_test_header.go.j2", {"structName": ms.struct_name}))
    for f in fields:
        sb.write("\n")
        f.generate_set_with_test_value(sb)
    sb.write("\n}")
