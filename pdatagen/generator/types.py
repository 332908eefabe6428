"""Shared type definitions for struct and field descriptors."""

from enum import StrEnum, auto
from typing import Protocol


class NamedStruct(Protocol):
    """Anything that owns fields and can be addressed by its generated type name."""

    @property
    def struct_name(self) -> str: ...


class FieldKind(StrEnum):
    """Categorical shape a field can take."""

    SLICE = auto()
    MESSAGE_PTR = auto()
    MESSAGE_VALUE = auto()
    PRIMITIVE = auto()
    PRIMITIVE_TYPED = auto()
    ONEOF = auto()


class StructKind(StrEnum):
    """Categorical shape of a generated wrapper type."""

    MESSAGE_PTR = auto()
    MESSAGE_VALUE = auto()
    SLICE = auto()


GO_BUILTIN_TYPES = frozenset(
    [
        "bool",
        "string",
        "byte",
        "rune",
        "int",
        "int8",
        "int16",
        "int32",
        "int64",
        "uint",
        "uint8",
        "uint16",
        "uint32",
        "uint64",
        "float32",
        "float64",
        "[]byte",
    ]
)


def is_builtin(type_name: str) -> bool:
    """Check if a Go type name is a builtin scalar type."""
    return type_name in GO_BUILTIN_TYPES


# Methods every generated wrapper carries regardless of its fields.
STRUCT_METHODS: dict[StructKind, tuple[str, ...]] = {
    StructKind.MESSAGE_PTR: ("InitEmpty", "IsNil", "CopyTo"),
    StructKind.MESSAGE_VALUE: ("InitEmpty", "IsNil", "CopyTo"),
    StructKind.SLICE: ("Len", "At", "MoveAndAppendTo", "CopyTo", "Resize", "Append"),
}
