"""Consistency checks over a catalog of files before any code is generated."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .fields import MessagePointerField, MessageValueField, PrimitiveField, SliceField
from .structs import SliceStruct
from .types import STRUCT_METHODS, is_builtin

if TYPE_CHECKING:
    from .fields import Field
    from .files import File

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class ValidationError(RuntimeError):
    """Raised when catalog validation fails."""


def _referenced_struct(field: Field) -> str | None:
    if isinstance(field, (MessagePointerField, MessageValueField)):
        return field.return_message.struct_name
    if isinstance(field, SliceField):
        return field.return_slice.struct_name
    return None


def validate(files: list[File]) -> None:
    """Validate a catalog of file descriptors."""
    file_names: set[str] = set()
    struct_owner: dict[str, str] = {}

    for f in files:
        if f.name in file_names:
            raise ValidationError(f"File {f.name} declared more than once")
        file_names.add(f.name)

        for s in f.structs:
            if not _IDENTIFIER.match(s.struct_name):
                raise ValidationError(f"Invalid struct name {s.struct_name!r} in file {f.name}")
            if s.struct_name in struct_owner:
                raise ValidationError(
                    f"{s.struct_name} declared in {f.name}, "
                    f"but already declared in {struct_owner[s.struct_name]}"
                )
            struct_owner[s.struct_name] = f.name

    for f in files:
        for s in f.structs:
            if isinstance(s, SliceStruct) and s.element.struct_name not in struct_owner:
                raise ValidationError(
                    f"{s.struct_name} references {s.element.struct_name}, "
                    "which is not declared in any file"
                )

            # Accessors must not shadow the methods every wrapper already has.
            accessors: set[str] = set(STRUCT_METHODS[s.kind])
            for field in s.fields:
                referenced = _referenced_struct(field)
                if referenced is not None and referenced not in struct_owner:
                    raise ValidationError(
                        f"{s.struct_name}.{field.field_name} references {referenced}, "
                        "which is not declared in any file"
                    )

                for name in field.accessor_names():
                    if not _IDENTIFIER.match(name):
                        raise ValidationError(f"Invalid accessor name {name!r} in {s.struct_name}")
                    if name in accessors:
                        raise ValidationError(f"{s.struct_name}.{name} generated more than once")
                    accessors.add(name)

                if isinstance(field, PrimitiveField) and not is_builtin(field.return_type):
                    raise ValidationError(
                        f"{s.struct_name}.{field.field_name} has non-builtin type "
                        f"{field.return_type}, declare it as a typed primitive"
                    )
