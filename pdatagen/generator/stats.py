"""Statistics over a catalog: generated methods and required hand-written code."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from dataclasses_json import DataClassJsonMixin

from .fields import OneofField, TypedPrimitiveField
from .types import STRUCT_METHODS, FieldKind, StructKind

if TYPE_CHECKING:
    from .files import File
    from .structs import Struct


@dataclass(frozen=True)
class ManualCode(DataClassJsonMixin):
    """A piece of hand-written code the generated code relies on."""

    struct_name: str
    name: str
    reason: str


@dataclass(frozen=True)
class StructStats(DataClassJsonMixin):
    """Generation statistics for a single struct."""

    name: str
    kind: StructKind
    field_counts: dict[str, int]
    method_count: int

    @property
    def field_count(self) -> int:
        return sum(self.field_counts.values())


@dataclass(frozen=True)
class FileStats(DataClassJsonMixin):
    """Generation statistics for one generated file."""

    name: str
    structs: list[StructStats]


@dataclass(frozen=True)
class CatalogStats(DataClassJsonMixin):
    """Generation statistics for an entire catalog."""

    files: list[FileStats]
    manual_code: list[ManualCode] = field(default_factory=list)

    @property
    def struct_count(self) -> int:
        return sum(len(f.structs) for f in self.files)

    @property
    def field_count(self) -> int:
        return sum(s.field_count for f in self.files for s in f.structs)


def struct_stats(s: "Struct") -> StructStats:
    counts = {kind.value: 0 for kind in FieldKind}
    methods = len(STRUCT_METHODS[s.kind])
    for f in s.fields:
        counts[f.kind.value] += 1
        methods += len(f.accessor_names())
    return StructStats(
        name=s.struct_name,
        kind=s.kind,
        field_counts={k: v for k, v in counts.items() if v},
        method_count=methods,
    )


def manual_code(s: "Struct") -> list[ManualCode]:
    result: list[ManualCode] = []
    for f in s.fields:
        if isinstance(f, TypedPrimitiveField) and f.manual_setter:
            result.append(
                ManualCode(s.struct_name, f"Set{f.field_name}", "setter with custom logic")
            )
        elif isinstance(f, OneofField):
            result.append(ManualCode(s.struct_name, f.copy_func_name, "oneof copy function"))
            result.append(ManualCode(s.struct_name, f.fill_test_name, "oneof alternative accessor"))
    return result


def calculate_stats(files: list["File"]) -> CatalogStats:
    """Calculate generation statistics for a catalog."""
    file_stats: list[FileStats] = []
    manual: list[ManualCode] = []
    for f in files:
        file_stats.append(FileStats(f.name, [struct_stats(s) for s in f.structs]))
        for s in f.structs:
            manual.extend(manual_code(s))
    return CatalogStats(files=file_stats, manual_code=manual)
