"""Built-in catalog of the record types pdatagen generates."""

from pdatagen.generator.files import File

from .common import common_file
from .metrics import metrics_file
from .resource import resource_file
from .trace import trace_file

ALL_FILES: list[File] = [common_file, resource_file, trace_file, metrics_file]


def find_files(names: list[str] | tuple[str, ...]) -> list[File]:
    """Select catalog files by name, preserving catalog order.

    Raises KeyError naming the first unknown file.
    """
    by_name = {f.name: f for f in ALL_FILES}
    for name in names:
        if name not in by_name:
            raise KeyError(name)
    return [f for f in ALL_FILES if f.name in names]
