"""Assembly of complete Go source and test files from struct descriptors."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .config import GeneratorConfig
from .structs import Struct
from .templating import comment_lines, expand

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class File:
    """A generated Go file and its companion test file.

    In ``imports`` and ``test_imports`` an empty string starts a new import
    group.
    """

    name: str
    structs: tuple[Struct, ...]
    imports: tuple[str, ...] = ()
    test_imports: tuple[str, ...] = ()

    def generate_file(self, config: GeneratorConfig | None = None) -> str:
        config = config or GeneratorConfig()
        sb = io.StringIO()
        _write_header(sb, self.imports, config)
        for s in self.structs:
            sb.write("\n\n")
            s.generate_struct(sb)
        sb.write("\n")
        return sb.getvalue()

    def generate_test_file(self, config: GeneratorConfig | None = None) -> str:
        config = config or GeneratorConfig()
        sb = io.StringIO()
        _write_header(sb, self.test_imports, config)
        for s in self.structs:
            sb.write("\n\n")
            s.generate_tests(sb)
        for s in self.structs:
            sb.write("\n\n")
            s.generate_test_value_helpers(sb)
        sb.write("\n")
        return sb.getvalue()


def _write_header(sb: TextIO, imports: tuple[str, ...], config: GeneratorConfig) -> None:
    license_header = comment_lines(config.license_header) if config.license_header else ""
    sb.write(
        expand(
            "file_header.go.j2",
            {"licenseHeader": license_header, "packageName": config.package_name},
        )
    )
    if not imports:
        return
    sb.write("\n\nimport (\n")
    for imp in imports:
        if imp:
            sb.write(f"\t{imp}\n")
        else:
            sb.write("\n")
    sb.write(")")


def write_files(files: list[File], config: GeneratorConfig) -> list[Path]:
    """Generate every file and its test file into ``config.output_dir``."""
    config.output_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []

    for f in files:
        for path, content in (
            (config.source_path(f.name), f.generate_file(config)),
            (config.test_path(f.name), f.generate_test_file(config)),
        ):
            logger.info("Writing %s", path)
            with open(path, "w", encoding="utf-8") as out:
                out.write(content)
            written.append(path)

    return written
