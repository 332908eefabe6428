"""Generator configuration."""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_PACKAGE_NAME = "pdata"
DEFAULT_FILE_PREFIX = "generated_"


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings for one generation pass.

    ``license_header`` is plain text; it is turned into a Go line comment and
    placed above the "Code generated" notice of every file.
    """

    output_dir: Path = Path(".")
    package_name: str = DEFAULT_PACKAGE_NAME
    file_prefix: str = DEFAULT_FILE_PREFIX
    license_header: str | None = None

    def source_path(self, name: str) -> Path:
        return self.output_dir / f"{self.file_prefix}{name}.go"

    def test_path(self, name: str) -> Path:
        return self.output_dir / f"{self.file_prefix}{name}_test.go"


def load_license_header(path: str | Path) -> str:
    """Read a license text file, dropping trailing blank lines."""
    with open(path, encoding="utf-8") as f:
        return f.read().rstrip()
