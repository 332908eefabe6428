"""Command-line interface for pdatagen code generation."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from pdatagen.catalog import ALL_FILES, find_files
from pdatagen.generator.config import (
    DEFAULT_FILE_PREFIX,
    DEFAULT_PACKAGE_NAME,
    GeneratorConfig,
    load_license_header,
)
from pdatagen.generator.files import File, write_files
from pdatagen.generator.stats import CatalogStats, calculate_stats
from pdatagen.generator.validation import ValidationError, validate

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _select_files(names: tuple[str, ...]) -> list[File]:
    if not names:
        return list(ALL_FILES)
    try:
        return find_files(names)
    except KeyError as e:
        print(f"Unknown file: {e.args[0]}")
        sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """pdatagen accessor code generator."""
    _setup_logging(verbose)


@cli.command()
@click.option("--output", "-o", "output_dir", required=True, help="Output directory")
@click.option(
    "--file",
    "-f",
    "file_names",
    multiple=True,
    help="Catalog file to generate (repeatable). Omit to generate every file",
)
@click.option("--package", "package_name", default=DEFAULT_PACKAGE_NAME, help="Go package name")
@click.option("--prefix", "file_prefix", default=DEFAULT_FILE_PREFIX, help="Output file prefix")
@click.option(
    "--license-file",
    "license_file",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="Text file placed as a comment at the top of every generated file",
)
def gen(
    output_dir: str,
    file_names: tuple[str, ...],
    package_name: str,
    file_prefix: str,
    license_file: str | None,
) -> None:
    """Generate Go accessors and tests for the catalog."""
    files = _select_files(file_names)

    try:
        validate(ALL_FILES)
    except ValidationError as e:
        print(f"Invalid catalog: {e}")
        sys.exit(1)

    config = GeneratorConfig(
        output_dir=Path(output_dir),
        package_name=package_name,
        file_prefix=file_prefix,
        license_header=load_license_header(license_file) if license_file else None,
    )
    written = write_files(files, config)
    logger.info("Generated %d files in %s", len(written), config.output_dir)


@cli.command()
@click.option("--file", "-f", "file_names", multiple=True, help="Catalog file to describe")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def info(file_names: tuple[str, ...], output_json: bool) -> None:
    """Display catalog statistics and the hand-written code it relies on."""
    stats = calculate_stats(_select_files(file_names))

    if output_json:
        print(stats.to_json(indent=2))
    else:
        _output_plain(stats)


def _output_plain(stats: CatalogStats) -> None:
    """Output catalog statistics using rich text formatting."""
    console = Console()

    for file_stats in stats.files:
        console.print(f"[bold cyan]{file_stats.name}[/bold cyan]")
        table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
        table.add_column("Struct", style="white", no_wrap=True)
        table.add_column("Kind", style="dim")
        table.add_column("Fields", style="yellow", justify="right")
        table.add_column("Kinds", style="dim")
        table.add_column("Methods", style="green", justify="right")

        for s in file_stats.structs:
            kinds = ", ".join(f"{k}={v}" for k, v in s.field_counts.items())
            table.add_row(s.name, s.kind.value, str(s.field_count), kinds, str(s.method_count))

        console.print(table)
        console.print()

    console.print(
        f"[bold]{stats.struct_count}[/bold] structs, [bold]{stats.field_count}[/bold] fields"
    )

    if stats.manual_code:
        console.print()
        console.print("[bold cyan]Hand-written code required[/bold cyan]")
        manual_table = Table(show_header=False, box=None, padding=(0, 2, 0, 2))
        manual_table.add_column("Struct", style="white")
        manual_table.add_column("Name", style="yellow", no_wrap=True)
        manual_table.add_column("Reason", style="dim")
        for m in stats.manual_code:
            manual_table.add_row(m.struct_name, m.name, m.reason)
        console.print(manual_table)


def main() -> None:
    """Main entry point."""
    cli(auto_envvar_prefix="PDATAGEN")


if __name__ == "__main__":
    main()
