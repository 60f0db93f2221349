"""Command line interface for patternbook, built with Typer."""

from pathlib import Path
from typing import Optional

import typer

from patternbook import config
from patternbook.build import build_catalog, load_catalog
from patternbook.compiler.render_markdown import render_entry
from patternbook.errors import CatalogError
from patternbook.patterns.catalog import PATTERN_CATALOG
from patternbook.patterns.loader import CatalogLoader
from patternbook.patterns.registry import (
    PatternCategory,
    PatternRegistry,
    build_registry,
    get_pattern_registry,
)
from patternbook.schemas import BuildRequest
from patternbook.validation.catalog_validator import validate_catalog, validate_entries

app = typer.Typer(
    name="patternbook",
    help="Reference guide to classic design patterns: validate the catalog and render it to Markdown, HTML or JSON.",
    no_args_is_help=True,
)


def _fail(error: Exception) -> None:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)


def _registry_for(catalog: Optional[Path]) -> PatternRegistry:
    if catalog is None and config.PATTERNBOOK_CATALOG is None:
        return get_pattern_registry()
    loaded = load_catalog(str(catalog) if catalog else None)
    return build_registry(loaded.entries)


@app.command()
def build(
    output: Path = typer.Argument(..., help="Destination file for the rendered document"),
    catalog: Optional[Path] = typer.Option(None, "--catalog", "-c", help="YAML or JSON catalog (default: built-in)"),
    output_format: Optional[str] = typer.Option(None, "--format", "-f", help="markdown, html or json (default: from file suffix)"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Document title"),
    strict: bool = typer.Option(False, "--strict", help="Treat warnings as errors"),
) -> None:
    """Render the catalog into a single document."""
    request = BuildRequest(
        output_path=str(output),
        catalog_path=str(catalog) if catalog else None,
        output_format=output_format,
        title=title,
        strict=strict,
    )
    try:
        response = build_catalog(request)
    except CatalogError as e:
        _fail(e)

    typer.echo(
        f"Wrote {response.entry_count} patterns to {response.output_path} "
        f"({response.output_format}, {response.bytes_written} bytes)"
    )


@app.command()
def validate(
    catalog: Optional[Path] = typer.Option(None, "--catalog", "-c", help="YAML or JSON catalog (default: built-in)"),
    strict: bool = typer.Option(False, "--strict", help="Treat warnings as errors"),
) -> None:
    """Check every entry and report all problems at once."""
    path = str(catalog) if catalog else config.PATTERNBOOK_CATALOG
    try:
        if path:
            _, raw_entries = CatalogLoader().read_raw(path)
            result = validate_catalog(raw_entries, strict=strict)
        else:
            result = validate_entries(PATTERN_CATALOG, strict=strict)
    except CatalogError as e:
        _fail(e)

    for issue in result.issues:
        typer.echo(f"{issue.severity.value}: {issue.describe()}")
    typer.echo(result.get_summary())

    if not result.is_valid:
        raise typer.Exit(code=1)


@app.command("list")
def list_patterns(
    catalog: Optional[Path] = typer.Option(None, "--catalog", "-c", help="YAML or JSON catalog (default: built-in)"),
    category: Optional[PatternCategory] = typer.Option(None, "--category", help="Only list one category"),
) -> None:
    """List pattern names in catalog order."""
    try:
        registry = _registry_for(catalog)
    except CatalogError as e:
        _fail(e)

    entries = registry.get_by_category(category) if category else registry.list_all()
    for entry in entries:
        typer.echo(entry.name)


@app.command()
def show(
    name: str = typer.Argument(..., help="Pattern name, e.g. 'Chain of Responsibility'"),
    catalog: Optional[Path] = typer.Option(None, "--catalog", "-c", help="YAML or JSON catalog (default: built-in)"),
) -> None:
    """Print one pattern as Markdown."""
    try:
        registry = _registry_for(catalog)
    except CatalogError as e:
        _fail(e)

    entry = registry.get(name)
    if entry is None:
        _fail(CatalogError(f"No pattern named '{name}'"))

    typer.echo("\n".join(render_entry(entry)).rstrip("\n"))


@app.command()
def search(
    query: str = typer.Argument(..., help="Describe the problem you are solving"),
    limit: int = typer.Option(5, "--limit", "-n", min=1, help="Maximum number of results"),
    catalog: Optional[Path] = typer.Option(None, "--catalog", "-c", help="YAML or JSON catalog (default: built-in)"),
) -> None:
    """Suggest patterns for a problem description."""
    try:
        registry = _registry_for(catalog)
    except CatalogError as e:
        _fail(e)

    matches = registry.find_applicable(query, max_results=limit)
    if not matches:
        typer.echo("No matching patterns.")
        return
    for entry in matches:
        typer.echo(f"{entry.name}: {entry.description}")


if __name__ == "__main__":
    app()
