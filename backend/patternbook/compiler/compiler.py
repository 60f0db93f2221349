# backend/patternbook/compiler/compiler.py

from typing import Callable, Dict, List, Optional

from patternbook import config
from patternbook.compiler.layout import build_document
from patternbook.compiler.render_html import render_html
from patternbook.compiler.render_json import render_json
from patternbook.compiler.render_markdown import render_markdown
from patternbook.compiler.types import Document
from patternbook.errors import UnsupportedFormatError
from patternbook.patterns.registry import PatternEntry
from patternbook.utils.debug import debug
from patternbook.validation.catalog_validator import entries_to_raw, raise_on_errors


RENDERERS: Dict[str, Callable[[Document], str]] = {
    "markdown": render_markdown,
    "html": render_html,
    "json": render_json,
}

FORMAT_ALIASES = {
    "md": "markdown",
    "htm": "html",
}

SUFFIX_FORMATS = {
    ".md": "markdown",
    ".markdown": "markdown",
    ".html": "html",
    ".htm": "html",
    ".json": "json",
}


def resolve_format(output_format: str) -> str:
    """Canonical renderer name for a user-supplied format."""
    name = output_format.strip().lower()
    name = FORMAT_ALIASES.get(name, name)
    if name not in RENDERERS:
        raise UnsupportedFormatError(output_format, sorted(RENDERERS))
    return name


def compile_document(
    entries: List[PatternEntry],
    output_format: str = "markdown",
    title: Optional[str] = None,
    strict: bool = False,
) -> str:
    """
    Validate entries, lay them out and render them.

    All-or-nothing: a catalog with any error raises CatalogValidationError
    before a single line is rendered. Pure: same input, same output.
    """
    renderer = RENDERERS[resolve_format(output_format)]
    raise_on_errors(entries_to_raw(entries), strict=strict)

    document = build_document(entries, title or config.PATTERNBOOK_TITLE)
    output = renderer(document)

    debug("COMPILER", f"rendered {len(entries)} entries as {output_format} ({len(output)} chars)")
    return output
