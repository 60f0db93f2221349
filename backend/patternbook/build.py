# backend/patternbook/build.py
"""
Build service - load, validate, render and write a catalog document.
"""

import os
from pathlib import Path
from typing import Optional

from patternbook import config
from patternbook.compiler import SUFFIX_FORMATS, compile_document, resolve_format
from patternbook.errors import CatalogError
from patternbook.patterns.catalog import PATTERN_CATALOG
from patternbook.patterns.loader import CatalogLoader, LoadedCatalog
from patternbook.schemas import BuildRequest, BuildResponse
from patternbook.utils.debug import debug


def load_catalog(catalog_path: Optional[str] = None, strict: bool = False) -> LoadedCatalog:
    """Load a catalog file, or the built-in catalog when no path is given."""
    path = catalog_path or config.PATTERNBOOK_CATALOG
    if path:
        return CatalogLoader(strict_mode=strict).load(path)
    return LoadedCatalog(entries=list(PATTERN_CATALOG))


def infer_format(output_path: str, output_format: Optional[str] = None) -> str:
    """Explicit format wins; otherwise the output suffix; otherwise the configured default."""
    if output_format:
        return resolve_format(output_format)
    suffix = Path(output_path).suffix.lower()
    if suffix in SUFFIX_FORMATS:
        return SUFFIX_FORMATS[suffix]
    return resolve_format(config.PATTERNBOOK_FORMAT)


def write_document(text: str, output_path: str) -> int:
    """
    Write the rendered document and return the number of bytes written.

    The text goes to a sibling temp file first and replaces the
    destination in one step, so a failed write never leaves half a file.
    """
    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    temp_path = destination.with_name(destination.name + ".tmp")

    data = text.encode("utf-8")
    try:
        with open(temp_path, "wb") as f:
            f.write(data)
        os.replace(temp_path, destination)
    except OSError as e:
        raise CatalogError(f"Cannot write '{output_path}': {e.strerror or e}") from e
    finally:
        if temp_path.exists():
            temp_path.unlink()

    return len(data)


def build_catalog(request: BuildRequest) -> BuildResponse:
    output_format = infer_format(request.output_path, request.output_format)
    catalog = load_catalog(request.catalog_path, strict=request.strict)

    text = compile_document(
        catalog.entries,
        output_format=output_format,
        title=request.title or catalog.title,
        strict=request.strict,
    )
    bytes_written = write_document(text, request.output_path)

    debug("BUILD", f"wrote {bytes_written} bytes to {request.output_path}")
    return BuildResponse(
        status="success",
        output_path=request.output_path,
        output_format=output_format,
        entry_count=len(catalog.entries),
        bytes_written=bytes_written,
        source=catalog.source,
    )
