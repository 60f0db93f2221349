from patternbook.compiler.compiler import (
    RENDERERS,
    SUFFIX_FORMATS,
    compile_document,
    resolve_format,
)
from patternbook.compiler.layout import build_document
from patternbook.compiler.types import Document, Section, TocItem

__all__ = [
    "RENDERERS",
    "SUFFIX_FORMATS",
    "compile_document",
    "resolve_format",
    "build_document",
    "Document",
    "Section",
    "TocItem",
]
