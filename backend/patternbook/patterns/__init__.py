"""
Design Pattern Library

The built-in reference catalog plus the registry used to look entries up.
File-based catalogs are read with patternbook.patterns.loader.
"""

from patternbook.patterns.registry import (
    CodeExample,
    PatternCategory,
    PatternEntry,
    PatternRegistry,
    build_registry,
    get_pattern_registry,
)
from patternbook.patterns.catalog import (
    PATTERN_CATALOG,
    register_all_patterns,
)

__all__ = [
    "CodeExample",
    "PatternCategory",
    "PatternEntry",
    "PatternRegistry",
    "build_registry",
    "get_pattern_registry",
    "PATTERN_CATALOG",
    "register_all_patterns",
]
