# backend/patternbook/patterns/registry.py
"""
Pattern Registry - Central store for design pattern entries
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from patternbook.errors import DuplicateEntryError
from patternbook.utils.debug import debug


class PatternCategory(Enum):
    """Classic GoF classification"""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"


@dataclass
class CodeExample:
    """An illustrative snippet, tagged with the language it is written in"""
    code: str
    language: str = "python"


@dataclass
class PatternEntry:
    """
    One documented design pattern

    Entries are independent: no entry refers to another, and the only
    relationship between them is their position in the catalog.
    """
    name: str
    description: str
    example: CodeExample

    # Guidance
    when_to_use: List[str] = field(default_factory=list)
    when_not_to_use: List[str] = field(default_factory=list)
    pros: List[str] = field(default_factory=list)
    cons: List[str] = field(default_factory=list)

    # Metadata
    category: Optional[PatternCategory] = None
    tags: List[str] = field(default_factory=list)


_WORD_RE = re.compile(r"[a-z0-9]+")


class PatternRegistry:
    """
    Ordered registry of pattern entries

    Provides lookup by name, filtering by category or tag, and keyword
    matching. Registration order is the catalog order.
    """

    def __init__(self):
        self.patterns: Dict[str, PatternEntry] = {}
        self._category_index: Dict[PatternCategory, List[str]] = {cat: [] for cat in PatternCategory}
        self._tag_index: Dict[str, List[str]] = {}

    @staticmethod
    def _key(name: str) -> str:
        return name.strip().lower()

    def register(self, entry: PatternEntry) -> None:
        """Register an entry; names are unique regardless of case"""
        key = self._key(entry.name)
        if key in self.patterns:
            raise DuplicateEntryError(entry.name)

        self.patterns[key] = entry

        if entry.category is not None:
            self._category_index[entry.category].append(key)

        for tag in entry.tags:
            self._tag_index.setdefault(tag.lower(), []).append(key)

        debug("REGISTRY", f"registered '{entry.name}'")

    def get(self, name: str) -> Optional[PatternEntry]:
        """Get an entry by name (case-insensitive)"""
        entry = self.patterns.get(self._key(name))
        debug("REGISTRY", f"get('{name}') -> {'found' if entry else 'not found'}")
        return entry

    def __len__(self) -> int:
        return len(self.patterns)

    def __contains__(self, name: str) -> bool:
        return self._key(name) in self.patterns

    def find_applicable(self, context: str, max_results: int = 5) -> List[PatternEntry]:
        """
        Find entries matching a free-text problem description.

        Scoring: entry name mentioned +3, each tag mentioned +2, each
        distinct context word (4+ letters) found in the description or
        when-to-use guidance +1. Ties keep catalog order.
        """
        if max_results < 1:
            raise ValueError(f"max_results must be at least 1, got {max_results}")

        context_lower = context.lower()
        words = {w for w in _WORD_RE.findall(context_lower) if len(w) >= 4}
        scored: List[tuple] = []

        for entry in self.patterns.values():
            score = 0

            if entry.name.lower() in context_lower:
                score += 3

            for tag in entry.tags:
                if tag.lower() in context_lower:
                    score += 2

            text = " ".join([entry.description] + entry.when_to_use).lower()
            text_words = set(_WORD_RE.findall(text))
            score += len(words & text_words)

            if score > 0:
                scored.append((score, entry))

        # sort() is stable, so equal scores stay in catalog order
        scored.sort(key=lambda item: item[0], reverse=True)
        results = [entry for _, entry in scored[:max_results]]

        debug("REGISTRY", f"find_applicable('{context[:40]}') -> {[e.name for e in results]}")
        return results

    def get_by_category(self, category: PatternCategory) -> List[PatternEntry]:
        """Get all entries in a category"""
        return [self.patterns[key] for key in self._category_index.get(category, [])]

    def get_by_tag(self, tag: str) -> List[PatternEntry]:
        """Get all entries with a specific tag"""
        return [self.patterns[key] for key in self._tag_index.get(tag.lower(), [])]

    def list_all(self) -> List[PatternEntry]:
        """List all registered entries in catalog order"""
        return list(self.patterns.values())


def build_registry(entries: List[PatternEntry]) -> PatternRegistry:
    """Create a registry holding the given entries in order"""
    registry = PatternRegistry()
    for entry in entries:
        registry.register(entry)
    return registry


# Global registry instance
_global_registry: Optional[PatternRegistry] = None


def get_pattern_registry() -> PatternRegistry:
    """Get or create the global registry of built-in patterns"""
    global _global_registry
    if _global_registry is None:
        debug("REGISTRY", "creating global PatternRegistry")
        registry = PatternRegistry()
        from patternbook.patterns.catalog import register_all_patterns
        register_all_patterns(registry)
        _global_registry = registry
    return _global_registry
