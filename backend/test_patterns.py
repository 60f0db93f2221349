"""
Tests for the built-in pattern catalog and the registry
"""

import pytest

from conftest import make_entry
from patternbook import config
from patternbook.errors import DuplicateEntryError
from patternbook.patterns import (
    PATTERN_CATALOG,
    PatternCategory,
    PatternRegistry,
    build_registry,
    get_pattern_registry,
    register_all_patterns,
)
from patternbook.validation import validate_entries


EXPECTED_NAMES = [
    "Singleton", "Factory", "Observer", "Strategy", "Decorator",
    "Adapter", "Bridge", "Composite", "Facade", "Flyweight",
    "Proxy", "Chain of Responsibility", "Command", "Iterator", "State",
]


def test_catalog_has_fifteen_patterns_in_editorial_order():
    assert [p.name for p in PATTERN_CATALOG] == EXPECTED_NAMES


def test_builtin_catalog_is_valid_even_in_strict_mode():
    result = validate_entries(PATTERN_CATALOG, strict=True)
    assert result.is_valid, [i.describe() for i in result.issues]


def test_every_builtin_entry_is_complete():
    for entry in PATTERN_CATALOG:
        assert entry.description
        assert entry.when_to_use and entry.when_not_to_use
        assert entry.pros and entry.cons
        assert entry.category is not None
        assert entry.example.language == "python"
        # short textbook snippets, no leading indentation left over
        lines = entry.example.code.splitlines()
        assert 10 <= len(lines) <= 45, entry.name
        assert not lines[0].startswith(" ")


def test_builtin_examples_compile():
    for entry in PATTERN_CATALOG:
        compile(entry.example.code, f"<{entry.name}>", "exec")


def test_register_all_patterns_keeps_order():
    registry = PatternRegistry()
    register_all_patterns(registry)
    assert len(registry) == 15
    assert [p.name for p in registry.list_all()] == EXPECTED_NAMES


def test_global_registry_is_shared():
    assert get_pattern_registry() is get_pattern_registry()
    assert len(get_pattern_registry()) == len(PATTERN_CATALOG)


def test_get_is_case_insensitive():
    registry = get_pattern_registry()
    assert registry.get("chain of responsibility").name == "Chain of Responsibility"
    assert registry.get("  FACADE ").name == "Facade"
    assert registry.get("Visitor") is None
    assert "observer" in registry


def test_register_rejects_duplicate_names():
    registry = build_registry([make_entry("Singleton")])
    with pytest.raises(DuplicateEntryError) as exc_info:
        registry.register(make_entry("singleton"))
    assert "duplicate entry" in str(exc_info.value)
    assert len(registry) == 1


def test_get_by_category():
    registry = get_pattern_registry()
    creational = [p.name for p in registry.get_by_category(PatternCategory.CREATIONAL)]
    assert creational == ["Singleton", "Factory"]
    structural = registry.get_by_category(PatternCategory.STRUCTURAL)
    assert [p.name for p in structural] == [
        "Decorator", "Adapter", "Bridge", "Composite", "Facade", "Flyweight", "Proxy",
    ]


def test_get_by_tag():
    registry = get_pattern_registry()
    assert [p.name for p in registry.get_by_tag("Undo")] == ["Command"]
    assert {p.name for p in registry.get_by_tag("wrapper")} == {"Decorator", "Adapter"}
    assert registry.get_by_tag("nothing-tagged-like-this") == []


@pytest.mark.parametrize("context, expected", [
    ("Our editor needs undo and redo for its operations", "Command"),
    ("Files and folders in a tree hierarchy", "Composite"),
    ("Wrap a legacy third-party library with an incompatible interface", "Adapter"),
    ("Objects move through a state machine with clear transitions", "State"),
])
def test_find_applicable_ranks_best_match_first(context, expected):
    matches = get_pattern_registry().find_applicable(context, max_results=3)
    assert matches
    assert matches[0].name == expected


def test_find_applicable_honours_limit_and_misses():
    registry = get_pattern_registry()
    assert len(registry.find_applicable("object interface class behavior", max_results=2)) <= 2
    assert registry.find_applicable("zzzz qqqq") == []


@pytest.mark.parametrize("limit", [0, -1])
def test_find_applicable_rejects_non_positive_limit(limit):
    with pytest.raises(ValueError, match="max_results must be at least 1"):
        get_pattern_registry().find_applicable("undo redo", max_results=limit)


def test_find_applicable_ties_keep_catalog_order():
    registry = build_registry([
        make_entry("Alpha", tags=["shared"]),
        make_entry("Beta", tags=["shared"]),
    ])
    assert [p.name for p in registry.find_applicable("shared")] == ["Alpha", "Beta"]


def test_debug_lines_go_to_stderr_only_when_enabled(monkeypatch, capsys):
    registry = build_registry([make_entry("Alpha")])
    registry.get("Alpha")
    assert capsys.readouterr().err == ""

    monkeypatch.setattr(config, "PATTERNBOOK_DEBUG", True)
    registry.get("Alpha")
    captured = capsys.readouterr()
    assert "[REGISTRY DEBUG]" in captured.err
    assert captured.out == ""
