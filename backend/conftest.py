import pytest

from patternbook import config
from patternbook.patterns.registry import CodeExample, PatternCategory, PatternEntry


def make_entry(name: str, **overrides) -> PatternEntry:
    fields = dict(
        name=name,
        description=f"{name} in one sentence.",
        example=CodeExample(code=f"class {name.replace(' ', '')}:\n    pass"),
        when_to_use=[f"You need a {name.lower()}."],
        when_not_to_use=["A plain function is enough."],
        pros=["Clear intent."],
        cons=["One more class."],
        category=PatternCategory.CREATIONAL,
        tags=[name.lower()],
    )
    fields.update(overrides)
    return PatternEntry(**fields)


def raw_entry(name: str, **overrides) -> dict:
    raw = {
        "name": name,
        "description": f"{name} in one sentence.",
        "when_to_use": [f"You need a {name.lower()}."],
        "when_not_to_use": ["A plain function is enough."],
        "pros": ["Clear intent."],
        "cons": ["One more class."],
        "example": {"code": "print('hi')", "language": "python"},
    }
    raw.update(overrides)
    return raw


@pytest.fixture
def two_entries():
    return [make_entry("Singleton"), make_entry("Factory")]


@pytest.fixture(autouse=True)
def quiet_config(monkeypatch):
    """Keep tests independent of a developer's .env."""
    monkeypatch.setattr(config, "PATTERNBOOK_DEBUG", False)
    monkeypatch.setattr(config, "PATTERNBOOK_CATALOG", None)
    monkeypatch.setattr(config, "PATTERNBOOK_FORMAT", "markdown")
    monkeypatch.setattr(config, "PATTERNBOOK_TITLE", "Design Patterns Reference")
