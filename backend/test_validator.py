"""
Tests for catalog validation
"""

import pytest

from conftest import raw_entry
from patternbook.errors import CatalogValidationError
from patternbook.validation import (
    ValidationSeverity,
    get_validation_summary,
    raise_on_errors,
    validate_catalog,
)


def codes(result):
    return [issue.code for issue in result.issues]


def test_valid_catalog_has_no_issues():
    result = validate_catalog([raw_entry("Singleton"), raw_entry("Factory")])
    assert result.is_valid
    assert result.issues == []
    assert result.stats == {"entries": 2}


def test_empty_catalog_is_valid():
    result = validate_catalog([])
    assert result.is_valid
    assert result.stats["entries"] == 0


def test_missing_example_names_the_entry():
    raw = raw_entry("Factory")
    del raw["example"]
    with pytest.raises(CatalogValidationError) as exc_info:
        raise_on_errors([raw_entry("Singleton"), raw])

    error = exc_info.value
    assert error.codes == ["MISSING_FIELD"]
    assert error.issues[0].entry_name == "Factory"
    assert error.issues[0].field_name == "example"
    assert "missing field" in str(error)
    assert "Factory" in str(error)


def test_missing_name_is_reported_by_position():
    raw = raw_entry("Ghost")
    del raw["name"]
    result = validate_catalog([raw_entry("Singleton"), raw])
    assert not result.is_valid
    issue = result.errors[0]
    assert issue.code == "MISSING_FIELD"
    assert issue.entry_name is None
    assert issue.describe() == "[MISSING_FIELD] entry #2: missing field 'name'"


def test_duplicate_names_fail_case_insensitively():
    with pytest.raises(CatalogValidationError) as exc_info:
        raise_on_errors([raw_entry("Singleton"), raw_entry("Factory"), raw_entry("singleton")])
    assert exc_info.value.codes == ["DUPLICATE_ENTRY"]
    assert "duplicate entry" in str(exc_info.value)
    assert "#1, #3" in str(exc_info.value)


def test_every_problem_is_enumerated_at_once():
    no_example = raw_entry("Factory")
    del no_example["example"]
    result = validate_catalog([
        raw_entry("Singleton"),
        no_example,
        raw_entry("Proxy", description="   "),
        raw_entry("Singleton"),
    ])
    assert sorted(codes(result)) == ["DUPLICATE_ENTRY", "EMPTY_FIELD", "MISSING_FIELD"]
    assert result.error_count == 3


def test_blank_example_code_is_empty_field():
    result = validate_catalog([raw_entry("Observer", example="   \n")])
    assert codes(result) == ["EMPTY_FIELD"]
    result = validate_catalog([raw_entry("Observer", example={"language": "python"})])
    assert codes(result) == ["MISSING_FIELD"]


def test_plain_text_example_is_accepted():
    assert validate_catalog([raw_entry("Observer", example="observer = Subject()")]).is_valid


def test_anchor_collision_between_distinct_names():
    result = validate_catalog([raw_entry("Chain of Responsibility"), raw_entry("Chain-of-Responsibility")])
    assert codes(result) == ["ANCHOR_COLLISION"]
    assert "#chain-of-responsibility" in result.issues[0].message


def test_name_without_letters_is_rejected():
    result = validate_catalog([raw_entry("???")])
    assert codes(result) == ["INVALID_NAME"]


@pytest.mark.parametrize("overrides", [
    {"pros": "not a list"},
    {"cons": ["ok", 3]},
    {"category": "architectural"},
    {"category": ["creational"]},
    {"description": 42},
    {"example": 7},
])
def test_wrong_shapes_are_invalid_type(overrides):
    result = validate_catalog([raw_entry("Bridge", **overrides)])
    assert not result.is_valid
    assert codes(result)[0] == "INVALID_TYPE"


def test_non_mapping_entry_and_non_list_catalog():
    result = validate_catalog([raw_entry("Bridge"), "Flyweight"])
    assert codes(result) == ["INVALID_TYPE"]
    assert result.issues[0].entry_index == 1

    result = validate_catalog({"name": "Bridge"})
    assert not result.is_valid
    assert codes(result) == ["INVALID_TYPE"]


def test_thin_guidance_warns_and_fails_only_when_strict():
    thin = raw_entry("Iterator", pros=[], cons=[])
    result = validate_catalog([thin])
    assert result.is_valid
    assert [i.severity for i in result.issues] == [ValidationSeverity.WARNING] * 2

    assert not validate_catalog([thin], strict=True).is_valid
    with pytest.raises(CatalogValidationError) as exc_info:
        raise_on_errors([thin], strict=True)
    assert set(exc_info.value.codes) == {"EMPTY_GUIDANCE"}


def test_summary_and_dict_view():
    assert get_validation_summary([raw_entry("State")]) == "Valid | Entries: 1 | Errors: 0, Warnings: 0"

    result = validate_catalog([raw_entry("State"), raw_entry("State")])
    payload = result.to_dict()
    assert payload["is_valid"] is False
    assert payload["error_count"] == 1
    assert payload["issues"][0]["code"] == "DUPLICATE_ENTRY"
    assert payload["issues"][0]["severity"] == "error"


@pytest.mark.parametrize("name", ["Line\nBreak", "Tab\there", "Bell\x07"])
def test_name_with_control_characters_is_rejected(name):
    result = validate_catalog([raw_entry(name)])
    assert codes(result) == ["INVALID_NAME"]
    assert "control characters" in result.issues[0].message


def test_non_latin_names_are_valid_and_distinct():
    result = validate_catalog([raw_entry("Синглтон"), raw_entry("Адаптер"), raw_entry("Café"), raw_entry("Caf")])
    assert result.is_valid
    assert result.issues == []
