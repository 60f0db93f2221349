"""
Catalog Validator - Checks pattern entries before anything is rendered.

Catches issues like:
- Missing required fields (name, description, example)
- Blank required text (e.g. an example with no code)
- Wrongly shaped fields
- Duplicate entry names
- Names that collide once turned into anchors

Validation is all-or-nothing: every problem is collected, and a catalog
with any error is rejected as a whole.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from patternbook.errors import CatalogValidationError
from patternbook.patterns.registry import PatternCategory, PatternEntry
from patternbook.utils.anchors import slugify
from patternbook.utils.serializers import serialize


class ValidationSeverity(Enum):
    ERROR = "error"      # Catalog cannot be rendered
    WARNING = "warning"  # Renders, but the entry is thin


@dataclass
class ValidationIssue:
    """A single validation issue found in the catalog"""
    severity: ValidationSeverity
    code: str           # Machine-readable issue code
    message: str        # Human-readable description
    entry_index: Optional[int] = None
    entry_name: Optional[str] = None
    field_name: Optional[str] = None
    suggestion: Optional[str] = None

    @property
    def entry_label(self) -> str:
        if self.entry_name:
            return self.entry_name
        if self.entry_index is not None:
            return f"entry #{self.entry_index + 1}"
        return "catalog"

    def describe(self) -> str:
        return f"[{self.code}] {self.entry_label}: {self.message}"

    def to_dict(self) -> dict:
        return {
            "severity": self.severity.value,
            "code": self.code,
            "message": self.message,
            "entry_index": self.entry_index,
            "entry_name": self.entry_name,
            "field": self.field_name,
            "suggestion": self.suggestion,
        }


@dataclass
class CatalogValidationResult:
    """Result of catalog validation"""
    is_valid: bool
    issues: List[ValidationIssue] = field(default_factory=list)
    stats: Dict[str, int] = field(default_factory=dict)

    @property
    def errors(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "issues": [i.to_dict() for i in self.issues],
            "stats": self.stats,
        }

    def get_summary(self) -> str:
        """Get human-readable summary"""
        status = "Valid" if self.is_valid else "Invalid"
        return (
            f"{status} | Entries: {self.stats.get('entries', 0)} | "
            f"Errors: {self.error_count}, Warnings: {self.warning_count}"
        )


class CatalogValidator:
    """
    Validates raw catalog entries (mappings, as loaded from a file).

    Usage:
        validator = CatalogValidator()
        result = validator.validate(raw_entries)

        if not result.is_valid:
            for issue in result.issues:
                print(issue.describe())
    """

    REQUIRED_TEXT_FIELDS = ("name", "description")
    LIST_FIELDS = ("when_to_use", "when_not_to_use", "pros", "cons", "tags")
    CATEGORIES = {c.value for c in PatternCategory}

    def __init__(self, strict_mode: bool = False):
        self.strict_mode = strict_mode

    def validate(self, raw_entries: Any) -> CatalogValidationResult:
        """Validate the entire catalog."""
        if not isinstance(raw_entries, list):
            issue = ValidationIssue(
                severity=ValidationSeverity.ERROR,
                code="INVALID_TYPE",
                message=f"catalog must be a list of entries, got {type(raw_entries).__name__}",
                suggestion="Put the entries under a top-level 'patterns' list",
            )
            return CatalogValidationResult(is_valid=False, issues=[issue], stats={"entries": 0})

        issues: List[ValidationIssue] = []
        for index, raw in enumerate(raw_entries):
            issues.extend(self._check_entry(index, raw))

        issues.extend(self._check_duplicate_names(raw_entries))
        issues.extend(self._check_anchor_collisions(raw_entries))

        has_errors = any(i.severity == ValidationSeverity.ERROR for i in issues)
        has_warnings = any(i.severity == ValidationSeverity.WARNING for i in issues)

        is_valid = not has_errors
        if self.strict_mode:
            is_valid = not has_errors and not has_warnings

        return CatalogValidationResult(
            is_valid=is_valid,
            issues=issues,
            stats={"entries": len(raw_entries)},
        )

    # ---------- per-entry checks ----------

    @staticmethod
    def _name_of(raw: Any) -> Optional[str]:
        if isinstance(raw, dict) and isinstance(raw.get("name"), str) and raw["name"].strip():
            return raw["name"].strip()
        return None

    def _issue(self, code: str, message: str, index: int, raw: Any,
               field_name: Optional[str] = None,
               severity: ValidationSeverity = ValidationSeverity.ERROR,
               suggestion: Optional[str] = None) -> ValidationIssue:
        return ValidationIssue(
            severity=severity,
            code=code,
            message=message,
            entry_index=index,
            entry_name=self._name_of(raw),
            field_name=field_name,
            suggestion=suggestion,
        )

    def _check_entry(self, index: int, raw: Any) -> List[ValidationIssue]:
        if not isinstance(raw, dict):
            return [self._issue(
                "INVALID_TYPE",
                f"entry must be a mapping, got {type(raw).__name__}",
                index, raw,
            )]

        issues = []
        for field_name in self.REQUIRED_TEXT_FIELDS:
            issues.extend(self._check_required_text(index, raw, field_name))
        issues.extend(self._check_example(index, raw))
        issues.extend(self._check_lists(index, raw))
        issues.extend(self._check_category(index, raw))
        issues.extend(self._check_guidance(index, raw))
        return issues

    def _check_required_text(self, index: int, raw: dict, field_name: str) -> List[ValidationIssue]:
        if field_name not in raw or raw[field_name] is None:
            return [self._issue(
                "MISSING_FIELD", f"missing field '{field_name}'", index, raw, field_name,
                suggestion=f"Add a '{field_name}' to the entry",
            )]
        value = raw[field_name]
        if not isinstance(value, str):
            return [self._issue(
                "INVALID_TYPE", f"field '{field_name}' must be text, got {type(value).__name__}",
                index, raw, field_name,
            )]
        if not value.strip():
            return [self._issue(
                "EMPTY_FIELD", f"field '{field_name}' is empty", index, raw, field_name,
            )]
        if field_name == "name" and any(not ch.isprintable() for ch in value):
            return [self._issue(
                "INVALID_NAME", f"name {value!r} contains control characters",
                index, raw, field_name,
                suggestion="Keep the name on a single line",
            )]
        if field_name == "name" and not slugify(value):
            return [self._issue(
                "INVALID_NAME", f"name '{value}' has no characters usable in an anchor",
                index, raw, field_name,
                suggestion="Use at least one letter or digit in the name",
            )]
        return []

    def _check_example(self, index: int, raw: dict) -> List[ValidationIssue]:
        example = raw.get("example")
        if example is None:
            return [self._issue(
                "MISSING_FIELD", "missing field 'example'", index, raw, "example",
                suggestion="Add a code example to the entry",
            )]

        if isinstance(example, str):
            code, language = example, "python"
        elif isinstance(example, dict):
            code, language = example.get("code"), example.get("language", "python")
            if code is None:
                return [self._issue(
                    "MISSING_FIELD", "missing field 'example.code'", index, raw, "example",
                )]
        else:
            return [self._issue(
                "INVALID_TYPE",
                f"field 'example' must be text or a mapping, got {type(example).__name__}",
                index, raw, "example",
            )]

        issues = []
        if not isinstance(code, str):
            issues.append(self._issue(
                "INVALID_TYPE", "field 'example.code' must be text", index, raw, "example",
            ))
        elif not code.strip():
            issues.append(self._issue(
                "EMPTY_FIELD", "field 'example' is empty", index, raw, "example",
            ))
        if not isinstance(language, str) or not language.strip():
            issues.append(self._issue(
                "INVALID_TYPE", "field 'example.language' must be non-empty text",
                index, raw, "example",
            ))
        return issues

    def _check_lists(self, index: int, raw: dict) -> List[ValidationIssue]:
        issues = []
        for field_name in self.LIST_FIELDS:
            value = raw.get(field_name)
            if value is None:
                continue
            if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
                issues.append(self._issue(
                    "INVALID_TYPE", f"field '{field_name}' must be a list of text items",
                    index, raw, field_name,
                ))
        return issues

    def _check_category(self, index: int, raw: dict) -> List[ValidationIssue]:
        category = raw.get("category")
        if category is None or (isinstance(category, str) and category in self.CATEGORIES):
            return []
        return [self._issue(
            "INVALID_TYPE",
            f"unknown category '{category}'",
            index, raw, "category",
            suggestion=f"Use one of: {', '.join(sorted(self.CATEGORIES))}",
        )]

    def _check_guidance(self, index: int, raw: dict) -> List[ValidationIssue]:
        issues = []
        for field_name in ("when_to_use", "pros", "cons"):
            if not raw.get(field_name):
                issues.append(self._issue(
                    "EMPTY_GUIDANCE", f"no '{field_name}' items", index, raw, field_name,
                    severity=ValidationSeverity.WARNING,
                ))
        return issues

    # ---------- cross-entry checks ----------

    def _check_duplicate_names(self, raw_entries: List[Any]) -> List[ValidationIssue]:
        issues = []
        positions: Dict[str, List[int]] = defaultdict(list)
        for index, raw in enumerate(raw_entries):
            name = self._name_of(raw)
            if name:
                positions[name.lower()].append(index)

        for indexes in positions.values():
            if len(indexes) < 2:
                continue
            first = raw_entries[indexes[0]]
            where = ", ".join(f"#{i + 1}" for i in indexes)
            issues.append(self._issue(
                "DUPLICATE_ENTRY",
                f"duplicate entry name '{self._name_of(first)}' (entries {where})",
                indexes[-1], raw_entries[indexes[-1]], "name",
                suggestion="Give each pattern a unique name",
            ))
        return issues

    def _check_anchor_collisions(self, raw_entries: List[Any]) -> List[ValidationIssue]:
        issues = []
        by_anchor: Dict[str, List[int]] = defaultdict(list)
        for index, raw in enumerate(raw_entries):
            name = self._name_of(raw)
            if name and slugify(name):
                by_anchor[slugify(name)].append(index)

        for anchor, indexes in by_anchor.items():
            names = {self._name_of(raw_entries[i]).lower() for i in indexes}
            # same-name clashes are already reported as duplicates
            if len(names) < 2:
                continue
            issues.append(self._issue(
                "ANCHOR_COLLISION",
                f"anchor '#{anchor}' is shared by "
                + ", ".join(f"'{self._name_of(raw_entries[i])}'" for i in indexes),
                indexes[-1], raw_entries[indexes[-1]], "name",
                suggestion="Rename one of the entries",
            ))
        return issues


def entries_to_raw(entries: List[PatternEntry]) -> List[dict]:
    """Turn PatternEntry objects back into the mapping shape the validator reads"""
    return [serialize(entry) for entry in entries]


def validate_catalog(raw_entries: Any, strict: bool = False) -> CatalogValidationResult:
    """Convenience function to validate raw entries."""
    validator = CatalogValidator(strict_mode=strict)
    return validator.validate(raw_entries)


def validate_entries(entries: List[PatternEntry], strict: bool = False) -> CatalogValidationResult:
    """Validate already-built PatternEntry objects."""
    return validate_catalog(entries_to_raw(entries), strict=strict)


def get_validation_summary(raw_entries: Any) -> str:
    """Get a quick validation summary string."""
    return validate_catalog(raw_entries).get_summary()


def raise_on_errors(raw_entries: Any, strict: bool = False, source: Optional[str] = None) -> CatalogValidationResult:
    """Validate raw entries and raise CatalogValidationError if they fail."""
    result = validate_catalog(raw_entries, strict=strict)
    if not result.is_valid:
        blocking = result.issues if strict else result.errors
        raise CatalogValidationError(blocking, source=source)
    return result
