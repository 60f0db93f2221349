"""
Validation module for pattern catalogs.
"""

from patternbook.validation.catalog_validator import (
    CatalogValidationResult,
    CatalogValidator,
    ValidationIssue,
    ValidationSeverity,
    entries_to_raw,
    get_validation_summary,
    raise_on_errors,
    validate_catalog,
    validate_entries,
)

__all__ = [
    "CatalogValidationResult",
    "CatalogValidator",
    "ValidationIssue",
    "ValidationSeverity",
    "entries_to_raw",
    "get_validation_summary",
    "raise_on_errors",
    "validate_catalog",
    "validate_entries",
]
