# backend/patternbook/errors.py
"""
Exceptions raised by the catalog loader, validator and compiler.

Library code raises these; only the CLI turns them into exit codes.
"""

from typing import List, Optional


class CatalogError(Exception):
    """Base class for every catalog failure"""


class CatalogLoadError(CatalogError):
    """The catalog file could not be read or parsed"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load catalog '{path}': {reason}")


class CatalogValidationError(CatalogError):
    """One or more entries are malformed; carries every blocking issue"""

    def __init__(self, issues: List, source: Optional[str] = None):
        self.issues = list(issues)
        self.source = source
        header = f"Catalog validation failed with {len(self.issues)} error(s)"
        if source:
            header += f" in '{source}'"
        lines = [header + ":"]
        lines.extend(f"  - {issue.describe()}" for issue in self.issues)
        super().__init__("\n".join(lines))

    @property
    def codes(self) -> List[str]:
        return [issue.code for issue in self.issues]


class DuplicateEntryError(CatalogError):
    """A pattern with the same name is already registered"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"duplicate entry: a pattern named '{name}' is already registered")


class UnsupportedFormatError(CatalogError):
    """Requested output format has no renderer"""

    def __init__(self, output_format: str, supported: List[str]):
        self.output_format = output_format
        self.supported = list(supported)
        super().__init__(
            f"Unsupported output format '{output_format}' "
            f"(expected one of: {', '.join(self.supported)})"
        )
