"""
Catalog Loader - reads pattern entries from YAML or JSON files.

Accepted layouts:

    # a bare list
    - name: Singleton
      description: ...
      example: |
        class Configuration: ...

    # or a mapping with an optional title
    title: My Patterns
    patterns:
      - name: Singleton
        ...

`whenToUse` / `whenNotToUse` are accepted as aliases, and `example` may be
plain text or a mapping with `code` and `language`.
"""

import json
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

from patternbook.errors import CatalogLoadError
from patternbook.patterns.registry import CodeExample, PatternCategory, PatternEntry
from patternbook.utils.debug import debug
from patternbook.validation.catalog_validator import raise_on_errors


KEY_ALIASES = {
    "whenToUse": "when_to_use",
    "whenNotToUse": "when_not_to_use",
}


@dataclass
class LoadedCatalog:
    entries: List[PatternEntry] = field(default_factory=list)
    title: Optional[str] = None
    source: str = "<built-in>"


class CatalogLoader:
    """
    Loads and validates pattern catalogs from structured files.

    Nothing is returned unless the whole file validates.
    """

    SUPPORTED_EXTENSIONS = (".yaml", ".yml", ".json")

    def __init__(self, strict_mode: bool = False):
        self.strict_mode = strict_mode

    def load(self, path: str) -> LoadedCatalog:
        """Read, validate and convert a catalog file."""
        title, raw_entries = self.read_raw(path)
        raise_on_errors(raw_entries, strict=self.strict_mode, source=str(path))

        entries = [entry_from_dict(raw) for raw in raw_entries]
        debug("LOADER", f"loaded {len(entries)} entries from {path}")
        return LoadedCatalog(entries=entries, title=title, source=str(path))

    def read_raw(self, path: str):
        """
        Parse a catalog file without validating it.

        Returns (title, raw_entries) with entry keys normalized.
        """
        path = str(path)
        extension = os.path.splitext(path)[1].lower()
        if extension not in self.SUPPORTED_EXTENSIONS:
            raise CatalogLoadError(
                path, f"unsupported file type '{extension or '(none)'}', expected .yaml, .yml or .json"
            )

        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            raise CatalogLoadError(path, e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise CatalogLoadError(path, f"not valid UTF-8: {e.reason} at byte {e.start}") from e

        try:
            if extension == ".json":
                data = json.loads(text) if text.strip() else None
            else:
                data = yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise CatalogLoadError(path, f"malformed {extension[1:].upper()}: {e}") from e

        debug("LOADER", f"parsed {path}")
        return split_document(data, path)


def split_document(data: Any, path: str = "<data>"):
    """Split parsed file content into (title, normalized raw entries)."""
    if data is None:
        return None, []

    title = None
    if isinstance(data, dict):
        title = data.get("title")
        if title is not None and not isinstance(title, str):
            raise CatalogLoadError(path, "'title' must be text")
        if "patterns" not in data:
            raise CatalogLoadError(path, "mapping catalog has no 'patterns' list")
        data = data["patterns"] if data["patterns"] is not None else []

    if not isinstance(data, list):
        # the validator reports the exact shape problem
        return title, data

    return title, [normalize_entry(raw) for raw in data]


def normalize_entry(raw: Any) -> Any:
    """Rename key aliases; anything that is not a mapping is left for the validator."""
    if not isinstance(raw, dict):
        return raw
    normalized: Dict[str, Any] = {}
    for key, value in raw.items():
        normalized[KEY_ALIASES.get(key, key)] = value
    return normalized


def entry_from_dict(raw: Dict[str, Any]) -> PatternEntry:
    """Build a PatternEntry from a validated mapping."""
    example = raw["example"]
    if isinstance(example, str):
        example = CodeExample(code=example.rstrip())
    else:
        example = CodeExample(
            code=example["code"].rstrip(),
            language=example.get("language", "python"),
        )

    category = raw.get("category")
    return PatternEntry(
        name=raw["name"].strip(),
        description=raw["description"].strip(),
        example=example,
        when_to_use=list(raw.get("when_to_use") or []),
        when_not_to_use=list(raw.get("when_not_to_use") or []),
        pros=list(raw.get("pros") or []),
        cons=list(raw.get("cons") or []),
        category=PatternCategory(category) if category else None,
        tags=list(raw.get("tags") or []),
    )
