"""
Tests for the build service: load, validate, render, write
"""

import json

import pytest

from patternbook import config
from patternbook.build import build_catalog, infer_format, load_catalog, write_document
from patternbook.errors import CatalogValidationError, UnsupportedFormatError
from patternbook.schemas import BuildRequest


CATALOG_YAML = """\
title: Team Patterns
patterns:
  - name: Singleton
    description: One instance.
    when_to_use: [Shared configuration]
    pros: [Simple]
    cons: [Global state]
    example: "config = Config()"
"""


def test_build_builtin_catalog_to_markdown(tmp_path):
    output = tmp_path / "docs" / "nested" / "patterns.md"
    response = build_catalog(BuildRequest(output_path=str(output)))

    assert response.status == "success"
    assert response.output_format == "markdown"
    assert response.entry_count == 15
    assert response.source == "<built-in>"

    text = output.read_text(encoding="utf-8")
    assert text.startswith("# Design Patterns Reference\n")
    assert response.bytes_written == len(text.encode("utf-8"))
    assert not (output.parent / "patterns.md.tmp").exists()


def test_build_is_repeatable_byte_for_byte(tmp_path):
    first, second = tmp_path / "a.html", tmp_path / "b.html"
    build_catalog(BuildRequest(output_path=str(first)))
    build_catalog(BuildRequest(output_path=str(second)))
    assert first.read_bytes() == second.read_bytes()


def test_build_from_file_uses_catalog_title(tmp_path):
    catalog = tmp_path / "catalog.yaml"
    catalog.write_text(CATALOG_YAML, encoding="utf-8")
    output = tmp_path / "out.json"

    response = build_catalog(BuildRequest(output_path=str(output), catalog_path=str(catalog)))

    payload = json.loads(output.read_text(encoding="utf-8"))
    assert response.entry_count == 1
    assert response.source == str(catalog)
    assert payload["title"] == "Team Patterns"
    assert [item["name"] for item in payload["toc"]] == ["Singleton"]


def test_request_title_overrides_catalog_title(tmp_path):
    catalog = tmp_path / "catalog.yaml"
    catalog.write_text(CATALOG_YAML, encoding="utf-8")
    output = tmp_path / "out.md"
    build_catalog(BuildRequest(output_path=str(output), catalog_path=str(catalog), title="Override"))
    assert output.read_text(encoding="utf-8").startswith("# Override\n")


def test_failed_validation_writes_nothing(tmp_path):
    catalog = tmp_path / "catalog.yaml"
    catalog.write_text("- name: Singleton\n  description: One instance.\n", encoding="utf-8")
    output = tmp_path / "out.md"
    output.write_text("previous build", encoding="utf-8")

    with pytest.raises(CatalogValidationError):
        build_catalog(BuildRequest(output_path=str(output), catalog_path=str(catalog)))

    assert output.read_text(encoding="utf-8") == "previous build"


def test_infer_format(monkeypatch):
    assert infer_format("guide.md") == "markdown"
    assert infer_format("guide.HTM") == "html"
    assert infer_format("guide.json") == "json"
    assert infer_format("guide.md", "html") == "html"

    monkeypatch.setattr(config, "PATTERNBOOK_FORMAT", "json")
    assert infer_format("guide.txt") == "json"

    with pytest.raises(UnsupportedFormatError):
        infer_format("guide.md", "docx")


def test_load_catalog_follows_config(tmp_path, monkeypatch):
    assert len(load_catalog().entries) == 15

    catalog = tmp_path / "catalog.yaml"
    catalog.write_text(CATALOG_YAML, encoding="utf-8")
    monkeypatch.setattr(config, "PATTERNBOOK_CATALOG", str(catalog))
    assert [e.name for e in load_catalog().entries] == ["Singleton"]


def test_write_document_replaces_existing_file(tmp_path):
    path = tmp_path / "doc.md"
    path.write_text("old", encoding="utf-8")
    assert write_document("new → text\n", str(path)) == len("new → text\n".encode("utf-8"))
    assert path.read_text(encoding="utf-8") == "new → text\n"


def test_interrupted_write_leaves_no_temp_file(tmp_path, monkeypatch):
    path = tmp_path / "doc.md"
    path.write_text("old", encoding="utf-8")

    def interrupted_replace(src, dst):
        raise KeyboardInterrupt

    monkeypatch.setattr("patternbook.build.os.replace", interrupted_replace)
    with pytest.raises(KeyboardInterrupt):
        write_document("new\n", str(path))

    assert path.read_text(encoding="utf-8") == "old"
    assert list(tmp_path.iterdir()) == [path]
