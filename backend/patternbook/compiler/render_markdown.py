# backend/patternbook/compiler/render_markdown.py

import re
from typing import List

from patternbook.compiler.types import Document, Section
from patternbook.patterns.registry import PatternEntry


GUIDANCE_HEADINGS = [
    ("when_to_use", "When to use"),
    ("when_not_to_use", "When not to use"),
    ("pros", "Pros"),
    ("cons", "Cons"),
]

_BACKTICK_RUN = re.compile(r"`+")
_LINK_TEXT_SPECIAL = re.compile(r"([\\\[\]])")


def code_fence(code: str) -> str:
    """Shortest backtick fence (min 3) that cannot be closed by the code itself."""
    longest = max((len(run) for run in _BACKTICK_RUN.findall(code)), default=0)
    return "`" * max(3, longest + 1)


def link_text(name: str) -> str:
    """Backslash-escape characters that would end or nest a link label."""
    return _LINK_TEXT_SPECIAL.sub(r"\\\1", name)


def render_entry(entry: PatternEntry, heading_level: int = 2) -> List[str]:
    """Markdown lines for one entry, starting with its header."""
    lines = [f"{'#' * heading_level} {entry.name}", ""]

    if entry.category is not None:
        lines.append(f"*Category: {entry.category.value.capitalize()}*")
        lines.append("")

    lines.append(entry.description)
    lines.append("")

    sub = "#" * (heading_level + 1)
    for attr, heading in GUIDANCE_HEADINGS:
        items = getattr(entry, attr)
        if not items:
            continue
        lines.append(f"{sub} {heading}")
        lines.append("")
        lines.extend(f"- {item}" for item in items)
        lines.append("")

    fence = code_fence(entry.example.code)
    lines.append(f"{sub} Example")
    lines.append("")
    lines.append(f"{fence}{entry.example.language}")
    lines.append(entry.example.code)
    lines.append(fence)
    lines.append("")

    return lines


def render_section(section: Section) -> List[str]:
    # explicit anchor so TOC links work on any Markdown renderer
    return [f'<a id="{section.anchor}"></a>', ""] + render_entry(section.entry)


def render_markdown(document: Document) -> str:
    lines = [f"# {document.title}", "", "## Table of Contents", ""]

    for item in document.toc:
        lines.append(f"- [{link_text(item.name)}](#{item.anchor})")
    if document.toc:
        lines.append("")

    for section in document.sections:
        lines.extend(render_section(section))

    return "\n".join(lines).rstrip("\n") + "\n"
