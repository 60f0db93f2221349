from typing import List

from patternbook.compiler.types import Document, Section, TocItem
from patternbook.patterns.registry import PatternEntry
from patternbook.utils.anchors import slugify


def build_document(entries: List[PatternEntry], title: str) -> Document:
    """
    Lay out entries as a table of contents plus one section per entry.
    Input order is kept; entries are expected to be validated already.
    """
    document = Document(title=title)

    for entry in entries:
        anchor = slugify(entry.name)
        document.toc.append(TocItem(name=entry.name, anchor=anchor))
        document.sections.append(Section(anchor=anchor, entry=entry))

    return document
