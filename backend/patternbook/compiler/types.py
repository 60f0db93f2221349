from dataclasses import dataclass, field
from typing import List

from patternbook.patterns.registry import PatternEntry


@dataclass
class TocItem:
    name: str
    anchor: str


@dataclass
class Section:
    anchor: str
    entry: PatternEntry


@dataclass
class Document:
    title: str
    toc: List[TocItem] = field(default_factory=list)
    sections: List[Section] = field(default_factory=list)
