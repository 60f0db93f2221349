import json

from patternbook.compiler.types import Document
from patternbook.utils.serializers import serialize


def render_json(document: Document) -> str:
    payload = {
        "title": document.title,
        "toc": [{"name": item.name, "anchor": item.anchor} for item in document.toc],
        "patterns": [
            dict(serialize(section.entry), anchor=section.anchor)
            for section in document.sections
        ],
    }
    return json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False) + "\n"
