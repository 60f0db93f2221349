import re


# \W plus "_" so underscores become separators; anchors never contain "_"
_NON_WORD = re.compile(r"[\W_]+")


def slugify(name: str) -> str:
    """
    Convert a pattern name into a document anchor.
    Deterministic: "Chain of Responsibility" -> "chain-of-responsibility".
    Letters and digits of any script are kept ("Синглтон" -> "синглтон").
    Returns "" when the name has no letters or digits.
    """
    return _NON_WORD.sub("-", name.strip().lower()).strip("-")
