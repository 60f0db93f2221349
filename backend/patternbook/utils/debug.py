import sys

from patternbook import config


def debug(tag: str, message: str) -> None:
    """Print a tagged trace line to stderr when PATTERNBOOK_DEBUG is on."""
    if config.PATTERNBOOK_DEBUG:
        print(f"[{tag} DEBUG] {message}", file=sys.stderr)
