import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

PATTERNBOOK_FORMAT = os.getenv("PATTERNBOOK_FORMAT", "markdown")
PATTERNBOOK_TITLE = os.getenv("PATTERNBOOK_TITLE", "Design Patterns Reference")
PATTERNBOOK_CATALOG = os.getenv("PATTERNBOOK_CATALOG") or None
PATTERNBOOK_DEBUG = os.getenv("PATTERNBOOK_DEBUG", "0").strip().lower() in ("1", "true", "yes", "on")
