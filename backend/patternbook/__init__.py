"""
patternbook - a reference guide to classic object-oriented design patterns.

Holds the pattern catalog, validates it, and renders it into a single
navigable document (Markdown, HTML or JSON).
"""

__version__ = "0.4.0"
