"""Load tips content into an immutable Section/Entry catalog.

This subpackage splits Markdown tip collections into ordered sections and
entries, separating each tip's prose from its code samples and example
outputs. The primary entry point is :func:`load`, which accepts Markdown
text, a file, a directory, or several files and returns a :class:`Catalog`.

Examples
--------
>>> from pathlib import Path
>>> from shortcuts_pages.catalog import load
>>> catalog = load(Path("README.md"))  # doctest: +SKIP
>>> [section.title for section in catalog.sections()][:1]  # doctest: +SKIP
['Object creation']
"""

from .loader import ContentSource, load, parse_catalog
from .models import (
    Catalog,
    CatalogError,
    DuplicateAnchorError,
    Entry,
    MalformedContentError,
    Section,
)

__all__ = [
    "Catalog",
    "CatalogError",
    "ContentSource",
    "DuplicateAnchorError",
    "Entry",
    "MalformedContentError",
    "Section",
    "load",
    "parse_catalog",
]
