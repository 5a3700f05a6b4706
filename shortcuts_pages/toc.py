r"""Build the navigable outline of a tips catalog.

The outline mirrors catalog order: each section followed by its entries.
Every item carries the anchor slug used for in-page links, and anchors are
validated for uniqueness so a rendered document never ships broken links.

Example
-------
>>> from shortcuts_pages.catalog import Catalog, Entry, Section
>>> from shortcuts_pages.toc import generate, render_markdown
>>> section = Section(
...     "Object creation", 1, (Entry("Create an empty list of a given length"),)
... )
>>> items = generate(Catalog((section,)))
>>> [(item.anchor, item.depth) for item in items]
[('object-creation', 1), ('create-an-empty-list-of-a-given-length', 2)]
>>> print(render_markdown(items))
- [Object creation](#object-creation)
  - [Create an empty list of a given length](#create-an-empty-list-of-a-given-length)
"""

from __future__ import annotations

import typing as typ

from .anchors import slugify
from .catalog.models import DuplicateAnchorError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .catalog.models import Catalog

SECTION_DEPTH = 1
ENTRY_DEPTH = 2


class TocItem(typ.NamedTuple):
    """One outline row: a title, its anchor, and its nesting depth."""

    title: str
    anchor: str
    depth: int


def generate(catalog: Catalog) -> list[TocItem]:
    """Return the outline of ``catalog`` in document order.

    Parameters
    ----------
    catalog : Catalog
        Loaded catalog to walk.

    Returns
    -------
    list[TocItem]
        One item per section (depth 1) followed by one item per entry of that
        section (depth 2). Empty when the catalog has no sections.

    Raises
    ------
    DuplicateAnchorError
        If two titles derive the same anchor. The error names both titles.
    """
    items: list[TocItem] = []
    seen: dict[str, str] = {}

    def _add(title: str, depth: int) -> None:
        anchor = slugify(title)
        if anchor in seen:
            raise DuplicateAnchorError(anchor, seen[anchor], title)
        seen[anchor] = title
        items.append(TocItem(title=title, anchor=anchor, depth=depth))

    for section in catalog.sections():
        _add(section.title, SECTION_DEPTH)
        for entry in catalog.entries(section):
            _add(entry.title, ENTRY_DEPTH)
    return items


def _escape_link_text(title: str) -> str:
    """Escape characters that would end a Markdown link label early."""
    return title.replace("\\", "\\\\").replace("[", r"\[").replace("]", r"\]")


def render_markdown(items: cabc.Iterable[TocItem]) -> str:
    """Render outline items as a nested Markdown bullet list."""
    lines = [
        f"{'  ' * (item.depth - 1)}- [{_escape_link_text(item.title)}](#{item.anchor})"
        for item in items
    ]
    return "\n".join(lines)


__all__ = [
    "ENTRY_DEPTH",
    "SECTION_DEPTH",
    "TocItem",
    "generate",
    "render_markdown",
    "slugify",
]
