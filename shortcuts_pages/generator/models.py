"""View models passed to the catalog page template."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(slots=True)
class EntryModel:
    """Rendered tip ready for the template.

    Attributes
    ----------
    title : str
        Tip heading.
    anchor : str
        Element id, identical to the outline anchor.
    text_html : str
        Rendered explanatory prose.
    code_html : list[str]
        Highlighted code samples in document order.
    output_html : list[str]
        Escaped example outputs in document order.
    """

    title: str
    anchor: str
    text_html: str
    code_html: list[str]
    output_html: list[str]


@dc.dataclass(slots=True)
class SectionModel:
    """Rendered section with its tips."""

    title: str
    anchor: str
    order: int
    intro_html: str
    entries: list[EntryModel]


__all__ = ["EntryModel", "SectionModel"]
