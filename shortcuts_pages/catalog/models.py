"""Immutable dataclasses describing the tips catalog and its errors."""

from __future__ import annotations

import dataclasses as dc


class CatalogError(ValueError):
    """Base class for fatal catalog content errors."""


class MalformedContentError(CatalogError):
    """Raised when the content source violates the heading/body structure.

    Attributes
    ----------
    source : str
        Human-readable name of the offending source (file path or
        ``"<string>"``).
    line : int or None
        1-based line number of the offending construct, when known.
    """

    def __init__(self, message: str, *, source: str = "<string>", line: int | None = None) -> None:
        location = f"{source}:{line}" if line is not None else source
        super().__init__(f"{location}: {message}")
        self.source = source
        self.line = line


class DuplicateAnchorError(CatalogError):
    """Raised when two titles derive the same anchor slug."""

    def __init__(self, anchor: str, first_title: str, second_title: str) -> None:
        msg = (
            f"Anchor '{anchor}' is derived from both '{first_title}' and "
            f"'{second_title}'; rename one of them."
        )
        super().__init__(msg)
        self.anchor = anchor
        self.first_title = first_title
        self.second_title = second_title


@dc.dataclass(frozen=True, slots=True)
class Entry:
    """A single tip.

    Attributes
    ----------
    title : str
        Heading of the tip, unique within its section.
    text : str
        Explanatory Markdown prose with code samples removed.
    code_samples : tuple[str, ...]
        Opaque code snippets in document order.
    outputs : tuple[str, ...]
        Opaque example outputs in document order.
    code_language : str
        Fence label used to highlight ``code_samples``.
    """

    title: str
    text: str = ""
    code_samples: tuple[str, ...] = ()
    outputs: tuple[str, ...] = ()
    code_language: str = "r"


@dc.dataclass(frozen=True, slots=True)
class Section:
    """Named grouping of tips."""

    title: str
    order: int
    entries: tuple[Entry, ...] = ()
    intro: str = ""


@dc.dataclass(frozen=True, slots=True)
class Catalog:
    """Ordered sequence of sections; the root of the content model."""

    section_list: tuple[Section, ...] = ()
    title: str = ""
    preamble: str = ""

    def sections(self) -> tuple[Section, ...]:
        """Return the sections in document order."""
        return self.section_list

    def entries(self, section: Section) -> tuple[Entry, ...]:
        """Return the entries of ``section`` in document order.

        Raises
        ------
        KeyError
            If ``section`` is not part of this catalog.
        """
        if section not in self.section_list:
            msg = f"Section '{section.title}' does not belong to this catalog."
            raise KeyError(msg)
        return section.entries

    def entry_count(self) -> int:
        """Return the total number of entries across all sections."""
        return sum(len(section.entries) for section in self.section_list)


__all__ = [
    "Catalog",
    "CatalogError",
    "DuplicateAnchorError",
    "Entry",
    "MalformedContentError",
    "Section",
]
