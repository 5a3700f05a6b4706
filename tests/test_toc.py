"""Unit tests for outline generation and anchor derivation."""

from __future__ import annotations

from pathlib import Path

import pytest

from shortcuts_pages.catalog import Catalog, DuplicateAnchorError, Entry, Section, load
from shortcuts_pages.toc import TocItem, generate, render_markdown, slugify

README_PATH = Path(__file__).resolve().parents[1] / "README.md"


def _catalog(*sections: tuple[str, list[str]]) -> Catalog:
    """Build a catalog from ``(section title, [entry titles])`` pairs."""
    return Catalog(
        tuple(
            Section(title, order, tuple(Entry(entry) for entry in entries))
            for order, (title, entries) in enumerate(sections, start=1)
        )
    )


def test_single_entry_scenario() -> None:
    """A section and its entry get depth 1 and depth 2 anchors."""
    items = generate(
        _catalog(("Object creation", ["Create an empty list of a given length"]))
    )

    assert items == [
        TocItem("Object creation", "object-creation", 1),
        TocItem(
            "Create an empty list of a given length",
            "create-an-empty-list-of-a-given-length",
            2,
        ),
    ], f"unexpected outline {items!r}"


def test_items_compare_as_plain_triples() -> None:
    """Outline rows behave as ``(title, anchor, depth)`` tuples."""
    (item,) = generate(_catalog(("Vectorization", [])))

    assert item == ("Vectorization", "vectorization", 1)
    title, anchor, depth = item
    assert (title, anchor, depth) == ("Vectorization", "vectorization", 1)


def test_entries_follow_their_section() -> None:
    """The walk visits each section and then that section's entries."""
    items = generate(
        _catalog(("Lists", ["Drop NULLs", "Bind frames"]), ("Factors", ["Drop levels"]))
    )

    assert [(item.title, item.depth) for item in items] == [
        ("Lists", 1),
        ("Drop NULLs", 2),
        ("Bind frames", 2),
        ("Factors", 1),
        ("Drop levels", 2),
    ]


def test_duplicate_titles_in_different_sections_fail() -> None:
    """Two entries titled "Setup" collide and the error names both."""
    catalog = _catalog(("Testing", ["Setup"]), ("Packaging", ["Setup"]))

    with pytest.raises(DuplicateAnchorError) as excinfo:
        generate(catalog)

    error = excinfo.value
    assert error.anchor == "setup"
    assert (error.first_title, error.second_title) == ("Setup", "Setup")
    assert str(error).count("'Setup'") == 2, (
        f"expected both conflicting titles in {str(error)!r}"
    )


def test_titles_that_slug_alike_fail() -> None:
    """Distinct titles that derive the same anchor are reported together."""
    catalog = _catalog(("Sequences", ["Use seq_len()", "Use seqlen"]))

    with pytest.raises(DuplicateAnchorError) as excinfo:
        generate(catalog)

    assert excinfo.value.first_title == "Use seq_len()"
    assert excinfo.value.second_title == "Use seqlen"
    assert excinfo.value.anchor == "use-seqlen"


def test_section_and_entry_anchor_collision_fails() -> None:
    """Anchors are unique across sections and entries alike."""
    with pytest.raises(DuplicateAnchorError):
        generate(_catalog(("Factors", ["factors"])))


def test_empty_catalog_gives_empty_outline() -> None:
    """No sections means no outline and no error."""
    assert generate(Catalog()) == []


def test_outline_covers_every_title_of_the_shipped_tips() -> None:
    """The README catalog yields one unique anchor per section and entry."""
    catalog = load(README_PATH)
    items = generate(catalog)

    assert len(items) == len(catalog.sections()) + catalog.entry_count()
    anchors = [item.anchor for item in items]
    assert len(set(anchors)) == len(anchors), "anchors must be unique"


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("Object creation", "object-creation"),
        ("Tabs\tand   spaces", "tabs-and-spaces"),
        ("Restore options with on.exit()", "restore-options-with-onexit"),
        ("Use `seq_len()` not `1:n`", "use-seqlen-not-1n"),
        ("Side-effect management", "side-effect-management"),
        ("Événements et facteurs", "événements-et-facteurs"),
        ("  padded  ", "padded"),
    ],
)
def test_slugify(title: str, expected: str) -> None:
    """Slugs are lower-case, hyphenated, and limited to letters/digits/hyphens."""
    assert slugify(title) == expected


def test_render_markdown_nests_entries() -> None:
    """Entries are indented beneath their section in the Markdown outline."""
    items = [
        TocItem("Object creation", "object-creation", 1),
        TocItem("Use [[ for lists", "use--for-lists", 2),
    ]

    assert render_markdown(items) == (
        "- [Object creation](#object-creation)\n"
        "  - [Use \\[\\[ for lists](#use--for-lists)"
    )


def test_render_markdown_of_empty_outline_is_empty() -> None:
    """An empty outline renders as an empty string."""
    assert render_markdown([]) == ""


def test_shipped_titles_avoid_underscores() -> None:
    """GitHub keeps ``_`` in heading ids, so shipped titles must not use it."""
    catalog = load(README_PATH)
    titles = [section.title for section in catalog.sections()] + [
        entry.title for section in catalog.sections() for entry in section.entries
    ]

    offending = [title for title in titles if "_" in title]
    assert not offending, f"README anchors would break on GitHub: {offending!r}"
