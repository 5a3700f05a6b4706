"""Keep the outline embedded in the tips README current.

The README carries its table of contents between ``<!-- toc -->`` and
``<!-- tocstop -->`` marker comments. :func:`inject_toc` replaces whatever
sits between the markers with a freshly rendered outline, and
:func:`update_readme` applies that to a file on disk.

Examples
--------
>>> from shortcuts_pages.readme import inject_toc
>>> print(inject_toc("# Tips\\n<!-- toc -->\\nstale\\n<!-- tocstop -->\\n", "- [A](#a)"))
# Tips
<!-- toc -->
<BLANKLINE>
- [A](#a)
<BLANKLINE>
<!-- tocstop -->
<BLANKLINE>
"""

from __future__ import annotations

import typing as typ

from ._constants import TOC_END_MARKER, TOC_START_MARKER
from .catalog.loader import FENCE_OPEN_PATTERN, _read_fence
from .catalog.models import MalformedContentError
from .toc import generate, render_markdown

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .catalog.models import Catalog


def _find_marker(
    lines: list[str], marker: str, source: str, start: int = 0
) -> int | None:
    """Return the index of the first line equal to ``marker`` from ``start``.

    Lines inside fenced code blocks are skipped.
    """
    idx = start
    while idx < len(lines):
        opening = FENCE_OPEN_PATTERN.match(lines[idx])
        if opening:
            _block, idx = _read_fence(lines, idx, opening, source)
            continue
        if lines[idx].strip() == marker:
            return idx
        idx += 1
    return None


def inject_toc(markdown_text: str, toc_markdown: str, *, source: str = "<string>") -> str:
    """Replace the text between the outline markers with ``toc_markdown``.

    Raises
    ------
    MalformedContentError
        If the start marker is missing, has no matching stop marker, or a
        fenced code block is never closed.
    """
    lines = markdown_text.splitlines()
    start = _find_marker(lines, TOC_START_MARKER, source)
    if start is None:
        msg = f"No '{TOC_START_MARKER}' marker to place the outline at."
        raise MalformedContentError(msg, source=source)
    end = _find_marker(lines, TOC_END_MARKER, source, start + 1)
    if end is None:
        msg = f"'{TOC_START_MARKER}' has no matching '{TOC_END_MARKER}'."
        raise MalformedContentError(msg, source=source, line=start + 1)

    body = ["", *toc_markdown.splitlines(), ""] if toc_markdown.strip() else [""]
    updated = [*lines[: start + 1], *body, *lines[end:]]
    trailing = "\n" if markdown_text.endswith("\n") else ""
    return "\n".join(updated) + trailing


def update_readme(path: Path, catalog: Catalog) -> bool:
    """Rewrite the outline embedded in ``path``; return whether it changed."""
    original = path.read_text(encoding="utf-8")
    updated = inject_toc(
        original, render_markdown(generate(catalog)), source=str(path)
    )
    if updated == original:
        return False
    path.write_text(updated, encoding="utf-8")
    return True


__all__ = ["inject_toc", "update_readme"]
