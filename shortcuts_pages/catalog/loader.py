r"""Parse Markdown tip collections into the catalog model.

The content format follows the layout of the tips README: an optional
first-level title, ``##`` headings for sections, and ``###`` headings (or
bold-only lines) for individual tips. Fenced code blocks inside a tip are
split into code samples and example outputs; everything else becomes the
tip's explanatory text.

Example
-------
>>> from shortcuts_pages.catalog import load
>>> catalog = load("## Object creation\n### Create an empty list\n```r\nvector('list', 2)\n```\n")
>>> catalog.sections()[0].entries[0].code_samples
("vector('list', 2)",)
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import re
import textwrap
from pathlib import Path

from shortcuts_pages._constants import OUTPUT_LANGUAGES, TOC_END_MARKER, TOC_START_MARKER
from shortcuts_pages.anchors import slugify

from .models import Catalog, Entry, MalformedContentError, Section

HEADING_PATTERN = re.compile(r"^(#{1,3})(?:[ \t]+(.*?))?[ \t]*$")
BOLD_HEADING_PATTERN = re.compile(r"^\s*\*\*([^*]+)\*\*\s*$")
FENCE_OPEN_PATTERN = re.compile(r"^([ ]{0,3})(`{3,}|~{3,})[ \t]*([A-Za-z0-9_+#.-]+)?[^\n]*$")
REPREX_OUTPUT_PREFIX = "#>"

ContentSource = str | Path | cabc.Iterable[Path]


@dc.dataclass(slots=True)
class _FencedBlock:
    """A fenced code block lifted out of the source text."""

    language: str
    body: str
    raw_lines: list[str]


@dc.dataclass(slots=True)
class _EntryDraft:
    title: str
    text_lines: list[str] = dc.field(default_factory=list)
    code_samples: list[str] = dc.field(default_factory=list)
    outputs: list[str] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class _SectionDraft:
    title: str
    intro_lines: list[str] = dc.field(default_factory=list)
    entries: list[_EntryDraft] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class _Document:
    title: str = ""
    preamble_lines: list[str] = dc.field(default_factory=list)
    sections: list[_SectionDraft] = dc.field(default_factory=list)


def load(source: ContentSource, *, code_language: str = "r") -> Catalog:
    """Load a structured content source into a :class:`Catalog`.

    Parameters
    ----------
    source : str, Path, or iterable of Path
        Markdown text, a Markdown file, a directory (every ``*.md`` file in
        name order), or an iterable of such paths. Sections from several
        files are concatenated in order.
    code_language : str, optional
        Fence label recorded on entries for syntax highlighting.

    Returns
    -------
    Catalog
        The parsed, immutable catalog.

    Raises
    ------
    FileNotFoundError
        If a named path does not exist.
    MalformedContentError
        If a heading/body structural expectation is violated.
    """
    match source:
        case str():
            return parse_catalog(source, code_language=code_language)
        case Path():
            paths = _expand_path(source)
        case _:
            paths = [path for item in source for path in _expand_path(Path(item))]

    documents = [
        _parse_document(path.read_text(encoding="utf-8"), source=str(path))
        for path in paths
    ]
    return _build_catalog(documents, code_language=code_language)


def parse_catalog(
    markdown_text: str, *, source: str = "<string>", code_language: str = "r"
) -> Catalog:
    """Parse a single Markdown document into a :class:`Catalog`."""
    document = _parse_document(markdown_text, source=source)
    return _build_catalog([document], code_language=code_language)


def _expand_path(path: Path) -> list[Path]:
    """Return the Markdown files named by ``path``."""
    if not path.exists():
        msg = f"Content source '{path}' not found."
        raise FileNotFoundError(msg)
    if path.is_dir():
        return sorted(path.glob("*.md"))
    return [path]


def _clean_heading(text: str) -> str:
    """Return a cleaned heading, removing escapes and whitespace."""
    return text.replace("\\", "").strip()


def _read_fence(
    lines: list[str], start: int, opening: re.Match[str], source: str
) -> tuple[_FencedBlock, int]:
    """Consume the fenced block opening at ``start``; return it and the next index."""
    indent, fence, language = opening.groups()
    closing = re.compile(
        rf"^[ ]{{0,{len(indent) + 3}}}{re.escape(fence[0])}{{{len(fence)},}}[ \t]*$"
    )
    for idx in range(start + 1, len(lines)):
        if closing.match(lines[idx]):
            body = textwrap.dedent("\n".join(lines[start + 1 : idx])).strip("\n")
            block = _FencedBlock(
                language=(language or "").lower(),
                body=body,
                raw_lines=lines[start : idx + 1],
            )
            return block, idx + 1
    msg = "Fenced code block is never closed."
    raise MalformedContentError(msg, source=source, line=start + 1)


def _split_reprex(body: str) -> tuple[str, str]:
    """Separate ``#>`` output lines from the code lines of a sample."""
    code: list[str] = []
    output: list[str] = []
    for line in body.splitlines():
        if line.lstrip().startswith(REPREX_OUTPUT_PREFIX):
            output.append(line.strip())
        else:
            code.append(line)
    return "\n".join(code).strip("\n"), "\n".join(output)


def _attach_block(entry: _EntryDraft, block: _FencedBlock) -> None:
    """File a fenced block under the entry's code samples or outputs."""
    if not block.language or block.language in OUTPUT_LANGUAGES:
        entry.outputs.append(block.body)
        return
    code, output = _split_reprex(block.body)
    if code.strip():
        entry.code_samples.append(code)
    if output:
        entry.outputs.append(output)


def _require_title(raw: str | None, kind: str, source: str, line: int) -> str:
    """Return the cleaned heading text or fail when it is missing."""
    title = _clean_heading(raw or "")
    if not title:
        msg = f"{kind} heading has no title."
        raise MalformedContentError(msg, source=source, line=line)
    if not slugify(title):
        msg = f"{kind} title '{title}' has no letters or digits to derive an anchor from."
        raise MalformedContentError(msg, source=source, line=line)
    return title


def _start_entry(
    document: _Document, raw_title: str | None, source: str, line: int
) -> _EntryDraft:
    """Open a new entry in the current section."""
    if not document.sections:
        msg = "Entry heading appears before any section heading."
        raise MalformedContentError(msg, source=source, line=line)
    title = _require_title(raw_title, "Entry", source, line)
    section = document.sections[-1]
    if any(existing.title == title for existing in section.entries):
        msg = f"Entry '{title}' is repeated within section '{section.title}'."
        raise MalformedContentError(msg, source=source, line=line)
    entry = _EntryDraft(title=title)
    section.entries.append(entry)
    return entry


def _parse_document(markdown_text: str, *, source: str) -> _Document:
    """Walk the Markdown lines and collect the document structure."""
    document = _Document()
    lines = markdown_text.splitlines()
    entry: _EntryDraft | None = None
    toc_start: int | None = None
    idx = 0
    while idx < len(lines):
        line = lines[idx]
        stripped = line.strip()

        if toc_start is not None:
            if stripped == TOC_END_MARKER:
                toc_start = None
            idx += 1
            continue
        if stripped == TOC_START_MARKER:
            toc_start = idx + 1
            idx += 1
            continue

        opening = FENCE_OPEN_PATTERN.match(line)
        if opening:
            block, idx = _read_fence(lines, idx, opening, source)
            if entry is not None:
                _attach_block(entry, block)
            elif document.sections:
                document.sections[-1].intro_lines.extend(block.raw_lines)
            else:
                document.preamble_lines.extend(block.raw_lines)
            continue

        heading = HEADING_PATTERN.match(line)
        bold = BOLD_HEADING_PATTERN.match(line) if document.sections else None
        if heading:
            level = len(heading.group(1))
            if level == 1 and not document.title and not document.sections:
                document.title = _clean_heading(heading.group(2) or "")
            elif level == 2:
                title = _require_title(heading.group(2), "Section", source, idx + 1)
                document.sections.append(_SectionDraft(title=title))
                entry = None
            elif level == 3:
                entry = _start_entry(document, heading.group(2), source, idx + 1)
            else:
                _append_text(document, entry, line)
        elif bold and bold.group(1).strip():
            entry = _start_entry(document, bold.group(1), source, idx + 1)
        else:
            _append_text(document, entry, line)
        idx += 1

    if toc_start is not None:
        msg = f"'{TOC_START_MARKER}' has no matching '{TOC_END_MARKER}'."
        raise MalformedContentError(msg, source=source, line=toc_start)
    return document


def _append_text(document: _Document, entry: _EntryDraft | None, line: str) -> None:
    """Append a prose line to the innermost open block."""
    if entry is not None:
        entry.text_lines.append(line)
    elif document.sections:
        document.sections[-1].intro_lines.append(line)
    else:
        document.preamble_lines.append(line)


def _join(lines: list[str]) -> str:
    """Join prose lines, collapsing runs of blank lines left by removed code."""
    return re.sub(r"\n{3,}", "\n\n", "\n".join(lines)).strip()


def _build_catalog(documents: list[_Document], *, code_language: str) -> Catalog:
    """Freeze parsed documents into a single ordered :class:`Catalog`."""
    title = next((doc.title for doc in documents if doc.title), "")
    preamble = next(
        (_join(doc.preamble_lines) for doc in documents if _join(doc.preamble_lines)),
        "",
    )
    drafts = [draft for doc in documents for draft in doc.sections]
    sections = tuple(
        Section(
            title=draft.title,
            order=order,
            intro=_join(draft.intro_lines),
            entries=tuple(
                Entry(
                    title=entry.title,
                    text=_join(entry.text_lines),
                    code_samples=tuple(entry.code_samples),
                    outputs=tuple(entry.outputs),
                    code_language=code_language,
                )
                for entry in draft.entries
            ),
        )
        for order, draft in enumerate(drafts, start=1)
    )
    return Catalog(section_list=sections, title=title, preamble=preamble)


__all__ = ["ContentSource", "load", "parse_catalog"]
