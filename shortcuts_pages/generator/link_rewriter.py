"""Rewrite relative links in tip prose to GitHub blob URLs.

Tips link to neighbouring files (images, contributing notes) with paths that
only work inside the repository checkout. When a repository is configured,
those links are pinned to ``https://github.com/<repo>/blob/<ref>/...`` so the
rendered page stays navigable wherever it is hosted.
"""

from __future__ import annotations

import posixpath
import typing as typ
from urllib.parse import urlsplit

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown

    from shortcuts_pages.config import CatalogConfig
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any
    CatalogConfig = typ.Any

LINK_ATTRIBUTES = {"a": "href", "img": "src"}
ABSOLUTE_PREFIXES = ("mailto:", "tel:", "data:", "javascript:", "#", "//", "/")


def _build_link_rewriter(config: CatalogConfig) -> Extension | None:
    """Return a RelativeLinkExtension for ``config`` or None without a repo."""
    if not config.repo:
        return None
    base_dir = posixpath.dirname(config.doc_path.lstrip("/"))
    return RelativeLinkExtension(config.repo, config.branch, base_dir)


def rewrite_relative_link(
    target: str | None, repo: str, ref: str, base_dir: str
) -> str | None:
    """Return the GitHub URL for a repository-relative ``target``.

    Returns ``None`` for empty targets, absolute URLs, in-page fragments, and
    site-rooted paths, which are left untouched.

    Examples
    --------
    >>> rewrite_relative_link("images/banner.png", "o/r", "main", "")
    'https://github.com/o/r/blob/main/images/banner.png'
    >>> rewrite_relative_link("#object-creation", "o/r", "main", "") is None
    True
    """
    if not target or "://" in target or target.lower().startswith(ABSOLUTE_PREFIXES):
        return None
    parsed = urlsplit(target)
    if parsed.scheme or parsed.netloc or not parsed.path:
        return None

    joined = posixpath.normpath(posixpath.join(base_dir, parsed.path))
    while joined.startswith("../"):
        joined = joined[3:]
    if joined in (".", "..", ""):
        return None

    url = f"https://github.com/{repo}/blob/{ref}/{joined}"
    if parsed.query:
        url = f"{url}?{parsed.query}"
    if parsed.fragment:
        url = f"{url}#{parsed.fragment}"
    return url


class RelativeLinkExtension(Extension):
    """Markdown extension that pins relative links and images to GitHub."""

    def __init__(self, repo: str, ref: str, base_dir: str) -> None:
        super().__init__()
        self.repo = repo
        self.ref = ref
        self.base_dir = base_dir

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the relative-link treeprocessor on the Markdown instance."""
        processor = RelativeLinkTreeprocessor(md, self.repo, self.ref, self.base_dir)
        md.treeprocessors.register(processor, "shortcuts_relative_links", 15)


class RelativeLinkTreeprocessor(Treeprocessor):
    """Walk the parsed tree and rewrite relative ``href``/``src`` attributes."""

    def __init__(self, md: Markdown, repo: str, ref: str, base_dir: str) -> None:
        super().__init__(md)
        self.repo = repo
        self.ref = ref
        self.base_dir = base_dir

    def run(self, root: Element) -> Element:
        for element in root.iter():
            attribute = LINK_ATTRIBUTES.get(element.tag)
            if attribute is None:
                continue
            rewritten = rewrite_relative_link(
                element.get(attribute), self.repo, self.ref, self.base_dir
            )
            if rewritten:
                element.set(attribute, rewritten)
        return root


__all__ = [
    "RelativeLinkExtension",
    "RelativeLinkTreeprocessor",
    "_build_link_rewriter",
    "rewrite_relative_link",
]
