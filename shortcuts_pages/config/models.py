"""Typed dataclasses describing the tips catalog configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


class CatalogConfigError(ValueError):
    """Raised when the catalog configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class ThemeConfig:
    """Visual theming applied to the generated catalog page."""

    hero_eyebrow: str = "R base"
    hero_tagline: str = "Idiomatic shortcuts for everyday base R"
    doc_label: str = "Tips"
    site_name: str = "r-base-shortcuts"


@dc.dataclass(slots=True)
class CatalogConfig:
    """A fully resolved catalog build definition sourced from YAML config.

    Attributes
    ----------
    sources : list[Path]
        Markdown files or directories holding the tips, in catalog order.
    output : Path
        Destination of the rendered HTML page.
    title : str
        Page title used when the content has no first-level heading.
    pygments_style : str
        Pygments style for highlighted code samples.
    code_language : str
        Fence label assumed for code samples.
    theme : ThemeConfig
        Hero and branding copy.
    repo : str or None
        ``owner/name`` GitHub slug used to rewrite relative links.
    branch : str
        Git ref used in rewritten links.
    doc_path : str
        Repository path of the content document; relative links resolve
        against its directory.
    readme : Path or None
        File whose embedded outline ``shortcuts toc --write`` refreshes.
    footer_note : str
        Optional footer text rendered below the tips.
    """

    sources: list[Path]
    output: Path = Path("public/index.html")
    title: str = "r-base-shortcuts"
    pygments_style: str = "monokai"
    code_language: str = "r"
    theme: ThemeConfig = dc.field(default_factory=ThemeConfig)
    repo: str | None = None
    branch: str = "main"
    doc_path: str = "README.md"
    readme: Path | None = None
    footer_note: str = ""


__all__ = ["CatalogConfig", "CatalogConfigError", "ThemeConfig"]
