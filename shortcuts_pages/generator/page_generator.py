"""High-level orchestration for rendering the tips catalog page.

This module loads the configured Markdown sources, derives the outline, and
renders a single themed HTML page with the shared Jinja template. It exposes
:class:`CatalogPageGenerator`, which consumes a
:class:`~shortcuts_pages.config.CatalogConfig`, renders each tip with
``HtmlContentRenderer``, and writes ``public/index.html`` (or the configured
output path).

Example
-------
>>> from pathlib import Path
>>> from shortcuts_pages.config import load_catalog_config
>>> from shortcuts_pages.generator import CatalogPageGenerator
>>> config = load_catalog_config(Path("config/catalog.yaml"))  # doctest: +SKIP
>>> CatalogPageGenerator(config).run()  # doctest: +SKIP
PosixPath('public/index.html')
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from shortcuts_pages.catalog import Catalog, load
from shortcuts_pages.generator.link_rewriter import _build_link_rewriter
from shortcuts_pages.generator.models import EntryModel, SectionModel
from shortcuts_pages.generator.renderer import HtmlContentRenderer
from shortcuts_pages.toc import ENTRY_DEPTH, TocItem, generate

if typ.TYPE_CHECKING:
    from shortcuts_pages.catalog import Entry, Section
    from shortcuts_pages.config import CatalogConfig


class CatalogPageGenerator:
    """Load the tips catalog and emit it as one themed HTML page."""

    def __init__(
        self,
        config: CatalogConfig,
        *,
        templates_dir: Path | None = None,
        output: Path | None = None,
    ) -> None:
        """Initialize the generator with configuration and template context.

        Parameters
        ----------
        config : CatalogConfig
            Catalog configuration describing sources, theming, and links.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package templates.
        output : Path, optional
            Override for the HTML output path; defaults to ``config.output``.
        """
        self.config = config
        self.output = output or config.output
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.renderer = HtmlContentRenderer(
            config.pygments_style,
            link_extension=_build_link_rewriter(config),
            default_language=config.code_language,
        )
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("catalog_page.jinja")

    def run(self) -> Path:
        """Load the sources, render the page, and write it to disk.

        Returns
        -------
        Path
            Path to the generated HTML document.

        Raises
        ------
        MalformedContentError
            If a content source violates the heading/body structure.
        DuplicateAnchorError
            If two titles derive the same anchor.
        """
        catalog = load(self.config.sources, code_language=self.config.code_language)
        html = self.render(catalog, doc_updated_at=self._resolve_doc_updated_at())
        self.output.parent.mkdir(parents=True, exist_ok=True)
        self.output.write_text(html, encoding="utf-8")
        return self.output

    def render(
        self, catalog: Catalog, *, doc_updated_at: dt.datetime | None = None
    ) -> str:
        """Return the HTML page for ``catalog`` without touching the filesystem."""
        toc_items = generate(catalog)
        generated_at = dt.datetime.now(dt.UTC)
        site_title = catalog.title or self.config.title
        repo = self.config.repo
        context = {
            "site_title": site_title,
            "html_title": f"{site_title} | {self.config.theme.doc_label}",
            "theme": self.config.theme,
            "preamble_html": self.renderer.markdown(catalog.preamble),
            "sections": self._build_section_models(catalog, toc_items),
            "nav_groups": self._build_nav_groups(toc_items),
            "entry_count": catalog.entry_count(),
            "generated_at": generated_at,
            "doc_updated_at": doc_updated_at or generated_at,
            "pygments_css": self.renderer.stylesheet,
            "footer_note": self.config.footer_note,
            "repo_url": f"https://github.com/{repo}" if repo else None,
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def _resolve_doc_updated_at(self) -> dt.datetime | None:
        """Return the newest modification time across the content sources."""
        stamps: list[float] = []
        for source in self.config.sources:
            files = sorted(source.glob("*.md")) if source.is_dir() else [source]
            stamps.extend(path.stat().st_mtime for path in files if path.exists())
        if not stamps:
            return None
        return dt.datetime.fromtimestamp(max(stamps), tz=dt.UTC)

    def _build_section_models(
        self, catalog: Catalog, toc_items: list[TocItem]
    ) -> list[SectionModel]:
        """Pair each section and entry with its outline anchor and render it."""
        anchors = iter(item.anchor for item in toc_items)
        models: list[SectionModel] = []
        for section in catalog.sections():
            section_anchor = next(anchors)
            entries = [
                self._build_entry_model(entry, next(anchors))
                for entry in catalog.entries(section)
            ]
            models.append(self._build_section_model(section, section_anchor, entries))
        return models

    def _build_section_model(
        self, section: Section, anchor: str, entries: list[EntryModel]
    ) -> SectionModel:
        return SectionModel(
            title=section.title,
            anchor=anchor,
            order=section.order,
            intro_html=self.renderer.markdown(section.intro),
            entries=entries,
        )

    def _build_entry_model(self, entry: Entry, anchor: str) -> EntryModel:
        """Render the prose, code samples, and outputs of one tip."""
        return EntryModel(
            title=entry.title,
            anchor=anchor,
            text_html=self.renderer.markdown(entry.text),
            code_html=[
                self.renderer.code_block(code, entry.code_language)
                for code in entry.code_samples
            ],
            output_html=[self.renderer.output_block(out) for out in entry.outputs],
        )

    @staticmethod
    def _build_nav_groups(toc_items: list[TocItem]) -> list[dict[str, typ.Any]]:
        """Group outline items into sidebar sections with nested tip links."""
        groups: list[dict[str, typ.Any]] = []
        for item in toc_items:
            link = {"label": item.title, "href": f"#{item.anchor}"}
            if item.depth == ENTRY_DEPTH and groups:
                groups[-1]["entries"].append(link)
            else:
                groups.append({**link, "entries": []})
        return groups


__all__ = ["CatalogPageGenerator"]
