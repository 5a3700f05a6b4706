"""Utilities for rendering the tips catalog into a static HTML page."""

from .link_rewriter import RelativeLinkExtension
from .models import EntryModel, SectionModel
from .page_generator import CatalogPageGenerator
from .renderer import HtmlContentRenderer

__all__ = [
    "CatalogPageGenerator",
    "EntryModel",
    "HtmlContentRenderer",
    "RelativeLinkExtension",
    "SectionModel",
]
