"""Tooling for the r-base-shortcuts tips catalog.

This package loads the Markdown tips into an ordered Section/Entry catalog,
derives the anchor-linked table of contents, keeps the README outline current,
and renders the catalog as a static HTML page.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from shortcuts_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
