"""Cyclopts CLI entrypoint for maintaining the r-base-shortcuts tips catalog.

The ``shortcuts`` console script defined here validates the tips content,
refreshes the table of contents embedded in the README, and renders the
catalog into a static HTML page. Typical usage runs ``shortcuts check`` in CI
so duplicate anchors and malformed headings fail the build, and
``shortcuts toc --write`` before committing new tips.

Examples
--------
Validate the default configuration:

>>> from shortcuts_pages.cli import main
>>> main()  # doctest: +SKIP

Render the page into a custom location:

>>> from shortcuts_pages.cli import app
>>> app(["build", "--output", "dist/index.html"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .catalog import Catalog, CatalogError, load
from .config import CatalogConfig, load_catalog_config
from .generator import CatalogPageGenerator
from .readme import update_readme
from .toc import generate, render_markdown

DEFAULT_CONFIG = Path("config/catalog.yaml")

app = App(name="shortcuts", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_catalog(catalog_config: CatalogConfig) -> Catalog:
    return load(catalog_config.sources, code_language=catalog_config.code_language)


def _fail(exc: Exception) -> typ.NoReturn:
    """Report a fatal content error on stderr and exit non-zero."""
    print(f"error: {exc}", file=sys.stderr)
    raise SystemExit(1) from exc


@app.command(help="Print the table of contents, or write it into the README.")
def toc(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to catalog config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    write: typ.Annotated[
        bool, Parameter(help="Update the README between its toc markers")
    ] = False,
) -> None:
    """Render the catalog outline as a nested Markdown list.

    Parameters
    ----------
    config : Path, optional
        Path to the ``catalog.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    write : bool, optional
        When ``True``, splice the outline into the configured ``readme``
        instead of printing it.

    Raises
    ------
    ValueError
        If ``write`` is requested but the configuration names no ``readme``.
    """
    catalog_config = load_catalog_config(config)
    readme = catalog_config.readme
    if write and readme is None:
        msg = "Cannot write the outline: no 'readme' configured."
        raise ValueError(msg)
    try:
        catalog = _load_catalog(catalog_config)
        if write and readme is not None:
            changed = update_readme(readme, catalog)
        else:
            outline = render_markdown(generate(catalog))
    except CatalogError as exc:
        _fail(exc)

    if write and readme is not None:
        label = "wrote" if changed else "unchanged"
        print(f"{label} {_format_path(readme)}")
    else:
        print(outline)


@app.command(help="Validate the tips content and its anchors.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to catalog config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Load every content source and derive the outline.

    Prints a short summary on success. Malformed content or duplicate anchors
    are reported on stderr and exit with status 1.
    """
    catalog_config = load_catalog_config(config)
    try:
        catalog = _load_catalog(catalog_config)
        generate(catalog)
    except CatalogError as exc:
        _fail(exc)
    print(f"{len(catalog.sections())} sections, {catalog.entry_count()} entries")


@app.command(help="Render the tips catalog into a static HTML page.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to catalog config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the output file", env_var="INPUT_OUTPUT"),
    ] = None,
) -> None:
    """Generate the catalog HTML page for the configured sources.

    Parameters
    ----------
    config : Path, optional
        Path to the ``catalog.yaml`` configuration file.
    output : Path or None, optional
        Override for the HTML output path.
    """
    catalog_config = load_catalog_config(config)
    try:
        written = CatalogPageGenerator(catalog_config, output=output).run()
    except CatalogError as exc:
        _fail(exc)
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``shortcuts`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
