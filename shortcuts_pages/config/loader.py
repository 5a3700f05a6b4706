"""Load catalog configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _as_path,
    _build_theme_config,
    _normalize_sources,
    _optional_str,
)
from .models import CatalogConfig


def load_catalog_config(path: Path) -> CatalogConfig:
    """Load the YAML configuration describing the catalog build.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/catalog.yaml``).

    Returns
    -------
    CatalogConfig
        Parsed configuration, including content sources, output path, and
        presentation defaults.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    CatalogConfigError
        If no content sources are defined or a source entry is invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from shortcuts_pages.config import load_catalog_config
    >>> config = load_catalog_config(Path("config/catalog.yaml"))  # doctest: +SKIP
    >>> config.output  # doctest: +SKIP
    PosixPath('public/index.html')
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}

    sources = _normalize_sources(raw.get("sources"))
    readme_raw = _optional_str(raw.get("readme"))
    base = CatalogConfig(sources=sources)

    return CatalogConfig(
        sources=sources,
        output=_as_path(defaults.get("output", base.output)),
        title=defaults.get("title", base.title),
        pygments_style=defaults.get("pygments_style", base.pygments_style),
        code_language=str(defaults.get("code_language", base.code_language)).lower(),
        theme=_build_theme_config(defaults.get("theme")),
        repo=_optional_str(defaults.get("repo")),
        branch=defaults.get("branch", base.branch),
        doc_path=defaults.get("doc_path", base.doc_path),
        readme=_as_path(readme_raw) if readme_raw else None,
        footer_note=defaults.get("footer_note", base.footer_note),
    )


__all__ = ["load_catalog_config"]
