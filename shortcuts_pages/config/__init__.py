"""Load and validate catalog configuration YAML for tips page builds.

This subpackage parses the project's ``catalog.yaml`` file, applies defaults,
turns content source entries into paths, and produces typed
dataclasses (:class:`CatalogConfig`, :class:`ThemeConfig`) that the outline
and page generators consume. The primary entry point is
:func:`load_catalog_config`.

Examples
--------
>>> from pathlib import Path
>>> from shortcuts_pages.config import load_catalog_config
>>> config = load_catalog_config(Path("config/catalog.yaml"))  # doctest: +SKIP
>>> [path.name for path in config.sources]  # doctest: +SKIP
['README.md']
"""

from .loader import load_catalog_config
from .models import CatalogConfig, CatalogConfigError, ThemeConfig

__all__ = [
    "CatalogConfig",
    "CatalogConfigError",
    "ThemeConfig",
    "load_catalog_config",
]
