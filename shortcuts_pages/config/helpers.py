"""Utility helpers shared by the catalog configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import CatalogConfigError, ThemeConfig


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_path(value: str | Path) -> Path:
    """Return ``value`` as a Path with ``~`` expanded."""
    return Path(value).expanduser()


def _build_theme_config(payload: typ.Mapping[str, typ.Any] | None) -> ThemeConfig:
    """Build a ThemeConfig instance from the provided mapping payload."""
    base = ThemeConfig()
    if not payload:
        return base
    return ThemeConfig(
        hero_eyebrow=payload.get("hero_eyebrow", base.hero_eyebrow),
        hero_tagline=payload.get("hero_tagline", base.hero_tagline),
        doc_label=payload.get("doc_label", base.doc_label),
        site_name=payload.get("site_name", base.site_name),
    )


def _normalize_sources(raw: object) -> list[Path]:
    """Return the configured content sources as paths."""
    match raw:
        case str():
            entries: list[object] = [raw]
        case list():
            entries = list(raw)
        case None:
            entries = []
        case _:
            msg = "'sources' must be a path or a list of paths."
            raise CatalogConfigError(msg)

    sources: list[Path] = []
    for entry in entries:
        if not isinstance(entry, str) or not entry.strip():
            msg = f"Invalid content source {entry!r}; expected a non-empty path."
            raise CatalogConfigError(msg)
        sources.append(_as_path(entry.strip()))
    if not sources:
        msg = "No content sources defined in catalog configuration."
        raise CatalogConfigError(msg)
    return sources


__all__ = [
    "_build_theme_config",
    "_normalize_sources",
    "_optional_str",
    "_as_path",
]
