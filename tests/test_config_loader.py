"""Unit tests for loading ``catalog.yaml`` into typed configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from shortcuts_pages.config import (
    CatalogConfigError,
    ThemeConfig,
    load_catalog_config,
)


def _write(tmp_path: Path, text: str) -> Path:
    """Write ``text`` to a config file under ``tmp_path`` and return its path."""
    path = tmp_path / "catalog.yaml"
    path.write_text(text.strip() + "\n", encoding="utf-8")
    return path


def test_full_configuration_is_parsed(tmp_path: Path) -> None:
    """Every documented key should land on the CatalogConfig."""
    path = _write(
        tmp_path,
        """
defaults:
  title: Shortcuts
  output: dist/tips.html
  pygments_style: friendly
  code_language: R
  repo: owner/tips
  branch: trunk
  doc_path: docs/README.md
  footer_note: Be kind.
  theme:
    hero_tagline: Base R only
sources:
  - README.md
  - extra
readme: README.md
""",
    )

    config = load_catalog_config(path)

    assert config.sources == [Path("README.md"), Path("extra")]
    assert config.output == Path("dist/tips.html")
    assert config.title == "Shortcuts"
    assert config.pygments_style == "friendly"
    assert config.code_language == "r", "code language should be normalized"
    assert config.repo == "owner/tips"
    assert config.branch == "trunk"
    assert config.doc_path == "docs/README.md"
    assert config.readme == Path("README.md")
    assert config.footer_note == "Be kind."
    assert config.theme.hero_tagline == "Base R only"
    assert config.theme.site_name == ThemeConfig().site_name


def test_defaults_apply_when_omitted(tmp_path: Path) -> None:
    """A config with only a source falls back to the documented defaults."""
    config = load_catalog_config(_write(tmp_path, "sources: README.md"))

    assert config.sources == [Path("README.md")]
    assert config.output == Path("public/index.html")
    assert config.pygments_style == "monokai"
    assert config.code_language == "r"
    assert config.repo is None
    assert config.readme is None
    assert config.theme == ThemeConfig()


def test_missing_sources_is_an_error(tmp_path: Path) -> None:
    """A configuration without content sources is rejected."""
    with pytest.raises(CatalogConfigError, match="No content sources"):
        load_catalog_config(_write(tmp_path, "defaults:\n  title: Tips"))


def test_non_string_source_is_an_error(tmp_path: Path) -> None:
    """Each source entry must be a non-empty path string."""
    with pytest.raises(CatalogConfigError, match="Invalid content source"):
        load_catalog_config(_write(tmp_path, "sources:\n  - 42"))


def test_source_mapping_is_an_error(tmp_path: Path) -> None:
    """Sources must be a path or a list of paths."""
    with pytest.raises(CatalogConfigError):
        load_catalog_config(_write(tmp_path, "sources:\n  path: README.md"))


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    """A YAML list at the top level is not a configuration."""
    with pytest.raises(TypeError):
        load_catalog_config(_write(tmp_path, "- README.md"))


def test_missing_file_raises(tmp_path: Path) -> None:
    """A missing configuration file surfaces as FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_catalog_config(tmp_path / "absent.yaml")


def test_shipped_configuration_loads() -> None:
    """The repository's own configuration names the README as its source."""
    config_path = Path(__file__).resolve().parents[1] / "config" / "catalog.yaml"

    config = load_catalog_config(config_path)

    assert config.sources == [Path("README.md")]
    assert config.readme == Path("README.md")
