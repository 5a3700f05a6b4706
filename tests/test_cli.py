"""Tests for the ``shortcuts`` command functions."""

from __future__ import annotations

import typing as typ

import pytest

from shortcuts_pages import cli

if typ.TYPE_CHECKING:
    from pathlib import Path

TIPS = (
    "# Tips\n"
    "\n"
    "<!-- toc -->\n"
    "<!-- tocstop -->\n"
    "\n"
    "## Vectorization\n"
    "\n"
    "### Replace a loop with vapply()\n"
    "\n"
    "```r\n"
    "vapply(1:3, sqrt, numeric(1))\n"
    "```\n"
)


def _project(
    tmp_path: Path, tips: str = TIPS, *, readme: bool = True
) -> Path:
    """Lay out a tips file and config under ``tmp_path``; return the config."""
    (tmp_path / "tips.md").write_text(tips, encoding="utf-8")
    config = tmp_path / "catalog.yaml"
    lines = [
        "defaults:",
        f"  output: {tmp_path / 'public' / 'index.html'}",
        "sources:",
        f"  - {tmp_path / 'tips.md'}",
    ]
    if readme:
        lines.append(f"readme: {tmp_path / 'tips.md'}")
    config.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return config


def test_check_reports_counts(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A valid catalog prints its size and exits cleanly."""
    cli.check(config=_project(tmp_path))

    assert capsys.readouterr().out.strip() == "1 sections, 1 entries"


def test_check_fails_on_duplicate_anchor(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Colliding anchors exit non-zero and name both titles on stderr."""
    config = _project(tmp_path, "## Testing\n### Setup\n## Packaging\n### Setup\n")

    with pytest.raises(SystemExit) as excinfo:
        cli.check(config=config)

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert err.startswith("error: Anchor 'setup'"), err


def test_check_fails_on_malformed_content(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Structural errors are reported with their source line."""
    config = _project(tmp_path, "### Orphan\n")

    with pytest.raises(SystemExit):
        cli.check(config=config)

    assert ":1: " in capsys.readouterr().err


def test_toc_prints_outline(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Without ``--write`` the outline goes to stdout."""
    cli.toc(config=_project(tmp_path))

    assert capsys.readouterr().out == (
        "- [Vectorization](#vectorization)\n"
        "  - [Replace a loop with vapply()](#replace-a-loop-with-vapply)\n"
    )


def test_toc_write_updates_readme(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``--write`` splices the outline in once and is then a no-op."""
    config = _project(tmp_path)

    cli.toc(config=config, write=True)
    assert capsys.readouterr().out.startswith("wrote ")
    assert "(#vectorization)" in (tmp_path / "tips.md").read_text(encoding="utf-8")

    cli.toc(config=config, write=True)
    assert capsys.readouterr().out.startswith("unchanged ")


def test_toc_write_requires_readme(tmp_path: Path) -> None:
    """Writing the outline needs a configured README."""
    with pytest.raises(ValueError, match="no 'readme' configured"):
        cli.toc(config=_project(tmp_path, readme=False), write=True)


def test_build_writes_page(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``build`` renders the page and reports where it went."""
    output = tmp_path / "out" / "page.html"

    cli.build(config=_project(tmp_path), output=output)

    assert output.exists()
    assert capsys.readouterr().out.strip().endswith("page.html")
