"""Tests for the ``sitemill`` command functions."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from sitemill import cli
from sitemill.server import DevServer


def test_build_uses_site_yaml_from_cwd(
    site_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.build_site(cwd=site_dir)

    out = capsys.readouterr().out
    assert "built 5 pages" in out
    assert "dist" in out
    html = (site_dir / "dist" / "about.html").read_text(encoding="utf-8")
    assert "<nav>Test Site</nav>" in html


def test_build_with_explicit_config_and_out_dir(site_dir: Path, tmp_path: Path) -> None:
    config = tmp_path / "other.yaml"
    config.write_text("title: Other Site\n", encoding="utf-8")

    cli.build_site(config=config, cwd=site_dir, out_dir="public")

    html = (site_dir / "public" / "about.html").read_text(encoding="utf-8")
    assert "<nav>Other Site</nav>" in html


def test_build_without_site_yaml_uses_empty_config(site_dir: Path) -> None:
    (site_dir / "site.yaml").unlink()
    cli.build_site(cwd=site_dir)
    html = (site_dir / "dist" / "about.html").read_text(encoding="utf-8")
    assert "<nav></nav>" in html


def test_explicit_missing_config_is_an_error(site_dir: Path) -> None:
    with pytest.raises(FileNotFoundError):
        cli.build_site(config=site_dir / "absent.yaml", cwd=site_dir)


def test_serve_closes_server_on_interrupt(
    site_dir: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.delenv("PORT", raising=False)
    closed: list[bool] = []

    def _interrupt(self: DevServer) -> None:
        raise KeyboardInterrupt

    original_close = DevServer.close

    def _close(self: DevServer) -> None:
        closed.append(True)
        original_close(self)

    monkeypatch.setattr(DevServer, "wait", _interrupt)
    monkeypatch.setattr(DevServer, "close", _close)

    cli.serve_site(cwd=site_dir, port=0)

    assert closed == [True]
    assert "serving at http://localhost:" in capsys.readouterr().out


def test_build_summary_is_reported_once(
    site_dir: Path,
    capsys: pytest.CaptureFixture[str],
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.INFO, logger="sitemill"):
        cli.build_site(cwd=site_dir)

    assert capsys.readouterr().out.count("built 5 pages") == 1
    assert not [r for r in caplog.records if "pages built" in r.getMessage()]
