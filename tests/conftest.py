"""Shared fixtures for the sitemill test suite."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

FIXTURE_SITE = Path(__file__).resolve().parent / "fixtures" / "site"


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """Copy the fixture site into a scratch directory so builds can write freely."""
    target = tmp_path / "site"
    shutil.copytree(FIXTURE_SITE, target)
    return target


@pytest.fixture
def site_config() -> dict[str, str]:
    return {"title": "Test Site"}
