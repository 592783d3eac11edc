"""Shared fixtures for gfm_wordpress tests."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from PIL import Image

from gfm_wordpress.config import SiteSettings


@pytest.fixture
def settings() -> SiteSettings:
    """Return default site settings."""
    return SiteSettings()


@pytest.fixture
def write_image(tmp_path: Path) -> typ.Callable[[str, int, int], Path]:
    """Return a helper that writes a PNG of the given size under ``tmp_path``."""

    def _write(relative: str, width: int, height: int) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGB", (width, height), "white").save(path, format="PNG")
        return path

    return _write
