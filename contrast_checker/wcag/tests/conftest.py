"""Shared fixtures for the contrast engine test suite."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from contrast_checker.wcag import config_loader
from contrast_checker.wcag.config_loader import ContrastConfig, load_contrast_config


@pytest.fixture
def contrast_config() -> ContrastConfig:
    """Load the bundled contrast config."""
    return load_contrast_config()


@pytest.fixture(autouse=True)
def reset_config_singleton(monkeypatch: pytest.MonkeyPatch) -> None:
    """Each test starts without a cached config."""
    monkeypatch.setattr(config_loader, "_config", None)
    monkeypatch.setattr(config_loader, "_config_path", None)


@pytest.fixture
def write_config(tmp_path: Path):
    """Write YAML text to a temporary config file and return its path."""

    def _write(body: str, name: str = "contrast_config.yaml") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(body), encoding="utf-8")
        return path

    return _write
