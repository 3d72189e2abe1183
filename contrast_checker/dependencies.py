"""Shared FastAPI dependencies injected into route handlers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from contrast_checker.config import Settings, get_settings
from contrast_checker.wcag.config_loader import ContrastConfig, get_contrast_config


def get_active_contrast_config(
    settings: Annotated[Settings, Depends(get_settings)],
) -> ContrastConfig:
    """Return the cached threshold config, honouring the settings override path."""
    return get_contrast_config(settings.contrast_config_path)


# Annotated shortcuts for route signatures
AppSettings = Annotated[Settings, Depends(get_settings)]
ActiveContrastConfig = Annotated[ContrastConfig, Depends(get_active_contrast_config)]
