"""Health check endpoint — public, no auth required."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter

from contrast_checker.config import get_settings
from contrast_checker.wcag.config_loader import ConfigValidationError, get_contrast_config

router = APIRouter(tags=["system"])
logger = logging.getLogger("contrast_checker.health")


@router.get("/health")
async def health_check() -> dict:
    """Liveness probe. Returns 200 if the API process is up.

    Also reports whether the threshold config could be loaded.
    """
    settings = get_settings()
    config_ok = False
    try:
        get_contrast_config(settings.contrast_config_path)
        config_ok = True
    except (ConfigValidationError, FileNotFoundError) as exc:
        logger.warning("Health check config probe failed: %s", exc)

    return {
        "status": "healthy" if config_ok else "degraded",
        "version": settings.app_version,
        "environment": settings.environment,
        "thresholds": "loaded" if config_ok else "invalid",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
