"""Contrast Checker API — FastAPI application entry point.

Run locally:
    uvicorn contrast_checker.main:app --reload --port 8000
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contrast_checker.config import get_settings
from contrast_checker.middleware.security import SecurityHeadersMiddleware
from contrast_checker.routers import contrast, health
from contrast_checker.wcag.config_loader import get_contrast_config

# ---------- Logging ----------

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stdout,
)
logger = logging.getLogger("contrast_checker")


# ---------- Lifespan ----------

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup / shutdown hooks."""
    settings = get_settings()
    logger.info(
        "Starting Contrast Checker API v%s [%s]",
        settings.app_version,
        settings.environment,
    )
    # Fail fast on a bad threshold table
    get_contrast_config(settings.contrast_config_path)
    yield
    logger.info("Contrast Checker API shut down")


# ---------- App factory ----------

def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title="Contrast Checker API",
        description=(
            "WCAG 2.0 contrast ratio between a text and a background color, "
            "with AA Large / AA / AAA classification."
        ),
        version=settings.app_version,
        debug=settings.debug,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ---------- Middleware (order matters — outermost first) ----------

    app.add_middleware(SecurityHeadersMiddleware)

    # CORS — innermost so it can handle preflight
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # ---------- Health check (outside v1 prefix — always at /health) ----------
    app.include_router(health.router)

    # ---------- API v1 routes ----------
    app.include_router(contrast.router, prefix="/api/v1")

    return app


app = create_app()
