"""Contrast check API endpoints.

Endpoints:
    GET  /contrast         — Check one pair given as query parameters
    POST /contrast         — Check one pair given as a JSON body
    POST /contrast/batch   — Check a list of labelled pairs
    GET  /contrast/levels  — The active WCAG threshold table
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Query

from contrast_checker.dependencies import ActiveContrastConfig, AppSettings
from contrast_checker.models.base import ErrorDetail
from contrast_checker.models.contrast import (
    BatchContrastRequest,
    BatchContrastResponse,
    ContrastRequest,
    ContrastResponse,
    LabelledContrastResponse,
    LevelResponse,
    LevelsResponse,
)
from contrast_checker.wcag import InvalidColorFormat, evaluate_contrast, evaluate_pairs
from contrast_checker.wcag.config_loader import ContrastConfig

logger = logging.getLogger("contrast_checker.routers.contrast")

router = APIRouter(prefix="/contrast", tags=["contrast"])

_INVALID_COLOR_RESPONSE: dict[int | str, dict[str, Any]] = {
    422: {"model": ErrorDetail, "description": "Malformed hex color"}
}


def _evaluate(text_color: str, background_color: str, config: ContrastConfig) -> ContrastResponse:
    try:
        evaluation = evaluate_contrast(
            text_color,
            background_color,
            thresholds=config.thresholds,
            ratio_decimals=config.ratio_decimals,
        )
    except InvalidColorFormat as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return ContrastResponse.from_evaluation(evaluation)


# ---------------------------------------------------------------------------
# GET/POST /contrast
# ---------------------------------------------------------------------------


@router.get("", response_model=ContrastResponse, responses=_INVALID_COLOR_RESPONSE)
async def check_contrast_query(
    config: ActiveContrastConfig,
    text: str = Query(..., description="Text color, 6 hex digits with optional '#'"),
    background: str = Query(..., description="Background color, 6 hex digits with optional '#'"),
) -> Any:
    """Compute the contrast ratio for a text/background pair.

    A literal ``#`` must be URL-encoded as ``%23`` in the query string, or
    simply omitted.
    """
    return _evaluate(text, background, config)


@router.post("", response_model=ContrastResponse, responses=_INVALID_COLOR_RESPONSE)
async def check_contrast_body(body: ContrastRequest, config: ActiveContrastConfig) -> Any:
    """Compute the contrast ratio for a text/background pair sent as JSON."""
    return _evaluate(body.text_color, body.background_color, config)


# ---------------------------------------------------------------------------
# POST /contrast/batch
# ---------------------------------------------------------------------------


@router.post("/batch", response_model=BatchContrastResponse, responses=_INVALID_COLOR_RESPONSE)
async def check_contrast_batch(
    body: BatchContrastRequest,
    settings: AppSettings,
    config: ActiveContrastConfig,
) -> Any:
    """Check every labelled pair of a palette in one request.

    The whole batch is rejected if any color is malformed.
    """
    if len(body.pairs) > settings.max_batch_pairs:
        raise HTTPException(
            status_code=400,
            detail=f"Too many pairs. Max: {settings.max_batch_pairs}",
        )

    try:
        evaluated = evaluate_pairs(
            ((p.label, p.text_color, p.background_color) for p in body.pairs),
            thresholds=config.thresholds,
            ratio_decimals=config.ratio_decimals,
        )
    except InvalidColorFormat as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    results = [
        LabelledContrastResponse(
            label=label,
            **ContrastResponse.from_evaluation(evaluation).model_dump(),
        )
        for label, evaluation in evaluated
    ]
    return BatchContrastResponse(
        results=results,
        total=len(results),
        failing=sum(1 for r in results if not r.passed),
    )


# ---------------------------------------------------------------------------
# GET /contrast/levels
# ---------------------------------------------------------------------------


@router.get("/levels", response_model=LevelsResponse)
async def list_levels(config: ActiveContrastConfig) -> Any:
    """Return the WCAG levels in the order they are applied (loosest first)."""
    return LevelsResponse(
        version=config.version,
        levels=[LevelResponse.from_threshold(t) for t in config.thresholds],
    )
