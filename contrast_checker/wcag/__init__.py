"""WCAG 2.0 contrast engine — public API.

Usage::

    from contrast_checker.wcag import evaluate_contrast

    result = evaluate_contrast("#000000", "#ffffff")
    print(result.ratio_display)     # "21:1"
    print(result.strictest_level)   # "AAA"

Core modules:
    color         — 6-digit hex parsing
    luminance     — relative luminance
    ratio         — contrast ratio
    compliance    — level classification and ratio formatting
    config_loader — load/validate/reload contrast_config.yaml
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from contrast_checker.wcag.base import (
    Color,
    ComplianceResult,
    ContrastEvaluation,
    InvalidColorFormat,
    WcagThreshold,
)
from contrast_checker.wcag.color import parse_hex_color
from contrast_checker.wcag.compliance import (
    DEFAULT_RATIO_DECIMALS,
    WCAG_MINIMUM_RATIOS,
    classify_ratio,
    format_ratio,
)
from contrast_checker.wcag.luminance import color_luminance, relative_luminance
from contrast_checker.wcag.ratio import check_contrast, contrast_ratio

__all__ = [
    "evaluate_contrast",
    "evaluate_pairs",
    "check_contrast",
    "classify_ratio",
    "contrast_ratio",
    "format_ratio",
    "parse_hex_color",
    "relative_luminance",
    "Color",
    "ComplianceResult",
    "ContrastEvaluation",
    "InvalidColorFormat",
    "WcagThreshold",
    "WCAG_MINIMUM_RATIOS",
]

logger = logging.getLogger("contrast_checker.wcag")


def evaluate_contrast(
    text_color: str,
    background_color: str,
    thresholds: Sequence[WcagThreshold] = WCAG_MINIMUM_RATIOS,
    ratio_decimals: int = DEFAULT_RATIO_DECIMALS,
) -> ContrastEvaluation:
    """Compare a text color against a background color.

    This is the single entry point used by the API layer.  Both colors are
    6-digit hex strings, with or without a leading ``#``.  Swapping the two
    colors gives the same ratio and classification.

    Args:
        text_color:       Foreground color, e.g. ``"#333333"``.
        background_color: Background color, e.g. ``"ffffff"``.
        thresholds:       Levels ordered loosest to strictest.
        ratio_decimals:   Decimal places for ``ratio_display``.

    Returns:
        :class:`ContrastEvaluation` with the ratio, its display string and
        the compliance result.

    Raises:
        InvalidColorFormat: If either color is not a valid 6-digit hex string.
    """
    text = parse_hex_color(text_color)
    background = parse_hex_color(background_color)

    ratio = contrast_ratio(color_luminance(text), color_luminance(background))
    compliance = classify_ratio(ratio, thresholds)

    return ContrastEvaluation(
        text_color=text.hex,
        background_color=background.hex,
        ratio=ratio,
        ratio_display=format_ratio(ratio, ratio_decimals),
        compliance=compliance,
    )


def evaluate_pairs(
    pairs: Iterable[tuple[str, str, str]],
    thresholds: Sequence[WcagThreshold] = WCAG_MINIMUM_RATIOS,
    ratio_decimals: int = DEFAULT_RATIO_DECIMALS,
) -> list[tuple[str, ContrastEvaluation]]:
    """Evaluate labelled ``(label, text_color, background_color)`` pairs.

    Useful for auditing a whole palette at once.  Evaluation stops at the
    first invalid color and the error propagates.
    """
    results: list[tuple[str, ContrastEvaluation]] = []
    for label, text_color, background_color in pairs:
        evaluation = evaluate_contrast(
            text_color, background_color, thresholds, ratio_decimals
        )
        results.append((label, evaluation))

    failing = sum(1 for _, e in results if not e.passed)
    logger.info("Evaluated %d color pairs (%d failing)", len(results), failing)
    return results
