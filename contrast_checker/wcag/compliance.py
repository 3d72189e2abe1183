"""WCAG conformance classification and ratio formatting.

Levels (minimum contrast ratio):
    AA Large  3.0  — large-scale text
    AA        4.5  — normal text
    AAA       7.0  — enhanced contrast
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from contrast_checker.wcag.base import ComplianceResult, WcagThreshold

logger = logging.getLogger("contrast_checker.wcag.compliance")

# Ordered loosest to strictest. classify_ratio() depends on this ordering.
WCAG_MINIMUM_RATIOS: tuple[WcagThreshold, ...] = (
    WcagThreshold("AA Large", 3.0),
    WcagThreshold("AA", 4.5),
    WcagThreshold("AAA", 7.0),
)

DEFAULT_RATIO_DECIMALS = 2


def classify_ratio(
    ratio: float,
    thresholds: Sequence[WcagThreshold] = WCAG_MINIMUM_RATIOS,
) -> ComplianceResult:
    """Find the strictest level whose minimum the ratio meets or exceeds.

    ``thresholds`` must be sorted ascending by ``min_ratio``; walking stops at
    the first level the ratio falls short of.
    """
    if math.isnan(ratio):
        return ComplianceResult(passed=False)

    passed = False
    strictest: str | None = None

    for threshold in thresholds:
        if ratio < threshold.min_ratio:
            break
        passed = True
        strictest = threshold.label

    logger.debug("Ratio %.4f classified as %s", ratio, strictest or "Fail")
    return ComplianceResult(passed=passed, strictest_level=strictest)


def format_ratio(ratio: float, decimals: int = DEFAULT_RATIO_DECIMALS) -> str:
    """Format a ratio for display, e.g. ``"4.33:1"`` or ``"21:1"``.

    The value is rounded to ``decimals`` places and shown as a bare integer
    when the rounded value is whole.  Ties round away from zero.
    """
    if not math.isfinite(ratio):
        return f"{ratio}:1"

    rounded = Decimal(ratio).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    if rounded == rounded.to_integral_value():
        return f"{int(rounded)}:1"
    return f"{rounded}:1"
