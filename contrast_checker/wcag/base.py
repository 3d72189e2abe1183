"""Data models for the WCAG contrast engine.

Every value here is transient: colors, thresholds and results are recomputed
from the two input strings on each call and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class InvalidColorFormat(ValueError):
    """Raised when a color string is not six hex digits (optionally ``#``-prefixed)."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Invalid color {value!r}: expected 6 hex digits, optionally prefixed with '#'"
        )


# ---------------------------------------------------------------------------
# Color
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Color:
    """An sRGB color with three 8-bit channels."""

    red: int
    green: int
    blue: int

    @property
    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)


# ---------------------------------------------------------------------------
# Thresholds / classification
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class WcagThreshold:
    """A named WCAG conformance level and the minimum ratio it requires."""

    label: str
    min_ratio: float


@dataclass(frozen=True)
class ComplianceResult:
    """Outcome of classifying a contrast ratio against a threshold table.

    Attributes:
        passed:          True if the ratio meets at least the loosest level.
        strictest_level: Label of the strictest level met, or None on failure.
    """

    passed: bool
    strictest_level: str | None = None

    @property
    def status_label(self) -> str:
        return self.strictest_level if self.passed and self.strictest_level else "Fail"


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ContrastEvaluation:
    """Full result of comparing a text color against a background color.

    Attributes:
        text_color:       Normalised ``#rrggbb`` text color.
        background_color: Normalised ``#rrggbb`` background color.
        ratio:            WCAG contrast ratio in [1, 21].
        ratio_display:    Ratio formatted for display, e.g. ``"4.33:1"``.
        compliance:       Pass/fail and strictest level passed.
    """

    text_color: str
    background_color: str
    ratio: float
    ratio_display: str
    compliance: ComplianceResult

    @property
    def passed(self) -> bool:
        return self.compliance.passed

    @property
    def strictest_level(self) -> str | None:
        return self.compliance.strictest_level

    @property
    def status_label(self) -> str:
        return self.compliance.status_label

    def to_dict(self) -> dict[str, Any]:
        return {
            "textColor": self.text_color,
            "backgroundColor": self.background_color,
            "ratio": self.ratio,
            "ratioDisplay": self.ratio_display,
            "pass": self.passed,
            "strictestLevelPassed": self.strictest_level,
            "statusLabel": self.status_label,
        }
