"""Request / response schemas for the contrast endpoints.

Response fields are serialised in camelCase (``ratioDisplay``, ``pass``,
``strictestLevelPassed``) to match what the browser front end reads.
"""

from __future__ import annotations

from pydantic import Field

from contrast_checker.models.base import ContrastBase
from contrast_checker.wcag.base import ContrastEvaluation, WcagThreshold


# ---------- Requests ----------


class ContrastRequest(ContrastBase):
    """Body for a single contrast check."""

    text_color: str = Field(alias="textColor", examples=["#333333"])
    background_color: str = Field(alias="backgroundColor", examples=["#ffffff"])


class LabelledPair(ContrastRequest):
    label: str = ""


class BatchContrastRequest(ContrastBase):
    pairs: list[LabelledPair] = Field(default_factory=list)


# ---------- Responses ----------


class ContrastResponse(ContrastBase):
    """Serialised ContrastEvaluation."""

    text_color: str = Field(alias="textColor")
    background_color: str = Field(alias="backgroundColor")
    ratio: float
    ratio_display: str = Field(alias="ratioDisplay")
    passed: bool = Field(alias="pass")
    strictest_level: str | None = Field(default=None, alias="strictestLevelPassed")
    status_label: str = Field(alias="statusLabel")

    @classmethod
    def from_evaluation(cls, evaluation: ContrastEvaluation) -> "ContrastResponse":
        return cls(
            text_color=evaluation.text_color,
            background_color=evaluation.background_color,
            ratio=evaluation.ratio,
            ratio_display=evaluation.ratio_display,
            passed=evaluation.passed,
            strictest_level=evaluation.strictest_level,
            status_label=evaluation.status_label,
        )


class LabelledContrastResponse(ContrastResponse):
    label: str = ""


class BatchContrastResponse(ContrastBase):
    results: list[LabelledContrastResponse]
    total: int
    failing: int


class LevelResponse(ContrastBase):
    label: str
    min_ratio: float = Field(alias="minRatio")

    @classmethod
    def from_threshold(cls, threshold: WcagThreshold) -> "LevelResponse":
        return cls(label=threshold.label, min_ratio=threshold.min_ratio)


class LevelsResponse(ContrastBase):
    version: str
    levels: list[LevelResponse]
