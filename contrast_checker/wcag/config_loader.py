"""Load, validate, and reload the contrast threshold configuration.

The config lives in ``contrast_config.yaml`` alongside this module.  It is
loaded once on first use and cached.  Call ``reload_contrast_config()`` to
re-read it from disk.

Usage::

    from contrast_checker.wcag.config_loader import get_contrast_config

    config = get_contrast_config()
    config.thresholds        # (WcagThreshold("AA Large", 3.0), ...)
    config.level("AA")       # WcagThreshold("AA", 4.5)
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from contrast_checker.wcag.base import WcagThreshold
from contrast_checker.wcag.compliance import DEFAULT_RATIO_DECIMALS

logger = logging.getLogger("contrast_checker.wcag.config")

_CONFIG_PATH = Path(__file__).parent / "contrast_config.yaml"

# Bounds of the WCAG contrast ratio
MIN_RATIO = 1.0
MAX_RATIO = 21.0


@dataclass
class ContrastConfig:
    """Validated in-memory form of contrast_config.yaml.

    Attributes:
        version:        Config schema version string.
        thresholds:     Levels ordered loosest to strictest.
        ratio_decimals: Decimal places used when displaying a ratio.
    """

    version: str
    thresholds: tuple[WcagThreshold, ...]
    ratio_decimals: int = DEFAULT_RATIO_DECIMALS
    _raw: dict = field(default_factory=dict, repr=False)

    @property
    def labels(self) -> list[str]:
        return [t.label for t in self.thresholds]

    def level(self, label: str) -> WcagThreshold | None:
        """Return the threshold with the given label, or None if unknown."""
        for threshold in self.thresholds:
            if threshold.label == label:
                return threshold
        return None


# ---------------------------------------------------------------------------
# Loader / validation
# ---------------------------------------------------------------------------


class ConfigValidationError(ValueError):
    """Raised when contrast_config.yaml fails validation."""


def _load_yaml(path: Path) -> dict:
    """Read and parse a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigValidationError: If the YAML is malformed or not a mapping.
    """
    if not path.exists():
        raise FileNotFoundError(f"Contrast config not found: {path}")

    with path.open("r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            raise ConfigValidationError(f"YAML parse error in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigValidationError(
            f"contrast_config.yaml must be a mapping at the top level, "
            f"got {type(data).__name__} in {path}"
        )
    return data


def _validate_and_build(raw: dict) -> ContrastConfig:
    """Validate the raw YAML dict and construct a ContrastConfig.

    Raises:
        ConfigValidationError: Listing every problem found.
    """
    errors: list[str] = []

    version = str(raw.get("version", "1.0"))

    # ── Thresholds ──
    thresholds_raw: Any = raw.get("thresholds")
    if not thresholds_raw:
        errors.append("'thresholds' section is missing or empty")
        thresholds_raw = []
    elif not isinstance(thresholds_raw, list):
        errors.append("'thresholds' must be a list of {label, min_ratio} entries")
        thresholds_raw = []

    thresholds: list[WcagThreshold] = []
    seen: set[str] = set()
    for index, entry in enumerate(thresholds_raw):
        if not isinstance(entry, dict):
            errors.append(f"thresholds[{index}] must be a mapping")
            continue

        label = str(entry.get("label") or "").strip()
        if not label:
            errors.append(f"thresholds[{index}] is missing a label")
            continue
        if label in seen:
            errors.append(f"thresholds[{index}] duplicates label '{label}'")
            continue
        seen.add(label)

        try:
            min_ratio = float(entry.get("min_ratio"))
        except (TypeError, ValueError):
            errors.append(
                f"thresholds.{label}.min_ratio must be a number, got {entry.get('min_ratio')!r}"
            )
            continue
        if not (MIN_RATIO <= min_ratio <= MAX_RATIO):
            errors.append(
                f"thresholds.{label}.min_ratio = {min_ratio} is out of range "
                f"[{MIN_RATIO}, {MAX_RATIO}]"
            )
            continue

        if thresholds and min_ratio <= thresholds[-1].min_ratio:
            errors.append(
                f"thresholds.{label}.min_ratio = {min_ratio} must be greater than "
                f"'{thresholds[-1].label}' ({thresholds[-1].min_ratio}); "
                "levels are listed loosest first"
            )
        thresholds.append(WcagThreshold(label=label, min_ratio=min_ratio))

    # ── Display ──
    display_raw = raw.get("display") or {}
    if not isinstance(display_raw, dict):
        errors.append("'display' must be a mapping")
        display_raw = {}
    ratio_decimals = display_raw.get("ratio_decimals", DEFAULT_RATIO_DECIMALS)
    # bool is an int subclass; YAML "true" must not pass as 1
    if not isinstance(ratio_decimals, int) or isinstance(ratio_decimals, bool):
        errors.append(f"display.ratio_decimals must be an integer, got {ratio_decimals!r}")
        ratio_decimals = DEFAULT_RATIO_DECIMALS
    elif ratio_decimals < 0:
        errors.append(f"display.ratio_decimals = {ratio_decimals} must not be negative")

    if errors:
        raise ConfigValidationError(
            f"contrast_config.yaml has {len(errors)} validation error(s):\n"
            + "\n".join(f"  • {e}" for e in errors)
        )

    return ContrastConfig(
        version=version,
        thresholds=tuple(thresholds),
        ratio_decimals=ratio_decimals,
        _raw=raw,
    )


def load_contrast_config(path: Path | None = None) -> ContrastConfig:
    """Load and validate the contrast config from disk.

    Args:
        path: Override path to YAML. Uses the bundled contrast_config.yaml by default.
    """
    target = path or _CONFIG_PATH
    raw = _load_yaml(target)
    config = _validate_and_build(raw)
    logger.info(
        "Loaded contrast config v%s from %s (%d levels)",
        config.version,
        target,
        len(config.thresholds),
    )
    return config


# ---------------------------------------------------------------------------
# Global singleton with reload support
# ---------------------------------------------------------------------------

_config: ContrastConfig | None = None
_config_path: Path | None = None
_config_lock = threading.Lock()


def get_contrast_config(path: Path | None = None) -> ContrastConfig:
    """Return the global ContrastConfig, loading it on first call.

    Passing a ``path`` different from the cached one loads that file instead.
    ``None`` returns whatever is cached (the bundled file on first load).
    """
    global _config, _config_path
    if _config is None or (path is not None and path != _config_path):
        with _config_lock:
            if _config is None or (path is not None and path != _config_path):
                _config = load_contrast_config(path)
                _config_path = path
    return _config


def reload_contrast_config(path: Path | None = None) -> ContrastConfig:
    """Force a re-read of the config from disk.

    If the new file fails validation the previous config stays in place and
    the error is raised.
    """
    global _config, _config_path
    target = path or _config_path
    new_config = load_contrast_config(target)
    with _config_lock:
        _config = new_config
        _config_path = target
    logger.info("Contrast config reloaded (v%s)", new_config.version)
    return new_config
