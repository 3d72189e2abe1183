"""Tests for contrast_config.yaml loading and validation."""

from __future__ import annotations

import pytest

from contrast_checker.wcag.compliance import WCAG_MINIMUM_RATIOS
from contrast_checker.wcag.config_loader import (
    ConfigValidationError,
    ContrastConfig,
    _validate_and_build,
    get_contrast_config,
    load_contrast_config,
    reload_contrast_config,
)


class TestConfigLoading:
    """Tests for loading the bundled contrast_config.yaml."""

    def test_load_default_config(self, contrast_config: ContrastConfig) -> None:
        assert contrast_config.version == "1.0"
        assert contrast_config.ratio_decimals == 2

    def test_bundled_levels_match_wcag(self, contrast_config: ContrastConfig) -> None:
        assert contrast_config.thresholds == WCAG_MINIMUM_RATIOS

    def test_levels_ascending(self, contrast_config: ContrastConfig) -> None:
        ratios = [t.min_ratio for t in contrast_config.thresholds]
        assert ratios == sorted(ratios)

    def test_level_lookup(self, contrast_config: ContrastConfig) -> None:
        assert contrast_config.level("AA").min_ratio == 4.5
        assert contrast_config.level("AAAA") is None
        assert contrast_config.labels == ["AA Large", "AA", "AAA"]

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_contrast_config(tmp_path / "nope.yaml")

    def test_malformed_yaml(self, write_config) -> None:
        path = write_config("thresholds: [unclosed\n")
        with pytest.raises(ConfigValidationError, match="YAML parse error"):
            load_contrast_config(path)

    def test_custom_file(self, write_config) -> None:
        path = write_config(
            """\
            version: "2.0"
            display:
              ratio_decimals: 1
            thresholds:
              - label: "Minimum"
                min_ratio: 4.5
              - label: "Enhanced"
                min_ratio: 7
            """
        )
        config = load_contrast_config(path)
        assert config.version == "2.0"
        assert config.ratio_decimals == 1
        assert config.labels == ["Minimum", "Enhanced"]


class TestConfigValidation:
    """Tests for _validate_and_build()."""

    def _thresholds(self, *pairs):
        return [{"label": label, "min_ratio": ratio} for label, ratio in pairs]

    def test_missing_thresholds(self) -> None:
        with pytest.raises(ConfigValidationError, match="missing or empty"):
            _validate_and_build({"version": "1.0"})

    def test_thresholds_must_be_list(self) -> None:
        with pytest.raises(ConfigValidationError, match="must be a list"):
            _validate_and_build({"thresholds": {"AA": 4.5}})

    def test_descending_order_rejected(self) -> None:
        raw = {"thresholds": self._thresholds(("AAA", 7), ("AA", 4.5))}
        with pytest.raises(ConfigValidationError, match="loosest first"):
            _validate_and_build(raw)

    def test_equal_ratios_rejected(self) -> None:
        raw = {"thresholds": self._thresholds(("A", 3), ("B", 3))}
        with pytest.raises(ConfigValidationError, match="must be greater than"):
            _validate_and_build(raw)

    def test_duplicate_label_rejected(self) -> None:
        raw = {"thresholds": self._thresholds(("AA", 3), ("AA", 4.5))}
        with pytest.raises(ConfigValidationError, match="duplicates label"):
            _validate_and_build(raw)

    def test_out_of_range_rejected(self) -> None:
        raw = {"thresholds": self._thresholds(("Impossible", 22))}
        with pytest.raises(ConfigValidationError, match="out of range"):
            _validate_and_build(raw)

    def test_non_numeric_ratio_rejected(self) -> None:
        raw = {"thresholds": self._thresholds(("AA", "high"))}
        with pytest.raises(ConfigValidationError, match="must be a number"):
            _validate_and_build(raw)

    def test_missing_label_rejected(self) -> None:
        raw = {"thresholds": [{"min_ratio": 3}]}
        with pytest.raises(ConfigValidationError, match="missing a label"):
            _validate_and_build(raw)

    def test_negative_decimals_rejected(self) -> None:
        raw = {
            "thresholds": self._thresholds(("AA", 4.5)),
            "display": {"ratio_decimals": -1},
        }
        with pytest.raises(ConfigValidationError, match="must not be negative"):
            _validate_and_build(raw)

    @pytest.mark.parametrize("value", [2.7, True, "two", None])
    def test_non_integer_decimals_rejected(self, value) -> None:
        raw = {
            "thresholds": self._thresholds(("AA", 4.5)),
            "display": {"ratio_decimals": value},
        }
        with pytest.raises(ConfigValidationError, match="must be an integer"):
            _validate_and_build(raw)

    @pytest.mark.parametrize(
        "body",
        [
            "- AA\n- AAA\n",
            "just a string\n",
            "42\n",
        ],
    )
    def test_top_level_must_be_mapping(self, write_config, body) -> None:
        path = write_config(body)
        with pytest.raises(ConfigValidationError, match="mapping at the top level"):
            load_contrast_config(path)

    def test_all_errors_reported(self) -> None:
        raw = {
            "thresholds": self._thresholds(("AA", "x"), ("", 3)),
            "display": {"ratio_decimals": "two"},
        }
        with pytest.raises(ConfigValidationError, match="3 validation error"):
            _validate_and_build(raw)


class TestConfigSingleton:
    def test_cached(self) -> None:
        assert get_contrast_config() is get_contrast_config()

    def test_new_path_loads_that_file(self, write_config) -> None:
        bundled = get_contrast_config()
        path = write_config(
            """\
            thresholds:
              - label: "Custom"
                min_ratio: 5
            """
        )
        custom = get_contrast_config(path)
        assert custom is not bundled
        assert custom.labels == ["Custom"]
        # Same path or no path keeps the cached config
        assert get_contrast_config(path) is custom
        assert get_contrast_config() is custom

    def test_reload_replaces_config(self, write_config) -> None:
        original = get_contrast_config()
        path = write_config(
            """\
            thresholds:
              - label: "Only"
                min_ratio: 2
            """
        )
        reloaded = reload_contrast_config(path)
        assert reloaded is not original
        assert get_contrast_config().labels == ["Only"]

    def test_failed_reload_keeps_previous(self, write_config) -> None:
        original = get_contrast_config()
        path = write_config("thresholds: []\n")
        with pytest.raises(ConfigValidationError):
            reload_contrast_config(path)
        assert get_contrast_config() is original
