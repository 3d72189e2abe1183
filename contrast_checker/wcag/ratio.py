"""Contrast ratio per WCAG 2.0.

See https://www.w3.org/TR/2008/REC-WCAG20-20081211/#contrast-ratiodef
"""

from __future__ import annotations

from contrast_checker.wcag.color import parse_hex_color
from contrast_checker.wcag.luminance import color_luminance

# Flare term added to both luminances
_FLARE = 0.05


def contrast_ratio(luminance1: float, luminance2: float) -> float:
    """Return ``(lighter + 0.05) / (darker + 0.05)``.

    Argument order does not matter.  For luminances in [0, 1] the result lies
    in [1, 21].
    """
    lighter = max(luminance1, luminance2)
    darker = min(luminance1, luminance2)
    return (lighter + _FLARE) / (darker + _FLARE)


def check_contrast(color1: str, color2: str) -> float:
    """Return the contrast ratio between two 6-digit hex color strings.

    Raises:
        InvalidColorFormat: If either string is not a valid hex color.
    """
    luminance1 = color_luminance(parse_hex_color(color1))
    luminance2 = color_luminance(parse_hex_color(color2))
    return contrast_ratio(luminance1, luminance2)
