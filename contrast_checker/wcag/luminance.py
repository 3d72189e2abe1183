"""Relative luminance per WCAG 2.0.

See https://www.w3.org/TR/2008/REC-WCAG20-20081211/#relativeluminancedef

    L = 0.2126 * R + 0.7152 * G + 0.0722 * B

where each of R, G, B is the gamma-expanded channel proportion.
"""

from __future__ import annotations

from contrast_checker.wcag.base import Color

# sRGB transfer-function breakpoint as published in WCAG 2.0
SRGB_LINEAR_THRESHOLD = 0.03928

RED_WEIGHT = 0.2126
GREEN_WEIGHT = 0.7152
BLUE_WEIGHT = 0.0722


def linearize_channel(channel: int) -> float:
    """Convert an 8-bit channel (0–255) to its linear-light component."""
    proportion = channel / 255
    if proportion <= SRGB_LINEAR_THRESHOLD:
        return proportion / 12.92
    return ((proportion + 0.055) / 1.055) ** 2.4


def relative_luminance(red: int, green: int, blue: int) -> float:
    """Return the relative luminance (0.0–1.0) of an sRGB color."""
    return (
        RED_WEIGHT * linearize_channel(red)
        + GREEN_WEIGHT * linearize_channel(green)
        + BLUE_WEIGHT * linearize_channel(blue)
    )


def color_luminance(color: Color) -> float:
    return relative_luminance(color.red, color.green, color.blue)
