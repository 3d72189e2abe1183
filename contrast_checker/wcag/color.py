"""Hex color parsing."""

from __future__ import annotations

import re

from contrast_checker.wcag.base import Color, InvalidColorFormat

_HEX_PATTERN = re.compile(r"[0-9a-fA-F]{6}")


def parse_hex_color(value: str) -> Color:
    """Parse a 6-digit hex string such as ``"#1e1a16"`` or ``"FAFAF5"``.

    A single leading ``#`` is stripped before the digits are read in
    red / green / blue pairs.

    Raises:
        InvalidColorFormat: If the remaining text is not exactly six hex digits.
    """
    if not isinstance(value, str):
        raise InvalidColorFormat(str(value))

    digits = value.strip()
    if digits.startswith("#"):
        digits = digits[1:]

    if not _HEX_PATTERN.fullmatch(digits):
        raise InvalidColorFormat(value)

    return Color(
        red=int(digits[0:2], 16),
        green=int(digits[2:4], 16),
        blue=int(digits[4:6], 16),
    )
