"""
Hex color codec - no external dependencies.

Pure functions to format a Color as "#AARRGGBB"-style text and to read
"#RRGGBB" or "RRGGBB" text back into a Color.
"""

__all__ = [
    "HexOptions",
    "encode_hex",
    "parse_hex",
    "HEX_MARKER",
]

import string
from dataclasses import dataclass
from typing import Optional

from colorcodec.color import Color
from colorcodec.errors import FormatError

HEX_MARKER = "#"

_HEX_DIGITS = frozenset(string.hexdigits)

# (channel, start offset) of each field read by parse_hex
_FIELDS = (("red", 0), ("green", 2), ("blue", 4))


@dataclass(frozen=True)
class HexOptions:
    """Configuration for hex encoding."""

    include_alpha: bool = False
    leading_marker: bool = True


def encode_hex(color: Color, options: Optional[HexOptions] = None) -> str:
    """
    Format a color as an uppercase hex string.

    Args:
        color: Color to format
        options: Encoding options (defaults to no alpha, with "#" marker)

    Returns:
        "[#][AA]RRGGBB", two zero-padded uppercase digits per channel

    Example:
        >>> encode_hex(Color(51, 102, 153))
        '#336699'
        >>> encode_hex(Color(51, 102, 153, 128), HexOptions(include_alpha=True))
        '#80336699'
        >>> encode_hex(Color(0, 10, 255), HexOptions(leading_marker=False))
        '000AFF'
    """
    if options is None:
        options = HexOptions()

    marker = HEX_MARKER if options.leading_marker else ""
    alpha = f"{color.alpha:02X}" if options.include_alpha else ""
    return f"{marker}{alpha}{color.red:02X}{color.green:02X}{color.blue:02X}"


def parse_hex(text: str) -> Color:
    """
    Parse a color from "#RRGGBB" or "RRGGBB" text.

    Only the first six digits are read. Alpha is never parsed, so the
    result is always fully opaque, and anything after the blue field is
    ignored.

    Args:
        text: Hex color string

    Returns:
        Color with the parsed red, green and blue, alpha 255

    Raises:
        FormatError: If fewer than six characters follow the marker, or
                     one of them is not a hex digit
        TypeError: If text is not a string

    Example:
        >>> parse_hex("#336699")
        Color(red=51, green=102, blue=153, alpha=255)
        >>> parse_hex("ff8000")
        Color(red=255, green=128, blue=0, alpha=255)
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    digits = text[1:] if text.startswith(HEX_MARKER) else text
    if len(digits) < 6:
        raise FormatError(
            f"expected 6 hex digits, got {len(digits)}: {text!r}", text
        )

    channels = {}
    for name, start in _FIELDS:
        field = digits[start : start + 2]
        if not _HEX_DIGITS.issuperset(field):
            raise FormatError(f"invalid {name} field {field!r} in {text!r}", text)
        channels[name] = int(field, 16)

    return Color(**channels)
