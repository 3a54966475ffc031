"""
colorcodec - Small color codec for hex strings and HSV.

This package is organized into focused subpackages:

- color/    Color value type (no dependencies)
            - model: Color, clamp

- hex/      Hex codec (no dependencies)
            - codec: encode_hex, parse_hex, HexOptions

- hsv/      HSV conversion (no dependencies)
            - convert: from_hsv, normalize_hue

- cli       Command-line front end (requires fire, loguru)

Usage:
    from colorcodec import Color, encode_hex, parse_hex, from_hsv
    from colorcodec.hex import HexOptions
"""

__version__ = "0.0.1"

from colorcodec.errors import FormatError

from colorcodec.color import (
    Color,
    clamp,
)

from colorcodec.hex import (
    HexOptions,
    encode_hex,
    parse_hex,
)

from colorcodec.hsv import (
    from_hsv,
    normalize_hue,
)

__all__ = [
    "__version__",
    # errors
    "FormatError",
    # color.model
    "Color",
    "clamp",
    # hex.codec
    "HexOptions",
    "encode_hex",
    "parse_hex",
    # hsv.convert
    "from_hsv",
    "normalize_hue",
]
