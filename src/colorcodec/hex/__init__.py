"""
Hex codec subpackage - no external dependencies.

Formatting and parsing of hexadecimal color strings.
"""

from colorcodec.hex.codec import (
    HexOptions,
    encode_hex,
    parse_hex,
    HEX_MARKER,
)

__all__ = [
    "HexOptions",
    "encode_hex",
    "parse_hex",
    "HEX_MARKER",
]
