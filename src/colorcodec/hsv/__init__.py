"""
HSV subpackage - no external dependencies.

Conversion from hue/saturation/value to Color.
"""

from colorcodec.hsv.convert import (
    from_hsv,
    normalize_hue,
)

__all__ = [
    "from_hsv",
    "normalize_hue",
]
