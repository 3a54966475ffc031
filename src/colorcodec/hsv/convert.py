"""
HSV to RGB conversion - no external dependencies.

Builds a Color from hue (degrees), saturation and value (0-1).
"""

__all__ = [
    "from_hsv",
    "normalize_hue",
]

import math
from typing import Tuple

from colorcodec.color import Color, clamp, CHANNEL_MIN, CHANNEL_MAX


def normalize_hue(hue: float) -> float:
    """
    Reduce a hue angle into [0, 360).

    Non-finite input maps to 0.0.

    Example:
        >>> normalize_hue(-30)
        330.0
        >>> normalize_hue(720.5)
        0.5
    """
    if not math.isfinite(hue):
        return 0.0
    hue = math.fmod(hue, 360.0)
    if hue < 0:
        hue += 360.0
    # tiny negatives round up to exactly 360.0
    if hue >= 360.0:
        hue = 0.0
    return hue


def _sector_rgb(
    hue: float, saturation: float, value: float
) -> Tuple[float, float, float]:
    hf = hue / 60.0
    i = math.floor(hf)
    f = hf - i
    pv = value * (1 - saturation)
    qv = value * (1 - saturation * f)
    tv = value * (1 - saturation * (1 - f))

    # 6 and -1 absorb floating point overshoot at the ends of the circle
    sectors = {
        0: (value, tv, pv),
        1: (qv, value, pv),
        2: (pv, value, tv),
        3: (pv, qv, value),
        4: (tv, pv, value),
        5: (value, pv, qv),
        6: (value, tv, pv),
        -1: (value, pv, qv),
    }
    return sectors.get(i, (value, value, value))


def _to_channel(intensity: float) -> int:
    scaled = intensity * 255.0
    # NaN only arises from non-finite saturation or value
    if math.isnan(scaled):
        return CHANNEL_MIN
    return int(clamp(scaled, float(CHANNEL_MIN), float(CHANNEL_MAX)))


def from_hsv(hue: float, saturation: float, value: float) -> Color:
    """
    Create a color from hue, saturation and value.

    Saturation and value are not range checked; the scaled channels are
    truncated and clamped to [0, 255] instead, so any real input yields a
    valid color.

    Args:
        hue: Hue in degrees, any real (wrapped into [0, 360))
        saturation: Saturation, nominally 0-1
        value: Value/brightness, nominally 0-1

    Returns:
        Opaque Color

    Example:
        >>> from_hsv(0, 1, 1)
        Color(red=255, green=0, blue=0, alpha=255)
        >>> from_hsv(210, 0.5, 0.6).rgb
        (76, 114, 153)
    """
    hue = normalize_hue(hue)

    if value <= 0:
        r = g = b = 0.0
    elif saturation <= 0:
        r = g = b = value
    else:
        r, g, b = _sector_rgb(hue, saturation, value)

    return Color(_to_channel(r), _to_channel(g), _to_channel(b))
