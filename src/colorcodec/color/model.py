"""
Color value type - no external dependencies.

An immutable RGBA color with four 8-bit channels, plus the clamp helper
used when converting computed intensities into channels.
"""

__all__ = [
    "Color",
    "clamp",
    "CHANNEL_MIN",
    "CHANNEL_MAX",
]

from dataclasses import dataclass
from typing import Tuple, TypeVar

N = TypeVar("N", int, float)

CHANNEL_MIN = 0
CHANNEL_MAX = 255


def clamp(number: N, lower: N, upper: N) -> N:
    """
    Constrain a number to the closed range [lower, upper].

    Args:
        number: Value to constrain
        lower: Lower bound (inclusive)
        upper: Upper bound (inclusive)

    Returns:
        lower if number is below it, upper if above it, else number

    Raises:
        ValueError: If lower > upper

    Example:
        >>> clamp(300, 0, 255)
        255
        >>> clamp(-4, 0, 255)
        0
        >>> clamp(0.5, 0.0, 1.0)
        0.5
    """
    if lower > upper:
        raise ValueError(f"lower bound {lower} exceeds upper bound {upper}")
    if number < lower:
        return lower
    if number > upper:
        return upper
    return number


@dataclass(frozen=True)
class Color:
    """
    Immutable RGBA color, each channel an int in [0, 255].

    Alpha defaults to fully opaque.

    Example:
        >>> Color(0x33, 0x66, 0x99)
        Color(red=51, green=102, blue=153, alpha=255)
    """

    red: int
    green: int
    blue: int
    alpha: int = CHANNEL_MAX

    def __post_init__(self):
        for name in ("red", "green", "blue", "alpha"):
            channel = getattr(self, name)
            # bool is an int subclass but never a meaningful channel
            if not isinstance(channel, int) or isinstance(channel, bool):
                raise ValueError(
                    f"{name} must be an int, got {type(channel).__name__}"
                )
            if not CHANNEL_MIN <= channel <= CHANNEL_MAX:
                raise ValueError(
                    f"{name} must be in [{CHANNEL_MIN}, {CHANNEL_MAX}], got {channel}"
                )

    @property
    def rgb(self) -> Tuple[int, int, int]:
        """(red, green, blue) tuple."""
        return (self.red, self.green, self.blue)

    @property
    def rgba(self) -> Tuple[int, int, int, int]:
        """(red, green, blue, alpha) tuple."""
        return (self.red, self.green, self.blue, self.alpha)

    def rgb_float(self) -> Tuple[float, float, float]:
        """
        Convert to an RGB float tuple (0.0-1.0).

        Example:
            >>> Color(255, 128, 0).rgb_float()
            (1.0, 0.5019607843137255, 0.0)
        """
        return tuple(channel / 255.0 for channel in self.rgb)
