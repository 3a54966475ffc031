"""
Color value subpackage - no external dependencies.

Contains the immutable Color type and the clamp helper.
"""

from colorcodec.color.model import (
    Color,
    clamp,
    CHANNEL_MIN,
    CHANNEL_MAX,
)

__all__ = [
    "Color",
    "clamp",
    "CHANNEL_MIN",
    "CHANNEL_MAX",
]
