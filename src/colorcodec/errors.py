"""Exceptions raised by the codec."""

__all__ = ["FormatError"]


class FormatError(ValueError):
    """
    Raised when a hex color string cannot be parsed.

    Attributes:
        text: The input that was rejected
    """

    def __init__(self, message: str, text: str):
        super().__init__(message)
        self.text = text
