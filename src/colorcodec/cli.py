"""
Command-line front end for the color codec.

Usage:
    colorcodec hex 51 102 153 --alpha=128 --include-alpha
    colorcodec parse "#336699"
    colorcodec parse 000000
    colorcodec hsv 210 0.5 0.6 --no-marker
    colorcodec --verbose parse 336699
"""

__all__ = [
    "ColorCodecCLI",
    "configure_logging",
    "prepare_argv",
    "main",
]

import sys
from typing import List, NoReturn, Optional, Sequence

import fire
from loguru import logger

from colorcodec.color import Color
from colorcodec.errors import FormatError
from colorcodec.hex import HexOptions, encode_hex, parse_hex
from colorcodec.hsv import from_hsv

_VERBOSE_FLAG = "--verbose"


def configure_logging(verbose: bool = False) -> None:
    """Send log output to stderr, at DEBUG when verbose else INFO."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")


def prepare_argv(argv: Sequence[str]) -> List[str]:
    """
    Rewrite raw arguments before handing them to fire.

    fire evaluates arguments as Python literals, so "000000" would become
    the int 0 and "12_3456" the int 123456. The TEXT argument of parse is
    therefore passed as a quoted literal to keep it verbatim. --verbose is
    moved after the command so it is not read as the command's value.

    Args:
        argv: Command-line arguments, without the program name

    Returns:
        Arguments ready for fire.Fire(command=...)

    Example:
        >>> prepare_argv(["--verbose", "parse", "000000"])
        ['parse', "'000000'", '--verbose']
    """
    args = [arg for arg in argv if arg != _VERBOSE_FLAG]
    if len(args) >= 2 and args[0] == "parse" and not args[1].startswith("-"):
        args[1] = repr(args[1])
    if len(args) < len(argv):
        args.append(_VERBOSE_FLAG)
    return args


def _fail(message: str) -> NoReturn:
    logger.error(message)
    raise SystemExit(1)


class ColorCodecCLI:
    """Convert colors between RGB, hex and HSV."""

    def __init__(self, verbose: bool = False):
        configure_logging(verbose)

    def hex(
        self,
        red: int,
        green: int,
        blue: int,
        alpha: int = 255,
        include_alpha: bool = False,
        no_marker: bool = False,
    ) -> str:
        """Format RGB(A) channels as a hex string."""
        try:
            color = Color(red, green, blue, alpha)
        except ValueError as e:
            _fail(f"Invalid color: {e}")
        options = HexOptions(include_alpha=include_alpha, leading_marker=not no_marker)
        result = encode_hex(color, options)
        logger.debug(f"{color} -> {result}")
        return result

    def parse(self, text: str) -> str:
        """Parse "#RRGGBB" text, printing "R G B A"."""
        if not isinstance(text, str):
            _fail(f"Expected hex text, got {text!r}; quote it or prefix it with '#'")
        try:
            color = parse_hex(text)
        except FormatError as e:
            _fail(f"Cannot parse {e.text!r}: {e}")
        logger.debug(f"{text!r} -> {color}")
        return " ".join(str(channel) for channel in color.rgba)

    def hsv(
        self,
        hue: float,
        saturation: float,
        value: float,
        include_alpha: bool = False,
        no_marker: bool = False,
    ) -> str:
        """Convert hue/saturation/value to a hex string."""
        color = from_hsv(float(hue), float(saturation), float(value))
        options = HexOptions(include_alpha=include_alpha, leading_marker=not no_marker)
        result = encode_hex(color, options)
        logger.debug(f"hsv({hue}, {saturation}, {value}) -> {color}")
        return result


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Console script entry point."""
    if argv is None:
        argv = sys.argv[1:]
    fire.Fire(ColorCodecCLI, command=prepare_argv(argv))


if __name__ == "__main__":
    main()
