"""Mapping from color values to ANSI SGR parameters."""

from __future__ import annotations

from .models import AnsiValue, Color, Rgb, TerminalColor


# Foreground codes; background codes are these plus 10.
NAMED_FOREGROUND_CODES: dict[Color, int] = {
    Color.BLACK: 30,
    Color.DARK_RED: 31,
    Color.DARK_GREEN: 32,
    Color.DARK_YELLOW: 33,
    Color.DARK_BLUE: 34,
    Color.DARK_MAGENTA: 35,
    Color.DARK_CYAN: 36,
    Color.GREY: 37,
    Color.DARK_GREY: 90,
    Color.RED: 91,
    Color.GREEN: 92,
    Color.YELLOW: 93,
    Color.BLUE: 94,
    Color.MAGENTA: 95,
    Color.CYAN: 96,
    Color.WHITE: 97,
}

RESET_FOREGROUND = "39"
RESET_BACKGROUND = "49"


def sgr_code(color: TerminalColor, background: bool = False) -> str:
    """Return the SGR parameter string selecting ``color`` on one layer.

    Either sentinel maps to the reset code of the requested layer.
    """
    if color is Color.BACKGROUND or color is Color.FOREGROUND:
        return RESET_BACKGROUND if background else RESET_FOREGROUND
    if isinstance(color, Color):
        code = NAMED_FOREGROUND_CODES[color]
        return str(code + 10 if background else code)
    if isinstance(color, Rgb):
        return f"{48 if background else 38};2;{color.r};{color.g};{color.b}"
    if isinstance(color, AnsiValue):
        return f"{48 if background else 38};5;{color.index}"
    raise TypeError(f"Unsupported color value: {color!r}")


def sgr_sequence(color: TerminalColor, background: bool = False) -> bytes:
    return f"\x1b[{sgr_code(color, background)}m".encode("ascii")
