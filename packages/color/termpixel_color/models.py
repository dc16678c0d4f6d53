"""Typed color values understood by the terminal renderer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Color(str, Enum):
    """Named terminal colors plus the two default-color sentinels.

    ``BACKGROUND`` and ``FOREGROUND`` stand for whatever the terminal's own
    default colors currently are. They are rendered with reset codes rather
    than an explicit color value.
    """

    BACKGROUND = "BgColor"
    FOREGROUND = "FgColor"
    BLACK = "Black"
    DARK_GREY = "DarkGrey"
    RED = "Red"
    DARK_RED = "DarkRed"
    GREEN = "Green"
    DARK_GREEN = "DarkGreen"
    YELLOW = "Yellow"
    DARK_YELLOW = "DarkYellow"
    BLUE = "Blue"
    DARK_BLUE = "DarkBlue"
    MAGENTA = "Magenta"
    DARK_MAGENTA = "DarkMagenta"
    CYAN = "Cyan"
    DARK_CYAN = "DarkCyan"
    WHITE = "White"
    GREY = "Grey"


@dataclass(frozen=True)
class Rgb:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError("RGB channels must be in range 0..255")


@dataclass(frozen=True)
class AnsiValue:
    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index <= 255:
            raise ValueError("ANSI palette index must be in range 0..255")


TerminalColor = Union[Color, Rgb, AnsiValue]

DEFAULT_COLOR: TerminalColor = Color.BACKGROUND


def is_sentinel(color: TerminalColor) -> bool:
    return color is Color.BACKGROUND or color is Color.FOREGROUND
