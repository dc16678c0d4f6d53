"""Glyph selection for a cell's pair of colors."""

from __future__ import annotations

from dataclasses import dataclass

from termpixel_color import Color, TerminalColor

BLANK = " "
FULL_BLOCK = "█"
LOWER_HALF_BLOCK = "▄"
UPPER_HALF_BLOCK = "▀"


@dataclass(frozen=True)
class CellStyle:
    """Glyph plus the color commands needed before writing it.

    ``None`` means the layer needs no command for this glyph.
    """

    glyph: str
    background: TerminalColor | None = None
    foreground: TerminalColor | None = None


_BLANK_STYLE = CellStyle(glyph=BLANK, background=Color.BACKGROUND)
_SOLID_STYLE = CellStyle(glyph=FULL_BLOCK, foreground=Color.FOREGROUND)


def select_glyph(top: TerminalColor, bottom: TerminalColor) -> CellStyle:
    if top == Color.BACKGROUND and bottom == Color.BACKGROUND:
        return _BLANK_STYLE
    if top == Color.FOREGROUND and bottom == Color.FOREGROUND:
        return _SOLID_STYLE
    if top != Color.FOREGROUND and bottom != Color.BACKGROUND:
        return CellStyle(glyph=LOWER_HALF_BLOCK, background=top, foreground=bottom)
    return CellStyle(glyph=UPPER_HALF_BLOCK, background=bottom, foreground=top)


def select_row_glyph(color: TerminalColor) -> CellStyle:
    """Style for cells whose halves share one color; needs a single command."""
    if color == Color.BACKGROUND:
        return _BLANK_STYLE
    if color == Color.FOREGROUND:
        return _SOLID_STYLE
    return CellStyle(glyph=BLANK, background=color)
