"""Raster engine packing two pixels per terminal cell."""

from .buffer import DEFAULT_CELL, Cell, CellBuffer
from .display import TerminalDisplay, advance
from .geometry import Pixel, Point, Rectangle, Size, saturating_count
from .glyphs import (
    BLANK,
    FULL_BLOCK,
    LOWER_HALF_BLOCK,
    UPPER_HALF_BLOCK,
    CellStyle,
    select_glyph,
    select_row_glyph,
)
from .image import draw_image, fit_image, image_colors
from .patterns import PATTERNS, pattern_colors

__all__ = [
    "BLANK",
    "Cell",
    "CellBuffer",
    "CellStyle",
    "DEFAULT_CELL",
    "FULL_BLOCK",
    "LOWER_HALF_BLOCK",
    "PATTERNS",
    "Pixel",
    "Point",
    "Rectangle",
    "Size",
    "TerminalDisplay",
    "UPPER_HALF_BLOCK",
    "advance",
    "draw_image",
    "fit_image",
    "image_colors",
    "pattern_colors",
    "saturating_count",
    "select_glyph",
    "select_row_glyph",
]
