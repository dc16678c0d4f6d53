"""Conversions from common pixel formats into terminal colors."""

from __future__ import annotations

import colorsys

from PIL import ImageColor

from .models import Color, Rgb


def _expand(value: int, bits: int) -> int:
    # Replicate the high bits into the low bits so full scale maps to 255.
    value &= (1 << bits) - 1
    out = value << (8 - bits)
    shift = bits
    while shift < 8:
        out |= out >> shift
        shift *= 2
    return out & 0xFF


def from_binary(on: bool) -> Color:
    return Color.FOREGROUND if on else Color.BACKGROUND


def from_rgb888(r: int, g: int, b: int) -> Rgb:
    return Rgb(r, g, b)


def from_bgr888(b: int, g: int, r: int) -> Rgb:
    return Rgb(r, g, b)


def from_rgb565(value: int) -> Rgb:
    return Rgb(_expand(value >> 11, 5), _expand(value >> 5, 6), _expand(value, 5))


def from_bgr565(value: int) -> Rgb:
    return Rgb(_expand(value, 5), _expand(value >> 5, 6), _expand(value >> 11, 5))


def from_rgb555(value: int) -> Rgb:
    return Rgb(_expand(value >> 10, 5), _expand(value >> 5, 5), _expand(value, 5))


def from_bgr555(value: int) -> Rgb:
    return Rgb(_expand(value, 5), _expand(value >> 5, 5), _expand(value >> 10, 5))


def from_gray(value: int, bits: int = 8) -> Rgb:
    if bits not in (2, 4, 8):
        raise ValueError("Gray depth must be 2, 4 or 8 bits")
    level = _expand(value, bits)
    return Rgb(level, level, level)


def from_hex(value: str) -> Rgb:
    """Parse ``#rrggbb``, ``#rgb`` or a CSS color name via Pillow."""
    rgb = ImageColor.getrgb(value)
    return Rgb(rgb[0], rgb[1], rgb[2])


def from_hsv(hue_degrees: float, saturation: float = 1.0, value: float = 1.0) -> Rgb:
    r, g, b = colorsys.hsv_to_rgb((hue_degrees % 360.0) / 360.0, saturation, value)
    return Rgb(round(r * 255), round(g * 255), round(b * 255))
