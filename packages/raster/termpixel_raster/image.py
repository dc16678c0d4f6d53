"""Pillow image helpers: blitting and fitting."""

from __future__ import annotations

from typing import Iterator

from PIL import Image

from termpixel_color import Rgb

from .display import TerminalDisplay
from .geometry import Point, Rectangle, Size


def image_colors(image: Image.Image) -> Iterator[Rgb]:
    """Yield the image's pixels as ``Rgb`` in row-major order."""
    if image.mode != "RGB":
        image = image.convert("RGB")
    width, height = image.size
    px = image.load()
    for y in range(height):
        for x in range(width):
            r, g, b = px[x, y]
            yield Rgb(r, g, b)

def fit_image(image: Image.Image, size: Size) -> Image.Image:
    """Scale ``image`` down (never up) to fit ``size`` preserving aspect ratio."""
    width, height = image.size
    scale = min(size.width / max(width, 1), size.height / max(height, 1), 1.0)
    target = (max(1, int(width * scale)), max(1, int(height * scale)))
    if target == image.size:
        return image
    return image.resize(target, Image.Resampling.LANCZOS)

def draw_image(display: TerminalDisplay, image: Image.Image, top_left: Point = Point(0, 0)) -> Rectangle:
    area = Rectangle(x=top_left.x, y=top_left.y, width=image.size[0], height=image.size[1])
    display.fill_contiguous(area, image_colors(image))
    return area
