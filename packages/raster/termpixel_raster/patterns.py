"""Deterministic test patterns generated lazily, one color per pixel."""

from __future__ import annotations

from typing import Callable, Iterator

from termpixel_color import Rgb

from .geometry import Point, Rectangle

Shader = Callable[[Point, Rectangle], Rgb]

_BLACK = Rgb(0, 0, 0)
_WHITE = Rgb(255, 255, 255)
_RED = Rgb(255, 0, 0)
_GREEN = Rgb(0, 255, 0)
_BLUE = Rgb(0, 0, 255)


def _solid(color: Rgb) -> Shader:
    return lambda _point, _area: color


def _quadrants(point: Point, area: Rectangle) -> Rgb:
    left = point.x < area.width // 2
    upper = point.y < area.height // 2
    if upper:
        return _RED if left else _GREEN
    return _BLUE if left else _WHITE


def _gray(position: int, extent: int) -> Rgb:
    level = 255 * position // max(extent - 1, 1)
    return Rgb(level, level, level)


def _h_gradient(point: Point, area: Rectangle) -> Rgb:
    return _gray(point.x, area.width)


def _v_gradient(point: Point, area: Rectangle) -> Rgb:
    return _gray(point.y, area.height)


def _checkerboard(point: Point, area: Rectangle) -> Rgb:
    square = max(1, min(area.width, area.height) // 8)
    return _WHITE if (point.x // square + point.y // square) % 2 == 0 else _BLACK


_SHADERS: dict[str, Shader] = {
    "black": _solid(_BLACK),
    "white": _solid(_WHITE),
    "red": _solid(_RED),
    "green": _solid(_GREEN),
    "blue": _solid(_BLUE),
    "quadrants": _quadrants,
    "h-gradient": _h_gradient,
    "v-gradient": _v_gradient,
    "checkerboard": _checkerboard,
}

PATTERNS = tuple(_SHADERS)


def pattern_colors(name: str, width: int, height: int) -> Iterator[Rgb]:
    """Row-major colors of pattern ``name`` over a ``width x height`` area.

    Raises ``ValueError`` for an unknown name before anything is generated.
    """
    try:
        shader = _SHADERS[name]
    except KeyError:
        raise ValueError(f"Unknown pattern: {name}") from None
    area = Rectangle(x=0, y=0, width=width, height=height)
    return (shader(point, area) for point in area.points())
