"""Color model for terminal pixel rendering."""

from .ansi import sgr_code, sgr_sequence
from .convert import (
    from_bgr555,
    from_bgr565,
    from_bgr888,
    from_binary,
    from_gray,
    from_hex,
    from_hsv,
    from_rgb555,
    from_rgb565,
    from_rgb888,
)
from .models import DEFAULT_COLOR, AnsiValue, Color, Rgb, TerminalColor, is_sentinel

__all__ = [
    "AnsiValue",
    "Color",
    "DEFAULT_COLOR",
    "Rgb",
    "TerminalColor",
    "from_bgr555",
    "from_bgr565",
    "from_bgr888",
    "from_binary",
    "from_gray",
    "from_hex",
    "from_hsv",
    "from_rgb555",
    "from_rgb565",
    "from_rgb888",
    "is_sentinel",
    "sgr_code",
    "sgr_sequence",
]
