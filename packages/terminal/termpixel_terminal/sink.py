"""Protocol implemented by every terminal output sink."""

from __future__ import annotations

from typing import Protocol

from termpixel_color import TerminalColor

from .models import TerminalSize


class TerminalSink(Protocol):
    """Queue-only terminal commands; nothing is transmitted before ``flush``."""

    def query_size(self) -> TerminalSize: ...

    def move_cursor(self, column: int, row: int) -> None: ...

    def set_foreground(self, color: TerminalColor) -> None: ...

    def set_background(self, color: TerminalColor) -> None: ...

    def reset_foreground(self) -> None: ...

    def reset_background(self) -> None: ...

    def write_glyph(self, glyph: str) -> None: ...

    def flush(self) -> None: ...
