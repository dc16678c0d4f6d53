"""Buffered ANSI escape writer used as the live terminal sink."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import BinaryIO, Iterator

from termpixel_color import Color, TerminalColor, sgr_sequence

from .models import TerminalSize, WriteStats


_CSI = "\x1b["
_HIDE_CURSOR = b"\x1b[?25l"
_SHOW_CURSOR = b"\x1b[?25h"
_ENTER_ALT_SCREEN = b"\x1b[?1049h"
_LEAVE_ALT_SCREEN = b"\x1b[?1049l"
_RESET_ATTRIBUTES = b"\x1b[0m"
_CLEAR_SCREEN = b"\x1b[2J"


@dataclass
class TerminalConfig:
    fixed_columns: int | None = None
    fixed_rows: int | None = None


class AnsiTerminal:
    """Queues ANSI commands in memory and writes them out on ``flush``."""

    def __init__(
        self,
        stream: BinaryIO | None = None,
        fixed_columns: int | None = None,
        fixed_rows: int | None = None,
    ) -> None:
        self._stream = stream
        self._pending = bytearray()
        self.config = TerminalConfig(fixed_columns=fixed_columns, fixed_rows=fixed_rows)
        self.stats = WriteStats()

    @property
    def stream(self) -> BinaryIO:
        """The output stream, resolved to stdout on first use."""
        if self._stream is None:
            buffer = getattr(sys.stdout, "buffer", None)
            if buffer is None:
                raise OSError("stdout has no binary buffer to draw on")
            self._stream = buffer
        return self._stream

    @property
    def pending_bytes(self) -> int:
        return len(self._pending)

    def _queue(self, payload: bytes) -> None:
        self._pending += payload
        self.stats.bytes_queued += len(payload)
        self.stats.commands_queued += 1

    def query_size(self) -> TerminalSize:
        if self.config.fixed_columns is not None and self.config.fixed_rows is not None:
            return TerminalSize(columns=self.config.fixed_columns, rows=self.config.fixed_rows)
        columns, rows = os.get_terminal_size(self.stream.fileno())
        return TerminalSize(
            columns=self.config.fixed_columns if self.config.fixed_columns is not None else columns,
            rows=self.config.fixed_rows if self.config.fixed_rows is not None else rows,
        )

    def move_cursor(self, column: int, row: int) -> None:
        # ANSI cursor positions are 1-based.
        self._queue(f"{_CSI}{row + 1};{column + 1}H".encode("ascii"))

    def set_foreground(self, color: TerminalColor) -> None:
        self._queue(sgr_sequence(color, background=False))

    def set_background(self, color: TerminalColor) -> None:
        self._queue(sgr_sequence(color, background=True))

    def reset_foreground(self) -> None:
        self.set_foreground(Color.FOREGROUND)

    def reset_background(self) -> None:
        self.set_background(Color.BACKGROUND)

    def write_glyph(self, glyph: str) -> None:
        self._queue(glyph.encode("utf-8"))

    def hide_cursor(self) -> None:
        self._queue(_HIDE_CURSOR)

    def show_cursor(self) -> None:
        self._queue(_SHOW_CURSOR)

    def enter_alternate_screen(self) -> None:
        self._queue(_ENTER_ALT_SCREEN)

    def leave_alternate_screen(self) -> None:
        self._queue(_LEAVE_ALT_SCREEN)

    def reset_attributes(self) -> None:
        self._queue(_RESET_ATTRIBUTES)

    def clear_screen(self) -> None:
        self._queue(_CLEAR_SCREEN)

    def flush(self) -> None:
        if self._pending:
            payload = bytes(self._pending)
            self.stream.write(payload)
            self._pending.clear()
            self.stats.bytes_flushed += len(payload)
        self.stream.flush()
        self.stats.flushes += 1

    @contextmanager
    def session(self, hide_cursor: bool = True, alternate_screen: bool = True) -> Iterator["AnsiTerminal"]:
        """Prepare the screen for drawing and restore it afterwards."""
        if alternate_screen:
            self.enter_alternate_screen()
        if hide_cursor:
            self.hide_cursor()
        self.flush()
        try:
            yield self
        finally:
            self.reset_attributes()
            if hide_cursor:
                self.show_cursor()
            if alternate_screen:
                self.leave_alternate_screen()
            self.flush()
