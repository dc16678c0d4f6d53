"""Draw target that packs two pixels into every terminal cell."""

from __future__ import annotations

import itertools
import logging
from typing import Iterable, Iterator

from termpixel_color import Color, TerminalColor
from termpixel_terminal import AnsiTerminal, TerminalSink

from .buffer import Cell, CellBuffer
from .geometry import Point, Rectangle, Size, saturating_count
from .glyphs import CellStyle, select_glyph, select_row_glyph


logger = logging.getLogger("termpixel.raster")

_EXHAUSTED = object()


def advance(iterator: Iterator[object], n: int) -> None:
    """Discard the next ``n`` items without materializing them."""
    n = saturating_count(n)
    if n:
        next(itertools.islice(iterator, n, n), None)


class TerminalDisplay:
    """Pixel draw target over a terminal sink.

    A pixel is half a character cell, since cells are roughly twice as tall as
    they are wide. Commands are only queued; call ``flush`` to show them.
    """

    def __init__(self, terminal: TerminalSink | None = None) -> None:
        self.terminal = terminal if terminal is not None else AnsiTerminal()
        self._buffer = CellBuffer()
        self._resize()

    @property
    def buffer(self) -> CellBuffer:
        return self._buffer

    def flush(self) -> None:
        self.terminal.flush()

    def size(self) -> Size:
        term = self.terminal.query_size()
        return Size(term.columns, 2 * term.rows)

    def bounding_box(self) -> Rectangle:
        width, height = self.size()
        return Rectangle(x=0, y=0, width=width, height=height)

    def cell(self, row: int, column: int) -> Cell:
        return self._buffer.get(row, column)

    def _resize(self) -> Rectangle:
        """Track the terminal size and return the bounds in pixels."""
        term = self.terminal.query_size()
        previous = self._buffer.size
        columns, rows = self._buffer.ensure_size(term.columns, term.rows)
        if previous != (columns, rows):
            logger.debug(
                "terminal resized from %sx%s to %sx%s",
                previous[0],
                previous[1],
                columns,
                rows,
                extra={"event": "terminal_resized"},
            )
        return Rectangle(x=0, y=0, width=columns, height=2 * rows)

    def _emit(self, style: CellStyle, count: int = 1) -> None:
        if style.background is not None:
            if style.background == Color.BACKGROUND:
                self.terminal.reset_background()
            else:
                self.terminal.set_background(style.background)
        if style.foreground is not None:
            if style.foreground == Color.FOREGROUND:
                self.terminal.reset_foreground()
            else:
                self.terminal.set_foreground(style.foreground)
        self.terminal.write_glyph(style.glyph * count)

    def _write_cell(
        self,
        row: int,
        column: int,
        top: TerminalColor | None = None,
        bottom: TerminalColor | None = None,
    ) -> None:
        saved_top, saved_bottom = self._buffer.merge(row, column, top=top, bottom=bottom)
        self._emit(select_glyph(saved_top, saved_bottom))

    def draw_points(self, pixels: Iterable[tuple[Point, TerminalColor]]) -> None:
        bounds = self._resize()
        for point, color in pixels:
            if not bounds.contains(point):
                continue
            x, y = point
            row = y // 2
            self.terminal.move_cursor(x, row)
            if y % 2 == 0:
                self._write_cell(row, x, top=color)
            else:
                self._write_cell(row, x, bottom=color)

    def fill_contiguous(self, area: Rectangle, colors: Iterable[TerminalColor]) -> None:
        """Fill ``area`` from ``colors`` in row-major order.

        ``colors`` is advanced as if every pixel of ``area`` were visited, so
        clipped margins still consume their elements. Nothing is consumed when
        ``area`` is entirely off screen. A short sequence stops drawing.

        Top-half rows are held in the buffer and written together with the
        bottom-half row below them, halving the number of cell writes.
        """
        bounds = self._resize()
        drawn = bounds.intersection(area)
        if drawn.is_empty:
            return

        it = iter(colors)
        advance(it, area.width * (drawn.y - area.y))

        first_y = drawn.y
        last_y = drawn.bottom - 1
        leading = drawn.x - area.x
        trailing = area.right - drawn.right

        for y in drawn.rows():
            is_top_half = y % 2 == 0
            write_now = not is_top_half or y == last_y
            row = y // 2
            if write_now:
                self.terminal.move_cursor(drawn.x, row)

            advance(it, leading)

            for column in drawn.columns():
                color = next(it, _EXHAUSTED)
                if color is _EXHAUSTED:
                    if is_top_half or y == first_y or y == last_y:
                        return
                    # Interior bottom row: still render the tops buffered above.
                    self._write_cell(row, column)
                elif not write_now:
                    self._buffer.set_top(row, column, color)
                elif is_top_half:
                    self._write_cell(row, column, top=color)
                else:
                    self._write_cell(row, column, bottom=color)

            advance(it, trailing)

        advance(it, area.width * (area.bottom - drawn.bottom))

    def fill_solid(self, area: Rectangle, color: TerminalColor) -> None:
        self._fill_solid(self._resize(), area, color)

    def _fill_solid(self, bounds: Rectangle, area: Rectangle, color: TerminalColor) -> None:
        drawn = bounds.intersection(area)
        if drawn.is_empty:
            return

        top, bottom = drawn.y, drawn.bottom
        if top % 2 == 1:
            self._fill_half_row(top // 2, drawn, bottom=color)
            top += 1

        partial_bottom = bottom % 2 == 1 and bottom > top
        if partial_bottom:
            bottom -= 1

        style = select_row_glyph(color)
        for row in range(top // 2, bottom // 2):
            self.terminal.move_cursor(drawn.x, row)
            self._emit(style, count=drawn.width)
            self._buffer.fill_row(row, drawn.x, drawn.right, (color, color))

        if partial_bottom:
            self._fill_half_row(bottom // 2, drawn, top=color)

    def _fill_half_row(
        self,
        row: int,
        drawn: Rectangle,
        top: TerminalColor | None = None,
        bottom: TerminalColor | None = None,
    ) -> None:
        cells: list[Cell] = []
        for column in drawn.columns():
            saved_top, saved_bottom = self._buffer.get(row, column)
            cells.append((saved_top if top is None else top, saved_bottom if bottom is None else bottom))

        self.terminal.move_cursor(drawn.x, row)
        column = drawn.x
        for cell, run in itertools.groupby(cells):
            count = sum(1 for _ in run)
            self._emit(select_glyph(*cell), count=count)
            # Only cells whose glyphs were queued take the new colors.
            self._buffer.fill_row(row, column, column + count, cell)
            column += count

    def clear(self, color: TerminalColor = Color.BACKGROUND) -> None:
        bounds = self._resize()
        self._fill_solid(bounds, bounds, color)
