"""Per-cell color memory for a character-cell terminal.

A terminal cannot report back what it shows, so the buffer remembers the last
color sent for both halves of every cell. Writing one pixel re-renders its
cell, and the stored color of the other half is needed to do that.
"""

from __future__ import annotations

from termpixel_color import DEFAULT_COLOR, TerminalColor

Cell = tuple[TerminalColor, TerminalColor]

DEFAULT_CELL: Cell = (DEFAULT_COLOR, DEFAULT_COLOR)


class CellBuffer:
    """A ``rows x columns`` grid of ``(top, bottom)`` color pairs.

    Indexing is unchecked and only valid straight after ``ensure_size`` within
    the same operation.
    """

    def __init__(self) -> None:
        self._rows: list[list[Cell]] = []
        self._columns = 0

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def rows(self) -> int:
        return len(self._rows)

    @property
    def size(self) -> tuple[int, int]:
        return self._columns, len(self._rows)

    def ensure_size(self, columns: int, rows: int) -> tuple[int, int]:
        if columns != self._columns:
            for row in self._rows:
                if columns < len(row):
                    del row[columns:]
                else:
                    row.extend([DEFAULT_CELL] * (columns - len(row)))
            self._columns = columns
        if rows != len(self._rows):
            if rows < len(self._rows):
                del self._rows[rows:]
            else:
                missing = rows - len(self._rows)
                self._rows.extend([DEFAULT_CELL] * columns for _ in range(missing))
        return columns, rows

    def get(self, row: int, column: int) -> Cell:
        return self._rows[row][column]

    def set(self, row: int, column: int, cell: Cell) -> None:
        self._rows[row][column] = cell

    def merge(
        self,
        row: int,
        column: int,
        top: TerminalColor | None = None,
        bottom: TerminalColor | None = None,
    ) -> Cell:
        saved_top, saved_bottom = self._rows[row][column]
        cell = (saved_top if top is None else top, saved_bottom if bottom is None else bottom)
        self._rows[row][column] = cell
        return cell

    def set_top(self, row: int, column: int, color: TerminalColor) -> None:
        self._rows[row][column] = (color, self._rows[row][column][1])

    def fill_row(self, row: int, start: int, stop: int, cell: Cell) -> None:
        self._rows[row][start:stop] = [cell] * (stop - start)
