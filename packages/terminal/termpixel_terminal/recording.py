"""In-memory sink that records terminal commands for analysis and headless runs."""

from __future__ import annotations

from typing import Any

from termpixel_color import Color, TerminalColor

from .models import CommandReport, TerminalCommand, TerminalEvent, TerminalSize


class RecordingTerminal:
    """Implements the sink protocol against a settable size.

    ``fail_after`` makes the N+1th queued command raise ``OSError``, which
    mimics a broken terminal mid-operation.
    """

    def __init__(self, columns: int = 80, rows: int = 24, fail_after: int | None = None) -> None:
        self.size = TerminalSize(columns=columns, rows=rows)
        self.events: list[TerminalEvent] = []
        self.fail_after = fail_after
        self.size_error: OSError | None = None
        self._queued = 0

    def resize(self, columns: int, rows: int) -> None:
        self.size = TerminalSize(columns=columns, rows=rows)

    def _record(self, command: TerminalCommand, *args: Any) -> None:
        if self.fail_after is not None and self._queued >= self.fail_after:
            raise OSError("terminal write failed")
        self._queued += 1
        self.events.append(TerminalEvent(command=command, args=args))

    def clear_events(self) -> None:
        self.events.clear()

    def query_size(self) -> TerminalSize:
        if self.size_error is not None:
            raise self.size_error
        return self.size

    def move_cursor(self, column: int, row: int) -> None:
        self._record(TerminalCommand.MOVE_CURSOR, column, row)

    def set_foreground(self, color: TerminalColor) -> None:
        self._record(TerminalCommand.SET_FOREGROUND, color)

    def set_background(self, color: TerminalColor) -> None:
        self._record(TerminalCommand.SET_BACKGROUND, color)

    def reset_foreground(self) -> None:
        self._record(TerminalCommand.RESET_FOREGROUND)

    def reset_background(self) -> None:
        self._record(TerminalCommand.RESET_BACKGROUND)

    def write_glyph(self, glyph: str) -> None:
        self._record(TerminalCommand.WRITE_GLYPH, glyph)

    def flush(self) -> None:
        self.events.append(TerminalEvent(command=TerminalCommand.FLUSH))

    def screen(self) -> dict[tuple[int, int], tuple[str, TerminalColor, TerminalColor]]:
        """Replay recorded events into ``{(column, row): (glyph, fg, bg)}``."""
        cells: dict[tuple[int, int], tuple[str, TerminalColor, TerminalColor]] = {}
        column, row = 0, 0
        fg: TerminalColor = Color.FOREGROUND
        bg: TerminalColor = Color.BACKGROUND
        for event in self.events:
            if event.command is TerminalCommand.MOVE_CURSOR:
                column, row = event.args
            elif event.command is TerminalCommand.SET_FOREGROUND:
                fg = event.args[0]
            elif event.command is TerminalCommand.SET_BACKGROUND:
                bg = event.args[0]
            elif event.command is TerminalCommand.RESET_FOREGROUND:
                fg = Color.FOREGROUND
            elif event.command is TerminalCommand.RESET_BACKGROUND:
                bg = Color.BACKGROUND
            elif event.command is TerminalCommand.WRITE_GLYPH:
                for char in event.args[0]:
                    cells[(column, row)] = (char, fg, bg)
                    column += 1
        return cells


def summarize(events: list[TerminalEvent]) -> CommandReport:
    report = CommandReport(total_events=len(events))
    for event in events:
        name = event.command.value
        report.command_counts[name] = report.command_counts.get(name, 0) + 1
        if event.command is TerminalCommand.MOVE_CURSOR:
            report.cursor_moves += 1
        elif event.command in (TerminalCommand.SET_FOREGROUND, TerminalCommand.SET_BACKGROUND):
            report.color_sets += 1
        elif event.command in (TerminalCommand.RESET_FOREGROUND, TerminalCommand.RESET_BACKGROUND):
            report.color_resets += 1
        elif event.command is TerminalCommand.WRITE_GLYPH:
            report.glyph_writes += 1
            report.cells_written += len(event.args[0])
        elif event.command is TerminalCommand.FLUSH:
            report.flushes += 1
    return report
