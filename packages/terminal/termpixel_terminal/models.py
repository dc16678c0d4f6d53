"""Typed models for terminal output sinks."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TerminalCommand(str, Enum):
    MOVE_CURSOR = "MoveCursor"
    SET_FOREGROUND = "SetForeground"
    SET_BACKGROUND = "SetBackground"
    RESET_FOREGROUND = "ResetForeground"
    RESET_BACKGROUND = "ResetBackground"
    WRITE_GLYPH = "WriteGlyph"
    FLUSH = "Flush"


@dataclass(frozen=True)
class TerminalSize:
    columns: int
    rows: int


@dataclass(frozen=True)
class TerminalEvent:
    command: TerminalCommand
    args: tuple[Any, ...] = ()


@dataclass
class WriteStats:
    bytes_queued: int = 0
    commands_queued: int = 0
    bytes_flushed: int = 0
    flushes: int = 0


@dataclass
class CommandReport:
    total_events: int = 0
    cursor_moves: int = 0
    color_sets: int = 0
    color_resets: int = 0
    glyph_writes: int = 0
    cells_written: int = 0
    flushes: int = 0
    command_counts: dict[str, int] = field(default_factory=dict)
