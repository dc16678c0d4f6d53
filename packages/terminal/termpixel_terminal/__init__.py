"""Terminal output sinks: the live ANSI writer and an in-memory recorder."""

from .ansi_terminal import AnsiTerminal
from .models import CommandReport, TerminalCommand, TerminalEvent, TerminalSize, WriteStats
from .recording import RecordingTerminal, summarize
from .sink import TerminalSink

__all__ = [
    "AnsiTerminal",
    "CommandReport",
    "RecordingTerminal",
    "TerminalCommand",
    "TerminalEvent",
    "TerminalSink",
    "TerminalSize",
    "WriteStats",
    "summarize",
]
