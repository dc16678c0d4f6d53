import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "apps" / "demo"))
sys.path.insert(0, str(ROOT / "packages" / "color"))
sys.path.insert(0, str(ROOT / "packages" / "terminal"))
sys.path.insert(0, str(ROOT / "packages" / "raster"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from termpixel_app.demos import draw_line, draw_square, run_color_wave, wave_colors
from termpixel_color import Color, Rgb
from termpixel_core import PerformanceController, PerformanceTargets
from termpixel_raster import DEFAULT_CELL, Rectangle, TerminalDisplay
from termpixel_terminal import RecordingTerminal, TerminalCommand, summarize

BG = Color.BACKGROUND
FG = Color.FOREGROUND


class FakeClock:
    def __init__(self, step=0.25):
        self.now = 0.0
        self.step = step

    def __call__(self):
        value = self.now
        self.now += self.step
        return value


class DemoTests(unittest.TestCase):
    def test_line_is_diagonal(self):
        term = RecordingTerminal(columns=4, rows=4)
        display = TerminalDisplay(term)
        self.assertEqual(draw_line(display), 4)
        self.assertEqual(display.cell(0, 0), (FG, BG))
        self.assertEqual(display.cell(0, 1), (BG, FG))
        self.assertEqual(display.cell(1, 2), (FG, BG))
        self.assertEqual(display.cell(1, 3), (BG, FG))
        self.assertEqual(display.cell(1, 0), (BG, BG))
        self.assertIs(term.events[-1].command, TerminalCommand.FLUSH)

    def test_square_straddles_cells(self):
        term = RecordingTerminal(columns=8, rows=4)
        display = TerminalDisplay(term)
        draw_square(display)
        self.assertEqual(display.cell(0, 0), DEFAULT_CELL)
        self.assertEqual(display.cell(0, 1), (BG, Color.RED))
        self.assertEqual(display.cell(1, 1), (Color.RED, Color.RED))
        self.assertEqual(display.cell(1, 2), (Color.GREEN, Color.GREEN))
        self.assertEqual(display.cell(2, 6), (Color.RED, Color.RED))
        self.assertEqual(display.cell(3, 3), (Color.RED, BG))
        self.assertIs(term.events[-1].command, TerminalCommand.FLUSH)

    def test_wave_colors_shift_along_diagonal(self):
        colors = list(wave_colors(Rectangle(x=0, y=0, width=2, height=2), elapsed_s=0.0, speed=200.0))
        self.assertEqual(len(colors), 4)
        self.assertEqual(colors[0], Rgb(255, 0, 0))
        self.assertEqual(colors[0], colors[3])

    def test_color_wave_runs_for_requested_time(self):
        term = RecordingTerminal(columns=4, rows=2)
        frames = []
        sleeps = []
        stats = run_color_wave(
            TerminalDisplay(term),
            seconds=1.0,
            delay_ms=10,
            on_frame=frames.append,
            clock=FakeClock(),
            sleep=sleeps.append,
        )
        self.assertEqual(stats.frames, 3)
        self.assertEqual(frames, [1, 2, 3])
        self.assertEqual(sleeps, [0.01, 0.01, 0.01])
        self.assertAlmostEqual(stats.elapsed_s, 1.25)
        self.assertAlmostEqual(stats.fps, 2.4)

        report = summarize(term.events)
        self.assertEqual(report.flushes, 3)
        self.assertEqual(report.cells_written, 3 * 8)

    def test_color_wave_samples_budget(self):
        perf = PerformanceController(PerformanceTargets(cpu_percent_max=10000.0, rss_mb_max=1e9, fps_min=10.0))
        stats = run_color_wave(
            TerminalDisplay(RecordingTerminal(columns=2, rows=1)),
            seconds=2.0,
            delay_ms=20,
            perf=perf,
            clock=FakeClock(),
            sleep=lambda _s: None,
        )
        self.assertEqual(stats.frames, 7)
        self.assertEqual(stats.delay_ms, 15)


if __name__ == "__main__":
    unittest.main()
