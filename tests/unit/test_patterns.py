import itertools
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "color"))
sys.path.insert(0, str(ROOT / "packages" / "terminal"))
sys.path.insert(0, str(ROOT / "packages" / "raster"))

from termpixel_color import Rgb
from termpixel_raster import PATTERNS, TerminalDisplay, pattern_colors
from termpixel_terminal import RecordingTerminal

WHITE = Rgb(255, 255, 255)
BLACK = Rgb(0, 0, 0)


class PatternTests(unittest.TestCase):
    def test_every_pattern_covers_the_area(self):
        for name in PATTERNS:
            with self.subTest(name=name):
                self.assertEqual(len(list(pattern_colors(name, 16, 8))), 16 * 8)

    def test_quadrants(self):
        colors = list(pattern_colors("quadrants", 4, 4))
        self.assertEqual(colors[0], Rgb(255, 0, 0))
        self.assertEqual(colors[3], Rgb(0, 255, 0))
        self.assertEqual(colors[12], Rgb(0, 0, 255))
        self.assertEqual(colors[15], WHITE)

    def test_gradients_span_full_range(self):
        row = list(pattern_colors("h-gradient", 5, 1))
        self.assertEqual(row[0], BLACK)
        self.assertEqual(row[-1], WHITE)
        column = list(pattern_colors("v-gradient", 1, 3))
        self.assertEqual(column, [BLACK, Rgb(127, 127, 127), WHITE])

    def test_checkerboard_squares_scale_with_area(self):
        colors = list(pattern_colors("checkerboard", 16, 16))
        # Squares are 2x2 pixels at this size.
        self.assertEqual(colors[0:4], [WHITE, WHITE, BLACK, BLACK])
        self.assertEqual(colors[32:34], [BLACK, BLACK])

    def test_unknown_pattern_rejected_before_iteration(self):
        with self.assertRaises(ValueError):
            pattern_colors("plaid", 4, 4)

    def test_generation_is_lazy(self):
        first = list(itertools.islice(pattern_colors("red", 10**6, 10**6), 3))
        self.assertEqual(first, [Rgb(255, 0, 0)] * 3)

    def test_pattern_drives_contiguous_fill(self):
        display = TerminalDisplay(RecordingTerminal(columns=4, rows=2))
        box = display.bounding_box()
        display.fill_contiguous(box, pattern_colors("quadrants", box.width, box.height))
        self.assertEqual(display.cell(0, 0), (Rgb(255, 0, 0), Rgb(255, 0, 0)))
        self.assertEqual(display.cell(1, 3), (WHITE, WHITE))


if __name__ == "__main__":
    unittest.main()
