import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "color"))
sys.path.insert(0, str(ROOT / "packages" / "terminal"))
sys.path.insert(0, str(ROOT / "packages" / "raster"))

from termpixel_color import Color
from termpixel_raster import DEFAULT_CELL, CellBuffer


class CellBufferTests(unittest.TestCase):
    def test_starts_empty(self):
        buf = CellBuffer()
        self.assertEqual(buf.size, (0, 0))

    def test_grow_fills_with_default_pair(self):
        buf = CellBuffer()
        self.assertEqual(buf.ensure_size(3, 2), (3, 2))
        self.assertEqual(buf.columns, 3)
        self.assertEqual(buf.rows, 2)
        for row in range(2):
            for column in range(3):
                self.assertEqual(buf.get(row, column), (Color.BACKGROUND, Color.BACKGROUND))

    def test_merge_touches_only_given_half(self):
        buf = CellBuffer()
        buf.ensure_size(2, 2)
        self.assertEqual(buf.merge(0, 1, top=Color.RED), (Color.RED, Color.BACKGROUND))
        self.assertEqual(buf.merge(0, 1, bottom=Color.BLUE), (Color.RED, Color.BLUE))
        self.assertEqual(buf.merge(0, 1), (Color.RED, Color.BLUE))
        buf.set_top(0, 1, Color.GREEN)
        self.assertEqual(buf.get(0, 1), (Color.GREEN, Color.BLUE))

    def test_unchanged_size_is_noop(self):
        buf = CellBuffer()
        buf.ensure_size(2, 2)
        buf.set(1, 1, (Color.RED, Color.RED))
        buf.ensure_size(2, 2)
        self.assertEqual(buf.get(1, 1), (Color.RED, Color.RED))

    def test_width_change_resizes_existing_rows(self):
        buf = CellBuffer()
        buf.ensure_size(3, 2)
        buf.set(1, 0, (Color.RED, Color.RED))
        buf.ensure_size(5, 2)
        self.assertEqual(buf.get(1, 4), DEFAULT_CELL)
        self.assertEqual(buf.get(1, 0), (Color.RED, Color.RED))
        buf.ensure_size(1, 3)
        self.assertEqual(buf.size, (1, 3))
        self.assertEqual(buf.get(2, 0), DEFAULT_CELL)

    def test_shrink_then_grow_loses_state(self):
        buf = CellBuffer()
        buf.ensure_size(4, 4)
        buf.fill_row(3, 0, 4, (Color.RED, Color.RED))
        buf.set(0, 3, (Color.BLUE, Color.BLUE))
        buf.ensure_size(2, 2)
        buf.ensure_size(4, 4)
        self.assertEqual(buf.get(3, 0), DEFAULT_CELL)
        self.assertEqual(buf.get(0, 3), DEFAULT_CELL)

    def test_fill_row_overwrites_run(self):
        buf = CellBuffer()
        buf.ensure_size(4, 1)
        buf.fill_row(0, 1, 3, (Color.RED, Color.BLUE))
        self.assertEqual(buf.get(0, 0), DEFAULT_CELL)
        self.assertEqual(buf.get(0, 1), (Color.RED, Color.BLUE))
        self.assertEqual(buf.get(0, 2), (Color.RED, Color.BLUE))
        self.assertEqual(buf.get(0, 3), DEFAULT_CELL)


if __name__ == "__main__":
    unittest.main()
