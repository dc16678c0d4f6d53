import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))

from termpixel_core.config import CONFIG_VERSION, AppConfig, load_config, save_config


class ConfigTests(unittest.TestCase):
    def test_load_default_when_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "missing.json"
            cfg = load_config(path)
            self.assertIsInstance(cfg, AppConfig)
            self.assertTrue(cfg.display.hide_cursor)
            self.assertIsNone(cfg.display.fixed_columns)
            self.assertIsNone(cfg.demo.hold_seconds)
            self.assertEqual(cfg.config_version, CONFIG_VERSION)

    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            cfg = load_config(path)
            cfg.demo.frame_delay_ms = 40
            cfg.display.fixed_columns = 100
            cfg.display.fixed_rows = 30
            save_config(cfg, path)
            reloaded = load_config(path)
            self.assertEqual(reloaded.demo.frame_delay_ms, 40)
            self.assertEqual((reloaded.display.fixed_columns, reloaded.display.fixed_rows), (100, 30))

    def test_migrate_v1_shape(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            old = {"size": [120, 40], "demo": {"wave_speed": 50}}
            path.write_text(json.dumps(old), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.config_version, 2)
            self.assertEqual(cfg.display.fixed_columns, 120)
            self.assertEqual(cfg.display.fixed_rows, 40)
            self.assertEqual(cfg.demo.wave_speed, 50.0)

    def test_out_of_range_values_are_clamped(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "config_version": 2,
                "display": {"fixed_columns": -3, "fixed_rows": "x"},
                "demo": {"frame_delay_ms": 99999, "hold_seconds": -1},
                "performance": {"fps_min": 0},
                "unknown": {"ignored": True},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertIsNone(cfg.display.fixed_columns)
            self.assertIsNone(cfg.display.fixed_rows)
            self.assertEqual(cfg.demo.frame_delay_ms, 1000)
            self.assertEqual(cfg.demo.hold_seconds, 0.0)
            self.assertEqual(cfg.performance.fps_min, 1.0)

    def test_corrupt_file_falls_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            self.assertEqual(load_config(path), AppConfig())
            path.write_text("[1, 2]", encoding="utf-8")
            self.assertEqual(load_config(path), AppConfig())


if __name__ == "__main__":
    unittest.main()
