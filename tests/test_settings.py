"""
Unit tests for settings loading and the command line parser.
Run from project root: python -m pytest tests/ -v
"""
import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mandelbrot.__main__ import build_parser
from mandelbrot.params import Corners, Gradient, OriginAndWidth
from mandelbrot.settings import DEFAULT_SETTINGS, load_settings, resolve_settings


class TestLoadSettings(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def test_bundled_settings_match_defaults(self):
        self.assertEqual(load_settings(), DEFAULT_SETTINGS)

    def test_missing_file_falls_back(self):
        self.assertEqual(load_settings(str(self.dir / "missing.json")), DEFAULT_SETTINGS)

    def test_invalid_json_falls_back(self):
        path = self.dir / "broken.json"
        path.write_text("{not json")
        self.assertEqual(load_settings(str(path)), DEFAULT_SETTINGS)

    def test_partial_override(self):
        path = self.dir / "settings.json"
        path.write_text(json.dumps({"width": 320, "gradient": "64 10 True", "unknown": 1}))
        settings = load_settings(str(path))
        self.assertEqual(settings["width"], 320)
        self.assertEqual(settings["gradient"], "64 10 True")
        self.assertEqual(settings["height"], DEFAULT_SETTINGS["height"])
        self.assertNotIn("unknown", settings)


class TestResolveSettings(unittest.TestCase):

    def test_defaults(self):
        resolved = resolve_settings(DEFAULT_SETTINGS)
        self.assertEqual(resolved.region, Corners(complex(-2.5, -1), complex(1, 1)))
        self.assertEqual(resolved.gradient, Gradient(256.0, 0.0, False))
        self.assertEqual(resolved.palette.shape, (768, 3))
        self.assertEqual((resolved.width, resolved.height), (1050, 600))
        self.assertEqual(resolved.max_iteration, 1000)
        self.assertEqual(resolved.bailout, 1e10)

    def test_origin_region_and_palette_size(self):
        settings = dict(DEFAULT_SETTINGS, region="0,0 4,4 True", palette="Hot", palette_size=64)
        resolved = resolve_settings(settings)
        self.assertEqual(resolved.region, OriginAndWidth(complex(0, 0), complex(4, 4)))
        self.assertEqual(resolved.palette.shape, (64, 3))

    def test_malformed_values_raise(self):
        for key, value in (("region", "-2.5,-1 1,1"), ("gradient", "256 x False"),
                           ("palette", "NoSuchPalette")):
            with self.subTest(key=key):
                with self.assertRaises(ValueError):
                    resolve_settings(dict(DEFAULT_SETTINGS, **{key: value}))


class TestParser(unittest.TestCase):

    def test_size_and_output(self):
        opt = build_parser().parse_args(["800", "600", "--output", "out.png"])
        self.assertEqual(opt.size, [800, 600])
        self.assertEqual(opt.output, "out.png")
        self.assertIsNone(opt.settings_path)

    def test_no_arguments(self):
        opt = build_parser().parse_args([])
        self.assertEqual(opt.size, [])
        self.assertIsNone(opt.output)


if __name__ == "__main__":
    unittest.main()
