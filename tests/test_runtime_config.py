import pathlib
import sys
import tempfile
import unittest

ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from sensorview.config.runtime import (  # noqa: E402
    RenderOptions,
    ViewerConfig,
    config_from_mapping,
    load_config,
)


class RuntimeConfigTest(unittest.TestCase):
    def test_defaults(self):
        cfg = ViewerConfig()
        self.assertEqual(cfg.zoom_step, 0.05)
        self.assertEqual((cfg.overview_offset, cfg.overview_zoom), (0.0, 1.0))
        self.assertEqual((cfg.detail_offset, cfg.detail_zoom), (0.0, 0.5))
        self.assertEqual(cfg.min_overview_height, 320)
        self.assertEqual(cfg.delimiter, ";")
        self.assertTrue(cfg.render.show_grid)

    def test_missing_file_uses_defaults(self):
        self.assertEqual(load_config(None), ViewerConfig())
        self.assertEqual(load_config("/nonexistent/viewer.yaml"), ViewerConfig())

    def test_load_yaml_with_viewer_block(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = pathlib.Path(tmpdir) / "viewer.yaml"
            path.write_text(
                "viewer:\n"
                "  zoom_step: 0.1\n"
                "  detail_zoom: 0.25\n"
                "  delimiter: ','\n"
                "  render:\n"
                "    show_markers: true\n"
                "    marker_size: 4\n"
                "unknown_key: 3\n",
                encoding="utf-8",
            )

            cfg = load_config(path)

            self.assertAlmostEqual(cfg.zoom_step, 0.1)
            self.assertAlmostEqual(cfg.detail_zoom, 0.25)
            self.assertEqual(cfg.delimiter, ",")
            self.assertEqual(cfg.render, RenderOptions(show_markers=True, marker_size=4))

    def test_sections_are_merged_and_top_level_wins(self):
        cfg = config_from_mapping(
            {
                "viewer": {"zoom_step": 0.1, "detail_zoom": 0.3},
                "chart": {"render": {"show_grid": False, "colour": "red"}},
                "detail_zoom": 0.4,
            }
        )
        self.assertAlmostEqual(cfg.zoom_step, 0.1)
        self.assertAlmostEqual(cfg.detail_zoom, 0.4)
        self.assertEqual(cfg.render, RenderOptions(show_grid=False))

    def test_non_mapping_yaml_is_rejected(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = pathlib.Path(tmpdir) / "viewer.yaml"
            path.write_text("- 1\n- 2\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_config(path)

    def test_sanitized_clamps_values(self):
        cfg = config_from_mapping(
            {
                "zoom_step": 2.0,
                "detail_zoom": 0.01,
                "detail_offset": 0.9,
                "overview_zoom": 3.0,
                "time_tick_target": 0,
                "min_overview_height": -5,
            }
        )
        self.assertEqual(cfg.zoom_step, 0.25)
        self.assertEqual(cfg.detail_zoom, 0.5)
        self.assertEqual(cfg.detail_offset, 0.5)
        self.assertEqual(cfg.overview_zoom, 1.0)
        self.assertEqual(cfg.time_tick_target, 1)
        self.assertEqual(cfg.min_overview_height, 0)


if __name__ == "__main__":
    unittest.main()
