import pathlib
import sys
import tempfile
import unittest

# Ensure src/ is on path for direct test execution
ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from wavescope.config import WaveScopeConfig, config_from_mapping, load_config  # noqa: E402


class WaveScopeConfigTest(unittest.TestCase):
    def test_defaults_sample_every_ten_ms(self):
        cfg = WaveScopeConfig()
        self.assertEqual(cfg.sample_interval_ms, 10.0)
        self.assertAlmostEqual(cfg.sample_interval_s, 0.010)
        self.assertEqual(cfg.tick_interval_ms, 8)
        self.assertEqual(cfg.history_capacity, 100)
        self.assertEqual(cfg.items_per_row, 3)

    def test_nested_block_is_flattened(self):
        cfg = config_from_mapping({"wavescope": {"channels": 4, "tick_hz": 60}})
        self.assertEqual(cfg.channels, 4)
        self.assertEqual(cfg.tick_hz, 60.0)

    def test_unknown_keys_are_ignored(self):
        cfg = config_from_mapping({"history_capacity": 12, "font": "sans-serif"})
        self.assertEqual(cfg.history_capacity, 12)

    def test_empty_mapping_gives_defaults(self):
        self.assertEqual(config_from_mapping(None), WaveScopeConfig())
        self.assertEqual(config_from_mapping({}), WaveScopeConfig())

    def test_sanitized_clamps_limits(self):
        cfg = WaveScopeConfig(
            sample_interval_ms=-5,
            history_capacity=0,
            items_per_row=0,
            value_min=50,
            value_max=-50,
        ).sanitized()
        self.assertEqual(cfg.sample_interval_ms, 0.0)
        self.assertEqual(cfg.history_capacity, 1)
        self.assertEqual(cfg.items_per_row, 1)
        self.assertEqual((cfg.value_min, cfg.value_max), (-50.0, 50.0))

    def test_load_config_missing_file_falls_back(self):
        self.assertEqual(load_config(None), WaveScopeConfig())
        self.assertEqual(load_config("/nonexistent/wavescope.yaml"), WaveScopeConfig())

    def test_load_config_reads_yaml(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = pathlib.Path(tmpdir) / "wavescope.yaml"
            path.write_text(
                "wavescope:\n  sample_interval_ms: 25\n  channels: 6\n",
                encoding="utf-8",
            )
            cfg = load_config(path)
        self.assertEqual(cfg.sample_interval_ms, 25.0)
        self.assertEqual(cfg.channels, 6)

    def test_load_config_rejects_non_mapping(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = pathlib.Path(tmpdir) / "list.yaml"
            path.write_text("- 1\n- 2\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_config(path)

    def test_non_numeric_value_is_rejected_with_field_name(self):
        with self.assertRaises(ValueError) as ctx:
            config_from_mapping({"wavescope": {"tick_hz": "fast"}})
        self.assertIn("tick_hz", str(ctx.exception))

    def test_numeric_text_is_not_a_number(self):
        with self.assertRaises(ValueError):
            WaveScopeConfig(history_capacity="100").sanitized()

    def test_load_config_rejects_non_numeric_yaml(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = pathlib.Path(tmpdir) / "bad.yaml"
            path.write_text("wavescope:\n  channels: [1, 2]\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_config(path)

    def test_section_must_be_a_mapping(self):
        with self.assertRaises(ValueError):
            config_from_mapping({"wavescope": 5})


if __name__ == "__main__":
    unittest.main()
