"""Tests for the segment_text entry point and the command line."""
import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch
from pathlib import Path

from text_segmenter.main import main, segment_text
from text_segmenter.model.settings import SegmentationSettings
from text_segmenter.model.token import LayoutMode


class SegmentTextTest(unittest.TestCase):
    """Settings-driven segmentation without a label."""

    def test_defaults_to_vertical_box(self) -> None:
        tokens = segment_text("a b\nc")
        self.assertEqual([t.content for t in tokens], ["a b", "c"])

    def test_settings_are_applied(self) -> None:
        settings = SegmentationSettings(layout="horizontal_box", font_size=20, line_height=30)
        tokens = segment_text("AB漢字CD", settings)
        self.assertEqual([t.content for t in tokens], ["AB", "漢", "字", "CD"])
        self.assertEqual(tokens[0].margin, (5.0, 0.0))

    def test_narrow_classes_setting(self) -> None:
        settings = SegmentationSettings(layout=LayoutMode.HORIZONTAL_BOX, narrow_classes=("Na", "H", "A"))
        self.assertEqual([t.content for t in segment_text("caf\u00e9", settings)], ["caf\u00e9"])

    def test_strip_control_chars_setting(self) -> None:
        self.assertEqual([t.content for t in segment_text("a\x07b")], ["a\x07b"])
        settings = SegmentationSettings(strip_control_chars=True)
        self.assertEqual([t.content for t in segment_text("a\x07b", settings)], ["ab"])


class SettingsTest(unittest.TestCase):
    """Loading settings from plain mappings."""

    def test_from_mapping(self) -> None:
        settings = SegmentationSettings.from_mapping({"layout": "flow", "line_height": 30, "preserve_blank_lines": True})
        self.assertEqual(settings.layout, LayoutMode.FLOW)
        self.assertEqual(settings.line_height, 30)
        self.assertTrue(settings.preserve_blank_lines)

    def test_unknown_keys_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            SegmentationSettings.from_mapping({"layout": "flow", "colour": "red"})

    def test_unknown_layout_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            SegmentationSettings(layout="grid")


class CommandLineTest(unittest.TestCase):
    """The CLI prints tokens as JSON."""

    def run_cli(self, *argv: str) -> list:
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            exit_code = main(list(argv))
        self.assertEqual(exit_code, 0)
        return json.loads(buffer.getvalue())

    def test_flow_output(self) -> None:
        tokens = self.run_cli("Hello World", "--mode", "flow")
        self.assertEqual([t["content"] for t in tokens], ["Hello", "World"])
        self.assertEqual([t["breakAfter"] for t in tokens], [False, True])
        self.assertEqual(tokens[0]["estimatedWidth"], 60.0)

    def test_line_height_argument(self) -> None:
        absolute = self.run_cli("abc", "--font-size", "20", "--line-height", "30")
        multiplier = self.run_cli("abc", "--font-size", "20", "--line-height", "1.5")
        self.assertEqual(absolute[0]["margin"], [5.0, 0.0])
        self.assertEqual(multiplier[0]["margin"], [5.0, 0.0])

    def test_file_config_and_dump(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            tmp_path = Path(tmp)
            source = tmp_path / "label.txt"
            source.write_text("漢字 abc\n", encoding="utf-8")
            config = tmp_path / "settings.json"
            config.write_text(json.dumps({"layout": "horizontal_box"}), encoding="utf-8")
            dump_dir = tmp_path / "debug"

            tokens = self.run_cli("--file", str(source), "--config", str(config), "--dump", str(dump_dir))

            self.assertEqual([t["content"] for t in tokens], ["漢", "字", "abc"])
            payload = json.loads((dump_dir / "tokens.json").read_text(encoding="utf-8"))
            self.assertEqual(payload["metadata"]["settings"]["layout"], "horizontal_box")
            self.assertEqual(len(payload["tokens"]), 3)

    def test_missing_text_is_an_error(self) -> None:
        with redirect_stdout(io.StringIO()), self.assertRaises(SystemExit):
            with patch("sys.stderr", new_callable=io.StringIO):
                main([])


if __name__ == "__main__":
    unittest.main()
