"""
Integration tests for the description -> descriptors -> fragments pipeline.

Mirrors the demo master deck: a percentage-wide footer band, a legacy
``bkgd`` color, an image background and skipped text/placeholder objects.
"""

import json
import tempfile
import unittest
from pathlib import Path

from pptx_fragments.main import fragment_filename, main, render_masters, resolve_layout, write_fragments
from pptx_fragments.model.fill_model import LAYOUT_16x9, LAYOUT_WIDE
from pptx_fragments.parser.descriptor_parser import parse_masters
from pptx_fragments.utils.xml_utils import parse_fragment

MASTERS = [
    {
        "title": "TITLE_SLIDE",
        "background": {"path": "images/starlabs_bkgd.jpg"},
        "objects": [
            {"rect": {"x": 0.0, "y": 5.7, "w": "100%", "h": 0.75, "fill": {"color": "F1F1F1"}}},
            {"text": {"text": "Global IT & Services :: Status Report", "options": {"x": 0.0, "y": 5.7}}},
        ],
    },
    {
        "title": "MASTER_SLIDE",
        "background": {"fill": "F1F1F1"},
        "objects": [
            {
                "rect": {
                    "x": 0.0,
                    "y": 6.9,
                    "w": "100%",
                    "h": 0.6,
                    "fill": {
                        "type": "gradient",
                        "gradientType": "linear",
                        "gradientDirection": "lr",
                        "gradStops": [{"color": "003b75"}, {"color": "accent1", "position": 100}],
                    },
                }
            },
            {"placeholder": {"options": {"name": "body", "type": "body"}, "text": ""}},
        ],
    },
    {"title": "THANKS_SLIDE", "bkgd": "36ABFF", "objects": [{"rect": {"y": 3.4, "h": 2.0, "fill": {"color": "FFFFFF"}}}]},
]


class PipelineTest(unittest.TestCase):
    """End-to-end rendering of master descriptions."""

    def test_render_masters(self) -> None:
        fragments = render_masters(parse_masters(MASTERS), LAYOUT_WIDE)

        self.assertEqual(list(fragments), ["TITLE_SLIDE", "MASTER_SLIDE", "THANKS_SLIDE"])
        for xml in fragments.values():
            parse_fragment(xml)

        self.assertNotIn("<p:bg>", fragments["TITLE_SLIDE"])
        self.assertIn('<a:ext cx="12192000" cy="685800"/>', fragments["TITLE_SLIDE"])
        self.assertIn('<a:lin ang="0" scaled="1"/>', fragments["MASTER_SLIDE"])
        self.assertIn('<a:gs pos="100000"><a:schemeClr val="accent1"/></a:gs>', fragments["MASTER_SLIDE"])
        self.assertIn('<p:bg><p:bgPr><a:solidFill><a:srgbClr val="36ABFF"/>', fragments["THANKS_SLIDE"])

    def test_main_writes_fragments_and_debug_dump(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            source = Path(tmp) / "masters.json"
            source.write_text(json.dumps(MASTERS), encoding="utf-8")
            output = Path(tmp) / "out"

            written = main(str(source), str(output), "LAYOUT_WIDE", debug=True)

            self.assertEqual(sorted(path.name for path in written), ["MASTER_SLIDE.xml", "THANKS_SLIDE.xml", "TITLE_SLIDE.xml"])
            master_xml = (output / "MASTER_SLIDE.xml").read_text(encoding="utf-8")
            self.assertTrue(master_xml.startswith('<p:cSld name="MASTER_SLIDE">'))

            dumped = json.loads((output / "debug" / "masters.json").read_text())
            self.assertEqual(dumped[0]["title"], "TITLE_SLIDE")
            self.assertEqual(dumped[0]["background_image"], "images/starlabs_bkgd.jpg")
            self.assertEqual(dumped[0]["skipped_objects"], ["text"])

    def test_titles_with_path_separators_stay_in_output_dir(self) -> None:
        masters = [{"title": "Intro/Outro"}, {"title": "../escape"}]
        with tempfile.TemporaryDirectory() as tmp:
            source = Path(tmp) / "masters.json"
            source.write_text(json.dumps(masters), encoding="utf-8")
            output = Path(tmp) / "out"

            written = main(str(source), str(output))

            self.assertEqual(sorted(path.name for path in written), ["Outro.xml", "escape.xml"])
            for path in written:
                self.assertEqual(path.parent, output.resolve())
                self.assertTrue(path.is_file())
            self.assertFalse((Path(tmp) / "escape.xml").exists())
            self.assertIn('<p:cSld name="Intro/Outro">', (output / "Outro.xml").read_text(encoding="utf-8"))

    def test_fragment_filenames(self) -> None:
        self.assertEqual(fragment_filename("MASTER_SLIDE"), "MASTER_SLIDE.xml")
        self.assertEqual(fragment_filename("a\\b"), "b.xml")
        for title in ("", "/", "..", "reports/.."):
            with self.subTest(title=title):
                with self.assertRaises(ValueError):
                    fragment_filename(title)

    def test_colliding_file_names_are_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(ValueError):
                write_fragments({"a/deck": "<x/>", "b/deck": "<y/>"}, Path(tmp))

    def test_missing_input_raises(self) -> None:
        with self.assertRaises(FileNotFoundError):
            main("/nonexistent/masters.json")

    def test_layout_lookup(self) -> None:
        self.assertIs(resolve_layout(None), LAYOUT_16x9)
        self.assertIs(resolve_layout("LAYOUT_WIDE"), LAYOUT_WIDE)
        with self.assertRaises(ValueError):
            resolve_layout("LAYOUT_A4")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
