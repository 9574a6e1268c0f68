"""Tests for color element validation and fallback."""
import unittest

from pptx_fragments.model.enums import DEF_FONT_COLOR, SchemeColor
from pptx_fragments.renderer.color_builder import build_color_element, is_valid_color


class ColorElementTest(unittest.TestCase):
    """Hex values become srgbClr, scheme tokens become schemeClr."""

    def test_hex_color(self) -> None:
        self.assertEqual(build_color_element("FF0000"), '<a:srgbClr val="FF0000"/>')

    def test_hash_is_stripped_and_value_uppercased(self) -> None:
        self.assertEqual(build_color_element("#ff00aa"), '<a:srgbClr val="FF00AA"/>')

    def test_scheme_colors(self) -> None:
        for color in SchemeColor:
            with self.subTest(color=color.value):
                self.assertEqual(build_color_element(color.value), f'<a:schemeClr val="{color.value}"/>')

    def test_inner_elements_are_wrapped(self) -> None:
        xml = build_color_element("text1", '<a:alpha val="50000"/>')
        self.assertEqual(xml, '<a:schemeClr val="text1"><a:alpha val="50000"/></a:schemeClr>')

    def test_invalid_color_falls_back_with_diagnostic(self) -> None:
        messages = []
        xml = build_color_element("not-a-color", warn=messages.append)

        self.assertEqual(xml, f'<a:srgbClr val="{DEF_FONT_COLOR}"/>')
        self.assertEqual(len(messages), 1)
        self.assertIn("not-a-color", messages[0])
        self.assertIn(DEF_FONT_COLOR, messages[0])

    def test_missing_color_falls_back(self) -> None:
        messages = []
        self.assertEqual(build_color_element(None, warn=messages.append), '<a:srgbClr val="000000"/>')
        self.assertEqual(len(messages), 1)

    def test_default_sink_logs_warning(self) -> None:
        with self.assertLogs("pptx_fragments.renderer.color_builder", level="WARNING") as captured:
            build_color_element("ACCENT1")
        self.assertIn("ACCENT1", captured.output[0])

    def test_valid_colors_do_not_warn(self) -> None:
        messages = []
        build_color_element("accent6", warn=messages.append)
        build_color_element("#00ff00", warn=messages.append)
        self.assertEqual(messages, [])

    def test_is_valid_color(self) -> None:
        self.assertTrue(is_valid_color("abcdef"))
        self.assertTrue(is_valid_color("background2"))
        self.assertFalse(is_valid_color("FFF"))
        self.assertFalse(is_valid_color("accent7"))

    def test_trailing_newline_is_not_a_hex_color(self) -> None:
        messages = []
        xml = build_color_element("FF0000\n", warn=messages.append)

        self.assertEqual(xml, f'<a:srgbClr val="{DEF_FONT_COLOR}"/>')
        self.assertEqual(len(messages), 1)
        self.assertFalse(is_valid_color("FF0000\n"))
        self.assertFalse(is_valid_color("accent1\n"))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
