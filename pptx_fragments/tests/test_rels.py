"""Tests for relationship id counting."""
import unittest

from pptx_fragments.model.fill_model import SlideRelationships
from pptx_fragments.renderer.rels import next_rel_id


class NextRelIdTest(unittest.TestCase):
    def test_counts_all_collections(self) -> None:
        slide = {"rels": ["a", "b"], "relsChart": ["c"], "relsMedia": []}
        self.assertEqual(next_rel_id(slide), 4)

    def test_dataclass_and_snake_case_keys(self) -> None:
        self.assertEqual(next_rel_id(SlideRelationships(rels=[1], rels_chart=[2, 3], rels_media=[4])), 5)
        self.assertEqual(next_rel_id({"rels": [], "rels_chart": [1], "rels_media": [2]}), 3)

    def test_empty_slide(self) -> None:
        self.assertEqual(next_rel_id(SlideRelationships()), 1)
        self.assertEqual(next_rel_id({}), 1)

    def test_does_not_mutate(self) -> None:
        slide = SlideRelationships(rels=["a"])
        next_rel_id(slide)
        self.assertEqual(slide.rels, ["a"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
