"""Relationship id arithmetic for slide parts."""
from __future__ import annotations

from typing import Any, Mapping, Sequence, Union

from pptx_fragments.model.fill_model import SlideRelationships

SlideLike = Union[SlideRelationships, Mapping[str, Sequence[Any]]]


def _collection(slide: Mapping[str, Sequence[Any]], *keys: str) -> Sequence[Any]:
    for key in keys:
        if key in slide:
            return slide[key] or ()
    return ()


def next_rel_id(slide: SlideLike) -> int:
    """Return the next free ``rId`` number; the caller registers the relationship."""
    if isinstance(slide, SlideRelationships):
        return len(slide.rels) + len(slide.rels_chart) + len(slide.rels_media) + 1
    return (
        len(_collection(slide, "rels"))
        + len(_collection(slide, "relsChart", "rels_chart"))
        + len(_collection(slide, "relsMedia", "rels_media"))
        + 1
    )
