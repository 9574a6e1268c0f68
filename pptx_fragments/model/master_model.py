"""Slide master descriptors consumed by the master builder."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

from pptx_fragments.model.fill_model import GlowOptions, ShapeFill

Dimension = Union[int, float, str]
FillSpec = Union[str, ShapeFill]


@dataclass(slots=True)
class ShapeSpec:
    """Rectangle placed on a master, positioned in inches, EMU or percentages."""

    name: str
    x: Dimension = 0
    y: Dimension = 0
    w: Dimension = "100%"
    h: Dimension = "100%"
    fill: Optional[FillSpec] = None
    rotate: Optional[float] = None
    glow: Optional[GlowOptions] = None


@dataclass(slots=True)
class SlideMasterSpec:
    """Declarative master definition: background plus rectangle objects."""

    title: str
    background: Optional[FillSpec] = None
    background_image: Optional[str] = None
    shapes: List[ShapeSpec] = field(default_factory=list)
    skipped_objects: List[str] = field(default_factory=list)
