"""Typed descriptors for fills, gradients, glow effects and slide geometry."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Union

Numeric = Union[int, float, str]


@dataclass(frozen=True)
class Layout:
    """Slide size in EMU, the reference frame for percentage dimensions."""

    name: str
    width: int
    height: int


LAYOUT_16x9 = Layout("LAYOUT_16x9", 9144000, 5143500)
LAYOUT_16x10 = Layout("LAYOUT_16x10", 9144000, 5715000)
LAYOUT_4x3 = Layout("LAYOUT_4x3", 9144000, 6858000)
LAYOUT_WIDE = Layout("LAYOUT_WIDE", 12192000, 6858000)

LAYOUTS: Dict[str, Layout] = {
    layout.name: layout for layout in (LAYOUT_16x9, LAYOUT_16x10, LAYOUT_4x3, LAYOUT_WIDE)
}


@dataclass(slots=True)
class GradientStop:
    """One color anchor of a gradient as supplied by the caller.

    ``0`` and ``None`` are both read as "unset" for the numeric fields.
    """

    color: Optional[str] = None
    position: Optional[Numeric] = None
    brightness: Optional[Numeric] = None
    transparency: Optional[Numeric] = None


@dataclass(slots=True)
class ShapeGradient:
    """Gradient options before defaults are applied."""

    gradient_type: Optional[str] = None
    gradient_direction: Optional[str] = None
    linear_angle: Optional[Numeric] = None
    rotate_with_shape: Optional[int] = None
    path_l: Optional[Numeric] = None
    path_t: Optional[Numeric] = None
    grad_stops: Optional[List[GradientStop]] = None


@dataclass(slots=True)
class ShapeFill:
    """Solid or gradient fill; ``gradient`` is only read when ``type`` is gradient."""

    type: Optional[str] = None
    color: Optional[str] = None
    alpha: Optional[Numeric] = None  # deprecated in favour of transparency
    transparency: Optional[Numeric] = None
    gradient: ShapeGradient = field(default_factory=ShapeGradient)


@dataclass(frozen=True)
class NormalizedStop:
    color: Optional[str]
    position: float
    brightness: float
    transparency: float


@dataclass(frozen=True)
class NormalizedGradient:
    """Fully defaulted gradient ready for serialization."""

    gradient_type: str
    rotate_with_shape: int
    stops: Sequence[NormalizedStop]
    linear_angle: Optional[float] = None
    gradient_direction: Optional[str] = None
    path_l: float = 50
    path_t: float = 50
    path_r: float = 50
    path_b: float = 50


@dataclass(frozen=True)
class GlowOptions:
    """Glow size in points, color reference and opacity as a 0-1 fraction."""

    size: Optional[float] = None
    color: Optional[str] = None
    opacity: Optional[float] = None


@dataclass(slots=True)
class SlideRelationships:
    """Relationship collections owned by a slide; only their lengths matter here."""

    rels: List[object] = field(default_factory=list)
    rels_chart: List[object] = field(default_factory=list)
    rels_media: List[object] = field(default_factory=list)
