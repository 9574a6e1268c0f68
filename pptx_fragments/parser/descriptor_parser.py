"""Convert JSON-like presentation descriptions into typed descriptors.

Keys follow the camelCase names of the declarative description
(``gradientType``, ``gradStops``, ``rotateWithShape`` ...). Style values are
passed through untouched: validation and fallbacks belong to the builders.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional

from pptx_fragments.model.fill_model import GlowOptions, GradientStop, ShapeFill, ShapeGradient
from pptx_fragments.model.master_model import FillSpec, ShapeSpec, SlideMasterSpec
from pptx_fragments.utils.logger import get_logger

LOGGER = get_logger(__name__)


def parse_fill(value: Any) -> Optional[FillSpec]:
    """Return a color string, a ``ShapeFill`` or ``None`` for a fill description."""
    if value is None:
        return None
    if isinstance(value, (str, ShapeFill)):
        return value
    if not isinstance(value, Mapping):
        LOGGER.debug("Unsupported fill description %r, treating it as an empty solid fill", value)
        return ShapeFill()
    return ShapeFill(
        type=value.get("type"),
        color=value.get("color"),
        alpha=value.get("alpha"),
        transparency=value.get("transparency"),
        gradient=parse_gradient(value),
    )


def parse_gradient(value: Mapping[str, Any]) -> ShapeGradient:
    stops = value.get("gradStops")
    return ShapeGradient(
        gradient_type=value.get("gradientType"),
        gradient_direction=value.get("gradientDirection"),
        linear_angle=value.get("linearAngle"),
        rotate_with_shape=value.get("rotateWithShape"),
        path_l=value.get("pathL"),
        path_t=value.get("pathT"),
        grad_stops=None if stops is None else parse_stops(stops),
    )


def parse_stops(stops: Iterable[Any]) -> List[GradientStop]:
    parsed: List[GradientStop] = []
    for stop in stops:
        if isinstance(stop, GradientStop):
            parsed.append(stop)
        elif isinstance(stop, Mapping):
            parsed.append(
                GradientStop(
                    color=stop.get("color"),
                    position=stop.get("position"),
                    brightness=stop.get("brightness"),
                    transparency=stop.get("transparency"),
                )
            )
        else:
            parsed.append(GradientStop(color=stop if isinstance(stop, str) else None))
    return parsed


def parse_glow(value: Any) -> Optional[GlowOptions]:
    if value is None or isinstance(value, GlowOptions):
        return value
    if not isinstance(value, Mapping):
        raise ValueError(f"Glow options must be an object, got {type(value).__name__}")
    return GlowOptions(size=value.get("size"), color=value.get("color"), opacity=value.get("opacity"))


def parse_shape(options: Mapping[str, Any], default_name: str) -> ShapeSpec:
    """Build a ``ShapeSpec`` from the options of a ``rect`` master object."""
    return ShapeSpec(
        name=str(options.get("name") or default_name),
        x=options.get("x", 0),
        y=options.get("y", 0),
        w=options.get("w", "100%"),
        h=options.get("h", "100%"),
        fill=parse_fill(options.get("fill")),
        rotate=options.get("rotate"),
        glow=parse_glow(options.get("glow")),
    )


def parse_master(value: Any) -> SlideMasterSpec:
    """Parse one slide master description (``title``, ``background``, ``objects``)."""
    if not isinstance(value, Mapping):
        raise ValueError(f"Slide master must be an object, got {type(value).__name__}")
    title = value.get("title")
    if not title:
        raise ValueError("Slide master is missing a title")

    master = SlideMasterSpec(title=str(title))
    _apply_background(master, value)

    for index, entry in enumerate(value.get("objects") or []):
        if not isinstance(entry, Mapping) or len(entry) != 1:
            raise ValueError(f"Master {master.title!r} object #{index} must have exactly one kind key")
        kind, options = next(iter(entry.items()))
        if kind != "rect":
            master.skipped_objects.append(kind)
            continue
        if not isinstance(options, Mapping):
            raise ValueError(f"Master {master.title!r} rect #{index} options must be an object")
        master.shapes.append(parse_shape(options, default_name=f"Shape {len(master.shapes) + 1}"))

    return master


def parse_masters(document: Any) -> List[SlideMasterSpec]:
    """Parse a list of masters, or a ``{"masters": [...]}`` document."""
    if isinstance(document, Mapping):
        document = document.get("masters")
    if not isinstance(document, list):
        raise ValueError("Expected a list of slide masters")
    masters = [parse_master(item) for item in document]
    seen = set()
    for master in masters:
        if master.title in seen:
            raise ValueError(f"Duplicate slide master title {master.title!r}")
        seen.add(master.title)
    return masters


def _apply_background(master: SlideMasterSpec, value: Mapping[str, Any]) -> None:
    background = value.get("background")
    legacy = value.get("bkgd")
    if background is None and legacy is not None:
        LOGGER.debug("Master %s uses the deprecated 'bkgd' key", master.title)
        background = legacy

    if isinstance(background, str):
        master.background = background
    elif isinstance(background, Mapping):
        if background.get("path") or background.get("data"):
            master.background_image = str(background.get("path") or "<data>")
        elif "fill" in background:
            master.background = parse_fill(background["fill"])
        else:
            master.background = parse_fill(background)
    elif background is not None:
        raise ValueError(f"Master {master.title!r} has an unsupported background {background!r}")
