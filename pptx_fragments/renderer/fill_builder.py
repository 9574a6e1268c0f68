"""Serialize solid and gradient fills (and slide backgrounds) into DrawingML."""
from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence, Union

from pptx_fragments.model.enums import (
    DEFAULT_FOCUS_DIRECTION,
    DEFAULT_LINEAR_ANGLE,
    DEFAULT_PATH_CENTER,
    FOCUS_DIRECTIONS,
    LINEAR_DIRECTION_ANGLES,
    MAX_GRADIENT_STOPS,
    MIN_GRADIENT_STOPS,
    FillType,
    GradientType,
    SchemeColor,
)
from pptx_fragments.model.fill_model import (
    GradientStop,
    NormalizedGradient,
    NormalizedStop,
    ShapeFill,
    ShapeGradient,
)
from pptx_fragments.parser.descriptor_parser import parse_fill
from pptx_fragments.renderer.color_builder import WarningSink, build_color_element
from pptx_fragments.utils.units import Number, to_number
from pptx_fragments.utils.xml_utils import xml_number

FillInput = Union[str, ShapeFill, Mapping[str, Any], None]

DEFAULT_GRADIENT_STOPS = (
    GradientStop(color=SchemeColor.ACCENT1.value, position=0, transparency=0, brightness=0),
    GradientStop(color=SchemeColor.ACCENT1.value, position=50, transparency=0, brightness=50),
    GradientStop(color=SchemeColor.ACCENT1.value, position=100, transparency=0, brightness=100),
)

# fillToRect/tileRect pairs for radial and rectangular gradients, keyed by focus direction.
_FOCUS_RECTS = {
    "ftl": '<a:fillToRect r="100000" b="100000"/></a:path><a:tileRect l="-100000" t="-100000"/>',
    "ftr": '<a:fillToRect l="100000" b="100000"/></a:path><a:tileRect t="-100000" r="-100000"/>',
    "fbl": '<a:fillToRect t="100000" r="100000"/></a:path><a:tileRect l="-100000" b="-100000"/>',
    "fbr": '<a:fillToRect l="100000" t="100000"/></a:path><a:tileRect r="-100000" b="-100000"/>',
    "c": '<a:fillToRect l="50000" t="50000" r="50000" b="50000"/></a:path><a:tileRect/>',
}
_CENTERED_RECT = _FOCUS_RECTS["c"]


def _truthy_in_range(value: Any, low: Number, high: Number) -> Optional[Number]:
    """Return ``value`` as a number when it is set, numeric and within bounds.

    Zero counts as unset, so callers fall back to their default for it.
    """
    if not value:
        return None
    number = to_number(value)
    if number is None or number < low or number > high:
        return None
    return number


def normalize_stop(stop: GradientStop, index: int) -> NormalizedStop:
    """Apply the positional and zero defaults to one gradient stop."""
    position = _truthy_in_range(stop.position, 0, 100)
    brightness = _truthy_in_range(stop.brightness, -100, 100)
    transparency = _truthy_in_range(stop.transparency, 0, 100)
    return NormalizedStop(
        color=stop.color,
        position=index * 10 if position is None else position,
        brightness=0 if brightness is None else brightness,
        transparency=0 if transparency is None else transparency,
    )


def normalize_gradient(gradient: ShapeGradient) -> NormalizedGradient:
    """Resolve direction tokens, path centres and stop defaults for a gradient."""
    gradient_type = gradient.gradient_type or GradientType.LINEAR.value
    direction = gradient.gradient_direction or None
    stops: Sequence[GradientStop] = DEFAULT_GRADIENT_STOPS if gradient.grad_stops is None else gradient.grad_stops

    # TODO: this count guard can never be true; settle whether short/long stop lists get the default.
    if len(stops) < MIN_GRADIENT_STOPS and len(stops) > MAX_GRADIENT_STOPS:
        stops = DEFAULT_GRADIENT_STOPS

    linear_angle: Optional[Number] = None
    path_l = to_number(gradient.path_l or DEFAULT_PATH_CENTER)
    path_t = to_number(gradient.path_t or DEFAULT_PATH_CENTER)
    path_r = path_b = DEFAULT_PATH_CENTER

    if gradient_type == GradientType.LINEAR.value:
        explicit = _truthy_in_range(gradient.linear_angle, 0, 360)
        if explicit is not None and explicit < 360:
            linear_angle = explicit
        else:
            linear_angle = LINEAR_DIRECTION_ANGLES.get(direction or "", DEFAULT_LINEAR_ANGLE)
    elif gradient_type in (GradientType.RADIAL.value, GradientType.RECT.value):
        if direction not in FOCUS_DIRECTIONS:
            direction = DEFAULT_FOCUS_DIRECTION
    elif gradient_type == GradientType.PATH.value:
        if path_l is None or path_l < 0 or path_l > 100:
            path_l = DEFAULT_PATH_CENTER
        path_r = 100 - path_l
        if path_t is None or path_t < 0 or path_t > 100:
            path_t = DEFAULT_PATH_CENTER
        path_b = 100 - path_t

    return NormalizedGradient(
        gradient_type=gradient_type,
        rotate_with_shape=gradient.rotate_with_shape or 1,
        stops=[normalize_stop(stop, index) for index, stop in enumerate(stops)],
        linear_angle=linear_angle,
        gradient_direction=direction,
        path_l=DEFAULT_PATH_CENTER if path_l is None else path_l,
        path_t=DEFAULT_PATH_CENTER if path_t is None else path_t,
        path_r=path_r,
        path_b=path_b,
    )


def _is_given(value: Any) -> bool:
    return value is not None and value is not False and value != ""


class FillBuilder:
    """Produce ``a:solidFill`` / ``a:gradFill`` markup with an optional slide background."""

    def __init__(self, warn: Optional[WarningSink] = None) -> None:
        self._warn = warn

    # ------------------------------------------------------------------
    # Public API
    def build(self, fill: FillInput, background: FillInput = None) -> str:
        """Return the background prelude followed by the fill markup."""
        xml = self._background_xml(background) if _is_given(background) else ""
        if _is_given(fill):
            xml += self._fill_xml(fill)
        return xml

    # ------------------------------------------------------------------
    # Internal helpers
    def _background_xml(self, background: FillInput) -> str:
        if isinstance(background, str):
            inner = self.build(background.replace("#", "", 1))
        else:
            inner = self.build(background)
        return f"<p:bg><p:bgPr>{inner}<a:effectLst/></p:bgPr></p:bg>"

    def _fill_xml(self, fill: FillInput) -> str:
        if isinstance(fill, str):
            return self._solid_xml(fill, "")

        spec = fill if isinstance(fill, ShapeFill) else parse_fill(fill)
        if not isinstance(spec, ShapeFill):
            return self._solid_xml(spec, "")
        fill_type = spec.type or FillType.SOLID.value
        inner = "".join(self._alpha_xml(value) for value in (spec.alpha, spec.transparency) if value)

        if fill_type == FillType.SOLID.value:
            return self._solid_xml(spec.color, inner)
        if fill_type == FillType.GRADIENT.value:
            return self._gradient_xml(normalize_gradient(spec.gradient or ShapeGradient()))
        return ""

    def _alpha_xml(self, transparency: Any) -> str:
        value = to_number(transparency)
        if value is None:
            return ""
        return f'<a:alpha val="{xml_number((100 - value) * 1000)}"/>'

    def _solid_xml(self, color: Optional[str], inner: str) -> str:
        return f"<a:solidFill>{build_color_element(color, inner, warn=self._warn)}</a:solidFill>"

    def _gradient_xml(self, gradient: NormalizedGradient) -> str:
        xml = f'<a:gradFill flip="none" rotWithShape="{xml_number(gradient.rotate_with_shape)}">'
        xml += "<a:gsLst>"
        xml += "".join(self._stop_xml(stop) for stop in gradient.stops)
        xml += "</a:gsLst>"
        xml += self._geometry_xml(gradient)
        xml += "</a:gradFill>"
        return xml

    def _stop_xml(self, stop: NormalizedStop) -> str:
        modifiers: List[str] = []
        if stop.brightness < 0:
            modifiers.append(f'<a:lumMod val="{xml_number((100 + stop.brightness) * 1000)}"/>')
        elif stop.brightness > 0:
            modifiers.append(f'<a:lumMod val="{xml_number((100 - stop.brightness) * 1000)}"/>')
            modifiers.append(f'<a:lumOff val="{xml_number(stop.brightness * 1000)}"/>')
        if stop.transparency > 0:
            modifiers.append(f'<a:alpha val="{xml_number((100 - stop.transparency) * 1000)}"/>')

        color = build_color_element(stop.color, "".join(modifiers), warn=self._warn)
        return f'<a:gs pos="{xml_number(stop.position * 1000)}">{color}</a:gs>'

    def _geometry_xml(self, gradient: NormalizedGradient) -> str:
        if gradient.gradient_type == GradientType.LINEAR.value:
            angle = xml_number((gradient.linear_angle or 0) * 60000)
            return f'<a:lin ang="{angle}" scaled="1"/><a:tileRect/>'

        if gradient.gradient_type in (GradientType.RADIAL.value, GradientType.RECT.value):
            shape = "circle" if gradient.gradient_type == GradientType.RADIAL.value else "rect"
            rects = _FOCUS_RECTS.get(gradient.gradient_direction or "", _CENTERED_RECT)
            return f'<a:path path="{shape}">{rects}'

        if gradient.gradient_type == GradientType.PATH.value:
            return (
                '<a:path path="shape">'
                f'<a:fillToRect l="{xml_number(gradient.path_l * 1000)}" t="{xml_number(gradient.path_t * 1000)}" '
                f'r="{xml_number(gradient.path_r * 1000)}" b="{xml_number(gradient.path_b * 1000)}"/>'
                "</a:path><a:tileRect/>"
            )

        return ""


def build_fill_xml(fill: FillInput, background: FillInput = None, warn: Optional[WarningSink] = None) -> str:
    """Serialize ``fill`` (and an optional slide ``background``) into DrawingML."""
    return FillBuilder(warn=warn).build(fill, background)
