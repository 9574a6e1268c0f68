"""Build ``p:sp`` rectangle fragments from shape descriptors."""
from __future__ import annotations

from typing import Optional

from pptx_fragments.model.enums import Axis
from pptx_fragments.model.fill_model import Layout
from pptx_fragments.model.master_model import ShapeSpec
from pptx_fragments.renderer.color_builder import WarningSink
from pptx_fragments.renderer.effect_builder import build_effect_list
from pptx_fragments.renderer.fill_builder import build_fill_xml
from pptx_fragments.utils.units import degrees_to_rotation, resolve_dimension
from pptx_fragments.utils.xml_utils import encode_xml_entities, xml_number


def build_transform_xml(shape: ShapeSpec, layout: Layout) -> str:
    """Return ``a:xfrm`` with offsets and extents resolved against ``layout``."""
    x = resolve_dimension(shape.x, Axis.X, layout)
    y = resolve_dimension(shape.y, Axis.Y, layout)
    cx = resolve_dimension(shape.w, Axis.X, layout)
    cy = resolve_dimension(shape.h, Axis.Y, layout)
    rotation = f' rot="{xml_number(degrees_to_rotation(shape.rotate))}"' if shape.rotate else ""
    return (
        f"<a:xfrm{rotation}>"
        f'<a:off x="{xml_number(x)}" y="{xml_number(y)}"/>'
        f'<a:ext cx="{xml_number(cx)}" cy="{xml_number(cy)}"/>'
        "</a:xfrm>"
    )


def build_shape_xml(shape: ShapeSpec, layout: Layout, shape_id: int, warn: Optional[WarningSink] = None) -> str:
    """Serialize a rectangle with its fill and optional glow."""
    xml = "<p:sp><p:nvSpPr>"
    xml += f'<p:cNvPr id="{shape_id}" name="{encode_xml_entities(shape.name)}"/>'
    xml += "<p:cNvSpPr/><p:nvPr/></p:nvSpPr>"
    xml += "<p:spPr>"
    xml += build_transform_xml(shape, layout)
    xml += '<a:prstGeom prst="rect"><a:avLst/></a:prstGeom>'
    xml += build_fill_xml(shape.fill, warn=warn) if shape.fill else "<a:noFill/>"
    if shape.glow is not None:
        xml += build_effect_list(shape.glow, warn=warn)
    xml += "</p:spPr></p:sp>"
    return xml
