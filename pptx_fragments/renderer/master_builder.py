"""Render slide master descriptors into ``p:cSld`` fragments."""
from __future__ import annotations

from typing import Optional

from pptx_fragments.model.fill_model import Layout
from pptx_fragments.model.master_model import SlideMasterSpec
from pptx_fragments.renderer.color_builder import WarningSink
from pptx_fragments.renderer.fill_builder import build_fill_xml
from pptx_fragments.renderer.shape_builder import build_shape_xml
from pptx_fragments.utils.logger import get_logger
from pptx_fragments.utils.xml_utils import encode_xml_entities

LOGGER = get_logger(__name__)

# Id 1 belongs to the group shape that wraps the tree.
FIRST_SHAPE_ID = 2

GROUP_SHAPE_HEADER = (
    '<p:nvGrpSpPr><p:cNvPr id="1" name=""/><p:cNvGrpSpPr/><p:nvPr/></p:nvGrpSpPr>'
    '<p:grpSpPr><a:xfrm><a:off x="0" y="0"/><a:ext cx="0" cy="0"/>'
    '<a:chOff x="0" y="0"/><a:chExt cx="0" cy="0"/></a:xfrm></p:grpSpPr>'
)


class MasterBuilder:
    """Serialize the background and rectangle objects of a slide master."""

    def __init__(self, layout: Layout, warn: Optional[WarningSink] = None) -> None:
        self._layout = layout
        self._warn = warn

    def build(self, master: SlideMasterSpec) -> str:
        if master.background_image:
            LOGGER.warning("Master %s: image background %s is not supported, skipping", master.title, master.background_image)
        for kind in master.skipped_objects:
            LOGGER.debug("Master %s: skipping unsupported %s object", master.title, kind)

        xml = f'<p:cSld name="{encode_xml_entities(master.title)}">'
        if master.background is not None:
            xml += build_fill_xml(None, background=master.background, warn=self._warn)
        xml += "<p:spTree>"
        xml += GROUP_SHAPE_HEADER
        for offset, shape in enumerate(master.shapes):
            xml += build_shape_xml(shape, self._layout, FIRST_SHAPE_ID + offset, warn=self._warn)
        xml += "</p:spTree></p:cSld>"
        return xml
