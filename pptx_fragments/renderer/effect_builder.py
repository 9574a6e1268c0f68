"""Build DrawingML effect elements (glow and the surrounding effect list)."""
from __future__ import annotations

from dataclasses import fields, replace
from typing import Mapping, Optional, Union

from pptx_fragments.model.fill_model import GlowOptions
from pptx_fragments.renderer.color_builder import WarningSink, build_color_element
from pptx_fragments.utils.units import ONEPT
from pptx_fragments.utils.xml_utils import xml_number

DEF_GLOW = GlowOptions(size=8, color="FFFFFF", opacity=0.75)

GlowOverrides = Union[GlowOptions, Mapping[str, object], None]


def apply_overrides(base: GlowOptions, overrides: GlowOverrides) -> GlowOptions:
    """Return a copy of ``base`` with every field set in ``overrides`` replacing it."""
    if overrides is None:
        return base
    if isinstance(overrides, GlowOptions):
        values = {f.name: getattr(overrides, f.name) for f in fields(GlowOptions)}
    else:
        values = {f.name: overrides.get(f.name) for f in fields(GlowOptions)}
    return replace(base, **{name: value for name, value in values.items() if value is not None})


def build_glow_element(options: GlowOverrides, defaults: GlowOptions, warn: Optional[WarningSink] = None) -> str:
    """Create an ``a:glow`` element, ``options`` taking precedence over ``defaults``.

    See http://officeopenxml.com/drwSp-effects.php
    """
    merged = apply_overrides(defaults, options)
    radius = (merged.size or 0) * ONEPT
    opacity = (merged.opacity or 0) * 100000

    xml = f'<a:glow rad="{xml_number(radius)}">'
    xml += build_color_element(merged.color, f'<a:alpha val="{xml_number(opacity)}"/>', warn=warn)
    xml += "</a:glow>"
    return xml


def build_effect_list(glow: GlowOverrides = None, defaults: GlowOptions = DEF_GLOW, warn: Optional[WarningSink] = None) -> str:
    if glow is None:
        return "<a:effectLst/>"
    return f"<a:effectLst>{build_glow_element(glow, defaults, warn=warn)}</a:effectLst>"
