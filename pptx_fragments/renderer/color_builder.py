"""Build ``a:srgbClr`` / ``a:schemeClr`` elements; the single point of color validation."""
from __future__ import annotations

from typing import Callable, Optional

from pptx_fragments.model.enums import DEF_FONT_COLOR, REGEX_HEX_COLOR, SCHEME_COLOR_VALUES
from pptx_fragments.utils.logger import get_logger

LOGGER = get_logger(__name__)

WarningSink = Callable[[str], None]


def is_valid_color(color: str) -> bool:
    """True for six-digit hex values and the scheme color tokens."""
    return bool(REGEX_HEX_COLOR.fullmatch(color)) or color in SCHEME_COLOR_VALUES


def build_color_element(color: Optional[str], inner_xml: Optional[str] = None, warn: Optional[WarningSink] = None) -> str:
    """Return a color element for a hex RGB value or scheme color token.

    Invalid values are reported through ``warn`` (the module logger by
    default) and replaced with ``DEF_FONT_COLOR``. ``inner_xml`` holds
    color modifiers such as ``<a:alpha val="50000"/>``.
    """
    value = str(color or "").replace("#", "", 1)

    if not is_valid_color(value):
        (warn or LOGGER.warning)(
            f'"{value}" is not a valid scheme color or hex RGB! "{DEF_FONT_COLOR}" is used as a fallback. '
            "Pass 6-digit RGB or SchemeColor values"
        )
        value = DEF_FONT_COLOR

    is_hex = bool(REGEX_HEX_COLOR.fullmatch(value))
    tag = "srgbClr" if is_hex else "schemeClr"
    attr = f'val="{value.upper() if is_hex else value}"'

    if inner_xml:
        return f"<a:{tag} {attr}>{inner_xml}</a:{tag}>"
    return f"<a:{tag} {attr}/>"
