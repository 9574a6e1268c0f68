"""Enumerations and default values shared by the fragment builders."""
from __future__ import annotations

import re
from enum import Enum
from typing import Dict, FrozenSet


class Axis(str, Enum):
    """Reference axis for percentage dimensions."""

    X = "X"
    Y = "Y"


class SchemeColor(str, Enum):
    """Theme-relative color tokens resolved by PowerPoint at render time."""

    BACKGROUND1 = "background1"
    BACKGROUND2 = "background2"
    TEXT1 = "text1"
    TEXT2 = "text2"
    ACCENT1 = "accent1"
    ACCENT2 = "accent2"
    ACCENT3 = "accent3"
    ACCENT4 = "accent4"
    ACCENT5 = "accent5"
    ACCENT6 = "accent6"


SCHEME_COLOR_VALUES: FrozenSet[str] = frozenset(color.value for color in SchemeColor)

REGEX_HEX_COLOR = re.compile(r"^[0-9a-fA-F]{6}$")

DEF_FONT_COLOR = "000000"


class FillType(str, Enum):
    SOLID = "solid"
    GRADIENT = "gradient"


class GradientType(str, Enum):
    LINEAR = "linear"
    RADIAL = "radial"
    RECT = "rect"
    PATH = "path"


# Linear direction tokens mapped to the gradient angle in degrees.
LINEAR_DIRECTION_ANGLES: Dict[str, int] = {
    "lr": 0,
    "tlbr": 45,
    "tb": 90,
    "trbl": 135,
    "rl": 180,
    "brtl": 225,
    "bt": 270,
    "bltr": 315,
}
DEFAULT_LINEAR_ANGLE = 45

# "From" corners (and centre) for radial and rectangular gradients.
FOCUS_DIRECTIONS: FrozenSet[str] = frozenset({"ftl", "ftr", "fbl", "fbr", "c"})
DEFAULT_FOCUS_DIRECTION = "ftl"

DEFAULT_PATH_CENTER = 50

MIN_GRADIENT_STOPS = 2
MAX_GRADIENT_STOPS = 10
