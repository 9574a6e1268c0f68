"""Unit conversion helpers for PresentationML measurements."""
from __future__ import annotations

import math
import re
from typing import Optional, Union

from pptx_fragments.model.enums import Axis
from pptx_fragments.model.fill_model import Layout

EMU = 914400  # per inch
ONEPT = 12700  # EMU per point
ROTATION_UNIT = 60000  # per degree

# Values at or above this are treated as EMU already; 150 inches cannot be expressed.
CONVERTED_THRESHOLD = 100

Number = Union[int, float]

_INCH_SUFFIX = re.compile(r"in*", re.IGNORECASE)
_LEADING_FLOAT = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def js_round(value: float) -> int:
    """Round half up, the way PowerPoint tooling has always rounded EMU."""
    return int(math.floor(value + 0.5))


def is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and not math.isnan(value)


def to_number(value: object) -> Optional[Number]:
    """Coerce numbers and numeric strings, returning None when not numeric.

    Blank strings count as zero, integral values come back as ``int``.
    """
    if isinstance(value, bool):
        return int(value)
    if is_number(value):
        return value  # type: ignore[return-value]
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return 0
    try:
        number = float(text)
    except ValueError:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return int(number) if number.is_integer() else number


def parse_leading_float(text: str) -> Optional[float]:
    """Parse the numeric prefix of a string such as ``"50%"``."""
    match = _LEADING_FLOAT.match(text)
    if match is None:
        return None
    return float(match.group(0))


def inches_to_emu(inches: Union[Number, str]) -> Number:
    """Convert inches (number or ``"5.5in"`` style string) into EMU."""
    if is_number(inches) and inches >= CONVERTED_THRESHOLD:  # type: ignore[operator]
        return inches  # type: ignore[return-value]
    if isinstance(inches, str):
        parsed = to_number(_INCH_SUFFIX.sub("", inches))
        if parsed is None:
            return 0
        inches = parsed
    if not is_number(inches):
        return 0
    return js_round(EMU * inches)  # type: ignore[operator]


def points_to_emu(points: object) -> int:
    """Convert points into EMU; anything non-numeric counts as zero."""
    value = to_number(points) or 0
    return js_round(value * ONEPT)


def resolve_dimension(size: object, axis: Optional[Union[Axis, str]] = None, layout: Optional[Layout] = None) -> Number:
    """Resolve inches, EMU or a layout percentage into EMU.

    Numbers below 100 are inches, numbers at or above 100 are returned as-is
    and ``"NN%"`` strings are taken relative to the layout width, or to the
    height when ``axis`` is ``Axis.Y``.
    """
    if isinstance(size, str):
        numeric = to_number(size)
        if numeric is not None:
            size = numeric

    if is_number(size):
        if size < CONVERTED_THRESHOLD:  # type: ignore[operator]
            return inches_to_emu(size)  # type: ignore[arg-type]
        return size  # type: ignore[return-value]

    if isinstance(size, str) and "%" in size:
        percent = parse_leading_float(size)
        if percent is None or layout is None:
            return 0
        reference = layout.height if axis == Axis.Y else layout.width
        return js_round((percent / 100) * reference)

    return 0


def degrees_to_rotation(degrees: object) -> Number:
    """Convert degrees into the 60000ths used by ``rot`` attributes.

    Only a single turn is removed: 730 degrees stays above 360.
    """
    value = to_number(degrees) or 0
    return (value - 360 if value > 360 else value) * ROTATION_UNIT


def rgb_to_hex(red: int, green: int, blue: int) -> str:
    """Convert 0-255 channel values into an uppercase ``RRGGBB`` string."""
    return "".join(f"{channel:02x}" for channel in (red, green, blue)).upper()
