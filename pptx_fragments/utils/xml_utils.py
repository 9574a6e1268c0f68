"""Helper functions to format and check DrawingML/PresentationML fragments."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict
from xml.etree import ElementTree as ET


@dataclass(frozen=True)
class Namespaces:
    """Common OpenXML namespace prefixes emitted by the builders."""

    PRESENTATION: Dict[str, str] = None  # type: ignore[assignment]

    def __post_init__(self) -> None:  # pragma: no cover
        raise RuntimeError("Namespaces should not be instantiated")


Namespaces.PRESENTATION = {  # type: ignore[attr-defined]
    "a": "http://schemas.openxmlformats.org/drawingml/2006/main",
    "p": "http://schemas.openxmlformats.org/presentationml/2006/main",
    "r": "http://schemas.openxmlformats.org/officeDocument/2006/relationships",
}

_XML_ENTITIES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def xml_number(value: object) -> str:
    """Render a number for an attribute value, dropping a trailing ``.0``."""
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def encode_xml_entities(text: object) -> str:
    """Escape the five XML special characters; ``None`` becomes an empty string."""
    if text is None:
        return ""
    encoded = str(text)
    for char, entity in _XML_ENTITIES:
        encoded = encoded.replace(char, entity)
    return encoded


def parse_fragment(fragment: str) -> ET.Element:
    """Parse a prefixed fragment by wrapping it in a root declaring a:, p: and r:."""
    declarations = " ".join(f'xmlns:{prefix}="{uri}"' for prefix, uri in Namespaces.PRESENTATION.items())
    return ET.fromstring(f"<root {declarations}>{fragment}</root>")


def qualified(tag: str) -> str:
    """Expand ``a:solidFill`` into its ElementTree ``{uri}solidFill`` form."""
    prefix, local = tag.split(":", 1)
    return f"{{{Namespaces.PRESENTATION[prefix]}}}{local}"
