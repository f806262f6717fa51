"""Write minified SVG markup from a vector document."""

from __future__ import annotations

from xml.sax.saxutils import quoteattr

from geoimage.models.svg_document import SvgElement, VectorDocument

SVG_NS = "http://www.w3.org/2000/svg"
SVG_MEDIA_TYPE = "image/svg+xml"


def fmt(value: float | int | str) -> str:
    """Compact number formatting for attribute values."""
    if isinstance(value, str):
        return value
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.6g}"


def _serialize_element(elem: SvgElement) -> str:
    attr_str = "".join(f" {k}={quoteattr(v)}" for k, v in elem.attributes.items())
    if not elem.children:
        return f"<{elem.tag}{attr_str}/>"
    inner = "".join(_serialize_element(child) for child in elem.children)
    return f"<{elem.tag}{attr_str}>{inner}</{elem.tag}>"


def serialize_svg(document: VectorDocument) -> str:
    """Generate minified SVG markup: no declaration, no inter-tag whitespace."""
    parts = [
        f'<svg xmlns="{SVG_NS}" width="{fmt(document.width)}" height="{fmt(document.height)}">'
    ]
    parts.extend(_serialize_element(elem) for elem in document.elements)
    parts.append("</svg>")
    return "".join(parts)
