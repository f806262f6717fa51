"""Tests for SVG serialization and intrinsic size parsing."""

import pytest

from tests.conftest import MALFORMED_SVG, VIEWBOX_ONLY_SVG, WIDE_RED_SVG, ZERO_SIZE_SVG

from geoimage.errors import RenderError
from geoimage.models.svg_document import SvgElement, VectorDocument
from geoimage.svg.parser import parse_svg_size
from geoimage.svg.serializer import fmt, serialize_svg


def test_fmt():
    assert fmt(2.0) == "2"
    assert fmt(7) == "7"
    assert fmt(2.5) == "2.5"
    assert fmt(1 / 3) == "0.333333"
    assert fmt("100%") == "100%"


def test_serialize_minified():
    doc = VectorDocument(
        width=60,
        height=30.5,
        elements=[
            SvgElement(tag="rect", attributes={"x": "0", "y": "0", "width": "100%", "height": "100%"}),
            SvgElement(
                tag="g",
                attributes={"fill": "#222"},
                children=[SvgElement(tag="circle", attributes={"cx": "1", "cy": "2", "r": "3"})],
            ),
        ],
    )
    svg = serialize_svg(doc)
    assert svg == (
        '<svg xmlns="http://www.w3.org/2000/svg" width="60" height="30.5">'
        '<rect x="0" y="0" width="100%" height="100%"/>'
        '<g fill="#222"><circle cx="1" cy="2" r="3"/></g>'
        "</svg>"
    )
    assert "\n" not in svg


def test_serialize_escapes_attributes():
    doc = VectorDocument(width=1, height=1, elements=[SvgElement(tag="rect", attributes={"id": "a<b"})])
    assert 'id="a&lt;b"' in serialize_svg(doc)


def test_parse_width_height():
    assert parse_svg_size(WIDE_RED_SVG) == (100.0, 50.0)


def test_parse_viewbox_fallback():
    assert parse_svg_size(VIEWBOX_ONLY_SVG) == (24.0, 48.0)


def test_parse_unit_suffix():
    svg = '<svg xmlns="http://www.w3.org/2000/svg" width="20px" height="10pt"></svg>'
    assert parse_svg_size(svg) == (20.0, 10.0)


def test_parse_ignores_child_attributes():
    svg = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 8 4"><rect width="99" height="99"/></svg>'
    assert parse_svg_size(svg) == (8.0, 4.0)


def test_parse_reads_truncated_body():
    # Size comes from the root tag; the body is the renderer's problem
    assert parse_svg_size(MALFORMED_SVG) == (10.0, 10.0)


@pytest.mark.parametrize(
    "svg",
    [
        ZERO_SIZE_SVG,
        '<svg width="-4" height="4"></svg>',
        '<svg width="abc" height="4"></svg>',
        '<svg width="10"></svg>',
        '<svg viewBox="0 0 0 0"></svg>',
        "<html></html>",
        "",
    ],
)
def test_parse_degenerate_raises(svg):
    with pytest.raises(RenderError):
        parse_svg_size(svg)
