"""Tests for the rasterizer and the rendering backend."""

import pytest

from tests.conftest import MALFORMED_SVG, VIEWBOX_ONLY_SVG, WIDE_RED_SVG, ZERO_SIZE_SVG

from geoimage.errors import InvalidSizeError, RenderError
from geoimage.pattern.generator import produce
from geoimage.render.backend import init_backend, is_initialized
from geoimage.render.rasterizer import compute_zoom, output_dimensions, rasterize
from geoimage.svg.serializer import serialize_svg


def test_backend_init_once():
    first = init_backend()
    assert is_initialized()
    assert init_backend() is first


def test_compute_zoom_short_side():
    assert compute_zoom(100, 50, 128) == pytest.approx(2.56)
    assert compute_zoom(50, 100, 128) == pytest.approx(2.56)


@pytest.mark.parametrize("w,h", [(0, 50), (100, 0), (-1, 10), (float("nan"), 10)])
def test_compute_zoom_degenerate(w, h):
    with pytest.raises(RenderError):
        compute_zoom(w, h, 128)


def test_output_dimensions_never_zero():
    assert output_dimensions(1000, 1, 0.0001) == (1, 1)


def test_rasterize_keeps_aspect_ratio(wide_red_svg):
    buf = rasterize(wide_red_svg, 128)
    assert min(buf.width, buf.height) == 128
    assert (buf.width, buf.height) == (256, 128)


def test_rasterize_fills_pixels(wide_red_svg):
    buf = rasterize(wide_red_svg, 64)
    assert buf.pixel(buf.width // 2, buf.height // 2) == (255, 0, 0, 255)


def test_rasterize_viewbox_document():
    buf = rasterize(VIEWBOX_ONLY_SVG, 30)
    assert (buf.width, buf.height) == (30, 60)


def test_rasterize_zoom_out():
    buf = rasterize(WIDE_RED_SVG, 10)
    assert (buf.width, buf.height) == (20, 10)


def test_rasterize_generated_pattern():
    doc = produce("abc")
    buf = rasterize(serialize_svg(doc), 64)
    assert abs(min(buf.width, buf.height) - 64) <= 1
    assert len(buf) % 4 == 0


@pytest.mark.parametrize("size", [0, -3])
def test_rasterize_rejects_non_positive_size(size):
    with pytest.raises(InvalidSizeError):
        rasterize(WIDE_RED_SVG, size)


def test_rasterize_rejects_oversized():
    with pytest.raises(InvalidSizeError) as exc_info:
        rasterize(WIDE_RED_SVG, 513, max_size=512)
    assert exc_info.value.max_size == 512


def test_invalid_size_is_a_render_error():
    assert issubclass(InvalidSizeError, RenderError)


def test_rasterize_degenerate_document():
    with pytest.raises(RenderError):
        rasterize(ZERO_SIZE_SVG, 64)


def test_rasterize_malformed_document():
    with pytest.raises(RenderError):
        rasterize(MALFORMED_SVG, 64)


def test_rasterize_not_svg():
    with pytest.raises(RenderError):
        rasterize("hello", 64)
