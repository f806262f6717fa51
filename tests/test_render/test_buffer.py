"""Tests for PixelBuffer."""

import io

import numpy as np
import pytest
from PIL import Image

from geoimage.render.buffer import PixelBuffer


def test_rejects_wrong_shape():
    with pytest.raises(ValueError):
        PixelBuffer(np.zeros((4, 4, 3), dtype=np.uint8))
    with pytest.raises(ValueError):
        PixelBuffer(np.zeros((4, 4, 4), dtype=np.float32))


def test_dimensions():
    buf = PixelBuffer.blank(5, 3)
    assert buf.width == 5
    assert buf.height == 3
    assert buf.pixel_count == 15
    assert len(buf) == 60
    assert len(buf) % 4 == 0


def test_rgb_is_a_view():
    buf = PixelBuffer.blank(2, 2, (1, 2, 3, 4))
    buf.rgb[...] = 9
    assert buf.pixel(1, 1) == (9, 9, 9, 4)
    assert buf.channel(3)[0, 0] == 4


def test_png_roundtrip_keeps_pixels():
    buf = PixelBuffer.blank(3, 2, (10, 20, 30, 255))
    buf.data[1, 2] = (200, 100, 50, 128)
    png = buf.to_png()
    assert png.startswith(b"\x89PNG")
    image = Image.open(io.BytesIO(png))
    assert image.mode == "RGBA"
    assert image.size == (3, 2)
    np.testing.assert_array_equal(PixelBuffer.from_png(png).data, buf.data)
