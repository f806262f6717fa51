"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from geoimage.render.buffer import PixelBuffer


# 2:1 landscape document, solid red
WIDE_RED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="50">
  <rect x="0" y="0" width="100" height="50" fill="#ff0000"/>
</svg>'''

# Size from viewBox only
VIEWBOX_ONLY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 48">
  <circle cx="12" cy="24" r="10" fill="#4ECDC4"/>
</svg>'''

ZERO_SIZE_SVG = '<svg xmlns="http://www.w3.org/2000/svg" width="0" height="0"></svg>'

# Root element is fine, body is truncated XML
MALFORMED_SVG = '<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10"><rect x="0"'


def solid_buffer(value: int, width: int = 4, height: int = 4, alpha: int = 255) -> PixelBuffer:
    """Uniform grey buffer."""
    return PixelBuffer.blank(width, height, (value, value, value, alpha))


@pytest.fixture
def wide_red_svg() -> str:
    return WIDE_RED_SVG


@pytest.fixture
def dark_buffer() -> PixelBuffer:
    return solid_buffer(40)


@pytest.fixture
def random_dark_buffer() -> PixelBuffer:
    rng = np.random.default_rng(1234)
    data = rng.integers(10, 60, size=(16, 16, 4), dtype=np.uint8)
    data[..., 3] = rng.integers(0, 256, size=(16, 16), dtype=np.uint8)
    return PixelBuffer(data)
