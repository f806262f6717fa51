"""Rasterizer — vector markup to an RGBA pixel buffer at a requested size.

The requested size is the short side of the output. The long side scales by
the same zoom factor, so the aspect ratio is kept and nothing is cropped.
"""

from __future__ import annotations

import logging
import math

from geoimage.errors import InvalidSizeError, RenderError
from geoimage.render.backend import init_backend
from geoimage.render.buffer import PixelBuffer
from geoimage.svg.parser import parse_svg_size

logger = logging.getLogger(__name__)

# Density hint for unit conversion inside the document; keeps
# physically-sized content sharp when zooming out.
DEFAULT_DPI = 300.0


def compute_zoom(width: float, height: float, target_size: int) -> float:
    """Scale that maps the shorter intrinsic side onto ``target_size`` pixels."""
    short_side = min(width, height)
    if not math.isfinite(short_side) or short_side <= 0:
        raise RenderError(f"Degenerate intrinsic size {width}x{height}")
    return target_size / short_side


def output_dimensions(width: float, height: float, zoom: float) -> tuple[int, int]:
    return max(1, round(width * zoom)), max(1, round(height * zoom))


def rasterize(
    svg_text: str,
    target_size: int,
    *,
    max_size: int | None = None,
    dpi: float = DEFAULT_DPI,
) -> PixelBuffer:
    """Render ``svg_text`` so its shorter side is ``target_size`` pixels.

    Raises:
        InvalidSizeError: target_size below 1 or above max_size.
        RenderError: unparsable document, degenerate size, or backend failure.
    """
    if target_size < 1 or (max_size is not None and target_size > max_size):
        raise InvalidSizeError(target_size, max_size)

    width, height = parse_svg_size(svg_text)
    zoom = compute_zoom(width, height, target_size)
    out_w, out_h = output_dimensions(width, height, zoom)

    backend = init_backend()
    try:
        png_data = backend.svg2png(
            bytestring=svg_text.encode("utf-8"),
            dpi=dpi,
            output_width=out_w,
            output_height=out_h,
        )
    except Exception as e:
        raise RenderError(f"Failed to render SVG: {e}") from e

    if not png_data:
        raise RenderError("Renderer produced no output")

    buffer = PixelBuffer.from_png(png_data)
    logger.debug(
        "Rasterized %gx%g at zoom %.4f -> %dx%d",
        width, height, zoom, buffer.width, buffer.height,
    )
    return buffer
