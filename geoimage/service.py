"""Mode dispatch — turn a pattern descriptor into response content."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from geoimage.config import Settings
from geoimage.errors import InvalidModeError
from geoimage.models.descriptor import Mode, PatternDescriptor
from geoimage.pattern.generator import produce
from geoimage.render.buffer import PNG_MEDIA_TYPE
from geoimage.render.luminance import normalize
from geoimage.render.rasterizer import rasterize
from geoimage.svg.serializer import SVG_MEDIA_TYPE, serialize_svg

logger = logging.getLogger(__name__)


@dataclass
class RenderedImage:
    content: bytes | str
    media_type: str


def render_pattern(descriptor: PatternDescriptor, settings: Settings) -> RenderedImage:
    """Run the pipeline for one request.

    Vector mode returns markup directly. Raster mode rasterizes, normalizes
    luminance and encodes PNG. Any failure propagates; no partial image.
    """
    if descriptor.mode is Mode.INVALID:
        raise InvalidModeError()

    start = time.perf_counter()
    svg = serialize_svg(produce(descriptor.identifier))

    if descriptor.mode is Mode.VECTOR:
        result = RenderedImage(content=svg, media_type=SVG_MEDIA_TYPE)
    else:
        buffer = rasterize(
            svg,
            descriptor.size,
            max_size=settings.max_size,
            dpi=settings.render_dpi,
        )
        normalize(buffer, max_passes=settings.max_normalize_passes)
        result = RenderedImage(content=buffer.to_png(), media_type=PNG_MEDIA_TYPE)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Rendered %s %r (size %d) in %.1fms",
        descriptor.mode.value, descriptor.identifier, descriptor.size, elapsed,
    )
    return result
