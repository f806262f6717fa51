"""Vector document producer — identifier in, deterministic pattern out."""

from __future__ import annotations

import colorsys
import logging

from geoimage.models.svg_document import VectorDocument
from geoimage.pattern.context import PatternContext, map_range, rect
from geoimage.pattern.registry import get_registry, load_builtin_patterns

logger = logging.getLogger(__name__)

BASE_COLOR = "#933c3c"

# Fixed order: the digest picks an index into this tuple, so reordering
# changes every generated image.
PATTERN_ORDER = (
    "plaid",
    "concentric_circles",
    "mosaic_squares",
    "xes",
    "octagons",
    "overlapping_circles",
    "plus_signs",
    "squares",
)


def _hex_to_rgb(color: str) -> tuple[float, float, float]:
    color = color.lstrip("#")
    return tuple(int(color[i:i + 2], 16) / 255 for i in (0, 2, 4))  # type: ignore[return-value]


def background_color(ctx: PatternContext) -> str:
    """Base color with hue and saturation shifted by digest nibbles."""
    hue_offset = map_range(ctx.hex_val(14, 3), 0, 4095, 0, 359)
    sat_offset = ctx.hex_val(17, 1)

    h, l, s = colorsys.rgb_to_hls(*_hex_to_rgb(BASE_COLOR))
    h = ((h * 360 - hue_offset) % 360) / 360
    if sat_offset % 2 == 0:
        s = min(1.0, s + sat_offset / 100)
    else:
        s = max(0.0, s - sat_offset / 100)

    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return f"rgb({round(r * 255)},{round(g * 255)},{round(b * 255)})"


def choose_pattern(ctx: PatternContext) -> str:
    return PATTERN_ORDER[ctx.hex_val(20, 1) % len(PATTERN_ORDER)]


def produce(identifier: str) -> VectorDocument:
    """Generate the vector document for ``identifier``. Never fails."""
    registry = load_builtin_patterns()
    ctx = PatternContext(identifier=identifier)

    name = choose_pattern(ctx)
    ctx.add(rect(0, 0, "100%", "100%", fill=background_color(ctx)))
    registry.get(name).fn(ctx)

    logger.debug(
        "Pattern %s for %r: %gx%g, %d elements",
        name, identifier, ctx.width, ctx.height, len(ctx.elements),
    )
    return VectorDocument(
        width=ctx.width,
        height=ctx.height,
        pattern=name,
        elements=ctx.elements,
    )


def registered_pattern_count() -> int:
    load_builtin_patterns()
    return get_registry().count
