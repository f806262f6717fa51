"""Octagons — a tiled grid of clipped-corner squares."""

from __future__ import annotations

from geoimage.pattern.context import (
    STROKE_COLOR,
    STROKE_OPACITY,
    PatternContext,
    map_range,
    polyline,
    translate,
)
from geoimage.pattern.registry import pattern


def octagon_points(size: float) -> list[float]:
    c = size * 0.33
    return [c, 0, size - c, 0, size, c, size, size - c,
            size - c, size, c, size, 0, size - c, 0, c, c, 0]


@pattern(name="octagons", description="6x6 grid of octagons")
def octagons(ctx: PatternContext) -> None:
    square_size = map_range(ctx.hex_val(0), 0, 15, 10, 60)
    tile = octagon_points(square_size)
    ctx.width = ctx.height = square_size * 6

    i = 0
    for y in range(6):
        for x in range(6):
            val = ctx.hex_val(i)
            ctx.add(polyline(
                tile,
                fill=ctx.fill_color(val),
                fill_opacity=ctx.opacity(val),
                stroke=STROKE_COLOR,
                stroke_opacity=STROKE_OPACITY,
                transform=translate(x * square_size, y * square_size),
            ))
            i += 1
