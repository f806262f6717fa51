"""Squares — a 6x6 checkerboard with per-cell tint."""

from __future__ import annotations

from geoimage.pattern.context import STROKE_COLOR, STROKE_OPACITY, PatternContext, map_range, rect
from geoimage.pattern.registry import pattern


@pattern(name="squares", description="6x6 grid of tinted squares")
def squares(ctx: PatternContext) -> None:
    square_size = map_range(ctx.hex_val(0), 0, 15, 10, 60)
    ctx.width = ctx.height = square_size * 6

    i = 0
    for y in range(6):
        for x in range(6):
            val = ctx.hex_val(i)
            ctx.add(rect(
                x * square_size, y * square_size, square_size, square_size,
                fill=ctx.fill_color(val),
                fill_opacity=ctx.opacity(val),
                stroke=STROKE_COLOR,
                stroke_opacity=STROKE_OPACITY,
            ))
            i += 1
