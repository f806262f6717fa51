"""Concentric circles — ring plus inner dot per cell, tinted independently."""

from __future__ import annotations

from geoimage.pattern.context import PatternContext, circle, map_range
from geoimage.pattern.registry import pattern


@pattern(name="concentric_circles", description="6x6 grid of rings with centre dots")
def concentric_circles(ctx: PatternContext) -> None:
    ring_size = map_range(ctx.hex_val(0), 0, 15, 10, 60)
    stroke_width = ring_size / 5
    cell = ring_size + stroke_width
    ctx.width = ctx.height = cell * 6

    i = 0
    for y in range(6):
        for x in range(6):
            cx = x * cell + cell / 2
            cy = y * cell + cell / 2

            val = ctx.hex_val(i)
            ctx.add(circle(
                cx, cy, ring_size / 2,
                fill="none",
                stroke=ctx.fill_color(val),
                style=f"opacity:{ctx.opacity(val):.6g};stroke-width:{stroke_width:.6g}px",
            ))

            # Inner dot reads the digest backwards
            val = ctx.hex_val(39 - i)
            ctx.add(circle(
                cx, cy, ring_size / 4,
                fill=ctx.fill_color(val),
                fill_opacity=ctx.opacity(val),
            ))
            i += 1
