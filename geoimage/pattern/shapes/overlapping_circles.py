"""Overlapping circles — large circles spaced by their radius, wrapped at the edges."""

from __future__ import annotations

from geoimage.pattern.context import PatternContext, circle, map_range
from geoimage.pattern.registry import pattern


@pattern(name="overlapping_circles", description="Circles overlapping by half a diameter")
def overlapping_circles(ctx: PatternContext) -> None:
    diameter = map_range(ctx.hex_val(0), 0, 15, 25, 200)
    radius = diameter / 2
    ctx.width = ctx.height = radius * 6

    i = 0
    for y in range(6):
        for x in range(6):
            val = ctx.hex_val(i)
            style = {"fill": ctx.fill_color(val), "style": f"opacity:{ctx.opacity(val):.6g}"}

            ctx.add(circle(x * radius, y * radius, radius, **style))

            # Repeat along the far edges so the tile wraps seamlessly
            if x == 0:
                ctx.add(circle(6 * radius, y * radius, radius, **style))
            if y == 0:
                ctx.add(circle(x * radius, 6 * radius, radius, **style))
            if x == 0 and y == 0:
                ctx.add(circle(6 * radius, 6 * radius, radius, **style))
            i += 1
