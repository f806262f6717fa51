"""Plaid — horizontal then vertical translucent stripes of varying width."""

from __future__ import annotations

from geoimage.pattern.context import PatternContext, rect
from geoimage.pattern.registry import pattern


@pattern(name="plaid", description="Overlapping horizontal and vertical stripes")
def plaid(ctx: PatternContext) -> None:
    height = 0
    width = 0

    # Horizontal stripes
    for i in range(0, 36, 2):
        height += ctx.hex_val(i) + 5
        val = ctx.hex_val(i + 1)
        strip = val + 5
        ctx.add(rect(0, height, "100%", strip, opacity=ctx.opacity(val), fill=ctx.fill_color(val)))
        height += strip

    # Vertical stripes
    for i in range(0, 36, 2):
        width += ctx.hex_val(i) + 5
        val = ctx.hex_val(i + 1)
        strip = val + 5
        ctx.add(rect(width, 0, strip, "100%", opacity=ctx.opacity(val), fill=ctx.fill_color(val)))
        width += strip

    ctx.width = width
    ctx.height = height
