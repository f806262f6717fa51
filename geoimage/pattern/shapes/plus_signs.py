"""Plus signs — interlocking crosses on staggered rows."""

from __future__ import annotations

from geoimage.pattern.context import (
    STROKE_COLOR,
    STROKE_OPACITY,
    PatternContext,
    map_range,
    plus_shape,
    translate,
)
from geoimage.pattern.registry import pattern


@pattern(name="plus_signs", description="Interlocking plus signs")
def plus_signs(ctx: PatternContext) -> None:
    square_size = map_range(ctx.hex_val(0), 0, 15, 10, 25)
    plus_size = square_size * 3
    ctx.width = ctx.height = square_size * 12

    i = 0
    for y in range(6):
        for x in range(6):
            val = ctx.hex_val(i)
            dx = 0 if y % 2 == 0 else 1
            style = {
                "fill": ctx.fill_color(val),
                "fill_opacity": ctx.opacity(val),
                "stroke": STROKE_COLOR,
                "stroke_opacity": STROKE_OPACITY,
            }

            tx = x * plus_size - x * square_size + dx * square_size - square_size
            ty = y * plus_size - y * square_size - plus_size / 2
            # Wrapped copies land four plus-widths further along
            tx_wrap = 4 * plus_size - x * square_size + dx * square_size - square_size
            ty_wrap = 4 * plus_size - y * square_size - plus_size / 2

            ctx.add(plus_shape(square_size, transform=translate(tx, ty), **style))
            if x == 0:
                ctx.add(plus_shape(square_size, transform=translate(tx_wrap, ty), **style))
            if y == 0:
                ctx.add(plus_shape(square_size, transform=translate(tx, ty_wrap), **style))
            if x == 0 and y == 0:
                ctx.add(plus_shape(square_size, transform=translate(tx_wrap, ty_wrap), **style))
            i += 1
