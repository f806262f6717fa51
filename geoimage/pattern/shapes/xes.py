"""Xes — plus signs rotated 45 degrees, offset on alternate columns."""

from __future__ import annotations

from geoimage.pattern.context import PatternContext, map_range, plus_shape, translate
from geoimage.pattern.registry import pattern
from geoimage.svg.serializer import fmt


@pattern(name="xes", description="Rotated crosses on alternating columns")
def xes(ctx: PatternContext) -> None:
    square_size = map_range(ctx.hex_val(0), 0, 15, 10, 25)
    x_size = square_size * 3 * 0.943
    half = x_size / 2
    ctx.width = ctx.height = x_size * 3

    rotate = f"rotate(45,{fmt(half)},{fmt(half)})"

    def place(tx: float, ty: float, style: dict) -> None:
        ctx.add(plus_shape(square_size, transform=f"{translate(tx, ty)} {rotate}", **style))

    i = 0
    for y in range(6):
        for x in range(6):
            val = ctx.hex_val(i)
            shift = 0 if x % 2 == 0 else x_size / 4
            dy = y * x_size - half + shift
            style = {"fill": ctx.fill_color(val), "style": f"opacity:{ctx.opacity(val):.6g}"}

            place(x * half - half, dy - y * half, style)

            # Edge copies so the tile wraps seamlessly
            if x == 0:
                place(6 * half - half, dy - y * half, style)
            if y == 0:
                dy = 6 * x_size - half + shift
                place(x * half - half, dy - 6 * half, style)
            if y == 5:
                place(x * half - half, dy - 11 * half, style)
            if x == 0 and y == 0:
                place(6 * half - half, dy - 6 * half, style)
            i += 1
