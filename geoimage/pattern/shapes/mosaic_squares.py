"""Mosaic squares — each tile split into four mirrored right triangles."""

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
from geoimage.svg.serializer import fmt


def right_triangle_points(size: float) -> list[float]:
    return [0, 0, size, size, 0, size, 0, 0]


def _triangle(ctx: PatternContext, points: list[float], val: int,
              tx: float, ty: float, sx: int, sy: int) -> None:
    ctx.add(polyline(
        points,
        stroke=STROKE_COLOR,
        stroke_opacity=STROKE_OPACITY,
        fill_opacity=ctx.opacity(val),
        fill=ctx.fill_color(val),
        transform=f"{translate(tx, ty)} scale({fmt(sx)},{fmt(sy)})",
    ))


def _inner_tile(ctx: PatternContext, x: float, y: float, size: float, vals: tuple[int, int]) -> None:
    tri = right_triangle_points(size)
    _triangle(ctx, tri, vals[0], x + size, y, -1, 1)
    _triangle(ctx, tri, vals[0], x + size, y + size * 2, 1, -1)
    _triangle(ctx, tri, vals[1], x + size, y + size * 2, -1, -1)
    _triangle(ctx, tri, vals[1], x + size, y, 1, 1)


def _outer_tile(ctx: PatternContext, x: float, y: float, size: float, val: int) -> None:
    tri = right_triangle_points(size)
    _triangle(ctx, tri, val, x, y + size, 1, -1)
    _triangle(ctx, tri, val, x + size * 2, y + size, -1, -1)
    _triangle(ctx, tri, val, x, y + size, 1, 1)
    _triangle(ctx, tri, val, x + size * 2, y + size, -1, 1)


@pattern(name="mosaic_squares", description="4x4 mosaic of mirrored triangle tiles")
def mosaic_squares(ctx: PatternContext) -> None:
    size = map_range(ctx.hex_val(0), 0, 15, 15, 50)
    ctx.width = ctx.height = size * 8

    i = 0
    for y in range(4):
        for x in range(4):
            ox, oy = x * size * 2, y * size * 2
            # Checkerboard of outer/inner tiles
            if (x % 2 == 0) == (y % 2 == 0):
                _outer_tile(ctx, ox, oy, size, ctx.hex_val(i))
            else:
                _inner_tile(ctx, ox, oy, size, (ctx.hex_val(i), ctx.hex_val(i + 1)))
            i += 1
