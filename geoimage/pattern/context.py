"""PatternContext — the mutable drawing state a pattern function fills in.

A pattern reads nibbles from the identifier digest, sets the tile size and
appends elements. The generator wraps the result into a VectorDocument.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field

from geoimage.models.svg_document import SvgElement
from geoimage.svg.serializer import fmt

FILL_COLOR_DARK = "#222"
FILL_COLOR_LIGHT = "#ddd"
STROKE_COLOR = "#000"
STROKE_OPACITY = 0.02
OPACITY_MIN = 0.02
OPACITY_MAX = 0.15


def seed_for(identifier: str) -> str:
    """SHA-1 hex digest of the identifier; 40 nibbles of pattern entropy."""
    return hashlib.sha1(identifier.encode("utf-8")).hexdigest()


def map_range(value: float, v_min: float, v_max: float, d_min: float, d_max: float) -> float:
    """Linearly map ``value`` from [v_min, v_max] onto [d_min, d_max]."""
    return (value - v_min) * (d_max - d_min) / (v_max - v_min) + d_min


@dataclass
class PatternContext:
    identifier: str
    seed: str = ""
    width: float = 0.0
    height: float = 0.0
    elements: list[SvgElement] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.seed:
            self.seed = seed_for(self.identifier)

    def hex_val(self, index: int, length: int = 1) -> int:
        """Integer value of ``length`` hex digits starting at ``index``."""
        return int(self.seed[index:index + length], 16)

    @staticmethod
    def opacity(val: int) -> float:
        return map_range(val, 0, 15, OPACITY_MIN, OPACITY_MAX)

    @staticmethod
    def fill_color(val: int) -> str:
        return FILL_COLOR_LIGHT if val % 2 == 0 else FILL_COLOR_DARK

    def add(self, elem: SvgElement) -> None:
        self.elements.append(elem)


# ── Element builders ──

def _attrs(**kwargs: float | int | str | None) -> dict[str, str]:
    # Underscores in keywords become hyphens (fill_opacity -> fill-opacity).
    return {k.replace("_", "-"): fmt(v) for k, v in kwargs.items() if v is not None}


def rect(x: float | str, y: float | str, width: float | str, height: float | str, **style) -> SvgElement:
    return SvgElement(tag="rect", attributes=_attrs(x=x, y=y, width=width, height=height, **style))


def circle(cx: float, cy: float, r: float, **style) -> SvgElement:
    return SvgElement(tag="circle", attributes=_attrs(cx=cx, cy=cy, r=r, **style))


def polyline(points: list[float], **style) -> SvgElement:
    return SvgElement(
        tag="polyline",
        attributes=_attrs(points=",".join(fmt(p) for p in points), **style),
    )


def group(children: list[SvgElement], **style) -> SvgElement:
    return SvgElement(tag="g", attributes=_attrs(**style), children=children)


def translate(x: float, y: float) -> str:
    return f"translate({fmt(x)},{fmt(y)})"


def plus_shape(size: float, **style) -> SvgElement:
    """Plus sign made of two overlapping bars; ``size`` is the bar width."""
    return group(
        [rect(size, 0, size, size * 3), rect(0, size, size * 3, size)],
        **style,
    )
