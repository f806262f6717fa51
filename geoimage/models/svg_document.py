"""Vector document model produced by the pattern generator."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SvgElement(BaseModel):
    tag: str
    attributes: dict[str, str] = Field(default_factory=dict)
    children: list[SvgElement] = Field(default_factory=list)


class VectorDocument(BaseModel):
    """A generated pattern: intrinsic size plus an element tree.

    Read-only once produced; the raster pipeline only ever sees its markup.
    """

    width: float
    height: float
    pattern: str = ""
    elements: list[SvgElement] = Field(default_factory=list)
