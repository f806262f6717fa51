"""Pattern descriptor — what a single request asks for."""

from __future__ import annotations

import enum
import re

from pydantic import BaseModel, ConfigDict

DEFAULT_IDENTIFIER = "default"
DEFAULT_SIZE = 128

# Unsigned 32-bit integer, optional leading '+', ASCII digits only.
_UINT_RE = re.compile(r"\+?[0-9]+")
_UINT_MAX = 2**32 - 1


class Mode(str, enum.Enum):
    VECTOR = "svg"
    RASTER = "png"
    INVALID = "invalid"

    @classmethod
    def parse(cls, text: str | None) -> Mode:
        if text == "png":
            return cls.RASTER
        if text == "svg":
            return cls.VECTOR
        return cls.INVALID


def parse_size(text: str | None, default: int = DEFAULT_SIZE) -> int:
    """Parse an unsigned pixel size, falling back to ``default`` on any failure."""
    if text is None or not _UINT_RE.fullmatch(text):
        return default
    value = int(text)
    if value > _UINT_MAX:
        return default
    return value


class PatternDescriptor(BaseModel):
    """Identifier, short-side pixel size and output mode. Immutable."""

    model_config = ConfigDict(frozen=True)

    identifier: str = DEFAULT_IDENTIFIER
    size: int = DEFAULT_SIZE
    mode: Mode = Mode.INVALID

    @classmethod
    def from_raw(
        cls,
        identifier: str | None,
        size_text: str | None,
        mode_text: str | None,
        default_size: int = DEFAULT_SIZE,
    ) -> PatternDescriptor:
        """Build a descriptor from raw path segments. Never raises."""
        return cls(
            identifier=identifier or DEFAULT_IDENTIFIER,
            size=parse_size(size_text, default_size),
            mode=Mode.parse(mode_text),
        )
