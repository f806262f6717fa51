"""Deterministic geometric pattern generation."""

from geoimage.pattern.context import PatternContext
from geoimage.pattern.generator import PATTERN_ORDER, produce
from geoimage.pattern.registry import get_registry, pattern

__all__ = [
    "PatternContext",
    "PATTERN_ORDER",
    "produce",
    "get_registry",
    "pattern",
]
