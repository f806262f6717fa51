"""Pattern registry — every pattern is a standalone function registered via decorator.

Usage:
    @pattern(name="squares", description="6x6 grid of tinted squares")
    def squares(ctx: PatternContext) -> None:
        ctx.width = ctx.height = size * 6
        ctx.add(rect(...))

Adding a new pattern = creating one module under ``geoimage.pattern.shapes``
with the decorator, then listing its name in ``PATTERN_ORDER``.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from geoimage.pattern.context import PatternContext

logger = logging.getLogger(__name__)

_SHAPES_PACKAGE = "geoimage.pattern.shapes"


@dataclass
class PatternSpec:
    name: str
    fn: Callable[["PatternContext"], None]
    description: str = ""


class PatternRegistry:
    """Singleton registry of all patterns."""

    def __init__(self) -> None:
        self._patterns: dict[str, PatternSpec] = {}

    def register(self, spec: PatternSpec) -> None:
        if spec.name in self._patterns:
            raise ValueError(f"Duplicate pattern name: {spec.name}")
        self._patterns[spec.name] = spec
        logger.debug("Registered pattern %s", spec.name)

    def get(self, name: str) -> PatternSpec:
        return self._patterns[name]

    def all(self) -> list[PatternSpec]:
        return sorted(self._patterns.values(), key=lambda s: s.name)

    def __contains__(self, name: str) -> bool:
        return name in self._patterns

    @property
    def count(self) -> int:
        return len(self._patterns)


# Module-level singleton
_registry = PatternRegistry()


def get_registry() -> PatternRegistry:
    return _registry


def load_builtin_patterns() -> PatternRegistry:
    """Import every module under the shapes package so @pattern decorators fire.

    Safe to call repeatedly: modules already imported are not re-executed.
    """
    package = importlib.import_module(_SHAPES_PACKAGE)
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{_SHAPES_PACKAGE}.{module_name}")
    return _registry


def pattern(*, name: str, description: str = ""):
    """Decorator to register a pattern function."""

    def decorator(fn: Callable[["PatternContext"], None]):
        _registry.register(PatternSpec(name=name, fn=fn, description=description))
        return fn

    return decorator
