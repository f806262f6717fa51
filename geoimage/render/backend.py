"""Process-wide rendering backend.

Lifecycle: initialized once (application startup, or lazily on first
render), never torn down. Initialization is thread-safe and idempotent.
"""

from __future__ import annotations

import logging
import threading
from types import ModuleType

from geoimage.errors import RenderError

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_backend: ModuleType | None = None


def init_backend() -> ModuleType:
    """Load CairoSVG and its native cairo library. Returns the backend module."""
    global _backend
    if _backend is not None:
        return _backend

    with _lock:
        if _backend is None:
            try:
                import cairosvg
            # OSError: cairocffi could not find the native cairo library
            except (ImportError, OSError) as e:
                raise RenderError(f"Rendering backend unavailable: {e}") from e
            _backend = cairosvg
            logger.info(
                "Rendering backend initialized (CairoSVG %s)",
                getattr(cairosvg, "__version__", "unknown"),
            )
    return _backend


def is_initialized() -> bool:
    return _backend is not None
