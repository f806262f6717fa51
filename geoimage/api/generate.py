"""GET /{mode}/{identifier}[/{size}] — pattern image as SVG or PNG.

Handlers are plain ``def``: FastAPI runs them on its worker thread pool, so
each request's CPU-bound render runs to completion on one thread.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from geoimage.config import Settings
from geoimage.dependencies import get_settings
from geoimage.models.descriptor import PatternDescriptor
from geoimage.service import render_pattern

router = APIRouter()


def _respond(mode: str, identifier: str, size: str | None, settings: Settings) -> Response:
    descriptor = PatternDescriptor.from_raw(identifier, size, mode, settings.default_size)
    image = render_pattern(descriptor, settings)
    return Response(
        content=image.content,
        media_type=image.media_type,
        headers={"Cache-Control": f"public, max-age={settings.cache_max_age}"},
    )


@router.get("/{mode}/{identifier}")
def generate(
    mode: str,
    identifier: str,
    settings: Settings = Depends(get_settings),
) -> Response:
    return _respond(mode, identifier, None, settings)


@router.get("/{mode}/{identifier}/{size}")
def generate_sized(
    mode: str,
    identifier: str,
    size: str,
    settings: Settings = Depends(get_settings),
) -> Response:
    return _respond(mode, identifier, size, settings)
