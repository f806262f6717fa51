"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from geoimage import __version__
from geoimage.models.responses import HealthResponse
from geoimage.pattern.generator import registered_pattern_count

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        patterns_registered=registered_pattern_count(),
    )
