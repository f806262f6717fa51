"""Master routers — meta endpoints under /api, pattern images at the root."""

from __future__ import annotations

from fastapi import APIRouter

from geoimage.api import generate, health

api_router = APIRouter(prefix="/api")
api_router.include_router(health.router)

# Catch-all /{mode}/{identifier} routes; must be mounted after api_router.
image_router = APIRouter()
image_router.include_router(generate.router)
