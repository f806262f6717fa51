"""Translate pipeline errors into HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from geoimage.errors import (
    DegenerateImageError,
    InvalidModeError,
    InvalidSizeError,
    IterationLimitExceeded,
    RenderError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(InvalidModeError)
    async def invalid_mode(request: Request, exc: InvalidModeError) -> JSONResponse:
        logger.warning("%s: %s", request.url.path, exc)
        return JSONResponse(status_code=404, content={"detail": "Not found"})

    @app.exception_handler(InvalidSizeError)
    async def invalid_size(request: Request, exc: InvalidSizeError) -> JSONResponse:
        logger.warning("%s: %s", request.url.path, exc)
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    async def render_failed(request: Request, exc: Exception) -> JSONResponse:
        logger.error("%s: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    for exc_class in (RenderError, DegenerateImageError, IterationLimitExceeded):
        app.add_exception_handler(exc_class, render_failed)
