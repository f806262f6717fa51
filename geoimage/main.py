"""FastAPI app factory."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from geoimage import __version__
from geoimage.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.geoimage_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    from geoimage.pattern.registry import load_builtin_patterns
    from geoimage.render.backend import init_backend

    # Process-wide, init-once; never torn down
    init_backend()
    registry = load_builtin_patterns()
    logger.info("%d patterns registered", registry.count)
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="geoimage",
        description="Deterministic geometric pattern images as SVG or PNG",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    from geoimage.api.errors import register_error_handlers
    from geoimage.api.router import api_router, image_router

    register_error_handlers(app)
    app.include_router(api_router)
    app.include_router(image_router)

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn on the configured bind address."""
    import uvicorn

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.geoimage_log_level.lower(),
    )
