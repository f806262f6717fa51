"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    geoimage_env: str = "development"
    geoimage_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["*"]

    # Bind address
    host: str = "0.0.0.0"
    port: int = 3000

    # Raster output
    default_size: int = 128
    max_size: int = 4096  # short side, pixels
    render_dpi: float = 300.0
    max_normalize_passes: int = 64

    # Cache-Control max-age for successful responses (30 days)
    cache_max_age: int = 2592000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
