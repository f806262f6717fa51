"""API response models."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    patterns_registered: int = 0


class ErrorResponse(BaseModel):
    detail: str
