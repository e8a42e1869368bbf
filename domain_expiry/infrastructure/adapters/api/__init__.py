"""API adapter for HTTP endpoints."""

from .app import create_app
from .models import CheckSuccessResponse, ErrorResponse, HealthResponse, StatusResponse

__all__ = [
    "CheckSuccessResponse",
    "ErrorResponse",
    "HealthResponse",
    "StatusResponse",
    "create_app",
]
