"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ....application.exceptions import DomainCheckError
from .models import CheckSuccessResponse, ErrorResponse, HealthResponse, StatusResponse

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable, Sequence

    from ....domain.entities import DomainExpirationReport

logger = logging.getLogger(__name__)

CHECK_PATH = "/api/check"


class ApiState:
    """Shared state for API endpoints."""

    def __init__(
        self,
        check_func: Callable[[str | None], Awaitable[DomainExpirationReport]],
        version: str = "1.0.0",
        domain_fields: Sequence[str] = ("domain", "domain_name"),
    ) -> None:
        """Initialize API state."""
        self.check_func = check_func
        self.version = version
        self.domain_fields = tuple(domain_fields)


async def _read_json_body(request: Request) -> dict[str, Any]:
    """JSON object body of the request, or an empty dict."""
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


async def extract_domain(request: Request, fields: Sequence[str]) -> str | None:
    """
    Pull the requested domain out of a request.

    POST requests look at the JSON body first and the query string second;
    GET requests only have the query string. The first non-blank string
    found wins.
    """
    candidates: list[Any] = []
    if request.method == "POST":
        body = await _read_json_body(request)
        candidates.extend(body.get(name) for name in fields)
    candidates.extend(request.query_params.get(name) for name in fields)

    return next((v for v in candidates if isinstance(v, str) and v.strip()), None)


def _report_to_response(report: DomainExpirationReport) -> CheckSuccessResponse:
    """Convert a domain report to the API response."""
    return CheckSuccessResponse(
        domain_name=report.domain_name,
        expiration_date=report.expiration_date,
        expiration_date_thai=report.expiration_date_localized,
        message=report.message,
    )


def _error_to_response(error: DomainCheckError) -> ErrorResponse:
    """Convert a check failure to the API error body."""
    return ErrorResponse(
        domain_name=error.domain_name,
        error=error.message,
        searched_domain=error.searched,
        normalized_domain=error.normalized,
    )


def create_app(
    check_func: Callable[[str | None], Awaitable[DomainExpirationReport]],
    version: str = "1.0.0",
    *,
    domain_fields: Sequence[str] = ("domain", "domain_name"),
    webhook_paths: Sequence[str] = (),
    cors_origins: Sequence[str] = ("*",),
    shutdown_hooks: Sequence[Callable[[], Awaitable[None]]] = (),
) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        check_func: Async function that checks one domain.
        version: Application version string.
        domain_fields: Request field names that may carry the domain.
        webhook_paths: Extra paths served by the check handler.
        cors_origins: Allowed CORS origins.
        shutdown_hooks: Async callables run when the server stops.

    Returns:
        Configured FastAPI application.
    """
    state = ApiState(check_func=check_func, version=version, domain_fields=domain_fields)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        logger.info("API server starting...")
        yield
        logger.info("API server shutting down...")
        for hook in shutdown_hooks:
            await hook()

    app = FastAPI(
        title="Domain Expiry API",
        description="Look up when a domain expires, by WHOIS or from a domain inventory database.",
        version=version,
        lifespan=lifespan,
        responses={
            500: {"model": ErrorResponse, "description": "Datastore error"},
        },
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_origins),
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept"],
    )

    @app.get("/", response_model=StatusResponse, tags=["Health"], summary="Service status")
    async def root() -> StatusResponse:
        endpoints = {"check": f"{CHECK_PATH}?domain=example.com"}
        if webhook_paths:
            endpoints["webhook"] = webhook_paths[0]
        return StatusResponse(message="Domain Checker API is running", endpoints=endpoints)

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health check",
        description="Check if the service is healthy and running.",
    )
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="healthy",
            version=state.version,
            timestamp=datetime.now(UTC),
        )

    async def check_domain(request: Request) -> CheckSuccessResponse:
        domain = await extract_domain(request, state.domain_fields)
        report = await state.check_func(domain)
        return _report_to_response(report)

    check_responses: dict[int | str, dict[str, Any]] = {
        400: {"model": ErrorResponse, "description": "Missing or invalid domain"},
        404: {"model": ErrorResponse, "description": "Expiration date not found"},
    }
    for path in (CHECK_PATH, *webhook_paths):
        app.add_api_route(
            path,
            check_domain,
            methods=["GET", "POST"],
            response_model=CheckSuccessResponse,
            tags=["Domains"],
            summary="Check domain expiration",
            responses=check_responses,
        )

    @app.exception_handler(DomainCheckError)
    async def domain_check_error_handler(request: Request, exc: DomainCheckError) -> JSONResponse:  # noqa: ARG001
        """Map check failures to their HTTP status."""
        logger.info("Domain check failed (%s): %s", exc.kind, exc.message)
        return JSONResponse(
            status_code=exc.kind.http_status,
            content=_error_to_response(exc).model_dump(by_alias=True, exclude_none=True),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:  # noqa: ARG001
        """Handle uncaught exceptions."""
        logger.exception("Unhandled exception in API")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": "Internal server error", "detail": str(exc)},
        )

    return app
