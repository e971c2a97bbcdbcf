"""Error Handlers — global exception handlers for the DevConnector API.

Invariants:
    - DevConnectorError → its own wire body ({"errors": [...]} or {"msg": ...})
    - RequestValidationError → {"errors": [{"msg", "field"}]} with status 400
    - Exception (catch-all) → {"msg": "Server error"}, never leaks internal details

Design Decisions:
    - Three-layer handler: domain, validation (Pydantic), catch-all (Exception)
    - Registered from main.py via register_error_handlers
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from devconnector.core.errors import DevConnectorError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register DevConnector domain/infrastructure error handler."""

    @app.exception_handler(DevConnectorError)
    async def domain_error_handler(request: Request, exc: DevConnectorError):
        log = logger.error if exc.http_status >= 500 else logger.info
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"msg": "Server error"},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build the {"errors": [...]} body from Pydantic errors."""
    return {
        "errors": [
            {
                "msg": e["msg"],
                "field": ".".join(str(loc) for loc in e["loc"] if loc != "body"),
            }
            for e in exc.errors()
        ],
    }
