"""Error Handlers - global exception handlers for the Casework API.

Invariants:
    - CaseworkError → structured JSON with error code, message, severity
    - RequestValidationError → 400 naming the Case/Task and each rejected wire field
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (CaseworkError), validation (Pydantic), catch-all (Exception)
    - Not-found logged at warning: it is a routine outcome, not a failure
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from casework.core.errors import CaseworkError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_casework_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_casework_error_handler(app: FastAPI) -> None:
    """Register Casework domain/infrastructure error handler."""

    @app.exception_handler(CaseworkError)
    async def casework_error_handler(request: Request, exc: CaseworkError):
        """Handle all Casework domain/infrastructure errors."""
        level = (
            logging.WARNING if exc.http_status < 500 else logging.ERROR
        )
        logger.log(
            level,
            f"CaseworkError: {exc.message}",
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
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={
                "error_code": "VALIDATION_ERROR",
                "path": request.url.path,
                "entity": _resource_for(request.url.path),
            },
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc, request.url.path),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


_RESOURCES = {"cases": "Case", "tasks": "Task"}
_LOCATIONS = {"body", "path", "query"}


def _resource_for(path: str) -> str | None:
    """Entity behind an /api/<resource>/... path, if any."""
    parts = path.strip("/").split("/")
    if len(parts) >= 2 and parts[0] == "api":
        return _RESOURCES.get(parts[1])
    return None


def _field_name(loc: tuple) -> str:
    """Wire name of the rejected field: ("body", "dueDateTime") → "dueDateTime"."""
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in _LOCATIONS:
        parts = parts[1:]
    return ".".join(parts)


def _build_validation_error_response(
    exc: RequestValidationError, path: str,
) -> dict:
    """Build structured validation error response."""
    entity = _resource_for(path)
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": f"Invalid {entity} data" if entity else "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "entity": entity,
            "details": [
                {
                    "field": _field_name(e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
