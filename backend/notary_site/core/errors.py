"""Application error hierarchy and the FastAPI handlers that render it.

Services raise these; handlers registered in ``main.create_app`` turn them into
``{"error": <code>, "message": <text>, "details": {...}}`` JSON bodies.

    AppError
    ├── ValidationError   400
    ├── UnauthorizedError 401
    ├── ForbiddenError    403
    ├── NotFoundError     404
    ├── ConflictError     409
    └── InternalError     500
"""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "internal_error"

    def __init__(self, message: str = "An unexpected error occurred", details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "validation_error"

    def __init__(self, message: str = "Validation failed", fields: Optional[Dict[str, str]] = None):
        super().__init__(message, {"fields": fields or {}})
        self.fields = fields or {}


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "unauthorized"

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "forbidden"

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message)


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"

    def __init__(self, resource: str = "resource", key: Any = None):
        message = f"{resource} not found"
        details: Dict[str, Any] = {"resource": resource}
        if key is not None:
            message = f"{resource} '{key}' not found"
            details["key"] = key
        super().__init__(message, details)


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    code = "conflict"

    def __init__(self, message: str = "Conflict", field: Optional[str] = None):
        super().__init__(message, {"field": field} if field else None)


class InternalError(AppError):
    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)


def _render(exc: AppError) -> JSONResponse:
    body: Dict[str, Any] = {"error": exc.code, "message": exc.message}
    if exc.details:
        body["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=body)


def _field_name(loc) -> str:
    # drop the "body"/"path"/"query" prefix pydantic puts in front of the field path
    parts = [str(p) for p in loc]
    if len(parts) > 1 and parts[0] in {"body", "path", "query", "header", "cookie"}:
        parts = parts[1:]
    return ".".join(parts) or "body"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return _render(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # api.deps imports this module
    from notary_site.api.deps import has_valid_session, route_requires_session

    route = request.scope.get("route")
    if route is not None and route_requires_session(route):
        if not await run_in_threadpool(has_valid_session, request):
            return _render(UnauthorizedError())

    fields: Dict[str, str] = {}
    for err in exc.errors():
        # a body that is not JSON at all is reported with the byte offset as its loc
        name = "body" if err.get("type") == "json_invalid" else _field_name(err.get("loc", ()))
        fields.setdefault(name, err.get("msg", "invalid value"))
    return _render(ValidationError(fields=fields))


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database failure on %s %s", request.method, request.url.path)
    return _render(InternalError())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
