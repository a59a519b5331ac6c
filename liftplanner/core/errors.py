"""API error types and the handlers that render them as failure envelopes."""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from liftplanner.schemas.envelope import Failure

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Error reported to the caller; message must be safe to expose."""

    status_code = 500
    code = "internal_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingParameterError(ApiError):
    status_code = 400
    code = "missing_parameter"


class InvalidParameterError(ApiError):
    status_code = 400
    code = "invalid_parameter"


class ForbiddenError(ApiError):
    status_code = 403
    code = "forbidden"


class NotFoundError(ApiError):
    status_code = 404
    code = "not_found"


class StorageError(ApiError):
    """Database failure; the original exception is logged, never returned."""

    status_code = 500
    code = "storage_error"


def failure_response(status_code: int, code: str, message: str) -> JSONResponse:
    body = Failure(error=message, code=code)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    # loc is e.g. ("body", "score") or ("query", "scenarioId")
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    msg = first.get("msg", "invalid value")
    return f"{field}: {msg}" if field else msg


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return failure_response(exc.status_code, exc.code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return failure_response(400, "invalid_request", _describe_validation_error(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return failure_response(exc.status_code, "http_error", str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("%s %s failed", request.method, request.url.path)
        return failure_response(500, "internal_error", "Internal server error")
