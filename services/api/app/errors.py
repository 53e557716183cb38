"""HTTP error handling for the API service.

Route handlers raise `ApiError` with a client-safe message. The handlers
registered by `register_exception_handlers` turn every failure into the
error envelope:

    {"message": "<human readable>", "statusCode": <int>}

The underlying cause (I/O errors, stack traces) is logged, never returned.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .datastore import StoreNotInitializedError

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A failure with a status code and a message that is safe to show clients."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"message": message, "statusCode": status_code},
    )


async def _api_error(request: Request, exc: ApiError):
    cause = exc.__cause__
    if cause is not None:
        logger.error("%s %s failed: %s (cause: %r)", request.method, request.url.path, exc.message, cause)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message)


async def _store_not_initialized(request: Request, exc: StoreNotInitializedError):
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return error_response(500, "record store not initialized")


async def _validation_error(request: Request, exc: RequestValidationError):
    logger.info("%s %s invalid request: %s", request.method, request.url.path, exc.errors())
    return error_response(400, "invalid request")


async def _http_error(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


async def _unhandled(request: Request, exc: Exception):
    logger.exception("%s %s raised an unhandled error", request.method, request.url.path)
    return error_response(500, "internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error)
    app.add_exception_handler(StoreNotInitializedError, _store_not_initialized)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(Exception, _unhandled)
