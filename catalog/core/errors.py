"""
Error taxonomy and its translation into the response envelope.
API errors map to 400/404/500; ingestion errors are fatal to an ingestion run.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.core.metrics import API_ERRORS
from catalog.schemas.response import error_response

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Error raised by the service layer and rendered as an error envelope."""

    status_code = 500
    error = "INTERNAL_ERROR"

    def __init__(self, message: str, code: str | None = None, error: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        if error is not None:
            self.error = error


class BadRequestError(APIError):
    status_code = 400
    error = "BAD_REQUEST"


class NotFoundError(APIError):
    status_code = 404
    error = "NOT_FOUND"


class InternalServiceError(APIError):
    """Downstream search service failure (SEARCH_FAILED, STATS_FAILED)."""

    status_code = 500

    def __init__(self, error: str, message: str, code: str = "INTERNAL_ERROR"):
        super().__init__(message, code=code, error=error)


# --- Ingestion ---

class IngestionError(Exception):
    """Fatal condition for an ingestion run."""


class DataFileError(IngestionError):
    """The records file is missing, unreadable or not a JSON array of objects."""


class BatchUploadError(IngestionError):
    def __init__(self, batch_number: int, total_batches: int, start: int, end: int, reason: str):
        super().__init__(
            f"Failed to upload batch {batch_number}/{total_batches} "
            f"(documents {start}-{end}): {reason}"
        )
        self.batch_number = batch_number
        self.total_batches = total_batches
        self.start = start
        self.end = end


class TaskPollError(IngestionError):
    def __init__(self, task_uid: int, state: str, detail: str | None):
        super().__init__(f"Task {task_uid} ended in state {state!r}: {detail or 'no detail'}")
        self.task_uid = task_uid
        self.state = state
        self.detail = detail


# --- FastAPI handlers ---

async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    API_ERRORS.labels(code=exc.code or exc.error).inc()
    if exc.status_code >= 500:
        logger.warning("%s %s failed: %s (%s)", request.method, request.url.path, exc.error, exc.message)
    return error_response(exc.status_code, exc.error, exc.message, exc.code)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unknown routes and wrong methods still answer with the envelope."""
    try:
        error = HTTPStatus(exc.status_code).name
    except ValueError:
        error = "HTTP_ERROR"
    API_ERRORS.labels(code=error).inc()
    response = error_response(exc.status_code, error, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    API_ERRORS.labels(code="INTERNAL_ERROR").inc()
    return error_response(500, "INTERNAL_ERROR", "Internal server error", "INTERNAL_ERROR")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
