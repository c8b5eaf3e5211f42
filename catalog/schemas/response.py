"""
Response envelope - every API answer shares one JSON shape.
Success: {success, message, data?, timestamp}. Error: {success, error, message, code?, timestamp}.
"""

from datetime import datetime, timezone
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field


def _now() -> datetime:
    return datetime.now(timezone.utc)


class APIResponse(BaseModel):
    success: bool = True
    message: str
    data: Any = None
    timestamp: datetime = Field(default_factory=_now)


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    message: str
    code: str | None = None
    timestamp: datetime = Field(default_factory=_now)


def success_response(message: str, data: Any = None, status_code: int = 200) -> JSONResponse:
    """Wrap ``data`` in the success envelope. ``data`` is omitted when None."""
    body = jsonable_encoder(APIResponse(message=message, data=data))
    if body.get("data") is None:
        body.pop("data", None)
    return JSONResponse(status_code=status_code, content=body)


def error_response(status_code: int, error: str, message: str, code: str | None = None) -> JSONResponse:
    body = jsonable_encoder(ErrorResponse(error=error, message=message, code=code))
    if body.get("code") is None:
        body.pop("code", None)
    return JSONResponse(status_code=status_code, content=body)
