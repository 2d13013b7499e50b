"""
Helpers that turn service results into HTTP responses.

Every body follows one of two shapes::

    {"success": true, "message": ..., "data": ..., ["count": ...]}
    {"success": false, "message": ...}
"""

from typing import Any, Dict, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from ..services.result import Failure, ServiceResult


def success_body(data: Any, message: str, count: Optional[int] = None) -> Dict[str, Any]:
    body = {"success": True, "message": message, "data": jsonable_encoder(data)}
    if count is not None:
        body["count"] = count
    return body


def error_body(message: str) -> Dict[str, Any]:
    return {"success": False, "message": message}


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error_body(message))


def to_response(result: ServiceResult) -> JSONResponse:
    """Map a ``Success`` or ``Failure`` to a JSON response."""
    if isinstance(result, Failure):
        return error_response(result.message, result.status_code)
    return JSONResponse(
        status_code=result.status_code,
        content=success_body(result.data, result.message, result.count),
    )
