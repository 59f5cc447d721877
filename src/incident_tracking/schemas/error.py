"""Error envelope returned by every failed request.

    {"error": {"code": "not_found", "message": "Incident with id 7 not found"}}

``code`` is one of ErrorCode so clients can branch on it; ``message`` is for people.
"""

from typing import Literal

from pydantic import BaseModel

ErrorCode = Literal["not_found", "invalid_page_size", "domain_error", "internal_error"]


class ErrorDetail(BaseModel):
    code: ErrorCode
    message: str


class ErrorResponse(BaseModel):
    error: ErrorDetail


def error_body(code: ErrorCode, message: str) -> dict[str, object]:
    """Serialize an error envelope for a JSONResponse."""
    return ErrorResponse(error=ErrorDetail(code=code, message=message)).model_dump()
