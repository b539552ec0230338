"""
Custom HTTP exceptions with error codes.

Extends FastAPI's HTTPException with standardized error codes so that the
application's exception handlers can render every failure the same way.

Example:
    from common.utils import BadRequestException

    @router.post("/progress")
    async def create_progress(request: Request):
        if not await request.body():
            raise BadRequestException("Missing request body")
"""

from typing import Optional, Any, Dict
from fastapi import HTTPException


class APIException(HTTPException):
    """
    Base API exception with error code support.

    Provides consistent error response format across the API.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        code: Optional[str] = None,
        details: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Create an API exception.

        Args:
            status_code: HTTP status code
            message: Human-readable error message
            code: Machine-readable error code
            details: Additional error details
            headers: Optional response headers
        """
        self.message = message
        self.code = code
        self.details = details

        super().__init__(
            status_code=status_code,
            detail=message,
            headers=headers,
        )


class BadRequestException(APIException):
    """400 Bad Request - Invalid input or malformed request."""

    def __init__(
        self,
        message: str = "Bad request",
        code: str = "BAD_REQUEST",
        details: Optional[Any] = None,
    ):
        super().__init__(400, message, code, details)


class MethodNotAllowedException(APIException):
    """405 Method Not Allowed - Endpoint does not support the HTTP method."""

    def __init__(
        self,
        message: str = "Method not allowed",
        code: str = "METHOD_NOT_ALLOWED",
        allowed: Optional[list] = None,
    ):
        headers = {"Allow": ", ".join(allowed)} if allowed else None
        super().__init__(405, message, code, headers=headers)


class InternalServerException(APIException):
    """500 Internal Server Error - Unexpected server error."""

    def __init__(
        self,
        message: str = "Server error",
        code: str = "INTERNAL_ERROR",
        details: Optional[Any] = None,
    ):
        super().__init__(500, message, code, details)
