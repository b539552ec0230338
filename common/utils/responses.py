"""
Standard API response helpers.

Provides consistent response bodies for success and error cases.

Example:
    from common.utils import success_response, error_response

    @router.get("/progress")
    async def list_progress():
        try:
            records = await service.list_records()
        except Exception as e:
            return JSONResponse(
                status_code=500,
                content=error_response("Server error", details=str(e)),
            )
        return success_response(records)
"""

from typing import Any, Optional, Dict


def success_response(data: Any = None) -> Dict[str, Any]:
    """
    Create a standard success response.

    Args:
        data: The response data (can be dict, list, or any serializable type)

    Returns:
        Dictionary with the payload under "data"
    """
    return {"data": data}


def error_response(
    message: str,
    details: Optional[Any] = None,
) -> Dict[str, Any]:
    """
    Create a standard error response.

    Args:
        message: Human-readable error message
        details: Diagnostic detail, usually the underlying exception message

    Returns:
        Dictionary with "error" and, when given, "details"
    """
    response: Dict[str, Any] = {"error": message}

    if details is not None:
        response["details"] = details

    return response
