from __future__ import annotations

from typing import Any

from fastapi.responses import JSONResponse

INVALID_USER_ID = "Invalid user ID format"
USER_NOT_FOUND = "User not found or underage"
INTERNAL_ERROR = "Internal server error"


def error_payload(message: str, details: dict[str, Any] | None = None) -> dict[str, Any]:
    payload: dict[str, Any] = {"error": message}
    if details is not None:
        payload["details"] = details
    return payload


def err(message: str, status: int, details: dict[str, Any] | None = None, headers: dict[str, str] | None = None):
    return JSONResponse(status_code=status, content=error_payload(message, details), headers=headers)
