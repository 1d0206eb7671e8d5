from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status


BAD_REQUEST = "BAD_REQUEST"
UNAUTHORIZED = "UNAUTHORIZED"
NOT_FOUND = "NOT_FOUND"

_STATUS_BY_CODE = {
    BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


class ActionError(HTTPException):
    """An expected action failure with a stable, machine-readable code.

    Rendered by FastAPI as ``{"detail": {"code": ..., "message": ...}}``.
    """

    def __init__(self, code: str, message: str, *, issues: list[dict[str, Any]] | None = None) -> None:
        detail: dict[str, Any] = {"code": code, "message": message}
        if issues is not None:
            detail["issues"] = issues
        headers = {"WWW-Authenticate": "Bearer"} if code == UNAUTHORIZED else None
        super().__init__(status_code=_STATUS_BY_CODE[code], detail=detail, headers=headers)
        self.code = code
        self.message = message
        self.issues = issues or []

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


def not_found(message: str) -> ActionError:
    return ActionError(NOT_FOUND, message)


def unauthorized(message: str = "You must be signed in to perform this action.") -> ActionError:
    return ActionError(UNAUTHORIZED, message)
