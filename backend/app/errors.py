"""Typed action errors and their JSON envelope."""

# purpose: give every failed action a machine-readable code and a readable message
# status: active

from __future__ import annotations

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

UNAUTHORIZED = "UNAUTHORIZED"
NOT_FOUND = "NOT_FOUND"
VALIDATION = "VALIDATION"

_STATUS_BY_CODE: dict[str, int] = {
    UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    NOT_FOUND: status.HTTP_404_NOT_FOUND,
    VALIDATION: 422,
}

EMPTY_PATCH_MESSAGE = "At least one field must be provided to update."


class ActionError(HTTPException):
    """HTTP error carrying one of the action error codes."""

    def __init__(self, code: str, message: str):
        super().__init__(status_code=_STATUS_BY_CODE[code], detail=message)
        self.code = code
        self.message = message


def unauthorized() -> ActionError:
    return ActionError(UNAUTHORIZED, "You must be signed in to perform this action.")


def not_found(message: str) -> ActionError:
    return ActionError(NOT_FOUND, message)


def validation_error(message: str) -> ActionError:
    return ActionError(VALIDATION, message)


def error_body(code: str, message: str) -> dict:
    return {"success": False, "error": {"code": code, "message": message}}


async def action_error_handler(request: Request, exc: ActionError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.code, exc.message),
        headers=exc.headers,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = first.get("msg", "Invalid input.")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        if location:
            message = f"{location}: {message}"
    else:
        message = "Invalid input."
    return JSONResponse(
        status_code=_STATUS_BY_CODE[VALIDATION],
        content=error_body(VALIDATION, message),
    )
