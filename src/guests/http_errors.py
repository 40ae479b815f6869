from fastapi import HTTPException

from src.guests.dtos import (
    GuestAlreadyExistsError,
    GuestError,
    GuestNotFoundError,
    GuestValidationError,
    InvalidTokenError,
    PersistenceError,
)

STATUS_CODES: dict[type[GuestError], int] = {
    GuestNotFoundError: 404,
    InvalidTokenError: 403,
    GuestValidationError: 422,
    GuestAlreadyExistsError: 409,
    PersistenceError: 503,
}

# Heading for the client's error dialog; detail stays the plain message
ERROR_TITLE_HEADER = "X-Error-Title"


def to_http_exception(error: GuestError) -> HTTPException:
    """Map a guest error to the response shown to the user."""
    status_code = STATUS_CODES.get(type(error), 400)
    headers = None
    if isinstance(error, GuestValidationError):
        headers = {ERROR_TITLE_HEADER: error.title}
    return HTTPException(status_code=status_code, detail=error.message, headers=headers)
