from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from contacts_api.core.logging_setup import logger


class ContactsError(Exception):
    """Base class for errors surfaced by the contacts service."""


class ContactNotFoundError(ContactsError):
    def __init__(self, contact_id: int) -> None:
        super().__init__(f"Contact {contact_id} not found")
        self.contact_id = contact_id


class StoreError(ContactsError):
    """The database rejected or failed an operation; carries the driver message."""

    def __init__(self, message: str, *, operation: str = "Failed retrieving contact") -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "invalid request"


def register_exception_handlers(application: FastAPI) -> None:
    @application.exception_handler(ContactNotFoundError)
    async def contact_not_found_handler(_: Request, exc: ContactNotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"status": "failed", "message": "Failed to retrieve contact with this ID"},
        )

    @application.exception_handler(StoreError)
    async def store_error_handler(_: Request, exc: StoreError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"status": exc.operation, "error": exc.message},
        )

    @application.exception_handler(RequestValidationError)
    async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
        if any(error.get("loc") and error["loc"][0] == "path" for error in exc.errors()):
            label = "Failed to cast id string to int"
        else:
            label = "Failed payload"
        message = _validation_message(exc)
        logger.info("%s: %s", label, message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"status": label, "error": message},
        )

    @application.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            message = f"The specified route {request.url.path} not found"
        else:
            message = str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"status": "failed", "message": message},
            headers=getattr(exc, "headers", None),
        )
