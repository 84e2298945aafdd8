"""
Error types and FastAPI exception handlers.

Three kinds of failure reach clients:

* ``ContactValidationError`` - one or more fields failed validation
  (HTTP 400, details is a field -> message mapping);
* ``ContactNotFoundError`` - the requested contact id does not exist
  (HTTP 404, details is a message);
* anything else - an unexpected internal error (HTTP 500).  The
  exception text is only exposed when ``DEBUG`` is enabled; the full
  traceback is always logged.

``register_exception_handlers`` wires all of them into an application
so every error body has the ``ErrorResponse`` shape.
"""

import logging
from datetime import datetime
from typing import Dict, Union

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import settings
from contact_book_api.app.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

VALIDATION_ERROR_SUMMARY = "Validation failed for the submitted fields"
NOT_FOUND_SUMMARY = "Contact not found"
INTERNAL_ERROR_SUMMARY = "Internal server error"
INTERNAL_ERROR_DETAILS = "An unexpected error occurred"


class ContactValidationError(Exception):
    """Raised when submitted contact data violates field constraints."""

    def __init__(self, details: Dict[str, str]) -> None:
        super().__init__(VALIDATION_ERROR_SUMMARY)
        self.details = dict(details)


class ContactNotFoundError(Exception):
    """Raised when an operation targets a contact id with no record."""

    def __init__(self, contact_id: int, message: str) -> None:
        super().__init__(message)
        self.contact_id = contact_id
        self.message = message


def error_response(
    status_code: int, error: str, details: Union[Dict[str, str], str]
) -> JSONResponse:
    """Build a ``JSONResponse`` carrying an ``ErrorResponse`` body."""
    body = ErrorResponse(
        timestamp=datetime.now(),
        status=status_code,
        error=error,
        details=details,
    )
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def handle_validation_error(request: Request, exc: ContactValidationError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.details)
    return error_response(status.HTTP_400_BAD_REQUEST, VALIDATION_ERROR_SUMMARY, exc.details)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Map FastAPI's own body/path parsing errors onto the validation shape.

    The field name is the last element of the error location; errors
    that are not tied to a field (e.g. an unparsable body) are reported
    under ``body``.
    """
    details: Dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc", ())
        if len(loc) > 1 and error.get("type") != "json_invalid":
            field_name = str(loc[-1])
        else:
            field_name = "body"
        details.setdefault(field_name, error.get("msg", "Invalid value"))
    logger.info("Rejected %s %s: %s", request.method, request.url.path, details)
    return error_response(status.HTTP_400_BAD_REQUEST, VALIDATION_ERROR_SUMMARY, details)


async def handle_not_found(request: Request, exc: ContactNotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND_SUMMARY, exc.message)


async def handle_internal_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    details = str(exc) if settings.debug else INTERNAL_ERROR_DETAILS
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_SUMMARY, details)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the contact error handlers to ``app``."""
    app.add_exception_handler(ContactValidationError, handle_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(ContactNotFoundError, handle_not_found)
    app.add_exception_handler(Exception, handle_internal_error)
