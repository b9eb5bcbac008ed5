"""Error kinds for the CRM API and their mapping to HTTP responses.

Every failure a handler reports on purpose is a `CRMError` carrying one of the
`ErrorKind` members. `status_for` is the only place a kind becomes an HTTP
status; anything that is not a `CRMError` is treated as an internal failure.
"""

import logging
from enum import Enum
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    RATE_LIMITED = "rate_limited"
    UNAVAILABLE = "unavailable"
    INTERNAL = "internal"


def status_for(kind: ErrorKind) -> int:
    match kind:
        case ErrorKind.VALIDATION:
            return status.HTTP_400_BAD_REQUEST
        case ErrorKind.NOT_FOUND:
            return status.HTTP_404_NOT_FOUND
        case ErrorKind.UNAUTHORIZED:
            return status.HTTP_401_UNAUTHORIZED
        case ErrorKind.RATE_LIMITED:
            return status.HTTP_429_TOO_MANY_REQUESTS
        case ErrorKind.UNAVAILABLE:
            return status.HTTP_503_SERVICE_UNAVAILABLE
        case ErrorKind.INTERNAL:
            return status.HTTP_500_INTERNAL_SERVER_ERROR


class CRMError(Exception):
    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, details: Optional[list[dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_body(self) -> dict:
        body: dict[str, Any] = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationFailed(CRMError):
    kind = ErrorKind.VALIDATION

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationFailed":
        return cls(message, details=[{"field": field, "message": message, "type": "value_error"}])


class NotFound(CRMError):
    kind = ErrorKind.NOT_FOUND

    @classmethod
    def entity(cls, name: str) -> "NotFound":
        return cls(f"{name} not found")


class Unauthorized(CRMError):
    kind = ErrorKind.UNAUTHORIZED


class RateLimited(CRMError):
    kind = ErrorKind.RATE_LIMITED


class Unavailable(CRMError):
    kind = ErrorKind.UNAVAILABLE


def validation_details(errors) -> list[dict[str, Any]]:
    """Flatten pydantic error dicts into field/message/type entries."""
    details = []
    for err in errors:
        # Drop the leading "body"/"query" segment FastAPI adds to locations
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        message = err.get("msg", "Invalid value")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        details.append({"field": ".".join(loc), "message": message, "type": err.get("type", "value_error")})
    return details


async def crm_error_handler(request: Request, exc: CRMError) -> JSONResponse:
    if exc.kind is ErrorKind.RATE_LIMITED:
        logger.warning("Rate limit hit on %s from %s", request.url.path, request.client.host if request.client else "?")
    return JSONResponse(status_code=status_for(exc.kind), content=exc.to_body())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = validation_details(exc.errors())
    summary = details[0]["message"] if len(details) == 1 else "Invalid request data"
    return JSONResponse(
        status_code=status_for(ErrorKind.VALIDATION),
        content={"error": summary, "details": details},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("API error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status_for(ErrorKind.INTERNAL),
        content={"error": "Internal server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CRMError, crm_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
