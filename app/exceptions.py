# =============================================================================
# app/exceptions.py - Error Variants, Normalizer and Responder
# =============================================================================
# Centralized error handling for the API.
#
# Every error leaves the service as the same envelope:
#   {"success": false, "message": "...", "stack"?: "...", "errors"?: ...}
# stack/errors are only included outside production.
#
# Flow:
#   raise SomeError  ->  exception handler / ErrorBoundaryMiddleware
#                    ->  normalize_error()  ->  error_response()
# =============================================================================

import logging
import traceback
from dataclasses import dataclass
from typing import Any

from bson.errors import InvalidId
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from pymongo.errors import DuplicateKeyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import Receive, Scope, Send
from starlette.websockets import WebSocketClose

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR = 500
GENERIC_ERROR_MESSAGE = "Something went wrong"
REQUEST_LOCATIONS = ("body", "query", "path", "header", "cookie")


class PlayerDexException(Exception):
    """
    Base exception for operational errors.

    Operational errors are expected conditions (not found, bad input,
    conflicts, bad credentials) with a status code and a message that is
    safe to send to the client. Raise a subclass from a service or route
    and the error pipeline turns it into the JSON envelope.
    """

    is_operational = True

    def __init__(
        self,
        message: str,
        status_code: int = INTERNAL_SERVER_ERROR,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


# =============================================================================
# Error Variants
# =============================================================================

class NotFoundError(PlayerDexException):
    """Raised when a resource or route doesn't exist."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


class ValidationFailedError(PlayerDexException):
    """
    Raised when one or more fields fail validation.

    Schema checks are done by pydantic at the request boundary; raise this
    from a service for rules a schema can't express.
    """

    def __init__(self, fields: dict[str, str]):
        message = "; ".join(fields.values()) if fields else "Validation failed"
        super().__init__(message, status_code=400, details=fields)
        self.fields = fields


class InvalidIdentifierError(PlayerDexException):
    """Raised when an identifier can't be cast to the store's id type."""

    def __init__(self, field: str, value: Any):
        super().__init__(f"Invalid value for {field}: {value}", status_code=400)
        self.field = field
        self.value = value


class ConflictError(PlayerDexException):
    """Raised when a write violates a uniqueness constraint."""

    def __init__(self, fields: dict[str, Any]):
        names = ", ".join(fields) if fields else "field"
        super().__init__(f"Duplicate value for {names}.", status_code=409, details=fields)
        self.fields = fields


class UnauthorizedError(PlayerDexException):
    """Raised when credentials or tokens are missing or invalid."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, status_code=401)


class InternalError(PlayerDexException):
    """
    Raised for failures that indicate a bug or broken dependency.

    Nothing in the API raises it today; unexpected exceptions are already
    answered as non-operational 500s. Raise it to replace a raw error
    message with a safe one.
    """

    is_operational = False

    def __init__(self, message: str = GENERIC_ERROR_MESSAGE):
        super().__init__(message, status_code=INTERNAL_SERVER_ERROR)


# =============================================================================
# Normalizer
# =============================================================================

@dataclass(frozen=True)
class NormalizedError:
    status_code: int
    message: str
    is_operational: bool


def _format_validation_errors(errors: list[dict[str, Any]]) -> list[str]:
    messages = []
    for error in errors:
        loc = list(error.get("loc", ()))
        # Request errors are prefixed with where the value came from
        if loc and loc[0] in REQUEST_LOCATIONS:
            loc = loc[1:]
        # Malformed JSON reports the decode position, not a field
        if error.get("type") == "json_invalid":
            loc = [part for part in loc if not isinstance(part, int)]
        prefix = ".".join(str(part) for part in loc)
        messages.append(f"{prefix}: {error['msg']}" if prefix else error["msg"])
    return messages


def normalize_error(exc: BaseException) -> NormalizedError:
    """
    Map any raised error to (status_code, message, is_operational).

    Classification order, first match wins:
    1. PlayerDexException - passed through
    2. Request/model validation errors - 400, field messages joined by "; "
    3. Malformed ObjectId - 400
    4. Duplicate key - 409 naming the conflicting field(s)
    5. Framework HTTP errors - their own status, operational below 500
    6. Anything else - its status_code attribute or 500, non-operational
    """
    if isinstance(exc, PlayerDexException):
        return NormalizedError(exc.status_code, exc.message, exc.is_operational)

    if isinstance(exc, (RequestValidationError, ValidationError)):
        messages = _format_validation_errors(exc.errors())
        return NormalizedError(
            400,
            "; ".join(messages) if messages else "Validation failed",
            True,
        )

    if isinstance(exc, InvalidId):
        return NormalizedError(400, f"Invalid value for id: {exc}", True)

    if isinstance(exc, DuplicateKeyError):
        key_value = (exc.details or {}).get("keyValue") or {}
        field = ", ".join(key_value) if key_value else "field"
        return NormalizedError(409, f"Duplicate value for {field}.", True)

    if isinstance(exc, StarletteHTTPException):
        return NormalizedError(exc.status_code, str(exc.detail), exc.status_code < 500)

    status_code = getattr(exc, "status_code", None)
    if not isinstance(status_code, int):
        status_code = INTERNAL_SERVER_ERROR
    return NormalizedError(status_code, str(exc) or GENERIC_ERROR_MESSAGE, False)


def _error_details(exc: BaseException) -> Any:
    if isinstance(exc, PlayerDexException):
        return exc.details
    if isinstance(exc, (RequestValidationError, ValidationError)):
        return exc.errors()
    if isinstance(exc, DuplicateKeyError):
        return (exc.details or {}).get("keyValue")
    errors = getattr(exc, "errors", None)
    return None if callable(errors) else errors


# =============================================================================
# Responder
# =============================================================================

def build_error_payload(exc: BaseException, normalized: NormalizedError, production: bool) -> dict[str, Any]:
    """Build the envelope; stack and errors are only added outside production."""
    payload: dict[str, Any] = {
        "success": False,
        "message": normalized.message,
    }

    if not production:
        if exc.__traceback__ is not None:
            payload["stack"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        details = _error_details(exc)
        if details:
            payload["errors"] = jsonable_encoder(details, custom_encoder={BaseException: str})

    return payload


def error_response(request: Request, exc: BaseException) -> JSONResponse:
    """
    Normalize, log and respond. This is the end of the error pipeline;
    nothing is forwarded after it.
    """
    normalized = normalize_error(exc)
    settings = request.app.state.settings
    payload = build_error_payload(exc, normalized, production=settings.is_production)

    if normalized.is_operational:
        logger.warning(f"[Operational] {normalized.status_code} {normalized.message}")
    else:
        logger.error(
            f"[Error] {normalized.status_code} {normalized.message}",
            exc_info=(type(exc), exc, exc.__traceback__),
        )

    headers = getattr(exc, "headers", None)
    return JSONResponse(status_code=normalized.status_code, content=payload, headers=headers)


async def handle_error(request: Request, exc: Exception) -> JSONResponse:
    """Exception handler registered for every class the framework dispatches."""
    return error_response(request, exc)


# =============================================================================
# Not-Found Interceptor
# =============================================================================

async def route_not_found(scope: Scope, receive: Receive, send: Send) -> None:
    """
    Router default app: only reached when no route matched.

    Raises instead of responding so unmatched routes go through the same
    handlers as every other error.
    """
    if scope["type"] != "http":
        await WebSocketClose()(scope, receive, send)
        return

    path = scope["path"]
    query = scope.get("query_string", b"").decode("latin-1")
    if query:
        path = f"{path}?{query}"
    raise NotFoundError(f"Resource not found: {scope['method']} {path}")
