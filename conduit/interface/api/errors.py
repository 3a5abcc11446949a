"""Mapping of domain errors to HTTP responses.

Every error body has the shape ``{"errors": {field: [messages]}}``; errors
that are not about a field use the key ``body``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from conduit.application.transaction import Transaction
from conduit.domain.error import (
    BadRequestError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)

# starlette.status names this constant differently across versions
UNPROCESSABLE_ENTITY = 422

STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (BadRequestError, status.HTTP_400_BAD_REQUEST),
    (ValidationError, UNPROCESSABLE_ENTITY),
]


def _body(errors: dict[str, list[str]]) -> dict:
    return {"errors": errors}


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error (500 when unmapped)."""
    for error_type, code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def rollback_request(request: Request) -> None:
    """Roll back the unit of work of a request that ends in an error response.

    Handled errors never reach the DI container's scope exit, so the
    transaction would otherwise commit the writes made before the failure.
    """
    container = getattr(request.state, "dishka_container", None)
    if container is None:
        return
    transaction = await container.get(Transaction)
    await transaction.rollback()


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    await rollback_request(request)
    code = status_for(exc)
    if isinstance(exc, ValidationError):
        errors = exc.errors
    else:
        errors = {"body": [getattr(exc, "message", str(exc))]}

    logfire.info(
        "Request failed",
        path=request.url.path,
        status=code,
        error=type(exc).__name__,
    )
    return JSONResponse(status_code=code, content=_body(errors))


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        # Skip the location prefix ("body", "query", "path") and wrapper keys
        loc = [str(part) for part in error.get("loc", ()) if not isinstance(part, int)]
        field = loc[-1] if len(loc) > 1 else "body"
        errors.setdefault(field, []).append(error.get("msg", "is invalid"))
    return JSONResponse(
        status_code=UNPROCESSABLE_ENTITY, content=_body(errors)
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the error handlers on ``app``."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
