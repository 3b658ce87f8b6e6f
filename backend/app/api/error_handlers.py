"""Error Handlers: global exception handlers for the catalog API.

Invariants:
    - Every error body has the ActionResult shape {status, message[, error]},
      the same contract the mutation endpoints return
    - RequestValidationError (path/query parsing) → 400 keyed by parameter name
    - Exception (catch-all) → 500 UnexpectedError, never leaks internal details

Design Decisions:
    - Handlers convert to CatalogError and render through ActionResult.from_error,
      so status codes come from the error taxonomy alone
    - Mutation actions already return ActionResults; these handlers cover read
      routes and parameter parsing
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.action_result import ActionResult
from app.core.errors import CatalogError, ErrorContext, UnexpectedError, ValidationError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"{exc.code}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "resource_id": exc.context.resource_id,
            },
        )
        return _render(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Invalid request parameters: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return _render(ValidationError(_parameter_errors(exc)))

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception: {exc}",
            extra={"error_code": "UNEXPECTED_ERROR", "path": request.url.path},
            exc_info=True,
        )
        return _render(UnexpectedError(
            f"{request.method} {request.url.path}",
            ErrorContext(debug_info={"exception": type(exc).__name__}),
        ))


def _render(exc: CatalogError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.http_status,
        content=ActionResult.from_error(exc).to_dict(),
    )


def _parameter_errors(exc: RequestValidationError) -> dict[str, str]:
    """{parameter: message}; the innermost loc names the parameter."""
    errors: dict[str, str] = {}
    for err in exc.errors():
        key = str(err["loc"][-1]) if err["loc"] else "general"
        errors.setdefault(key, err["msg"])
    return errors
