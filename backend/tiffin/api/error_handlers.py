"""Error Handlers — global exception handlers for anything that escapes a route.

Services already convert their failures to envelopes, so these only fire for
errors raised outside a service call (malformed JSON, dependency setup, bugs).

Invariants:
    - TiffinError → its own to_response() body and http_status
    - RequestValidationError → 400 with the same field-issue shape services produce
    - Exception (catch-all) → serverError body; stack only when settings allow it

Design Decisions:
    - Three-layer handler: domain (TiffinError), validation (Pydantic), catch-all (Exception)
    - Kept out of main.py so the app module only wires things together
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tiffin.config import get_settings
from tiffin.core.envelope import Envelope
from tiffin.core.errors import InputValidationError, TiffinError
from tiffin.schemas.common import issues_from

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_tiffin_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_tiffin_error_handler(app: FastAPI) -> None:

    @app.exception_handler(TiffinError)
    async def tiffin_error_handler(request: Request, exc: TiffinError):
        log = logger.warning if exc.is_client_error else logger.error
        log(
            f"TiffinError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        error = InputValidationError("Invalid request body", issues_from(exc))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
            exc_info=True,
        )
        envelope = Envelope.server_error(exc, get_settings().expose_stack_traces)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=envelope.body,
        )
