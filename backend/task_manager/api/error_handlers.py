"""Error Handlers — global exception handlers for the Task Manager API.

Invariants:
    - TaskManagerError → its http_status with the error text as plain body
    - RequestValidationError (malformed JSON, wrong shape) → 400 with a plain summary
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (TaskManagerError), validation (Pydantic), catch-all (Exception)
    - Plain-text bodies: clients read the error text directly, no envelope
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from fastapi.exceptions import RequestValidationError

from task_manager.core.errors import TaskManagerError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_task_manager_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_task_manager_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(TaskManagerError)
    async def task_manager_error_handler(request: Request, exc: TaskManagerError):
        """Handle all Task Manager domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"TaskManagerError: {exc.message}",
            extra={
                **exc.to_log_extra(),
                "method": request.method,
                "path": request.url.path,
            },
        )
        return PlainTextResponse(exc.to_response(), status_code=exc.http_status)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed bodies and parameters."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"method": request.method, "path": request.url.path},
        )
        return PlainTextResponse(
            _build_validation_error_text(exc),
            status_code=status.HTTP_400_BAD_REQUEST,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            extra={"method": request.method, "path": request.url.path},
            exc_info=True,
        )
        return PlainTextResponse(
            "An unexpected error occurred",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def _build_validation_error_text(exc: RequestValidationError) -> str:
    """One line per failing field: `body.name: Field required`."""
    return "\n".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    )
