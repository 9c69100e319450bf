"""Global exception handlers.

Unhandled exceptions and request validation errors are rendered as
RFC 9457 problem details. Stack traces never reach the client.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from recovery.core.config import get_settings
from recovery.core.container import get_logger
from recovery.core.enums import ErrorCode
from recovery.presentation.middleware.trace_middleware import get_trace_id
from recovery.presentation.routers.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)


def _field_name(loc: tuple[int | str, ...]) -> str:
    # ("body", "email") -> "email"
    parts = [str(p) for p in loc if p != "body"]
    return ".".join(parts) or "body"


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed request bodies as 422 problem details."""
    problem = ProblemDetails(
        type=f"{get_settings().api_base_url}/errors/{ErrorCode.VALIDATION_FAILED.value}",
        title="Validation Failed",
        status=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail="Request body failed validation",
        instance=str(request.url.path),
        errors=[
            ErrorDetail(
                field=_field_name(tuple(err.get("loc", ()))),
                code=str(err.get("type", "invalid")),
                message=str(err.get("msg", "Invalid value")),
            )
            for err in exc.errors()
        ],
        trace_id=get_trace_id(),
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=problem.model_dump(exclude_none=True),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions as 500 problem details."""
    trace_id = getattr(request.state, "trace_id", None)

    get_logger().error(
        "unhandled_exception",
        error=exc,
        trace_id=trace_id,
        request_path=request.url.path,
        request_method=request.method,
    )

    problem = ProblemDetails(
        type=f"{get_settings().api_base_url}/errors/internal-server-error",
        title="Internal Server Error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please contact support with the trace ID.",
        instance=str(request.url.path),
        trace_id=trace_id,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=problem.model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, generic_exception_handler)
