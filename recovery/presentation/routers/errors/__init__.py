"""RFC 9457 problem-details error responses.

Exports:
    ErrorDetail, ProblemDetails: response schemas
    ErrorResponseBuilder: DomainError -> JSONResponse
    register_exception_handlers: install global handlers on the app
"""

from recovery.presentation.routers.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from recovery.presentation.routers.errors.exception_handlers import (
    register_exception_handlers,
)
from recovery.presentation.routers.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]
