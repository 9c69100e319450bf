"""Build RFC 9457 responses from recovery domain errors."""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from recovery.core.config import get_settings
from recovery.core.enums import ErrorCode
from recovery.core.errors import DomainError
from recovery.domain.errors import PasswordPolicyViolationError
from recovery.presentation.middleware.trace_middleware import get_trace_id
from recovery.presentation.routers.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

_STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.ACCOUNT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TOKEN_INVALID_OR_EXPIRED: status.HTTP_404_NOT_FOUND,
    ErrorCode.PASSWORD_POLICY_VIOLATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.VALIDATION_FAILED: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.EMAIL_DELIVERY_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.PERSISTENCE_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.PERSISTENCE_INCONSISTENT: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_TITLE_BY_CODE: dict[ErrorCode, str] = {
    ErrorCode.ACCOUNT_NOT_FOUND: "Account Not Found",
    ErrorCode.TOKEN_INVALID_OR_EXPIRED: "Invalid Or Expired Token",
    ErrorCode.PASSWORD_POLICY_VIOLATION: "Password Policy Violation",
    ErrorCode.VALIDATION_FAILED: "Validation Failed",
    ErrorCode.EMAIL_DELIVERY_FAILED: "Email Delivery Failed",
    ErrorCode.PERSISTENCE_FAILED: "Internal Server Error",
    ErrorCode.PERSISTENCE_INCONSISTENT: "Internal Server Error",
}

# Storage failures answer with a generic detail; the message stays in the logs.
_OPAQUE_CODES = frozenset(
    {ErrorCode.PERSISTENCE_FAILED, ErrorCode.PERSISTENCE_INCONSISTENT}
)
_GENERIC_SERVER_DETAIL = (
    "An unexpected error occurred. Please contact support with the trace ID."
)

_FIELD_ERROR_CODES: dict[str, str] = {
    "min_length": "password_too_short",
}


class ErrorResponseBuilder:
    """Convert DomainError values into problem-details JSON responses.

    Example:
        >>> match await service.redeem(token, password):
        ...     case Failure(error=error):
        ...         return ErrorResponseBuilder.from_domain_error(error, request)
    """

    @staticmethod
    def from_domain_error(error: DomainError, request: Request) -> JSONResponse:
        status_code = ErrorResponseBuilder.get_status_code(error.code)
        detail = (
            _GENERIC_SERVER_DETAIL if error.code in _OPAQUE_CODES else error.message
        )

        problem = ProblemDetails(
            type=f"{get_settings().api_base_url}/errors/{error.code.value}",
            title=_TITLE_BY_CODE.get(error.code, "Internal Server Error"),
            status=status_code,
            detail=detail,
            instance=str(request.url.path),
            trace_id=get_trace_id(),
        )

        if isinstance(error, PasswordPolicyViolationError):
            problem.errors = [
                ErrorDetail(
                    field=error.field or "password",
                    code=_FIELD_ERROR_CODES.get(error.constraint, error.code.value),
                    message=error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def get_status_code(code: ErrorCode) -> int:
        """Map an error code to its HTTP status (500 when unmapped)."""
        return _STATUS_BY_CODE.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)
