"""Recovery router.

Endpoints:
    POST /auth/recover-token - issue a recovery token and e-mail it
    PUT  /auth/new-password  - redeem a token and set a new password

Both return 204 No Content on success and RFC 9457 problem details on
failure.
"""

from fastapi import APIRouter, Depends, Request, Response, status

from recovery.application.services import RecoveryService
from recovery.core.config import Settings, get_settings
from recovery.core.container import get_recovery_service
from recovery.core.result import Failure, Success
from recovery.domain.errors import AccountNotFoundError
from recovery.presentation.routers.errors import ErrorResponseBuilder, ProblemDetails
from recovery.schemas import NewPasswordRequest, RecoverTokenRequest

recovery_router = APIRouter(prefix="/auth", tags=["Recovery"])


@recovery_router.post(
    "/recover-token",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        404: {"description": "No account for this e-mail", "model": ProblemDetails},
        422: {"description": "Malformed e-mail", "model": ProblemDetails},
        500: {"description": "Storage or e-mail failure", "model": ProblemDetails},
    },
    summary="Request a recovery token",
)
async def recover_token(
    request: Request,
    data: RecoverTokenRequest,
    service: RecoveryService = Depends(get_recovery_service),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Issue a recovery token for ``data.email`` and send it by e-mail.

    With RECOVERY_CONCEAL_UNKNOWN_ACCOUNTS enabled an unknown e-mail also
    answers 204, so callers cannot discover which addresses are registered.
    """
    match await service.issue_token(str(data.email)):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=AccountNotFoundError()) if (
            settings.recovery_conceal_unknown_accounts
        ):
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@recovery_router.put(
    "/new-password",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        404: {"description": "Token invalid or expired", "model": ProblemDetails},
        422: {"description": "Password policy violation", "model": ProblemDetails},
        500: {"description": "Storage failure", "model": ProblemDetails},
    },
    summary="Set a new password with a recovery token",
)
async def new_password(
    request: Request,
    data: NewPasswordRequest,
    service: RecoveryService = Depends(get_recovery_service),
) -> Response:
    """Redeem ``data.token`` and replace the account password."""
    match await service.redeem(data.token, data.password):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
