"""Recovery service: issuance and redemption of password recovery tokens.

Issue flow:
1. Look up account by e-mail (unknown → AccountNotFoundError, nothing stored)
2. Generate token, expiration = issue time + window
3. Persist a new token record (older live tokens stay valid)
4. Send recovery e-mail (failure → EmailDeliveryFailedError, record kept)

Redeem flow:
1. Find live records for the token (none → InvalidOrExpiredTokenError)
2. Check password policy before touching any stored state
3. Look up the account and hash the new password
4. Single-use mode: atomically consume the token (lost race → invalid)
5. Store the new hash; its commit also makes the consume durable, so a
   failed update leaves the token live

Architecture:
- Application layer ONLY imports from domain and core
- Collaborators are injected as protocols
- Configuration is passed in once via RecoveryConfig; the service holds no
  other state, so one instance per request is fine
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from recovery.core.constants import TOKEN_LOG_PREFIX_LENGTH
from recovery.core.enums import ErrorCode
from recovery.core.result import Failure, Result, Success
from recovery.domain.entities.recovery_token import RecoveryToken
from recovery.domain.errors import (
    AccountNotFoundError,
    EmailDeliveryFailedError,
    InvalidOrExpiredTokenError,
    PasswordPolicyViolationError,
    PersistenceError,
)
from recovery.domain.protocols import (
    AccountRepository,
    LoggerProtocol,
    NotifierProtocol,
    PasswordHashingProtocol,
    RecoveryTokenRepository,
    RecoveryTokenServiceProtocol,
)
from recovery.domain.validators import check_password_policy


@dataclass(frozen=True, slots=True, kw_only=True)
class RecoveryConfig:
    """Per-instance recovery configuration.

    Attributes:
        expire_minutes: Token lifetime in minutes.
        recovery_url_base: Base URI of the recovery page.
        single_use: Consume tokens on redemption. When False a token can be
            redeemed repeatedly until it expires.
    """

    expire_minutes: int = 30
    recovery_url_base: str = "http://localhost:3000/recover"
    single_use: bool = True

    @property
    def window(self) -> timedelta:
        """Token lifetime as a timedelta."""
        return timedelta(minutes=self.expire_minutes)

    def build_recovery_url(self, token: str) -> str:
        """Return the link embedded in the recovery e-mail.

        Appends ``token`` as a query parameter, keeping any query string the
        base already carries.
        """
        separator = "&" if "?" in self.recovery_url_base else "?"
        return f"{self.recovery_url_base}{separator}token={token}"


def _mask(token: str) -> str:
    """Truncate a token for logging."""
    if len(token) <= TOKEN_LOG_PREFIX_LENGTH:
        return "..."
    return token[:TOKEN_LOG_PREFIX_LENGTH] + "..."


class RecoveryService:
    """Orchestrates the recovery-token lifecycle.

    Owns every recovery invariant: token uniqueness and entropy (via the
    token service), fixed expiration, password policy and single-use
    redemption.

    Follows hexagonal architecture:
    - Application layer (this service)
    - Domain layer (entities, protocols, errors)
    - Infrastructure layer (repositories, hasher, notifier via injection)
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        token_repo: RecoveryTokenRepository,
        token_service: RecoveryTokenServiceProtocol,
        password_service: PasswordHashingProtocol,
        notifier: NotifierProtocol,
        logger: LoggerProtocol,
        config: RecoveryConfig,
    ) -> None:
        """Initialize recovery service with dependencies.

        Args:
            account_repo: Account lookup and password update.
            token_repo: Recovery token persistence.
            token_service: Token generation.
            password_service: Password hashing.
            notifier: Recovery e-mail delivery.
            logger: Structured logger.
            config: Token window, recovery URL base and single-use switch.
        """
        self._account_repo = account_repo
        self._token_repo = token_repo
        self._token_service = token_service
        self._password_service = password_service
        self._notifier = notifier
        self._logger = logger
        self._config = config

    async def issue_token(
        self, email: str
    ) -> Result[
        RecoveryToken,
        AccountNotFoundError | EmailDeliveryFailedError | PersistenceError,
    ]:
        """Issue a recovery token for ``email`` and send it.

        Args:
            email: Account e-mail (format already validated at the boundary).

        Returns:
            Success(RecoveryToken) once the token is stored and the e-mail
            handed to the transport.
            Failure(AccountNotFoundError) if no account matches; nothing is
            stored.
            Failure(PersistenceError) if the token could not be stored.
            Failure(EmailDeliveryFailedError) if sending failed; the stored
            token is NOT rolled back and issuance counts as failed.
        """
        normalized = email.strip().lower()
        if not normalized:
            return Failure(error=AccountNotFoundError())

        match await self._account_repo.find_by_email(normalized):
            case Failure(error=persistence_error):
                self._logger.error(
                    "recovery_token_issue_failed",
                    reason="persistence_failed",
                    detail=persistence_error.message,
                )
                return Failure(error=persistence_error)
            case Success(value=None):
                self._logger.info(
                    "recovery_token_issue_failed", reason="account_not_found"
                )
                return Failure(error=AccountNotFoundError())
            case Success(value=account):
                pass

        issued_at = datetime.now(UTC)
        token = self._token_service.generate_token()
        expiration = issued_at + self._config.window

        match await self._token_repo.save(
            token=token,
            email=account.email,
            expiration=expiration,
        ):
            case Failure(error=persistence_error):
                self._logger.error(
                    "recovery_token_issue_failed",
                    reason="persistence_failed",
                    detail=persistence_error.message,
                )
                return Failure(error=persistence_error)
            case Success(value=record):
                pass

        delivery = await self._notifier.send_recovery_email(
            to_email=account.email,
            recovery_url=self._config.build_recovery_url(token),
            token=token,
            expire_minutes=self._config.expire_minutes,
        )
        if isinstance(delivery, Failure):
            self._logger.error(
                "recovery_token_issue_failed",
                reason="email_delivery_failed",
                account_id=str(account.id),
                token_prefix=_mask(token),
                detail=delivery.error.message,
            )
            return Failure(error=delivery.error)

        self._logger.info(
            "recovery_token_issued",
            account_id=str(account.id),
            token_prefix=_mask(token),
            expiration=expiration.isoformat(),
        )
        return Success(value=record)

    async def redeem(
        self, token: str, new_password: str
    ) -> Result[
        None,
        InvalidOrExpiredTokenError | PasswordPolicyViolationError | PersistenceError,
    ]:
        """Redeem ``token`` and set ``new_password`` on its account.

        Args:
            token: Recovery token from the e-mail.
            new_password: New plaintext password.

        Returns:
            Success(None) after the password was replaced.
            Failure(InvalidOrExpiredTokenError) for unknown, expired or (in
            single-use mode) consumed tokens.
            Failure(PasswordPolicyViolationError) if the password is too
            short; no stored state is touched.
            Failure(PersistenceError) on storage failure or when the store
            holds more than one record for the token.
        """
        if not token:
            return Failure(error=InvalidOrExpiredTokenError())

        now = datetime.now(UTC)

        match await self._token_repo.find_valid(token, now):
            case Failure(error=persistence_error):
                self._logger.error(
                    "recovery_token_redeem_failed",
                    reason="persistence_failed",
                    detail=persistence_error.message,
                )
                return Failure(error=persistence_error)
            case Success(value=records):
                pass

        if not records:
            self._logger.info(
                "recovery_token_redeem_failed",
                reason="invalid_or_expired",
                token_prefix=_mask(token),
            )
            return Failure(error=InvalidOrExpiredTokenError())

        if len(records) > 1:
            self._logger.critical(
                "recovery_token_store_inconsistent",
                token_prefix=_mask(token),
                matches=len(records),
            )
            return Failure(
                error=PersistenceError(
                    code=ErrorCode.PERSISTENCE_INCONSISTENT,
                    message="Recovery token store returned more than one record",
                )
            )

        policy = check_password_policy(new_password)
        if isinstance(policy, Failure):
            self._logger.info(
                "recovery_token_redeem_failed",
                reason="password_policy",
                constraint=policy.error.constraint,
            )
            return Failure(error=policy.error)

        record = records[0]

        match await self._account_repo.find_by_email(record.email):
            case Failure(error=persistence_error):
                self._logger.error(
                    "recovery_token_redeem_failed",
                    reason="persistence_failed",
                    detail=persistence_error.message,
                )
                return Failure(error=persistence_error)
            case Success(value=None):
                self._logger.warning(
                    "recovery_token_redeem_failed",
                    reason="account_missing",
                    token_prefix=_mask(token),
                )
                return Failure(error=InvalidOrExpiredTokenError())
            case Success(value=account):
                pass

        # Hash before consume; the consume and the password update commit
        # together.
        password_hash = self._password_service.hash_password(new_password)

        if self._config.single_use:
            match await self._token_repo.consume(token, now):
                case Failure(error=persistence_error):
                    self._logger.error(
                        "recovery_token_redeem_failed",
                        reason="persistence_failed",
                        detail=persistence_error.message,
                    )
                    return Failure(error=persistence_error)
                case Success(value=None):
                    # A concurrent redemption consumed it first.
                    self._logger.info(
                        "recovery_token_redeem_failed",
                        reason="already_consumed",
                        token_prefix=_mask(token),
                    )
                    return Failure(error=InvalidOrExpiredTokenError())
                case Success():
                    pass

        match await self._account_repo.update_password(account.id, password_hash):
            case Failure(error=persistence_error):
                self._logger.error(
                    "recovery_token_redeem_failed",
                    reason="persistence_failed",
                    account_id=str(account.id),
                    detail=persistence_error.message,
                )
                return Failure(error=persistence_error)

        self._logger.info(
            "recovery_token_redeemed",
            account_id=str(account.id),
            token_prefix=_mask(token),
            single_use=self._config.single_use,
        )
        return Success(value=None)


    async def purge_expired(self) -> Result[int, PersistenceError]:
        """Delete expired token records (storage hygiene).

        Returns:
            Success(number of deleted records) or Failure(PersistenceError).
        """
        result = await self._token_repo.delete_expired(datetime.now(UTC))
        if isinstance(result, Success):
            self._logger.info("recovery_tokens_purged", deleted=result.value)
        return result
