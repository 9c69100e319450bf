"""Stub notifier for development and testing.

Logs each recovery message instead of sending it and keeps the most recent
ones in ``outbox`` so tests can read the delivered token. The outbox is
bounded; older messages are dropped.
"""

from dataclasses import dataclass

from recovery.core.result import Failure, Result, Success
from recovery.domain.errors import EmailDeliveryFailedError
from recovery.domain.protocols import LoggerProtocol

OUTBOX_LIMIT = 100


@dataclass(frozen=True, slots=True, kw_only=True)
class SentMessage:
    """One recorded recovery message."""

    to_email: str
    recovery_url: str
    token: str
    expire_minutes: int


class StubNotifier:
    """Implements NotifierProtocol without a transport.

    Attributes:
        outbox: Up to ``outbox_limit`` messages "sent" so far, oldest first.
        fail: When True every send returns Failure (delivery outage).
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        *,
        fail: bool = False,
        outbox_limit: int = OUTBOX_LIMIT,
    ) -> None:
        """Initialize the stub.

        Args:
            logger: Structured logger for the "sent" messages.
            fail: Simulate a delivery outage.
            outbox_limit: Number of recent messages to keep.
        """
        self._logger = logger
        self._outbox_limit = outbox_limit
        self.outbox: list[SentMessage] = []
        self.fail = fail

    async def send_recovery_email(
        self,
        *,
        to_email: str,
        recovery_url: str,
        token: str,
        expire_minutes: int,
    ) -> Result[None, EmailDeliveryFailedError]:
        """Record and log the message (token and URL are never logged).

        Returns:
            Success(None), or Failure(EmailDeliveryFailedError) when ``fail``
            is set.
        """
        if self.fail:
            return Failure(
                error=EmailDeliveryFailedError(message="Stub notifier set to fail")
            )
        self.outbox.append(
            SentMessage(
                to_email=to_email,
                recovery_url=recovery_url,
                token=token,
                expire_minutes=expire_minutes,
            )
        )
        del self.outbox[: -self._outbox_limit]
        self._logger.info(
            "stub_recovery_email",
            to_email=to_email,
            expire_minutes=expire_minutes,
        )
        return Success(value=None)
