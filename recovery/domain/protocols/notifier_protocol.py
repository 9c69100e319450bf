"""NotifierProtocol - Domain protocol for recovery e-mail delivery.

Delivery failure is reported as a Result value, not an exception, so the
service can surface it without exception-driven control flow.
"""

from typing import Protocol

from recovery.core.result import Result
from recovery.domain.errors import EmailDeliveryFailedError


class NotifierProtocol(Protocol):
    """Protocol for delivering recovery messages.

    Implementations:
        - SmtpNotifier: recovery/infrastructure/email/smtp_notifier.py (production)
        - StubNotifier: recovery/infrastructure/email/stub_notifier.py (dev/test)
    """

    async def send_recovery_email(
        self,
        *,
        to_email: str,
        recovery_url: str,
        token: str,
        expire_minutes: int,
    ) -> Result[None, EmailDeliveryFailedError]:
        """Send the recovery message.

        Args:
            to_email: Recipient e-mail address.
            recovery_url: Full URL with the recovery token.
            token: Raw token (for clients that paste it manually).
            expire_minutes: Validity window shown to the user.

        Returns:
            Success(None) once the transport accepted the message.
            Failure(EmailDeliveryFailedError) otherwise. Never retried.
        """
        ...
