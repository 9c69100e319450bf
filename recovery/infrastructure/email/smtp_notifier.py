"""SMTP notifier.

smtplib is blocking, so each send runs in a worker thread via
``asyncio.to_thread``. Transport errors become
Failure(EmailDeliveryFailedError); nothing is retried.
"""

import asyncio
import smtplib
from email.message import EmailMessage

from recovery.core.result import Failure, Result, Success
from recovery.domain.errors import EmailDeliveryFailedError
from recovery.domain.protocols import LoggerProtocol
from recovery.infrastructure.email.message import build_recovery_message


class SmtpNotifier:
    """Implements NotifierProtocol over SMTP (optional STARTTLS and login)."""

    def __init__(
        self,
        *,
        host: str,
        port: int,
        mail_from: str,
        logger: LoggerProtocol,
        username: str | None = None,
        password: str | None = None,
        use_tls: bool = True,
        timeout: float = 10.0,
    ) -> None:
        """Initialize the SMTP transport settings.

        Args:
            host: SMTP server host.
            port: SMTP server port.
            mail_from: Sender address.
            logger: Structured logger for delivery failures.
            username: Login user; login is skipped when unset.
            password: Login password.
            use_tls: Upgrade the connection with STARTTLS.
            timeout: Connect and send timeout in seconds.
        """
        self._host = host
        self._port = port
        self._mail_from = mail_from
        self._logger = logger
        self._username = username
        self._password = password
        self._use_tls = use_tls
        self._timeout = timeout

    async def send_recovery_email(
        self,
        *,
        to_email: str,
        recovery_url: str,
        token: str,
        expire_minutes: int,
    ) -> Result[None, EmailDeliveryFailedError]:
        """Send the recovery e-mail.

        Returns:
            Success(None) once the server accepted the message.
            Failure(EmailDeliveryFailedError) on SMTP or socket errors.
        """
        msg = build_recovery_message(
            mail_from=self._mail_from,
            to_email=to_email,
            recovery_url=recovery_url,
            token=token,
            expire_minutes=expire_minutes,
        )
        try:
            await asyncio.to_thread(self._send, msg)
        except (smtplib.SMTPException, OSError) as e:
            self._logger.error(
                "recovery_email_send_failed",
                error=e,
                smtp_host=self._host,
            )
            return Failure(
                error=EmailDeliveryFailedError(
                    message=f"Failed to send recovery e-mail: {type(e).__name__}",
                    details={"error_type": type(e).__name__},
                )
            )
        self._logger.debug("recovery_email_sent", smtp_host=self._host)
        return Success(value=None)

    def _send(self, msg: EmailMessage) -> None:
        """Blocking SMTP session; runs in a worker thread."""
        with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as server:
            server.ehlo()
            if self._use_tls:
                server.starttls()
                server.ehlo()
            if self._username:
                server.login(self._username, self._password or "")
            server.send_message(msg)
