"""Recovery e-mail delivery adapters.

- SmtpNotifier: real SMTP transport (production)
- StubNotifier: logs and records messages (development/testing)
"""

from recovery.infrastructure.email.smtp_notifier import SmtpNotifier
from recovery.infrastructure.email.stub_notifier import SentMessage, StubNotifier

__all__ = ["SentMessage", "SmtpNotifier", "StubNotifier"]
