"""Recovery e-mail content."""

from email.message import EmailMessage

SUBJECT = "Reset your password"


def render_text(recovery_url: str, token: str, expire_minutes: int) -> str:
    """Return the plain-text body: link, raw token and expiry notice."""
    return (
        "We received a request to reset the password for your account.\n\n"
        f"Open this link to choose a new password:\n{recovery_url}\n\n"
        f"Or paste this code into the recovery form: {token}\n\n"
        f"The link expires in {expire_minutes} minutes. "
        "If you did not ask for a reset you can ignore this message."
    )


def build_recovery_message(
    *,
    mail_from: str,
    to_email: str,
    recovery_url: str,
    token: str,
    expire_minutes: int,
) -> EmailMessage:
    """Build the plain-text recovery message."""
    msg = EmailMessage()
    msg["Subject"] = SUBJECT
    msg["From"] = mail_from
    msg["To"] = to_email
    msg.set_content(render_text(recovery_url, token, expire_minutes))
    return msg
