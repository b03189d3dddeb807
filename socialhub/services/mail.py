"""
ⒸAngelaMos | 2025
mail.py
"""

import asyncio
import smtplib
import ssl
from email.message import EmailMessage

from socialhub.config import settings
from socialhub.core.exceptions import MailDeliveryError
from socialhub.core.logging import get_logger


logger = get_logger(__name__)


def redact_email(email: str) -> str:
    """
    Keep only enough of an address to correlate log lines
    """
    if "@" not in email:
        return "redacted"
    local, domain = email.split("@", 1)
    return f"{local[:2]}***@{domain}"


class MailService:
    """
    Outgoing transactional email over SMTP

    Without an SMTP host the message is logged (recipient and subject only)
    and treated as delivered
    """
    def __init__(
        self,
        host: str | None = None,
        port: int | None = None,
        user: str | None = None,
        password: str | None = None,
        use_tls: bool | None = None,
        sender: str | None = None,
    ) -> None:
        self.host = host if host is not None else settings.SMTP_HOST
        self.port = port or settings.SMTP_PORT
        self.user = user if user is not None else settings.SMTP_USER
        if password is None and settings.SMTP_PASSWORD is not None:
            password = settings.SMTP_PASSWORD.get_secret_value()
        self.password = password
        self.use_tls = settings.SMTP_USE_TLS if use_tls is None else use_tls
        self.sender = sender or settings.MAIL_FROM

    @property
    def is_configured(self) -> bool:
        return bool(self.host)

    def _deliver(self, message: EmailMessage) -> None:
        context = ssl.create_default_context()
        timeout = settings.SMTP_TIMEOUT_SECONDS

        if self.use_tls:
            with smtplib.SMTP(self.host, self.port, timeout = timeout) as server:
                server.starttls(context = context)
                if self.user and self.password:
                    server.login(self.user, self.password)
                server.send_message(message)
        else:
            with smtplib.SMTP_SSL(
                    self.host,
                    self.port,
                    context = context,
                    timeout = timeout,
            ) as server:
                if self.user and self.password:
                    server.login(self.user, self.password)
                server.send_message(message)

    async def send(self, to: str, subject: str, body: str) -> None:
        """
        Send a plain text email or raise MailDeliveryError
        """
        if not self.is_configured:
            logger.info(
                "email_dev_mode",
                to = redact_email(to),
                subject = subject,
            )
            return

        message = EmailMessage()
        message["Subject"] = subject
        message["From"] = self.sender
        message["To"] = to
        message.set_content(body)

        try:
            await asyncio.to_thread(self._deliver, message)
        except (smtplib.SMTPException, ssl.SSLError, OSError) as e:
            logger.error(
                "email_send_failed",
                to = redact_email(to),
                host = self.host,
                error_type = type(e).__name__,
                error = str(e),
            )
            raise MailDeliveryError() from e

        logger.info("email_sent", to = redact_email(to), subject = subject)


mail_service = MailService()


def get_mail_service() -> MailService:
    """
    FastAPI dependency for the process wide mail service
    """
    return mail_service
