import asyncio
import logging
import smtplib
import ssl
from email.message import EmailMessage
from email.utils import formataddr
from typing import Callable, Optional

from cashin_mailer.domain.models import DispatchResult

logger = logging.getLogger(__name__)

IMPLICIT_TLS_PORT = 465


class SmtpMailRelay:
    """SMTP relay (Gmail by default) driven from a worker thread."""

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        sender_name: str,
        sender_address: Optional[str] = None,
        timeout: float = 30.0,
        use_tls: bool = True,
        smtp_factory: Optional[Callable[..., smtplib.SMTP]] = None,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender_name = sender_name
        self.sender_address = sender_address or username
        self.timeout = timeout
        self.use_tls = use_tls
        self._smtp_factory = smtp_factory

    def build_message(self, recipient: str, subject: str, html_body: str) -> EmailMessage:
        message = EmailMessage()
        message["Subject"] = subject
        message["From"] = formataddr((self.sender_name, self.sender_address))
        message["To"] = recipient
        message.set_content("Please view this message in an HTML-capable email client.")
        message.add_alternative(html_body, subtype="html")
        return message

    def _connect(self) -> smtplib.SMTP:
        if self._smtp_factory is not None:
            return self._smtp_factory(self.host, self.port, timeout=self.timeout)
        if self.port == IMPLICIT_TLS_PORT:
            return smtplib.SMTP_SSL(
                self.host, self.port, timeout=self.timeout, context=ssl.create_default_context()
            )
        return smtplib.SMTP(self.host, self.port, timeout=self.timeout)

    def _send_blocking(self, message: EmailMessage) -> str:
        with self._connect() as server:
            if self.use_tls and self.port != IMPLICIT_TLS_PORT:
                server.starttls(context=ssl.create_default_context())
            if self.username:
                server.login(self.username, self.password)
            refused = server.send_message(message)
        if refused:
            raise smtplib.SMTPRecipientsRefused(refused)
        return f"accepted by {self.host}"

    async def send(self, recipient: str, subject: str, html_body: str) -> DispatchResult:
        """Send an HTML email through the SMTP server."""
        message = self.build_message(recipient, subject, html_body)
        try:
            logger.debug(f"Sending email to {recipient} via {self.host}:{self.port}")
            detail = await asyncio.to_thread(self._send_blocking, message)
            return DispatchResult.sent(detail)
        except smtplib.SMTPAuthenticationError as e:
            logger.error(f"SMTP authentication failed for {self.username}: {e}")
            return DispatchResult.failed(f"SMTP authentication error: {e}")
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"SMTP error sending to {recipient}: {e}")
            return DispatchResult.failed(f"SMTP error: {e}")

    async def close(self) -> None:
        """Connections are opened per message; nothing to release."""
        return None
