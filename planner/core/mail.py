import asyncio
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr, make_msgid
from typing import Optional

from planner.core.config import settings
from planner.core.logger import logger


class MailDeliveryError(Exception):
    """Raised when the SMTP server cannot take a message."""

    def __init__(self, recipient: str, reason: str):
        self.recipient = recipient
        self.reason = reason
        super().__init__(f"Could not deliver mail to {recipient}: {reason}")


class MailClient:
    def __init__(
        self,
        host: str,
        port: int,
        user: str = "",
        password: str = "",
        use_ssl: bool = False,
        timeout: float = 10.0,
        sender_name: str = "",
        sender_address: str = "",
    ):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.use_ssl = use_ssl
        self.timeout = timeout
        self.sender_name = sender_name
        self.sender_address = sender_address

    def build_message(
        self, to_email: str, subject: str, html: str, to_name: Optional[str] = None
    ) -> MIMEMultipart:
        message = MIMEMultipart("alternative")
        message["From"] = formataddr((self.sender_name, self.sender_address))
        message["To"] = formataddr((to_name, to_email)) if to_name else to_email
        message["Subject"] = subject
        message["Message-ID"] = make_msgid(domain=self.sender_address.rpartition("@")[2] or None)
        message.attach(MIMEText(html, "html"))
        return message

    def _connect(self) -> smtplib.SMTP:
        if self.use_ssl:
            return smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout)
        return smtplib.SMTP(self.host, self.port, timeout=self.timeout)

    def send_mail(
        self, to_email: str, subject: str, html: str, to_name: Optional[str] = None
    ) -> str:
        """
        Deliver one HTML message and return its Message-ID.
        """
        message = self.build_message(to_email, subject, html, to_name)

        try:
            with self._connect() as server:
                if self.user:
                    server.login(self.user, self.password)
                server.sendmail(self.sender_address, [to_email], message.as_string())
        except (smtplib.SMTPException, OSError) as e:
            raise MailDeliveryError(to_email, str(e)) from e

        message_id = message["Message-ID"]
        logger.info(f"[Mail] Sent '{subject}' to {to_email} ({message_id})")
        return message_id

    async def send(
        self, to_email: str, subject: str, html: str, to_name: Optional[str] = None
    ) -> str:
        return await asyncio.to_thread(self.send_mail, to_email, subject, html, to_name)


_mail_client: Optional[MailClient] = None


def get_mail_client() -> MailClient:
    """FastAPI dependency returning the configured mail client."""
    global _mail_client

    if _mail_client is None:
        _mail_client = MailClient(
            host=settings.SMTP_HOST,
            port=settings.SMTP_PORT,
            user=settings.SMTP_USER,
            password=settings.SMTP_PASSWORD,
            use_ssl=settings.SMTP_USE_SSL,
            timeout=settings.SMTP_TIMEOUT,
            sender_name=settings.MAIL_FROM_NAME,
            sender_address=settings.MAIL_FROM_ADDRESS,
        )

    return _mail_client
