"""
SMTP email service used for staff notifications.
One process-wide instance is built from environment settings at import time;
when any required setting is missing it stays unconfigured for the lifetime
of the process and every send reports failure without raising.
"""

import asyncio
import logging
import re
import smtplib
import ssl
from dataclasses import dataclass
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr, make_msgid
from typing import Optional, Union

from . import config

logger = logging.getLogger(__name__)

LINE_BREAKS = re.compile(r"[\r\n]+")


def header_value(value: str) -> str:
    """Submitted text may end up in headers; line breaks would start a new one"""
    return LINE_BREAKS.sub(" ", value).strip()


@dataclass
class SMTPConfig:
    host: str
    port: int
    user: str
    password: str
    secure: bool = False
    from_address: Optional[str] = None
    from_name: str = "Royal Transfer"
    timeout: float = 30

    @property
    def sender(self) -> str:
        return formataddr((self.from_name, self.from_address or self.user))

    @classmethod
    def from_env(cls) -> Optional["SMTPConfig"]:
        """Build the config from environment settings, None if incomplete"""
        if not (config.SMTP_HOST and config.SMTP_PORT and config.SMTP_USER and config.SMTP_PASSWORD):
            logger.warning("⚠️ Email service: Some SMTP environment variables are missing")
            return None

        try:
            port = int(config.SMTP_PORT)
        except ValueError:
            logger.warning(f"⚠️ Email service: SMTP_PORT is not a number: {config.SMTP_PORT!r}")
            return None

        return cls(
            host=config.SMTP_HOST,
            port=port,
            user=config.SMTP_USER,
            password=config.SMTP_PASSWORD,
            secure=config.SMTP_SECURE,
            from_address=config.SMTP_FROM,
            from_name=config.EMAIL_FROM_NAME,
            timeout=config.SMTP_TIMEOUT,
        )


class SMTPTransport:
    """Blocking SMTP delivery, one connection per message"""

    def __init__(self, smtp_config: SMTPConfig):
        if not 0 < smtp_config.port < 65536:
            raise ValueError(f"SMTP port out of range: {smtp_config.port}")
        self.config = smtp_config

    def _connect(self) -> smtplib.SMTP:
        context = ssl.create_default_context()
        if self.config.secure:
            return smtplib.SMTP_SSL(
                self.config.host, self.config.port, context=context, timeout=self.config.timeout
            )

        server = smtplib.SMTP(self.config.host, self.config.port, timeout=self.config.timeout)
        server.ehlo()
        if server.has_extn("starttls"):
            server.starttls(context=context)
            server.ehlo()
        return server

    def send(self, message: MIMEMultipart, recipients: list[str]) -> None:
        server = self._connect()
        try:
            server.login(self.config.user, self.config.password)
            server.sendmail(self.config.from_address or self.config.user, recipients, message.as_string())
        finally:
            try:
                server.quit()
            except smtplib.SMTPServerDisconnected:
                logger.warning("⚠️ SMTP server closed the connection before QUIT")


class EmailService:
    """Notification gateway wrapping an SMTP transport"""

    def __init__(self, smtp_config: Optional[SMTPConfig] = None):
        self.config = smtp_config
        self.transporter: Optional[SMTPTransport] = None
        if smtp_config:
            self._init_transporter()

    def _init_transporter(self) -> None:
        try:
            self.transporter = SMTPTransport(self.config)
            logger.info(f"✅ Email service configured for {self.config.host}:{self.config.port}")
        except ValueError as e:
            logger.error(f"❌ Email service: could not create SMTP transport: {e}")
            self.transporter = None

    def is_configured(self) -> bool:
        return self.transporter is not None and self.config is not None

    def build_message(
        self,
        to: Union[str, list[str]],
        subject: str,
        text: str,
        html: str,
        reply_to: Optional[str] = None,
    ) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = header_value(subject)
        msg["From"] = self.config.sender
        msg["To"] = header_value(to if isinstance(to, str) else ", ".join(to))
        msg["Message-ID"] = make_msgid()
        if reply_to:
            msg["Reply-To"] = header_value(reply_to)

        # Clients show the last alternative they support, so HTML goes last
        msg.attach(MIMEText(text, "plain", "utf-8"))
        msg.attach(MIMEText(html, "html", "utf-8"))
        return msg

    async def send_email(
        self,
        to: Union[str, list[str]],
        subject: str,
        text: str,
        html: str,
        reply_to: Optional[str] = None,
    ) -> bool:
        """
        Send one email, at most one delivery attempt.

        Returns:
            True when the SMTP server accepted the message, False otherwise
        """
        if not self.is_configured():
            logger.error("❌ Email service: Transporter not initialized")
            return False

        recipients = [to] if isinstance(to, str) else list(to)

        try:
            message = self.build_message(to, subject, text, html, reply_to)
            await asyncio.to_thread(self.transporter.send, message, recipients)
        except Exception as e:
            logger.error(f"❌ Error sending email to {recipients}: {e}")
            return False

        logger.info(f"📧 Email sent successfully: {message['Message-ID']}")
        return True


# Shared by every request for the lifetime of the process
email_service = EmailService(SMTPConfig.from_env())


def get_email_service() -> EmailService:
    """Dependency injection for the process-wide EmailService"""
    return email_service
