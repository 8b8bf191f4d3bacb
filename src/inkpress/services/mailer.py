"""Outbound mail over an SMTP relay."""

from __future__ import annotations

import logging
import smtplib
import ssl
from collections.abc import Sequence
from dataclasses import dataclass
from email.message import EmailMessage
from html import escape
from typing import Protocol

from inkpress.core.errors import ExternalServiceError
from inkpress.core.settings import Settings, settings

# Configure logger for this module
logger = logging.getLogger(__name__)


class Mailer(Protocol):
    """Anything that can deliver an HTML message to a list of recipients."""

    def send(self, recipients: Sequence[str], subject: str, html_body: str) -> None:
        ...


@dataclass(frozen=True)
class SmtpConfig:
    """Immutable connection settings for the relay."""

    host: str
    port: int
    username: str | None
    password: str | None
    use_tls: bool
    sender: str
    timeout_seconds: float

    @classmethod
    def from_settings(cls, config: Settings) -> SmtpConfig:
        return cls(
            host=config.smtp_host,
            port=config.smtp_port,
            username=config.smtp_username,
            password=config.smtp_password,
            use_tls=config.smtp_use_tls,
            sender=config.mail_sender,
            timeout_seconds=config.smtp_timeout_seconds,
        )


class SmtpMailer:
    """Send messages synchronously through an SMTP relay with STARTTLS."""

    def __init__(self, config: SmtpConfig) -> None:
        self._config = config

    def _build_message(self, subject: str, html_body: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self._config.sender
        message["To"] = self._config.sender
        message["Subject"] = subject
        message.set_content(html_body, subtype="html")
        return message

    def send(self, recipients: Sequence[str], subject: str, html_body: str) -> None:
        """Deliver one message to every recipient.

        Recipients are passed in the SMTP envelope only, so they do not see
        each other. An empty recipient list is a no-op.

        Raises:
            ExternalServiceError: If the relay cannot be reached or rejects the message.
        """
        if not recipients:
            logger.debug("No recipients for %r, skipping", subject)
            return

        message = self._build_message(subject, html_body)
        config = self._config
        try:
            with smtplib.SMTP(config.host, config.port, timeout=config.timeout_seconds) as smtp:
                if config.use_tls:
                    smtp.starttls(context=ssl.create_default_context())
                if config.username and config.password:
                    smtp.login(config.username, config.password)
                smtp.send_message(message, to_addrs=list(recipients))
        except (smtplib.SMTPException, OSError) as err:
            logger.error("Sending %r to %d recipient(s) failed: %s", subject, len(recipients), err)
            raise ExternalServiceError("sending mail failed", field="mail") from err

        logger.info("Sent %r to %d recipient(s)", subject, len(recipients))


def welcome_message(site_name: str, site_url: str) -> tuple[str, str]:
    """Return the subject and HTML body sent to a new subscriber."""
    subject = f"Welcome to {site_name}"
    body = (
        f"Welcome to {escape(site_name)}. I'm pleased to have you on board. "
        f'<a style="color:red;" href="{escape(site_url)}">Visit</a> '
        "now to start reading my posts."
    )
    return subject, body


def new_post_message(site_name: str, site_url: str, post_id: str, title: str) -> tuple[str, str]:
    """Return the subject and HTML body announcing a new post."""
    subject = f"{title} at {site_name}"
    link = f"{site_url.rstrip('/')}/blog/{post_id}"
    body = (
        f"I just posted a new blog titled <b>{escape(title)}</b> check it out "
        f'<a style="color:red;" href="{escape(link)}">Here</a>.'
    )
    return subject, body


def get_mailer() -> Mailer:
    """Return a mailer configured from application settings."""
    return SmtpMailer(SmtpConfig.from_settings(settings))
