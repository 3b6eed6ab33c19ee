"""
ptf_publisher.mail.sender

Outbound mail transports for broadcasts.

Responsibilities:
- Send one HTML message per batch with every recipient in BCC (aiosmtplib).
- Fall back to logging batches when no SMTP relay is configured.
"""

from __future__ import annotations

from email.message import EmailMessage
from email.utils import formatdate, make_msgid
from typing import Protocol

import aiosmtplib

from ptf_publisher.errors import BroadcastError
from ptf_publisher.observability.logging import get_logger
from ptf_publisher.settings import Settings

log = get_logger(__name__)


class MailSender(Protocol):
    async def send_batch(self, *, subject: str, html: str, bcc: list[str]) -> None: ...


def build_message(*, sender: str, subject: str, html: str) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = sender
    # Recipients travel only in the SMTP envelope so they never see each other.
    msg["To"] = sender
    msg["Subject"] = subject
    msg["Date"] = formatdate(localtime=False)
    msg["Message-ID"] = make_msgid()
    msg.set_content("This update is best viewed in an HTML-capable mail client.")
    msg.add_alternative(html, subtype="html")
    return msg


class SmtpSender:
    def __init__(self, *, settings: Settings) -> None:
        self._settings = settings

    async def send_batch(self, *, subject: str, html: str, bcc: list[str]) -> None:
        s = self._settings
        msg = build_message(sender=s.smtp_from, subject=subject, html=html)
        try:
            await aiosmtplib.send(
                msg,
                sender=s.smtp_from,
                recipients=bcc,
                hostname=s.smtp_host,
                port=s.smtp_port,
                username=s.smtp_username,
                password=s.smtp_password,
                use_tls=s.smtp_port == 465,
                start_tls=True if s.smtp_port == 587 else None,
                timeout=s.smtp_timeout,
            )
        except aiosmtplib.SMTPException as e:
            log.exception("smtp_send_failed", recipients=len(bcc))
            raise BroadcastError(f"SMTP send failed: {e}") from e


class LogOnlySender:
    async def send_batch(self, *, subject: str, html: str, bcc: list[str]) -> None:
        log.info("broadcast_batch_logged", subject=subject, recipients=bcc)


def build_sender(settings: Settings) -> MailSender:
    if settings.smtp_host:
        return SmtpSender(settings=settings)
    log.warning("smtp_not_configured", detail="broadcast batches will only be logged")
    return LogOnlySender()
