"""
tests.test_mail_sender

SMTP transport selection and delivery against a patched aiosmtplib.
"""

from __future__ import annotations

import aiosmtplib
import pytest

from ptf_publisher.errors import BroadcastError
from ptf_publisher.mail import sender as sender_mod
from ptf_publisher.mail.sender import LogOnlySender, SmtpSender, build_sender
from ptf_publisher.settings import Settings


def test_build_sender_follows_smtp_host() -> None:
    assert isinstance(build_sender(Settings()), LogOnlySender)
    assert isinstance(build_sender(Settings(smtp_host="smtp.example")), SmtpSender)


@pytest.mark.asyncio
async def test_smtp_sender_uses_envelope_recipients(monkeypatch) -> None:
    calls: list[dict[str, object]] = []

    async def fake_send(message, **kwargs):
        calls.append({"message": message, **kwargs})

    monkeypatch.setattr(sender_mod.aiosmtplib, "send", fake_send)
    smtp = SmtpSender(settings=Settings(smtp_host="smtp.example", smtp_port=587))
    await smtp.send_batch(subject="June", html="<p>hi</p>", bcc=["a@x.org", "b@x.org"])

    (call,) = calls
    assert call["recipients"] == ["a@x.org", "b@x.org"]
    assert call["hostname"] == "smtp.example"
    assert call["start_tls"] is True
    assert call["use_tls"] is False
    assert call["message"]["Subject"] == "June"


@pytest.mark.asyncio
async def test_smtp_failure_is_a_broadcast_error(monkeypatch) -> None:
    async def refuse(message, **kwargs):
        raise aiosmtplib.SMTPException("relay refused")

    monkeypatch.setattr(sender_mod.aiosmtplib, "send", refuse)
    smtp = SmtpSender(settings=Settings(smtp_host="smtp.example"))
    with pytest.raises(BroadcastError):
        await smtp.send_batch(subject="June", html="<p>hi</p>", bcc=["a@x.org"])
