"""Tests for the aiogram message handlers using fake messages."""

import asyncio
import dataclasses
import types

from aiogram.types import BufferedInputFile

from handlers import cmd_help, handle_payment_message, is_message_allowed
from qris.service import PaymentQrService


class FakeMessage:
    def __init__(self, text, chat_type="private", chat_id=4242):
        self.text = text
        self.chat = types.SimpleNamespace(id=chat_id, type=chat_type)
        self.answers = []
        self.photos = []

    async def answer(self, text, **kwargs):
        self.answers.append(text)

    async def answer_photo(self, photo, caption=None, **kwargs):
        self.photos.append((photo, caption))


def _service(cfg, renderer=None):
    return PaymentQrService(
        cfg,
        reference_factory=lambda: "TXN1700000000000",
        renderer=renderer or (lambda payload, options: b"png-bytes"),
    )


def test_payment_message_sends_photo(cfg):
    message = FakeMessage("bayar 50000")
    asyncio.run(handle_payment_message(message, payment_service=_service(cfg)))
    assert message.answers == []
    assert len(message.photos) == 1
    photo, caption = message.photos[0]
    assert isinstance(photo, BufferedInputFile)
    assert photo.filename == "qris_payment.png"
    assert "Rp 50.000" in caption


def test_regular_chat_is_ignored(cfg):
    message = FakeMessage("selamat pagi")
    asyncio.run(handle_payment_message(message, payment_service=_service(cfg)))
    assert message.answers == []
    assert message.photos == []


def test_invalid_amount_answers_text(cfg):
    message = FakeMessage("bayar 99999999")
    asyncio.run(handle_payment_message(message, payment_service=_service(cfg)))
    assert message.photos == []
    assert "maksimal" in message.answers[0]


def test_group_messages_ignored_by_default(cfg):
    message = FakeMessage("bayar 50000", chat_type="group")
    asyncio.run(handle_payment_message(message, payment_service=_service(cfg)))
    assert message.photos == []
    assert message.answers == []


def test_group_messages_allowed_when_enabled(cfg):
    enabled = dataclasses.replace(cfg, enable_group_messages=True)
    assert is_message_allowed(FakeMessage("bayar 50000", chat_type="supergroup"), enabled)


def test_oversized_message_ignored(cfg):
    short_cfg = dataclasses.replace(cfg, max_message_length=10)
    assert not is_message_allowed(FakeMessage("bayar 50000 " + "x" * 20), short_cfg)


def test_unexpected_error_gets_generic_answer(cfg):
    def explode(payload, options):
        raise KeyError("secret-internal")

    message = FakeMessage("bayar 50000")
    asyncio.run(handle_payment_message(message, payment_service=_service(cfg, explode)))
    assert message.photos == []
    assert len(message.answers) == 1
    assert "secret-internal" not in message.answers[0]
    assert "memproses pesan" in message.answers[0]


def test_help_command(cfg):
    message = FakeMessage("/help")
    asyncio.run(cmd_help(message, payment_service=_service(cfg)))
    assert "bayar [jumlah]" in message.answers[0]
