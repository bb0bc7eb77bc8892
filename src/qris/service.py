"""Transport-neutral payment pipeline: chat text in, reply out."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

from . import messages
from .commands import ParseOutcome, classify_message
from .errors import EncodingError, RenderError
from .models import RenderOptions
from .payload import PayloadAssembler, ReferenceFactory, timestamp_reference
from .render import render_qr_image
from .validation import AmountValidator

if TYPE_CHECKING:
    from config import Config

logger = logging.getLogger(__name__)

Renderer = Callable[[str, RenderOptions], bytes]


class ReplyKind(str, Enum):
    IGNORE = "ignore"
    HELP = "help"
    INVALID_AMOUNT = "invalid_amount"
    QR = "qr"
    FAILURE = "failure"


@dataclass(frozen=True)
class PaymentReply:
    kind: ReplyKind
    text: str = ""
    image: bytes | None = None
    payload: str | None = None
    amount: int | None = None


IGNORE_REPLY = PaymentReply(ReplyKind.IGNORE)


class PaymentQrService:
    """Runs parse -> validate -> assemble -> render for one message.

    Expected failures (bad command shape, out-of-range amounts) become
    corrective replies; encoding and render failures are logged in full and
    answered with a generic apology.
    """

    def __init__(
        self,
        cfg: Config,
        *,
        reference_factory: ReferenceFactory = timestamp_reference,
        renderer: Renderer = render_qr_image,
    ) -> None:
        self.cfg = cfg
        self.validator = AmountValidator(cfg.limits)
        self.assembler = PayloadAssembler(cfg.merchant, reference_factory)
        self.renderer = renderer

    @property
    def primary_keyword(self) -> str:
        return self.cfg.keywords[0] if self.cfg.keywords else "bayar"

    def help_text(self) -> str:
        return messages.help_text(self.cfg.limits, self.primary_keyword)

    async def build_reply(self, text: str | None) -> PaymentReply:
        parsed = classify_message(text, self.cfg.keywords)
        if parsed.outcome is ParseOutcome.NOT_COMMAND:
            return IGNORE_REPLY
        if parsed.outcome is ParseOutcome.MALFORMED or parsed.command is None:
            return PaymentReply(ReplyKind.HELP, text=self.help_text())

        check = self.validator.validate(parsed.command.amount)
        if not check.ok:
            return PaymentReply(
                ReplyKind.INVALID_AMOUNT,
                text=messages.validation_error_text(check.error),
                amount=parsed.command.amount,
            )

        amount = check.amount
        try:
            payload = self.assembler.assemble(amount)
            image = await asyncio.to_thread(self.renderer, payload, self.cfg.render)
        except (EncodingError, RenderError):
            logger.exception("Failed to generate QRIS QR code for amount %s", amount)
            return PaymentReply(
                ReplyKind.FAILURE,
                text=messages.error_text(messages.QR_GENERATION_ERROR, self.primary_keyword),
                amount=amount,
            )

        logger.info("Generated QRIS payload for amount: %s", messages.format_rupiah(amount))
        merchant = self.cfg.merchant if self.cfg.show_merchant_info else None
        return PaymentReply(
            ReplyKind.QR,
            text=messages.payment_caption(amount, merchant),
            image=image,
            payload=payload,
            amount=amount,
        )
