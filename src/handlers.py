from aiogram import Router, F
from aiogram.enums import ChatType
from aiogram.filters import Command, CommandStart
from aiogram.types import Message, BufferedInputFile
import logging

from config import Config
from qris import messages
from qris.service import PaymentQrService, PaymentReply, ReplyKind

router = Router()
logger = logging.getLogger(__name__)

QR_FILENAME = "qris_payment.png"


def is_message_allowed(message: Message, cfg: Config) -> bool:
    """Drop group chats (unless enabled) and oversized messages."""
    if not cfg.enable_group_messages and message.chat.type != ChatType.PRIVATE:
        return False
    text = message.text or ""
    if len(text) > cfg.max_message_length:
        logger.info("Ignoring oversized message (%d chars) from chat %s", len(text), message.chat.id)
        return False
    return True


async def send_reply(message: Message, reply: PaymentReply) -> None:
    """Deliver a pipeline reply through Telegram."""
    if reply.kind is ReplyKind.IGNORE:
        return
    if reply.kind is ReplyKind.QR and reply.image is not None:
        photo = BufferedInputFile(reply.image, filename=QR_FILENAME)
        await message.answer_photo(photo=photo, caption=reply.text)
        logger.info("QRIS QR code sent to chat %s for amount: %s",
                    message.chat.id, messages.format_rupiah(reply.amount))
        return
    await message.answer(reply.text)


@router.message(CommandStart())
@router.message(Command("help"))
async def cmd_help(message: Message, payment_service: PaymentQrService):
    """Usage guide with the configured limits."""
    await message.answer(payment_service.help_text())


@router.message(F.text)
async def handle_payment_message(message: Message, payment_service: PaymentQrService):
    """Turn `bayar <amount>` into a QRIS image; ignore everything else."""
    if not is_message_allowed(message, payment_service.cfg):
        return
    logger.info("Received message from chat %s: %s", message.chat.id, (message.text or "").strip().lower())
    try:
        reply = await payment_service.build_reply(message.text)
        await send_reply(message, reply)
    except Exception:
        logger.exception("Error handling message from chat %s", message.chat.id)
        await message.answer(messages.error_text(messages.PROCESSING_ERROR, payment_service.primary_keyword))
