import asyncio
import logging
import sys

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode

from config import ConfigError, load_config, validate_config
from logging_setup import configure_logging

configure_logging("qrisbot")

from handlers import router
from qris.service import PaymentQrService

logger = logging.getLogger(__name__)


async def main() -> int:
    """Entry point for the QRIS payment bot."""
    try:
        cfg = validate_config(load_config())
    except ConfigError as error:
        logger.error("%s", error)
        return 1
    if not cfg.token:
        logger.error("BOT_TOKEN is not set")
        return 1

    bot = Bot(
        token=cfg.token,
        default=DefaultBotProperties(parse_mode=ParseMode.HTML),
    )
    dp = Dispatcher(payment_service=PaymentQrService(cfg))
    dp.include_router(router)

    logger.info(
        "Starting QRIS bot for merchant %s (%s), keywords: %s",
        cfg.merchant.name,
        cfg.merchant.city,
        ", ".join(cfg.keywords),
    )
    try:
        await dp.start_polling(bot)
    finally:
        await bot.session.close()
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
