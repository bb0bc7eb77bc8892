import os
import re
from pathlib import Path
from dataclasses import dataclass

from dotenv import load_dotenv

from qris.commands import DEFAULT_KEYWORDS, normalize_keywords
from qris.models import AmountLimits, MerchantProfile, RenderOptions
from qris.tlv import MAX_FIELD_LENGTH

# Load .env from the working directory (where the bot is started)
env_path = Path.cwd() / ".env"
load_dotenv(env_path)

SUPPORTED_CURRENCY_CODES = {"360", "IDR"}
ERROR_CORRECTION_LEVELS = {"L", "M", "Q", "H"}


class ConfigError(ValueError):
    """Raised when the loaded configuration cannot be used."""


@dataclass(frozen=True)
class Config:
    token: str
    merchant: MerchantProfile
    limits: AmountLimits
    render: RenderOptions
    keywords: tuple[str, ...]
    # Transport
    enable_group_messages: bool
    max_message_length: int
    show_merchant_info: bool


def _clean(value: str | None, default: str = "") -> str:
    if value is None:
        return default
    return value.strip().strip('"').strip("'") or default


def parse_bool(value: str | None, default: bool = False) -> bool:
    """Parse a boolean flag from env."""
    if value is None:
        return default
    value = value.strip().strip('"').strip("'").lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    return default


def parse_int(value: str | None, default: int) -> int:
    """Parse an int from env, falling back to ``default`` when unset or invalid."""
    cleaned = _clean(value)
    if not cleaned:
        return default
    try:
        return int(cleaned)
    except ValueError:
        return default


def parse_keywords(value: str | None) -> tuple[str, ...]:
    """Parse command keywords separated by commas, semicolons or spaces."""
    cleaned = _clean(value)
    if not cleaned:
        return DEFAULT_KEYWORDS
    return normalize_keywords(re.split(r"[,\s;]+", cleaned))


def load_config() -> Config:
    """Read the process environment into an immutable ``Config``."""
    return Config(
        token=_clean(os.getenv("BOT_TOKEN")),
        merchant=MerchantProfile(
            account=_clean(os.getenv("QRIS_MERCHANT_ACCOUNT"), "ID.CO.EXAMPLE.WWW"),
            name=_clean(os.getenv("QRIS_MERCHANT_NAME"), "TOKO EXAMPLE"),
            city=_clean(os.getenv("QRIS_MERCHANT_CITY"), "JAKARTA"),
            country_code=_clean(os.getenv("QRIS_COUNTRY_CODE"), "ID").upper(),
            currency_code=_clean(os.getenv("QRIS_CURRENCY_CODE"), "360").upper(),
        ),
        limits=AmountLimits(
            min_amount=parse_int(os.getenv("MIN_PAYMENT_AMOUNT"), 1000),
            max_amount=parse_int(os.getenv("MAX_PAYMENT_AMOUNT"), 10_000_000),
        ),
        render=RenderOptions(
            image_format=_clean(os.getenv("QR_IMAGE_FORMAT"), "PNG").upper(),
            error_correction=_clean(os.getenv("QR_ERROR_CORRECTION"), "M").upper(),
            width=parse_int(os.getenv("QR_WIDTH"), 512),
            margin=parse_int(os.getenv("QR_MARGIN"), 2),
            dark_color=_clean(os.getenv("QR_DARK_COLOR"), "#000000"),
            light_color=_clean(os.getenv("QR_LIGHT_COLOR"), "#FFFFFF"),
        ),
        keywords=parse_keywords(os.getenv("PAYMENT_KEYWORDS")),
        enable_group_messages=parse_bool(os.getenv("ENABLE_GROUP_MESSAGES"), False),
        max_message_length=parse_int(os.getenv("MAX_MESSAGE_LENGTH"), 1000),
        show_merchant_info=parse_bool(os.getenv("SHOW_MERCHANT_INFO"), False),
    )


def validate_config(cfg: Config) -> Config:
    """Check critical settings and raise one ``ConfigError`` listing every problem."""
    errors: list[str] = []

    if cfg.limits.min_amount < 1:
        errors.append("Minimum payment amount must be at least 1")
    if cfg.limits.min_amount >= cfg.limits.max_amount:
        errors.append("Minimum payment amount must be less than maximum payment amount")

    merchant = cfg.merchant
    if merchant.currency_code not in SUPPORTED_CURRENCY_CODES:
        errors.append(f"Invalid currency code for Indonesian Rupiah: {merchant.currency_code!r}")
    if len(merchant.account) < 5:
        errors.append("Merchant account must be specified and at least 5 characters long")
    if not (len(merchant.country_code) == 2 and merchant.country_code.isalpha()):
        errors.append(f"Country code must be 2 letters, got {merchant.country_code!r}")
    for label, value in (
        ("Merchant account", merchant.account),
        ("Merchant name", merchant.name),
        ("Merchant city", merchant.city),
    ):
        if len(value) > MAX_FIELD_LENGTH:
            errors.append(f"{label} must be at most {MAX_FIELD_LENGTH} characters")

    if cfg.render.error_correction not in ERROR_CORRECTION_LEVELS:
        errors.append(f"QR error correction must be one of L/M/Q/H, got {cfg.render.error_correction!r}")
    if cfg.render.width <= 0 or cfg.render.margin < 0:
        errors.append("QR width must be positive and margin non-negative")

    if not cfg.keywords:
        errors.append("At least one payment keyword is required")

    if errors:
        raise ConfigError("Invalid configuration:\n  - " + "\n  - ".join(errors))
    return cfg
