"""QRIS payload core: command parsing, amount validation, TLV encoding and CRC."""

from .commands import (
    ParseOutcome,
    ParsedMessage,
    PaymentCommand,
    classify_message,
    parse_payment_command,
)
from .crc import crc16, crc16_value
from .errors import (
    AmountError,
    AmountErrorKind,
    EncodingError,
    EncodingErrorKind,
    QrisError,
    RenderError,
)
from .models import AmountLimits, MerchantProfile, RenderOptions
from .payload import (
    PayloadAssembler,
    ShapeCheck,
    assemble_payload,
    timestamp_reference,
    validate_shape,
    verify_payload,
)
from .tlv import Field, Tag, decode_fields, encode_field
from .validation import AmountCheck, AmountValidator, validate_amount

__all__ = [
    "AmountCheck",
    "AmountError",
    "AmountErrorKind",
    "AmountLimits",
    "AmountValidator",
    "EncodingError",
    "EncodingErrorKind",
    "Field",
    "MerchantProfile",
    "ParseOutcome",
    "ParsedMessage",
    "PayloadAssembler",
    "PaymentCommand",
    "QrisError",
    "RenderError",
    "RenderOptions",
    "ShapeCheck",
    "Tag",
    "assemble_payload",
    "classify_message",
    "crc16",
    "crc16_value",
    "decode_fields",
    "encode_field",
    "parse_payment_command",
    "timestamp_reference",
    "validate_amount",
    "validate_shape",
    "verify_payload",
]
