"""QRIS payload assembly and verification.

Payload layout (fields in fixed order, then the checksum)::

    00 02 01                      format indicator
    01 02 12                      point of initiation (dynamic)
    26 LL <merchant account>
    52 04 0000                    merchant category
    53 LL <currency code>
    54 LL <amount>
    58 02 <country code>
    59 LL <merchant name>
    60 LL <merchant city>
    62 LL 05 LL <reference>       additional data / reference label
    63 04 <CRC16>

The CRC covers every preceding character plus the literal ``6304``.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from numbers import Real
from typing import Callable

from .crc import crc16
from .errors import EncodingError, EncodingErrorKind
from .models import MerchantProfile
from .tlv import REFERENCE_LABEL, Tag, decode_fields, encode_field

logger = logging.getLogger(__name__)

FORMAT_INDICATOR = "01"
DYNAMIC_INITIATION = "12"
MERCHANT_CATEGORY_CODE = "0000"
CRC_HEADER = Tag.CRC.value + "04"
PAYLOAD_PREFIX = encode_field(Tag.FORMAT_INDICATOR, FORMAT_INDICATOR)
MIN_PAYLOAD_LENGTH = 50

ReferenceFactory = Callable[[], str]


def timestamp_reference() -> str:
    """Millisecond-timestamp transaction reference, e.g. ``TXN1700000000000``."""
    return f"TXN{time.time_ns() // 1_000_000}"


def _amount_text(amount: Real) -> str:
    if isinstance(amount, bool) or not isinstance(amount, Real):
        raise EncodingError(EncodingErrorKind.MALFORMED, tag=Tag.AMOUNT.value, detail="not a number")
    whole = isinstance(amount, int) or float(amount).is_integer()
    if not whole or amount < 0:
        raise EncodingError(
            EncodingErrorKind.MALFORMED, tag=Tag.AMOUNT.value, detail=f"not a whole amount: {amount!r}"
        )
    return str(int(amount))


def build_body(amount: Real, profile: MerchantProfile, reference: str) -> str:
    """Encode fields 1-10 (everything before the checksum)."""
    return "".join(
        [
            PAYLOAD_PREFIX,
            encode_field(Tag.POINT_OF_INITIATION, DYNAMIC_INITIATION),
            encode_field(Tag.MERCHANT_ACCOUNT, profile.account),
            encode_field(Tag.MERCHANT_CATEGORY, MERCHANT_CATEGORY_CODE),
            encode_field(Tag.CURRENCY, profile.currency_code),
            encode_field(Tag.AMOUNT, _amount_text(amount)),
            encode_field(Tag.COUNTRY, profile.country_code),
            encode_field(Tag.MERCHANT_NAME, profile.name),
            encode_field(Tag.MERCHANT_CITY, profile.city),
            encode_field(Tag.ADDITIONAL_DATA, encode_field(REFERENCE_LABEL, reference)),
        ]
    )


def append_checksum(body: str) -> str:
    framed = body + CRC_HEADER
    return framed + crc16(framed)


def assemble_payload(
    amount: Real,
    profile: MerchantProfile,
    reference_factory: ReferenceFactory = timestamp_reference,
) -> str:
    """Build a complete checksummed payload for an already validated amount."""
    payload = append_checksum(build_body(amount, profile, reference_factory()))
    logger.debug("Assembled payload: %s", payload)
    return payload


class PayloadAssembler:
    """Payload builder bound to one merchant profile and reference source."""

    def __init__(
        self,
        profile: MerchantProfile,
        reference_factory: ReferenceFactory = timestamp_reference,
    ) -> None:
        self.profile = profile
        self.reference_factory = reference_factory

    def assemble(self, amount: Real) -> str:
        return assemble_payload(amount, self.profile, self.reference_factory)


@dataclass(frozen=True)
class ShapeCheck:
    ok: bool
    reason: str | None = None


SHAPE_OK = ShapeCheck(ok=True)


def validate_shape(payload: object) -> ShapeCheck:
    """Structural sanity check.

    Only looks at length, the leading format indicator and the position of
    the CRC tag; the checksum value itself is not recomputed (see
    :func:`verify_payload`).
    """
    if not isinstance(payload, str) or len(payload) < MIN_PAYLOAD_LENGTH:
        return ShapeCheck(False, "Invalid QRIS payload length")
    if not payload.startswith(PAYLOAD_PREFIX):
        return ShapeCheck(False, "Invalid format indicator")
    if not payload[-8:-4].startswith(Tag.CRC.value):
        return ShapeCheck(False, "Missing or invalid CRC")
    return SHAPE_OK


def verify_payload(payload: object) -> ShapeCheck:
    """Shape check plus TLV decoding and a full checksum recomputation."""
    shape = validate_shape(payload)
    if not shape.ok:
        return shape
    if payload[-8:-4] != CRC_HEADER:
        return ShapeCheck(False, "Missing or invalid CRC")
    try:
        decode_fields(payload)
    except EncodingError as error:
        logger.debug("Payload TLV decode failed: %s", error)
        return ShapeCheck(False, "Malformed TLV structure")
    if crc16(payload[:-4]) != payload[-4:].upper():
        return ShapeCheck(False, "Checksum mismatch")
    return SHAPE_OK
