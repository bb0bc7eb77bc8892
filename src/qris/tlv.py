"""Tag-Length-Value field encoding for QRIS payloads.

Each field is ``tag`` (2 digits) + ``length`` (2 digits, zero-padded
character count of the value) + ``value``. Values longer than 99
characters cannot be represented and are rejected.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import EncodingError, EncodingErrorKind

MAX_FIELD_LENGTH = 99


class Tag(str, Enum):
    """Registry of top-level payload tags."""

    FORMAT_INDICATOR = "00"
    POINT_OF_INITIATION = "01"
    MERCHANT_ACCOUNT = "26"
    MERCHANT_CATEGORY = "52"
    CURRENCY = "53"
    AMOUNT = "54"
    COUNTRY = "58"
    MERCHANT_NAME = "59"
    MERCHANT_CITY = "60"
    ADDITIONAL_DATA = "62"
    CRC = "63"


# Sub-tag inside ADDITIONAL_DATA
REFERENCE_LABEL = "05"


@dataclass(frozen=True)
class Field:
    tag: str
    value: str

    @property
    def length(self) -> str:
        return f"{len(self.value):02d}"

    def encode(self) -> str:
        return encode_field(self.tag, self.value)


def _tag_code(tag: str | Tag) -> str:
    code = tag.value if isinstance(tag, Tag) else str(tag)
    if len(code) != 2 or not code.isdigit():
        raise ValueError(f"Tag must be 2 digits, got {code!r}")
    return code


def encode_field(tag: str | Tag, value: str) -> str:
    """Encode a single TLV field.

    Raises:
        EncodingError: ``MISSING_FIELD`` for an empty value,
            ``FIELD_TOO_LONG`` when the value exceeds 99 characters.
    """
    code = _tag_code(tag)
    if not value:
        raise EncodingError(EncodingErrorKind.MISSING_FIELD, tag=code)
    if len(value) > MAX_FIELD_LENGTH:
        raise EncodingError(
            EncodingErrorKind.FIELD_TOO_LONG,
            tag=code,
            detail=f"{len(value)} > {MAX_FIELD_LENGTH} characters",
        )
    return f"{code}{len(value):02d}{value}"


def decode_fields(data: str) -> list[Field]:
    """Split a TLV string into its top-level fields.

    Raises:
        EncodingError: ``MALFORMED`` if a header is truncated, a length is
            not numeric, or a value runs past the end of ``data``.
    """
    fields: list[Field] = []
    offset = 0
    while offset < len(data):
        header = data[offset : offset + 4]
        if len(header) < 4:
            raise EncodingError(
                EncodingErrorKind.MALFORMED, detail=f"truncated header at offset {offset}"
            )
        tag, raw_length = header[:2], header[2:]
        if not (raw_length.isascii() and raw_length.isdigit()):
            raise EncodingError(
                EncodingErrorKind.MALFORMED, tag=tag, detail=f"bad length {raw_length!r}"
            )
        length = int(raw_length)
        start = offset + 4
        end = start + length
        if end > len(data):
            raise EncodingError(
                EncodingErrorKind.MALFORMED, tag=tag, detail="value runs past end of data"
            )
        fields.append(Field(tag=tag, value=data[start:end]))
        offset = end
    return fields
