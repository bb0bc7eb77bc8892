"""Error taxonomy for the QRIS payment pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class QrisError(Exception):
    """Base QRIS pipeline error."""


class AmountErrorKind(str, Enum):
    NOT_A_NUMBER = "not_a_number"
    NOT_INTEGER = "not_integer"
    BELOW_MINIMUM = "below_minimum"
    ABOVE_MAXIMUM = "above_maximum"


@dataclass(frozen=True)
class AmountError:
    """Expected, user-correctable amount rejection (returned, never raised)."""

    kind: AmountErrorKind
    bound: int | None = None


class EncodingErrorKind(str, Enum):
    FIELD_TOO_LONG = "field_too_long"
    MISSING_FIELD = "missing_field"
    MALFORMED = "malformed"


class EncodingError(QrisError):
    """Raised when a payload field cannot be encoded or decoded."""

    def __init__(self, kind: EncodingErrorKind, tag: str | None = None, detail: str = "") -> None:
        self.kind = kind
        self.tag = tag
        self.detail = detail
        parts = [kind.value]
        if tag is not None:
            parts.append(f"tag={tag}")
        if detail:
            parts.append(detail)
        super().__init__(": ".join(parts))


class RenderError(QrisError):
    """Raised when the payload cannot be rendered to an image."""
