"""Payment command parsing for incoming chat text.

Parsing only recognises the ``<keyword> <digits>`` shape; range checks
belong to :mod:`qris.validation`.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

logger = logging.getLogger(__name__)

DEFAULT_KEYWORDS: tuple[str, ...] = ("bayar",)
AMOUNT_TOKEN_RE = re.compile(r"^[0-9]+$")


class ParseOutcome(str, Enum):
    COMMAND = "command"
    NOT_COMMAND = "not_command"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class PaymentCommand:
    keyword: str
    amount: int
    raw: str


@dataclass(frozen=True)
class ParsedMessage:
    outcome: ParseOutcome
    command: PaymentCommand | None = None


NOT_A_COMMAND = ParsedMessage(ParseOutcome.NOT_COMMAND)
MALFORMED_COMMAND = ParsedMessage(ParseOutcome.MALFORMED)


def normalize_keywords(keywords: Iterable[str]) -> tuple[str, ...]:
    result: list[str] = []
    for keyword in keywords:
        cleaned = str(keyword or "").strip().lower()
        if cleaned and cleaned not in result:
            result.append(cleaned)
    return tuple(result)


def classify_message(text: Any, keywords: Iterable[str] = DEFAULT_KEYWORDS) -> ParsedMessage:
    """Tell a payment command apart from ordinary chat and malformed commands.

    ``MALFORMED`` means the first word is a payment keyword but the rest of
    the message is not exactly one run of ASCII digits. Never raises.
    """
    try:
        if not isinstance(text, str):
            return NOT_A_COMMAND
        tokens = text.strip().lower().split()
        if not tokens or tokens[0] not in normalize_keywords(keywords):
            return NOT_A_COMMAND
        if len(tokens) != 2 or not AMOUNT_TOKEN_RE.fullmatch(tokens[1]):
            return MALFORMED_COMMAND
        try:
            amount = int(tokens[1])
        except ValueError:
            # Digit run longer than the interpreter's int() string limit.
            logger.info("Amount token too long to parse (%d digits)", len(tokens[1]))
            return MALFORMED_COMMAND
        return ParsedMessage(
            ParseOutcome.COMMAND,
            PaymentCommand(keyword=tokens[0], amount=amount, raw=text),
        )
    except Exception:
        logger.exception("Failed to parse payment command")
        return NOT_A_COMMAND


def parse_payment_command(
    text: Any, keywords: Iterable[str] = DEFAULT_KEYWORDS
) -> PaymentCommand | None:
    """Return the parsed command, or ``None`` for anything that is not one."""
    return classify_message(text, keywords).command
