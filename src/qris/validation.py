"""Amount validation gate in front of the payload encoder."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any

from .errors import AmountError, AmountErrorKind
from .models import AmountLimits

logger = logging.getLogger(__name__)

DEFAULT_LIMITS = AmountLimits()


@dataclass(frozen=True)
class AmountCheck:
    amount: Any
    error: AmountError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _is_finite(amount: Real) -> bool:
    if isinstance(amount, int):
        return True
    try:
        return math.isfinite(amount)
    except OverflowError:
        # Too large for a float, but still an exact finite value.
        return True


def _is_whole(amount: Real) -> bool:
    if isinstance(amount, int):
        return True
    return amount == math.floor(amount)


def validate_amount(amount: Any, limits: AmountLimits = DEFAULT_LIMITS) -> AmountCheck:
    """Check ``amount`` against integrality and the inclusive bounds.

    Checks run in a fixed order and only the first failure is reported:
    not a number, not an integer, below minimum, above maximum. On success
    the amount is returned unchanged.
    """
    if isinstance(amount, bool) or not isinstance(amount, Real) or not _is_finite(amount):
        error = AmountError(AmountErrorKind.NOT_A_NUMBER)
    elif not _is_whole(amount):
        error = AmountError(AmountErrorKind.NOT_INTEGER)
    elif amount < limits.min_amount:
        error = AmountError(AmountErrorKind.BELOW_MINIMUM, bound=limits.min_amount)
    elif amount > limits.max_amount:
        error = AmountError(AmountErrorKind.ABOVE_MAXIMUM, bound=limits.max_amount)
    else:
        logger.debug("Amount validation successful: %s", amount)
        return AmountCheck(amount=amount)

    logger.info("Amount rejected (%s): %r", error.kind.value, amount)
    return AmountCheck(amount=amount, error=error)


class AmountValidator:
    """Binds configured limits to :func:`validate_amount`."""

    def __init__(self, limits: AmountLimits = DEFAULT_LIMITS) -> None:
        self.limits = limits

    def validate(self, amount: Any) -> AmountCheck:
        return validate_amount(amount, self.limits)
