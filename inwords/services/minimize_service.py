"""Short magnitude strings such as ``"1.5 Lakh"``."""
from __future__ import annotations

from decimal import Decimal
from typing import Any

import structlog

from inwords.services.lexicon import PLACE_VALUES
from inwords.utils.errors import ERROR_CODES, InvalidNumberInput
from inwords.utils.indian_format import exact_decimal, plain_number_string, to_decimal, to_fixed

logger = structlog.get_logger(__name__)


def minimize(value: Any) -> str:
    """Abbreviate ``value`` to one decimal against the largest Indian place value.

    Magnitudes below one hundred come back unchanged; non-numbers give ``"0"``.

    >>> minimize(150000)
    '1.5 Lakh'
    >>> minimize(-250)
    '-2.5 Hundred'
    """
    if isinstance(value, str):
        logger.debug("minimize_fallback", code=ERROR_CODES["number"], value=repr(value))
        return "0"
    try:
        amount = to_decimal(value)
    except InvalidNumberInput as exc:
        logger.debug("minimize_fallback", code=exc.code, value=repr(value))
        return "0"

    if abs(amount) < 100:
        return plain_number_string(value)

    divisor, unit = next((d, u) for d, u in PLACE_VALUES if abs(amount) >= d)
    try:
        # float division, rounded on the exact binary quotient
        quotient = amount / Decimal(divisor) if isinstance(value, Decimal) else exact_decimal(value / divisor)
    except OverflowError:
        quotient = amount / Decimal(divisor)
    places = 0 if quotient == quotient.to_integral_value() else 1
    return f"{to_fixed(quotient, places)} {unit}"


__all__ = ["minimize"]
