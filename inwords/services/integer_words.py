"""Integer to words under Indian place values.

Place values are peeled largest first (Crore, Lakh, Thousand, Hundred); each
count is itself worded recursively, so counts of a hundred crore or more read
as e.g. ``"One Hundred Crore"``. A remainder below one hundred is joined to
any higher-order words with ``"and"``.

Examples:
>>> wordify_integer(105)
'One Hundred and Five'
>>> wordify_integer(1234567)
'Twelve Lakh Thirty-Four Thousand Five Hundred and Sixty-Seven'
"""
from __future__ import annotations

from decimal import Decimal
import math
from typing import Union

import structlog

from inwords.models.numeric import parse_leading_int
from inwords.services.lexicon import PLACE_VALUES, TENS, UNITS
from inwords.utils.errors import InvalidNumberInput

logger = structlog.get_logger(__name__)

IntegerLike = Union[int, float, Decimal, str]


def _below_hundred(n: int) -> str:
    if n < 20:
        return UNITS[n]
    tens, ones = divmod(n, 10)
    if ones:
        return f"{TENS[tens]}-{UNITS[ones]}"
    return TENS[tens]


def _wordify(n: int) -> str:
    if n == 0:
        return "Zero"
    if n < 0:
        return "Minus " + _wordify(-n)

    words = ""
    remaining = n
    for threshold, name in PLACE_VALUES:
        if remaining >= threshold:
            count, remaining = divmod(remaining, threshold)
            words += f"{_wordify(count)} {name} "

    if remaining == 0:
        return words.rstrip()
    if words:
        words += "and "
    return words + _below_hundred(remaining)


def _coerce_int(value: IntegerLike) -> int:
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidNumberInput(value)
        return int(value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidNumberInput(value)
        return int(value)
    if isinstance(value, str):
        return parse_leading_int(value)
    raise InvalidNumberInput(value)


def wordify_integer(value: IntegerLike) -> str:
    """Return ``value`` in words; non-integral numbers are truncated toward zero.

    Unusable input (NaN, infinity, non-numeric text) reads as ``"Zero"``.
    """
    try:
        n = _coerce_int(value)
    except InvalidNumberInput as exc:
        logger.debug("integer_words_fallback", code=exc.code, value=repr(value))
        return "Zero"
    return _wordify(n)


__all__ = ["wordify_integer"]
