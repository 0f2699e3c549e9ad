"""Words for the digits after the decimal point."""
from __future__ import annotations

import string

from inwords.models.numeric import parse_leading_int
from inwords.services.integer_words import wordify_integer
from inwords.services.lexicon import UNITS
from inwords.utils.errors import InvalidNumberInput


def wordify_fraction(fraction_digits: str, is_currency: bool) -> str:
    """Word the fractional digits ``fraction_digits``.

    As currency the digits are a sub-unit count out of 100: a single digit is
    tenths (``"5"`` -> ``"Fifty"``) and anything past two digits is truncated,
    not rounded. Otherwise every digit is spelled on its own
    (``"34"`` -> ``"Three Four"``).

    Returns an empty string when there is nothing positive to word.
    """
    if not fraction_digits or fraction_digits == "0":
        return ""
    try:
        if parse_leading_int(fraction_digits) <= 0:
            return ""
        if is_currency:
            padded = fraction_digits + "0" if len(fraction_digits) == 1 else fraction_digits[:2]
            return wordify_integer(parse_leading_int(padded))
    except InvalidNumberInput:
        return ""

    return " ".join(UNITS[int(ch)] for ch in fraction_digits if ch in string.digits)


__all__ = ["wordify_fraction"]
