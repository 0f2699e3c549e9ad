"""Amount-in-words phrase assembly.

Composes integer and fraction words into the final phrase:

- currency with name:     ``Rupees One Hundred Five And Fifty Paise Only``
- currency without name:  ``One Hundred Five And Fifty Paise Only``
- plain number:           ``Twelve Point Three Four``

Design goals:
 - Never raise; unusable input reads as ``"Zero"``.
 - Currency phrases drop the ``"and"`` connector from the integer words when a
   sub-unit part follows, so the only ``And`` is the one joining the two parts.
 - Without the currency name the sub-unit name is always the default one,
   even when a custom spec is passed (kept for output compatibility).
"""
from __future__ import annotations

from typing import Any

import structlog

from inwords.models.currency import DEFAULT_CURRENCY, CurrencyLike, resolve_currency_spec
from inwords.models.numeric import NumericInput
from inwords.services.fraction_words import wordify_fraction
from inwords.services.integer_words import wordify_integer
from inwords.utils.errors import InvalidNumberInput

logger = structlog.get_logger(__name__)

_CONNECTOR = " and "


def _drop_connector(words: str) -> str:
    return words.replace(_CONNECTOR, " ")


def to_words(
    value: Any,
    as_currency: bool = True,
    with_currency_name: bool = True,
    currency_spec: CurrencyLike = None,
) -> str:
    """Return ``value`` in words, optionally as a currency phrase.

    Args:
        value: number or numeric string
        as_currency: treat the fraction as a sub-unit count and close with "Only"
        with_currency_name: lead with the major unit name and name the sub-unit
        currency_spec: CurrencySpec, "Major;Minor;Symbol;Format" string or list of fields
    """
    try:
        parsed = NumericInput.from_value(value)
        integer = parsed.integer_value()
    except InvalidNumberInput as exc:
        logger.debug("to_words_fallback", code=exc.code, value=repr(value))
        return "Zero"

    words1 = wordify_integer(integer)
    word2 = ""
    fraction = parsed.fraction_value()
    if fraction is not None and fraction > 0:
        word2 = wordify_fraction(parsed.fraction, as_currency)

    if not as_currency:
        return f"{words1} Point {word2}" if word2 else words1

    if with_currency_name:
        spec = resolve_currency_spec(currency_spec)
        if word2:
            return f"{spec.major} {_drop_connector(words1)} And {word2} {spec.minor} Only"
        return f"{spec.major} {words1} Only"

    if word2:
        return f"{_drop_connector(words1)} And {word2} {DEFAULT_CURRENCY.minor} Only"
    return f"{words1} Only"


__all__ = ["to_words"]
