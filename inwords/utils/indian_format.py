"""Indian number formatting utilities.

Implements Indian digit grouping (3,2,2 pattern from right after the first group of 3) and
currency display for any :class:`~inwords.models.currency.CurrencySpec`.

Rules:
- Preserve sign
- Always format with two decimal places for currency helpers, rounding the exact
  binary value of floats half away from zero
- Pure string manipulation (avoid locale dependence)
- Handles large values (crores) and fractional parts
- Never raises: non-numeric or non-finite input formats as zero

Examples:
>>> format_indian_number(123456)
'1,23,456'
>>> group_indian(1234567.89)
'12,34,567.89'
>>> group_indian(999.5)
'999.50'
>>> format_currency_string(1234567.5)
'₹12,34,567.50'
"""
from __future__ import annotations
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Union

import structlog

from inwords.models.currency import CurrencyLike, GroupingPattern, resolve_currency_spec
from inwords.utils.errors import InvalidNumberInput

Number = Union[int, float, Decimal]

logger = structlog.get_logger(__name__)

__all__ = [
    "Number",
    "to_decimal",
    "exact_decimal",
    "to_fixed",
    "plain_number_string",
    "format_indian_number",
    "group_indian",
    "format_western",
    "format_currency_string",
]


def _split_number_str(num_str: str) -> tuple[str, str]:
    if '.' in num_str:
        left, right = num_str.split('.', 1)
    else:
        left, right = num_str, ''
    return left, right


def to_decimal(value: Union[Number, str]) -> Decimal:
    """Convert ``value`` to a finite Decimal via its shortest decimal representation.

    Raises:
        InvalidNumberInput: for booleans, unparsable strings and NaN/infinity.
    """
    if isinstance(value, bool):
        raise InvalidNumberInput(value)
    if isinstance(value, Decimal):
        dec = value
    elif isinstance(value, (int, float)):
        dec = Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
    elif isinstance(value, str):
        try:
            dec = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidNumberInput(value) from None
    else:
        raise InvalidNumberInput(value)
    if not dec.is_finite():
        raise InvalidNumberInput(value)
    return dec


def to_fixed(value: Decimal, places: int) -> str:
    """Render ``value`` with exactly ``places`` decimals, rounding half away from zero."""
    exponent = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        return format(value.quantize(exponent, rounding=ROUND_HALF_UP), 'f')


def plain_number_string(value: Number) -> str:
    """Fixed-notation string of a number with no exponent and no trailing ``.0``."""
    dec = to_decimal(value)
    if dec.is_zero() and not isinstance(value, Decimal):
        return '0'
    text = format(dec, 'f')
    if isinstance(value, float) and '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def format_indian_number(value: Number) -> str:
    """Format a number using Indian digit grouping.

    Does not add decimals; use :func:`group_indian` for a fixed two-decimal tail.
    """
    try:
        num_str = plain_number_string(value)
    except InvalidNumberInput as exc:
        logger.debug("number_format_fallback", code=exc.code, value=repr(value))
        return '0'
    sign = ''
    if num_str.startswith('-'):
        sign, num_str = '-', num_str[1:]
    left, right = _split_number_str(num_str)
    if len(left) <= 3:
        grouped = left
    else:
        # Last 3 digits stay together; preceding part grouped in 2s
        head = left[:-3]
        tail = left[-3:]
        head_groups: list[str] = []
        while len(head) > 2:
            head_groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            head_groups.insert(0, head)
        grouped = ','.join(head_groups + [tail])
    return sign + (grouped + ('.' + right if right else ''))


def exact_decimal(value: Union[Number, str]) -> Decimal:
    """Like :func:`to_decimal`, but floats keep their exact binary value.

    Rounding goes through this so ``1.005`` (stored just below 1.005) fixes to ``1.00``.
    """
    dec = to_decimal(value)
    if isinstance(value, float):
        return Decimal(value)
    return dec


def _fixed_two(value: Union[Number, str]) -> Decimal:
    try:
        dec = exact_decimal(value)
    except InvalidNumberInput as exc:
        logger.debug("number_format_fallback", code=exc.code, value=repr(value))
        dec = Decimal(0)
    if dec.is_zero():
        # -0.0 formats unsigned; only values that round to zero keep the sign
        dec = Decimal(0)
    return Decimal(to_fixed(dec, 2))


def group_indian(value: Union[Number, str]) -> str:
    """Indian-grouped string with exactly two decimals, e.g. ``-12,34,567.89``."""
    return format_indian_number(_fixed_two(value))


def format_western(value: Union[Number, str]) -> str:
    """Western 3-digit grouping with exactly two decimals, e.g. ``1,234,567.89``."""
    return format(_fixed_two(value), ',.2f')


def format_currency_string(value: Union[Number, str], currency_spec: CurrencyLike = None) -> str:
    """Format ``value`` for display using the spec's grouping and symbol.

    The symbol is prefixed directly, with no separating space.
    """
    spec = resolve_currency_spec(currency_spec)
    if spec.grouping is GroupingPattern.INDIAN:
        formatted = group_indian(value)
    elif spec.grouping is GroupingPattern.WESTERN:
        formatted = format_western(value)
    else:
        formatted = format(_fixed_two(value), '.2f')
    return f"{spec.symbol}{formatted}"
