"""Numeric input splitting.

Numbers and numeric strings are handled as text so the fractional digits
keep their exact count (``"05"`` and ``"5"`` are different sub-unit values).
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
import re
from typing import Any, Optional

from inwords.utils.errors import InvalidNumberInput
from inwords.utils.indian_format import plain_number_string

_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")


def parse_leading_int(text: str) -> int:
    """Parse the integer at the start of ``text``, ignoring anything after it.

    ``" 12abc"`` gives 12, ``"-0"`` gives 0.

    Raises:
        InvalidNumberInput: if ``text`` does not start with an integer.
    """
    match = _LEADING_INT_RE.match(text)
    if match is None:
        raise InvalidNumberInput(text)
    return int(match.group(1))


def stringify_number(value: Any) -> str:
    """Decimal text for ``value``; floats and Decimals never use exponent notation."""
    if isinstance(value, str):
        return value
    if isinstance(value, (float, Decimal)) or (isinstance(value, int) and not isinstance(value, bool)):
        return plain_number_string(value)
    return str(value)


@dataclass(frozen=True)
class NumericInput:
    integer: str
    fraction: Optional[str] = None

    @classmethod
    def from_value(cls, value: Any) -> "NumericInput":
        """Split ``value`` on its first decimal point.

        Raises:
            InvalidNumberInput: for ``None``, empty strings and NaN/infinity.
        """
        if value is None or value == "":
            raise InvalidNumberInput(value)
        text = stringify_number(value)
        parts = text.split(".")
        if len(parts) > 1:
            # "1.2.3" keeps only the first fraction segment
            return cls(integer=parts[0], fraction=parts[1])
        return cls(integer=text)

    def integer_value(self) -> int:
        return parse_leading_int(self.integer)

    def fraction_value(self) -> Optional[int]:
        """Leading integer of the fraction text, or None when absent or unparsable."""
        if self.fraction is None:
            return None
        try:
            return parse_leading_int(self.fraction)
        except InvalidNumberInput:
            return None


__all__ = ["NumericInput", "parse_leading_int", "stringify_number"]
