"""Currency specification value type.

A currency spec carries four fields: the major unit name, the minor unit
name, the display symbol and the grouping pattern marker. Callers may hand
one in as a ``CurrencySpec``, a ``"Major;Minor;Symbol;Format"`` string or a
list/tuple of at least four strings; :func:`resolve_currency_spec` is the
single place where those forms are validated, and anything malformed is
replaced by :data:`DEFAULT_CURRENCY`.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Sequence, Union

import structlog
from pydantic import BaseModel, ConfigDict, field_validator

from inwords.utils.errors import InvalidCurrencySpec

logger = structlog.get_logger(__name__)


class GroupingPattern(str, Enum):
    INDIAN = "#,##,##0.00"
    WESTERN = "#,##0.00"
    PLAIN = "0.00"

    @classmethod
    def from_marker(cls, marker: Union[str, "GroupingPattern"]) -> "GroupingPattern":
        """Map an exact format marker to a pattern; anything else is PLAIN."""
        if isinstance(marker, cls):
            return marker
        for member in cls:
            if marker == member.value:
                return member
        return cls.PLAIN


class CurrencySpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    major: str
    minor: str
    symbol: str
    grouping: GroupingPattern = GroupingPattern.INDIAN

    @field_validator("grouping", mode="before")
    @classmethod
    def _coerce_grouping(cls, value: Any) -> GroupingPattern:
        if isinstance(value, (str, GroupingPattern)):
            return GroupingPattern.from_marker(value)
        raise ValueError(f"grouping marker must be a string, got {type(value).__name__}")

    @classmethod
    def parse(cls, text: str) -> "CurrencySpec":
        """Build a spec from ``"Major;Minor;Symbol;Format"``.

        Raises:
            InvalidCurrencySpec: unless the text splits into exactly four parts.
        """
        parts = text.split(";")
        if len(parts) != 4:
            raise InvalidCurrencySpec(text, f"expected 4 ';'-separated parts, got {len(parts)}")
        major, minor, symbol, marker = parts
        return cls(major=major, minor=minor, symbol=symbol, grouping=marker)

    @classmethod
    def from_fields(cls, fields: Sequence[Any]) -> "CurrencySpec":
        """Build a spec from the first four entries of a list or tuple.

        Raises:
            InvalidCurrencySpec: on fewer than four fields or non-string entries.
        """
        if len(fields) < 4:
            raise InvalidCurrencySpec(fields, f"expected at least 4 fields, got {len(fields)}")
        major, minor, symbol, marker = fields[:4]
        if not all(isinstance(f, str) for f in (major, minor, symbol, marker)):
            raise InvalidCurrencySpec(fields, "fields must be strings")
        return cls(major=major, minor=minor, symbol=symbol, grouping=marker)

    def as_tuple(self) -> tuple[str, str, str, str]:
        return (self.major, self.minor, self.symbol, self.grouping.value)

    def __str__(self) -> str:
        return ";".join(self.as_tuple())


DEFAULT_CURRENCY = CurrencySpec(major="Rupees", minor="Paise", symbol="₹", grouping=GroupingPattern.INDIAN)

CurrencyLike = Union[CurrencySpec, str, Sequence[str], None]


def resolve_currency_spec(value: CurrencyLike = None) -> CurrencySpec:
    """Return the effective spec for ``value``, falling back to the default."""
    if value is None or value == "":
        return DEFAULT_CURRENCY
    if isinstance(value, CurrencySpec):
        return value
    try:
        if isinstance(value, str):
            return CurrencySpec.parse(value)
        if isinstance(value, (list, tuple)):
            return CurrencySpec.from_fields(value)
        raise InvalidCurrencySpec(value, f"unsupported type {type(value).__name__}")
    except InvalidCurrencySpec as exc:
        logger.debug("currency_spec_fallback", code=exc.code, reason=exc.message)
        return DEFAULT_CURRENCY


__all__ = [
    "GroupingPattern",
    "CurrencySpec",
    "CurrencyLike",
    "DEFAULT_CURRENCY",
    "resolve_currency_spec",
]
