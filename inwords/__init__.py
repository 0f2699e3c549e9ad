"""Indian-system number words, currency phrases and digit grouping."""

from inwords.config.logging import configure_logging
from inwords.config.settings import get_settings
from inwords.models.currency import (
    DEFAULT_CURRENCY,
    CurrencySpec,
    GroupingPattern,
    resolve_currency_spec,
)
from inwords.services.fraction_words import wordify_fraction
from inwords.services.integer_words import wordify_integer
from inwords.services.minimize_service import minimize
from inwords.services.phrase_service import to_words
from inwords.utils.errors import DomainError, InvalidCurrencySpec, InvalidNumberInput
from inwords.utils.indian_format import format_currency_string, format_indian_number, group_indian

__version__ = "0.1.0"

__all__ = [
    "to_words",
    "wordify_integer",
    "wordify_fraction",
    "minimize",
    "format_currency_string",
    "format_indian_number",
    "group_indian",
    "DEFAULT_CURRENCY",
    "CurrencySpec",
    "GroupingPattern",
    "resolve_currency_spec",
    "DomainError",
    "InvalidCurrencySpec",
    "InvalidNumberInput",
    "configure_logging",
    "get_settings",
]
