"""Word conversion services."""

from .fraction_words import wordify_fraction
from .integer_words import wordify_integer
from .minimize_service import minimize
from .phrase_service import to_words

__all__ = ["wordify_fraction", "wordify_integer", "minimize", "to_words"]
