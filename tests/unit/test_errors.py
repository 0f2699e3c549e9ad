import pytest

from inwords.models.currency import CurrencySpec
from inwords.models.numeric import parse_leading_int
from inwords.utils.errors import (
    ERROR_CODES,
    DomainError,
    InvalidCurrencySpec,
    InvalidNumberInput,
)


def test_invalid_currency_spec_fields():
    exc = InvalidCurrencySpec("a;b", "expected 4 parts")
    assert isinstance(exc, DomainError)
    assert exc.code == ERROR_CODES["currency_spec"]
    assert "expected 4 parts" in exc.message
    assert exc.details == {"value": "'a;b'"}


def test_invalid_number_input_message():
    exc = InvalidNumberInput("abc")
    assert exc.code == ERROR_CODES["number"]
    assert "'abc'" in str(exc)


def test_error_codes_are_all_raised():
    raised = set()
    with pytest.raises(DomainError) as exc_info:
        CurrencySpec.parse("only;three;parts")
    raised.add(exc_info.value.code)
    with pytest.raises(DomainError) as exc_info:
        parse_leading_int("abc")
    raised.add(exc_info.value.code)
    assert raised == set(ERROR_CODES.values())
