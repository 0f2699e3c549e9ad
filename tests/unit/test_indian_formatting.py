from decimal import Decimal

import pytest

from inwords.models.currency import CurrencySpec, GroupingPattern
from inwords.utils.indian_format import (
    format_currency_string,
    format_indian_number,
    format_western,
    group_indian,
    plain_number_string,
)


def test_indian_number_basic_groups():
    cases = [
        (0, '0'),
        (12, '12'),
        (123, '123'),
        (1234, '1,234'),
        (12345, '12,345'),
        (123456, '1,23,456'),
        (1234567, '12,34,567'),
        (12345678, '1,23,45,678'),
        (123456789, '12,34,56,789'),
    ]
    for value, expected in cases:
        assert format_indian_number(value) == expected


def test_indian_number_negative_and_fraction():
    assert format_indian_number(-1234567.89) == '-12,34,567.89'
    assert format_indian_number(Decimal('12345.6789')) == '12,345.6789'


def test_indian_number_non_numeric():
    assert format_indian_number(float('nan')) == '0'


def test_group_indian_fixed_two_decimals():
    assert group_indian(1234567.89) == '12,34,567.89'
    assert group_indian(999.5) == '999.50'
    assert group_indian(100) == '100.00'
    assert group_indian(0) == '0.00'


def test_group_indian_leftover_chunk():
    # 1 or 2 digit leftovers are prefixed as-is
    assert group_indian(1234567) == '12,34,567.00'
    assert group_indian(123456789) == '12,34,56,789.00'
    assert group_indian(9876543210.5) == '9,87,65,43,210.50'


def test_group_indian_negative_and_rounding():
    assert group_indian(-1234.5) == '-1,234.50'
    assert group_indian(1.004) == '1.00'
    # exact ties round away from zero
    assert group_indian(0.125) == '0.13'
    assert group_indian(-0.125) == '-0.13'


def test_group_indian_rounds_binary_value_of_floats():
    # 1.005 and 2.675 are stored just below the tie
    assert group_indian(1.005) == '1.00'
    assert group_indian(2.675) == '2.67'
    assert format_currency_string(1.005) == '₹1.00'
    assert format_western(2.675) == '2.67'
    # decimal text rounds on its decimal value
    assert group_indian('1.005') == '1.01'
    assert group_indian(Decimal('2.675')) == '2.68'


def test_group_indian_negative_zero():
    assert group_indian(-0.0) == '0.00'
    assert format_currency_string(-0.0) == '₹0.00'
    assert format_western(-0.0) == '0.00'
    # a negative value that rounds to zero keeps its sign
    assert group_indian(-0.001) == '-0.00'


def test_group_indian_numeric_string_and_garbage():
    assert group_indian('1234567.891') == '12,34,567.89'
    assert group_indian('not a number') == '0.00'


def test_format_western():
    assert format_western(1234567.891) == '1,234,567.89'
    assert format_western(-1000) == '-1,000.00'


def test_currency_string_default_is_indian_rupee():
    assert format_currency_string(1234567.5) == '₹12,34,567.50'
    assert format_currency_string(100) == '₹100.00'


def test_currency_string_dispatches_on_grouping():
    usd = CurrencySpec(major='Dollars', minor='Cents', symbol='$', grouping=GroupingPattern.WESTERN)
    assert format_currency_string(1234567.5, usd) == '$1,234,567.50'
    assert format_currency_string(1234567.5, 'Euros;Cents;€;0.00') == '€1234567.50'
    assert format_currency_string(1234567.5, 'Euros;Cents;€;whatever') == '€1234567.50'
    assert format_currency_string(1234.5, 'Euros;Cents;E;western') == 'E1234.50'
    assert format_currency_string(1234.5, ['Dollars', 'Cents', '$', '#,##0.00']) == '$1,234.50'


def test_currency_string_symbol_has_no_space_for_negatives():
    assert format_currency_string(-1234.5) == '₹-1,234.50'


@pytest.mark.parametrize('raw', ['Dollars;Cents;$', ['Dollars', 'Cents'], 42])
def test_currency_string_bad_spec_falls_back(raw):
    assert format_currency_string(1234567.5, raw) == '₹12,34,567.50'


def test_plain_number_string():
    assert plain_number_string(99) == '99'
    assert plain_number_string(12.0) == '12'
    assert plain_number_string(-5.5) == '-5.5'
    assert plain_number_string(-0.0) == '0'
    assert plain_number_string(1e16) == '10000000000000000'
    assert plain_number_string(1e-7) == '0.0000001'
