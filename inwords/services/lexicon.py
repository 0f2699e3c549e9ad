"""English word tables for numbers below one hundred."""
from __future__ import annotations

UNITS: tuple[str, ...] = (
    "Zero", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine",
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen",
    "Seventeen", "Eighteen", "Nineteen",
)

# Indexed by tens digit
TENS: tuple[str, ...] = (
    "Zero", "Ten", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety",
)

# Indian place values, largest first
PLACE_VALUES: tuple[tuple[int, str], ...] = (
    (10_000_000, "Crore"),
    (100_000, "Lakh"),
    (1_000, "Thousand"),
    (100, "Hundred"),
)

__all__ = ["UNITS", "TENS", "PLACE_VALUES"]
