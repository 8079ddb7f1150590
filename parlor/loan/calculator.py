"""
Monthly payment for a fixed-rate loan, and the checks applied to its inputs.
"""

import math


def parse_number(text: str):
    """Return the float value of `text`, or None if it isn't a finite number."""
    try:
        value = float(text.strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def is_valid_whole_amount(text: str) -> bool:
    """
    Principal and duration must be whole numbers of at least one.

    >>> is_valid_whole_amount("250000")
    True
    >>> is_valid_whole_amount("12.5")
    False
    """
    value = parse_number(text)
    return value is not None and value.is_integer() and value >= 1


def is_valid_apr(text: str) -> bool:
    """APR is a percentage and may be zero but not negative."""
    value = parse_number(text)
    return value is not None and value >= 0


def monthly_payment(principal: float, years: float, apr: float) -> float:
    """
    Monthly payment that pays off `principal` over `years` at `apr` percent.

    :param principal: Loan amount
    :param years: Loan duration in years
    :param apr: Annual percentage rate, e.g. 5 for 5%
    """
    rate = apr / 100 / 12
    months = years * 12
    if rate == 0:
        return principal / months
    return principal * (rate / (1 - (1 + rate) ** (-months)))
