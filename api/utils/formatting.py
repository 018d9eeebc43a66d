# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
pt-PT display formatting for amounts and dates.
"""

from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

NBSP = "\u00a0"
CURRENCY_SYMBOL = "€"

# pt-PT only groups thousands once the integer part has 5+ digits
_MIN_GROUPING_DIGITS = 5


def _group_thousands(digits: str) -> str:
    if len(digits) < _MIN_GROUPING_DIGITS:
        return digits
    groups = []
    while digits:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    return NBSP.join(groups)


def format_currency(value: Union[int, float, Decimal, str]) -> str:
    """
    Format an amount in euros the way pt-PT locales display it.

    Examples: 1234.56 -> "1234,56 €", 12345.6 -> "12 345,60 €"
    (spaces are non-breaking).

    Args:
        value: Amount in EUR

    Returns:
        Formatted string
    """
    amount = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    integer_part, fraction_part = f"{abs(amount):.2f}".split(".")
    return f"{sign}{_group_thousands(integer_part)},{fraction_part}{NBSP}{CURRENCY_SYMBOL}"


def format_date(value: Union[date, datetime, str]) -> str:
    """
    Format a date as dd/mm/yyyy.

    Accepts date/datetime objects or ISO-8601 strings (a trailing "Z" is
    understood as UTC).
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return value.strftime("%d/%m/%Y")
