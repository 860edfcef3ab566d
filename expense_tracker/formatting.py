"""Formatting utilities for currency, dates and amount entry."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from . import config


def _group_indian(digits: str) -> str:
    """Insert Indian-style separators: last three digits, then pairs."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_currency(amount: Union[float, int], include_sign: bool = True) -> str:
    """Format an amount in rupees with Indian digit grouping.

    Args:
        amount: The amount to format
        include_sign: Whether to include the rupee symbol

    Returns:
        Formatted currency string (e.g., "₹1,23,456.78" or "1,23,456.78")

    Example:
        >>> format_currency(123456.78)
        '₹1,23,456.78'
        >>> format_currency(-500)
        '-₹500.00'
    """
    rounded = round(float(amount), 2)
    whole, fraction = f"{abs(rounded):.2f}".split(".")
    body = f"{_group_indian(whole)}.{fraction}"
    if include_sign:
        body = f"{config.CURRENCY_SYMBOL}{body}"
    return f"-{body}" if rounded < 0 else body


def format_date(value: datetime) -> str:
    """Format a transaction timestamp for display, e.g. ``Jan 05, 2025``."""
    return value.strftime(config.DATE_FORMAT)


def filter_amount_input(text: Optional[str]) -> str:
    """Strip everything but digits and the first decimal point.

    Example:
        >>> filter_amount_input("12a.3.4")
        '12.34'
    """
    if not text:
        return ""
    kept = []
    seen_point = False
    for char in text:
        if char.isdigit() and char.isascii():
            kept.append(char)
        elif char == "." and not seen_point:
            kept.append(char)
            seen_point = True
    return "".join(kept)


def parse_amount(text: Optional[str]) -> Optional[float]:
    """Parse amount text after filtering, or ``None`` when there is no number."""
    cleaned = filter_amount_input(text)
    if not cleaned or cleaned == ".":
        return None
    return float(cleaned)
