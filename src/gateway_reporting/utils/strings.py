"""
Scalar formatting for reporting query parameters.

Amounts go out as minor-unit digit strings, dates as ``YYYY-MM-DD`` and enum
members as their wire value. ``None`` always stays ``None`` so the transport
can tell an absent filter from an empty one.
"""

from __future__ import annotations
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Any, Optional, Union

DATE_FORMAT = "%Y-%m-%d"

_TWO_PLACES = Decimal("0.01")

Numeric = Union[int, float, str, Decimal]


def to_numeric(value: Optional[Numeric]) -> Optional[str]:
    """
    Render an amount as its canonical minor-unit string.

    The value is quantized to two decimal places (half up) and only its
    digits are kept, so ``10``, ``10.0`` and ``"10.00"`` all become
    ``"1000"``.

    Zero is a real filter and renders as ``"000"``; only None or an empty
    string count as "no amount". The sign is dropped along with the decimal
    point, so ``-10`` also renders as ``"1000"``.

    Args:
        value: Amount in major units

    Returns:
        Digit string, or None when no amount was given
    """
    if value is None or value == "":
        return None

    # str() first so floats keep their shortest repr instead of binary noise
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    quantized = amount.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)

    return "".join(ch for ch in format(quantized, "f") if ch.isdigit())


def format_date(value: Optional[Union[date, datetime]]) -> Optional[str]:
    """Format a date or datetime as ``YYYY-MM-DD`` without timezone conversion."""
    if value is None:
        return None
    return value.strftime(DATE_FORMAT)


def to_param_value(value: Any) -> Any:
    """Convert a filter value to what goes in the query parameter map."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (date, datetime)):
        return format_date(value)
    return value


__all__ = [
    "DATE_FORMAT",
    "to_numeric",
    "format_date",
    "to_param_value",
]
