"""Formatting helpers shared by the request builders"""

from .strings import to_numeric, format_date, to_param_value

__all__ = [
    "to_numeric",
    "format_date",
    "to_param_value",
]
