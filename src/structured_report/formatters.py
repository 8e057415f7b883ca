"""Per-type value formatters.

Each formatter takes a raw cell value and a printf-style pattern and
returns the formatted string. Values are coerced to the column's Python
type first, so numbers stored as strings (``"10"``) format the same way
as real numbers.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from decimal import Decimal
from typing import Any

from .models import ColumnType

Formatter = Callable[[Any, str], str]

DEFAULT_FORMATS: dict[ColumnType, str] = {
    ColumnType.STRING: "%s",
    ColumnType.NUMERIC: "%d",
    ColumnType.FLOAT: "%f",
    ColumnType.CURRENCY: "$%.2f",
}

SPREADSHEET_TYPES: dict[ColumnType, str] = {
    ColumnType.STRING: "String",
    ColumnType.NUMERIC: "Number",
    ColumnType.FLOAT: "Number",
    ColumnType.CURRENCY: "Number",
}

_NON_NUMERIC_CHARS = re.compile(r"[^0-9.\-]")


def to_integer(value: Any) -> int | float | Decimal:
    """Coerce a value for integer formatting.

    Strings are parsed as int, falling back to float for values
    such as ``"10.5"``. Numbers are returned unchanged.

    Raises:
        ValueError: If a string is not a number
        TypeError: If the value is a bool, or not a number or string
    """
    if isinstance(value, bool):
        raise TypeError("expected a number, got bool")
    if isinstance(value, (int, float, Decimal)):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            return float(text)
    raise TypeError(f"expected a number, got {type(value).__name__}")


def to_float(value: Any) -> float:
    """Coerce a value for floating point formatting."""
    if isinstance(value, bool):
        raise TypeError("expected a number, got bool")
    if isinstance(value, (int, float, Decimal, str)):
        return float(value)
    raise TypeError(f"expected a number, got {type(value).__name__}")


def format_string(value: Any, pattern: str) -> str:
    return pattern % (value,)


def format_numeric(value: Any, pattern: str) -> str:
    return pattern % (to_integer(value),)


def format_float(value: Any, pattern: str) -> str:
    return pattern % (to_float(value),)


FORMATTERS: dict[ColumnType, Formatter] = {
    ColumnType.STRING: format_string,
    ColumnType.NUMERIC: format_numeric,
    ColumnType.FLOAT: format_float,
    ColumnType.CURRENCY: format_float,
}


def strip_to_number(text: str) -> str:
    """Keep only digits, '.' and '-' (``"$1,000.00"`` -> ``"1000.00"``)."""
    return _NON_NUMERIC_CHARS.sub("", text)
