"""Row input shapes accepted by Report.add_row().

A row is either keyed (column id -> value) or positional (values in
column registration order). Callers may build the shape explicitly or
pass a plain mapping or sequence, which to_row_input() classifies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class KeyedRow:
    """Row values keyed by column id; key order is irrelevant."""

    values: Mapping[str, Any]


@dataclass(frozen=True)
class PositionalRow:
    """Row values in column registration order."""

    values: Sequence[Any]


RowInput = Union[KeyedRow, PositionalRow]


def to_row_input(data: Any) -> RowInput:
    """Classify raw row data as a KeyedRow or PositionalRow.

    Raises:
        TypeError: If data is neither a mapping nor a non-string sequence
    """
    if isinstance(data, (KeyedRow, PositionalRow)):
        return data
    if isinstance(data, Mapping):
        return KeyedRow(data)
    if isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray)):
        return PositionalRow(data)
    raise TypeError(
        f"Row data must be a mapping or a sequence, got {type(data).__name__}"
    )
