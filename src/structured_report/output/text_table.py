"""
Fixed-width text output - renders a report as an aligned plain-text table.

Example:
    Date     | Cost
    ------------------
    1/1/2001 | $10.00
    1/2/2001 |  $5.00

Numeric, float and currency columns are right-aligned; everything else,
including every header title, is left-aligned. Each line carries one
trailing space (the divider one extra '-').
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..column import DEFAULT_DISPLAY_KEY, Column
from ..logging_config import get_logger
from ..models import OutputTarget

if TYPE_CHECKING:
    from ..report import Report

logger = get_logger("output.text_table")


def format_cells(report: Report, display_key: str = DEFAULT_DISPLAY_KEY) -> list[list[str]]:
    """Format every cell for text output, one list per row."""
    columns = list(report.columns.values())
    return [
        [column.format_value(row[column.id], OutputTarget.TEXT, display_key) for column in columns]
        for row in report.rows()
    ]


def _widths(columns: list[Column], cells: list[list[str]]) -> list[int]:
    widths = [len(column.title) for column in columns]
    for row in cells:
        for index, text in enumerate(row):
            widths[index] = max(widths[index], len(text))
    return widths


def compute_column_widths(
    report: Report,
    display_key: str = DEFAULT_DISPLAY_KEY,
) -> dict[str, int]:
    """
    Compute the display width of each column.

    Returns:
        Column id -> max(title length, longest formatted cell)
    """
    columns = list(report.columns.values())
    widths = _widths(columns, format_cells(report, display_key))
    return {column.id: width for column, width in zip(columns, widths)}


def render_text(
    report: Report,
    separator: str = " | ",
    display_key: str = DEFAULT_DISPLAY_KEY,
) -> str:
    """
    Render a report as a fixed-width text table.

    Args:
        report: The report to render
        separator: String placed between columns
        display_key: Key used to resolve mapping cell values

    Returns:
        Header, divider and one line per row, each newline-terminated
    """
    columns = list(report.columns.values())
    cells = format_cells(report, display_key)
    widths = _widths(columns, cells)

    header = separator.join(
        f"{column.title:<{width}}" for column, width in zip(columns, widths)
    )
    lines = [header + " ", "-" * (len(header) + 1)]

    for row in cells:
        lines.append(
            separator.join(
                f"{text:>{width}}" if column.is_numeric else f"{text:<{width}}"
                for column, width, text in zip(columns, widths, row)
            )
            + " "
        )

    logger.debug("Rendered %d rows as fixed-width text", report.count)
    return "\n".join(lines) + "\n"
