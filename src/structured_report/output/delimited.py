"""
Delimited text output - renders a report as CSV.

Quoting follows the csv module's QUOTE_MINIMAL rules; every record,
the header included, ends with a single newline.
"""

from __future__ import annotations

import csv
import io
from typing import TYPE_CHECKING

from ..column import DEFAULT_DISPLAY_KEY
from ..logging_config import get_logger
from ..models import OutputTarget

if TYPE_CHECKING:
    from ..report import Report

logger = get_logger("output.delimited")


def render_delimited(
    report: Report,
    delimiter: str = ",",
    display_key: str = DEFAULT_DISPLAY_KEY,
) -> str:
    """
    Render a report as delimited text.

    Args:
        report: The report to render
        delimiter: Field delimiter
        display_key: Key used to resolve mapping cell values

    Returns:
        Header line of column titles followed by one line per row
    """
    columns = list(report.columns.values())
    buffer = io.StringIO()
    record = io.StringIO()
    # Fields holding a character of the line terminator get quoted, so
    # records are written with CRLF to cover a bare CR, then end in LF.
    writer = csv.writer(record, delimiter=delimiter, lineterminator="\r\n")

    def write_record(fields: list[str]) -> None:
        record.seek(0)
        record.truncate()
        writer.writerow(fields)
        buffer.write(record.getvalue()[:-2] + "\n")

    write_record([column.title for column in columns])
    for row in report.rows():
        write_record(
            [
                column.format_value(row[column.id], OutputTarget.TEXT, display_key)
                for column in columns
            ]
        )

    logger.debug("Rendered %d rows as delimited text", report.count)
    return buffer.getvalue()
