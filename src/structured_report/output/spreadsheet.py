"""
Spreadsheet output - renders a report as an Excel 2003 XML Spreadsheet.

Document layout:
    Workbook
      Styles: Header (bold font), Currency (number format)
      Worksheet
        Table
          Column (one per report column)
          Row of header cells
          Row per report row

Escaping of element text and attribute values is left to lxml. Text holding
characters XML 1.0 cannot represent raises FormattingError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from lxml import etree

from ..column import DEFAULT_DISPLAY_KEY, Column
from ..exceptions import FormattingError
from ..logging_config import get_logger
from ..models import ColumnType, OutputTarget

if TYPE_CHECKING:
    from ..report import Report

logger = get_logger("output.spreadsheet")

SS_NAMESPACE = "urn:schemas-microsoft-com:office:spreadsheet"

XML_DECLARATION = '<?xml version="1.0"?>\n'

# Parsed rather than built from an nsmap so the declarations keep this
# order and elements stay in the default (unprefixed) namespace.
WORKBOOK_TEMPLATE = (
    '<Workbook xmlns="urn:schemas-microsoft-com:office:spreadsheet"'
    ' xmlns:o="urn:schemas-microsoft-com:office:office"'
    ' xmlns:x="urn:schemas-microsoft-com:office:excel"'
    ' xmlns:ss="urn:schemas-microsoft-com:office:spreadsheet"'
    ' xmlns:html="http://www.w3.org/TR/REC-html40"/>'
)

HEADER_STYLE = "Header"
CURRENCY_STYLE = "Currency"
CURRENCY_NUMBER_FORMAT = '"$"#,##0.00'


def _ss(name: str) -> str:
    """Qualify a name with the spreadsheet namespace."""
    return f"{{{SS_NAMESPACE}}}{name}"


def _format_width(width: float) -> str:
    if isinstance(width, float) and width.is_integer():
        return str(int(width))
    return str(width)


def _add_styles(workbook: etree._Element) -> None:
    styles = etree.SubElement(workbook, _ss("Styles"))

    header = etree.SubElement(styles, _ss("Style"), {_ss("ID"): HEADER_STYLE})
    etree.SubElement(header, _ss("Font"), {_ss("Bold"): "1"})

    currency = etree.SubElement(styles, _ss("Style"), {_ss("ID"): CURRENCY_STYLE})
    etree.SubElement(
        currency, _ss("NumberFormat"), {_ss("Format"): CURRENCY_NUMBER_FORMAT}
    )


def _add_column_definition(table: etree._Element, column: Column) -> None:
    attributes = {_ss("AutoFitWidth"): "1"}
    if column.width is not None:
        attributes[_ss("Width")] = _format_width(column.width)
    if column.type is ColumnType.CURRENCY:
        attributes[_ss("StyleID")] = CURRENCY_STYLE
    etree.SubElement(table, _ss("Column"), attributes)


def _add_cell(
    row: etree._Element,
    column: Column,
    cell_type: str,
    text: str,
    value: Any,
    display_key: str,
    style: str | None = None,
) -> None:
    """Append a Cell/Data pair holding text.

    Raises:
        FormattingError: If text holds characters XML 1.0 cannot represent
    """
    attributes = {_ss("StyleID"): style} if style else {}
    cell = etree.SubElement(row, _ss("Cell"), attributes)
    data = etree.SubElement(cell, _ss("Data"), {_ss("Type"): cell_type})
    try:
        data.text = text
    except ValueError as exc:
        raise FormattingError(
            column.id,
            value,
            text,
            OutputTarget.SPREADSHEET.value,
            display_key,
            column.format,
            reason=str(exc),
        ) from exc


def build_workbook(
    report: Report,
    worksheet_name: str = "Sheet 1",
    display_key: str = DEFAULT_DISPLAY_KEY,
) -> etree._Element:
    """
    Build the Workbook element tree for a report.

    Args:
        report: The report to render
        worksheet_name: Name of the single worksheet
        display_key: Key used to resolve mapping cell values

    Returns:
        The Workbook root element

    Raises:
        FormattingError: If a title or cell value cannot be formatted or
            contains control characters XML 1.0 does not allow
    """
    columns = list(report.columns.values())

    workbook = etree.fromstring(WORKBOOK_TEMPLATE)
    _add_styles(workbook)

    worksheet = etree.SubElement(workbook, _ss("Worksheet"), {_ss("Name"): worksheet_name})
    table = etree.SubElement(
        worksheet, _ss("Table"), {_ss("ExpandedColumnCount"): str(len(columns))}
    )

    for column in columns:
        _add_column_definition(table, column)

    header_row = etree.SubElement(table, _ss("Row"))
    for column in columns:
        _add_cell(
            header_row,
            column,
            "String",
            column.title,
            column.title,
            display_key,
            style=HEADER_STYLE,
        )

    for values in report.rows():
        row = etree.SubElement(table, _ss("Row"))
        for column in columns:
            value = values[column.id]
            _add_cell(
                row,
                column,
                column.spreadsheet_type,
                column.format_value(value, OutputTarget.SPREADSHEET, display_key),
                value,
                display_key,
            )

    return workbook


def render_spreadsheet(
    report: Report,
    worksheet_name: str = "Sheet 1",
    display_key: str = DEFAULT_DISPLAY_KEY,
) -> str:
    """
    Render a report as an XML Spreadsheet document string.

    Returns:
        The serialized document, starting with the XML declaration
    """
    workbook = build_workbook(report, worksheet_name, display_key)
    markup = etree.tostring(workbook, pretty_print=True, encoding="unicode")
    logger.debug("Rendered %d rows as spreadsheet markup", report.count)
    return XML_DECLARATION + markup
