"""
Structured Report - Build in-memory tables and render them as CSV,
XML spreadsheets or fixed-width text.

Basic Usage:
    from structured_report import Report

    report = Report({
        "date": {"title": "Date"},
        "cost": {"title": "Cost", "type": "currency"},
    })
    report.add_row(["1/1/2001", "10"])
    report.add_row({"date": "1/2/2001", "cost": "5"})

    report.to_csv()   # 'Date,Cost\n1/1/2001,$10.00\n1/2/2001,$5.00\n'
    report.to_text()
    report.to_xls()
"""

__version__ = "1.0.0"

from structured_report.exceptions import (
    ReportError,
    ConfigError,
    ColumnError,
    ColumnAlreadyExists,
    ColumnNotFound,
    InvalidColumnType,
    MissingColumnData,
    FormattingError,
)

from structured_report.config import ReportConfig, create_default_config
from structured_report.models import ColumnType, OutputTarget
from structured_report.column import Column
from structured_report.rows import KeyedRow, PositionalRow, RowInput
from structured_report.report import Report
from structured_report.logging_config import setup_logging, get_logger

__all__ = [
    # Version
    "__version__",
    # Main API
    "Report",
    "Column",
    "KeyedRow",
    "PositionalRow",
    "RowInput",
    # Configuration
    "ReportConfig",
    "create_default_config",
    "setup_logging",
    "get_logger",
    # Data Types
    "ColumnType",
    "OutputTarget",
    # Exceptions
    "ReportError",
    "ConfigError",
    "ColumnError",
    "ColumnAlreadyExists",
    "ColumnNotFound",
    "InvalidColumnType",
    "MissingColumnData",
    "FormattingError",
]
