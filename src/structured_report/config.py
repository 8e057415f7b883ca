"""
Configuration - Handles report rendering and row-handling options.

This module handles:
- Configuration dataclass with all options
- JSON configuration file support
- Configuration validation
"""

import json
import re
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

# Characters outside the XML 1.0 Char production
XML_INVALID_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


@dataclass
class ReportConfig:
    """
    Configuration for a Report.

    Attributes:
        display_key: Key used to resolve a display value from mapping cells
        strict_columns: Raise ColumnNotFound for unknown keys in keyed rows
            instead of ignoring them
        csv_delimiter: Single-character field delimiter for CSV output
        text_separator: Column separator for fixed-width text output
        worksheet_name: Worksheet name in spreadsheet output
        log_level: Logging level for callers that run setup_logging()
    """

    display_key: str = "text"
    strict_columns: bool = False
    csv_delimiter: str = ","
    text_separator: str = " | "
    worksheet_name: str = "Sheet 1"
    log_level: str = "INFO"

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save_to_file(self, path: Path) -> None:
        """Save configuration to JSON file."""
        path.write_text(json.dumps(self.to_dict(), indent=2))

    @classmethod
    def load_from_file(cls, path: Path) -> "ReportConfig":
        """Load configuration from JSON file."""
        data = json.loads(path.read_text())
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ReportConfig":
        """Create config from dictionary."""
        # Filter only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in known_fields}

        return cls(**filtered_data)

    def validate(self) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not isinstance(self.display_key, str) or not self.display_key:
            errors.append("display_key must be a non-empty string")

        if not isinstance(self.csv_delimiter, str) or len(self.csv_delimiter) != 1:
            errors.append(
                f"csv_delimiter must be a single character: {self.csv_delimiter!r}"
            )

        if not isinstance(self.text_separator, str):
            errors.append(f"text_separator must be a string: {self.text_separator!r}")

        if not isinstance(self.worksheet_name, str) or not self.worksheet_name:
            errors.append("worksheet_name must be a non-empty string")
        elif XML_INVALID_CHARS.search(self.worksheet_name):
            errors.append(
                f"worksheet_name contains characters not allowed in XML: {self.worksheet_name!r}"
            )

        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if str(self.log_level).upper() not in valid_log_levels:
            errors.append(f"Invalid log level: {self.log_level}")

        return errors

    def is_valid(self) -> bool:
        """Check if configuration is valid."""
        return len(self.validate()) == 0


def create_default_config() -> ReportConfig:
    """Create a configuration with default values."""
    return ReportConfig()
