"""
Compact formatter for minimal log output
"""

from logtree.core.log_level import LEVEL_ABBREVIATIONS
from logtree.core.log_record import LogRecord
from logtree.formatters.base_formatter import BaseFormatter


class CompactFormatter(BaseFormatter):
    """
    Format log records in a compact single-line format.
    """

    def __init__(self, include_timestamp: bool = True, include_logger: bool = False):
        """
        Initialize compact formatter.

        Args:
            include_timestamp: Include timestamp in output
            include_logger: Include logger name in output

        Example:
            # Minimal format: "WRN: message"
            formatter = CompactFormatter(include_timestamp=False)

            # With logger: "12:34:56 [svc.db] WRN: message"
            formatter = CompactFormatter(include_logger=True)
        """
        self.include_timestamp = include_timestamp
        self.include_logger = include_logger

    def format(self, record: LogRecord) -> str:
        """
        Format log record in compact format.

        Args:
            record: Log record to format

        Returns:
            Compact formatted string
        """
        parts = []

        # HH:MM:SS, skipped for records without a timestamp
        if self.include_timestamp and record.timestamp is not None:
            parts.append(record.timestamp.strftime("%H:%M:%S"))

        if self.include_logger:
            parts.append(f"[{record.logger_name or 'root'}]")

        if record.has_index:
            parts.append(f"#{record.index}")

        parts.append(f"{LEVEL_ABBREVIATIONS[record.level]}:")
        parts.append(record.message)

        return " ".join(parts)

    def __repr__(self) -> str:
        """String representation."""
        return f"CompactFormatter(timestamp={self.include_timestamp}, logger={self.include_logger})"
