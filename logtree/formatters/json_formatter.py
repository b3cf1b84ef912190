"""
JSON formatter

Formats log records as one JSON object each
"""

import json
from logtree.core.log_record import LogRecord
from logtree.formatters.base_formatter import BaseFormatter


class JSONFormatter(BaseFormatter):
    """
    Format log records as JSON objects.
    """

    def __init__(
        self,
        include_thread_info: bool = True,
        indent: int = None,
        ensure_ascii: bool = False
    ):
        """
        Initialize JSON formatter.

        Args:
            include_thread_info: Include thread_id and thread_name
            indent: JSON indentation (None for compact, 2 for readable)
            ensure_ascii: Escape non-ASCII characters

        Example:
            # Compact JSON (one line per record)
            formatter = JSONFormatter()

            # Pretty-printed JSON
            formatter = JSONFormatter(indent=2)
        """
        self.include_thread_info = include_thread_info
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def format(self, record: LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string
        """
        log_dict = {
            "timestamp": record.timestamp.isoformat() if record.timestamp else None,
            "level": record.level.name,
            "logger": record.logger_name,
            "message": record.message,
        }

        if record.has_index:
            log_dict["index"] = record.index

        if self.include_thread_info:
            log_dict["thread_id"] = record.thread_id
            log_dict["thread_name"] = record.thread_name

        return json.dumps(
            log_dict,
            indent=self.indent,
            ensure_ascii=self.ensure_ascii
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(indent={self.indent})"
