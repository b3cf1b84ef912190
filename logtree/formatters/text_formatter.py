"""
Text formatter with customizable template

Formats log records using a template string with placeholders
"""

from logtree.core.log_record import LogRecord
from logtree.formatters.base_formatter import BaseFormatter


class TextFormatter(BaseFormatter):
    """
    Format log records using a customizable template.

    Supports placeholders for all LogRecord fields.
    """

    DEFAULT_TEMPLATE = "[{timestamp}] [{level:5}] [{logger}] {message}"
    NO_TIMESTAMP = "-"

    def __init__(self, template: str = None, timestamp_format: str = "%Y-%m-%d %H:%M:%S.%f"):
        """
        Initialize text formatter.

        Args:
            template: Format template with placeholders.
                     Available placeholders:
                     - {timestamp}: Timestamp ("-" for records without one)
                     - {level}: Log level name
                     - {level:5}: Log level with padding
                     - {message}: Log message
                     - {logger}: Logger name ("root" for the root logger)
                     - {index}: Sequence index ("" when absent)
                     - {thread}: Thread name
                     - {thread_id}: Thread ID
            timestamp_format: strftime format for timestamps; a trailing
                     "%f" is cut to milliseconds

        Example:
            # Default format
            formatter = TextFormatter()

            # With sequence numbers
            formatter = TextFormatter("{index:>6} {level} {logger}: {message}")
        """
        self.template = template or self.DEFAULT_TEMPLATE
        self.timestamp_format = timestamp_format

    def format(self, record: LogRecord) -> str:
        """
        Format log record using the template.

        Args:
            record: Log record to format

        Returns:
            Formatted string
        """
        if record.timestamp is None:
            timestamp_str = self.NO_TIMESTAMP
        else:
            timestamp_str = record.timestamp.strftime(self.timestamp_format)
            if self.timestamp_format.endswith("%f"):
                timestamp_str = timestamp_str[:-3]

        format_dict = {
            "timestamp": timestamp_str,
            "level": record.level.name,
            "message": record.message,
            "logger": record.logger_name or "root",
            "index": record.index if record.has_index else "",
            "thread": record.thread_name,
            "thread_id": record.thread_id,
        }

        try:
            return self.template.format(**format_dict)
        except (KeyError, ValueError) as e:
            # Fallback if template has unknown placeholder or bad format code
            return f"[FORMAT ERROR: {e}] {record.message}"

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(template='{self.template}')"
