"""
Base handler interface

A handler is a sink for log records. Loggers only call publish() and
get_name(); buffering, durability and thread-affinity are up to the
handler.
"""

from abc import ABC, abstractmethod
from typing import Optional

from logtree.core.log_record import LogRecord


class LogHandler(ABC):
    """
    Abstract base class for log handlers.

    Loggers compare handlers by identity, so one instance attached to
    several loggers is published to once per logger on the chain.
    """

    def __init__(self, name: Optional[str] = None, formatter=None):
        """
        Initialize handler.

        Args:
            name: Handler name used by Logger.get_handler (default: class name)
            formatter: Record formatter (default: uses record's __str__)
        """
        self.name = name or type(self).__name__
        self.formatter = formatter

    @abstractmethod
    def publish(self, record: LogRecord) -> None:
        """
        Output a log record.

        Args:
            record: The record to output; must not be modified
        """
        pass

    def get_name(self) -> str:
        return self.name

    def format(self, record: LogRecord) -> str:
        """Render a record with the formatter, or str() without one."""
        if self.formatter:
            return self.formatter.format(record)
        return str(record)

    def flush(self) -> None:
        """Flush buffered output."""

    def close(self) -> None:
        """Release resources."""

    def __repr__(self) -> str:
        """String representation."""
        return f"{type(self).__name__}(name={self.name!r})"
