"""Console handler with ANSI colors"""

import sys
import threading
from typing import Optional

from logtree.core.log_record import LogRecord
from logtree.handlers.base_handler import LogHandler


class ConsoleHandler(LogHandler):
    """Write records to a console stream with optional colors."""

    def __init__(self, colored: bool = True, stream=None, formatter=None, name: Optional[str] = None):
        """
        Initialize console handler.

        Args:
            colored: Use ANSI color codes (ignored when a formatter is set)
            stream: Output stream (default: sys.stderr)
            formatter: Record formatter (default: uses record's __str__)
            name: Handler name (default: "ConsoleHandler")
        """
        super().__init__(name=name, formatter=formatter)
        self.colored = colored
        self.stream = stream or sys.stderr
        self._lock = threading.Lock()

    def publish(self, record: LogRecord) -> None:
        """Write record to console."""
        msg = self.format(record)

        if self.colored and not self.formatter:
            msg = f"{record.level.color_code}{msg}{record.level.reset_code}"

        with self._lock:
            self.stream.write(msg + "\n")
            self.stream.flush()

    def flush(self) -> None:
        """Flush stream."""
        self.stream.flush()
