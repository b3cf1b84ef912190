"""File handler"""

import threading
from pathlib import Path
from typing import Optional

from logtree.core.log_record import LogRecord
from logtree.handlers.base_handler import LogHandler


class FileHandler(LogHandler):
    """Append records to a file, one line each."""

    def __init__(
        self,
        filepath: str,
        mode: str = "a",
        encoding: str = "utf-8",
        formatter=None,
        name: Optional[str] = None,
    ):
        """
        Initialize file handler.

        Args:
            filepath: Path to log file; parent directories are created
            mode: File open mode (default: 'a' for append)
            encoding: File encoding (default: 'utf-8')
            formatter: Record formatter (default: uses record's __str__)
            name: Handler name (default: "FileHandler")
        """
        super().__init__(name=name, formatter=formatter)
        self.filepath = Path(filepath)
        self.mode = mode
        self.encoding = encoding
        self._file = None
        self._lock = threading.Lock()
        self._open()

    def _open(self):
        """Open log file."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.filepath, self.mode, encoding=self.encoding)

    def publish(self, record: LogRecord) -> None:
        """Write record to file; records published after close() are dropped."""
        msg = self.format(record)
        with self._lock:
            if self._file:
                self._file.write(msg + "\n")

    def flush(self) -> None:
        """Flush file buffer."""
        with self._lock:
            if self._file:
                self._file.flush()

    def close(self) -> None:
        """Close file."""
        with self._lock:
            if self._file:
                self._file.close()
                self._file = None
