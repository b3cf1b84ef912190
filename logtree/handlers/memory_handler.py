"""In-memory handler that keeps published records"""

import threading
from collections import deque
from typing import Deque, List, Optional

from logtree.core.log_level import LogLevel
from logtree.core.log_record import LogRecord
from logtree.handlers.base_handler import LogHandler


class MemoryHandler(LogHandler):
    """
    Keep published records in a list.

    Useful for embedding (e.g. showing recent log lines in a UI) and for
    asserting on log output in tests.

    Args:
        capacity: Keep at most this many newest records (None: unbounded)
        name: Handler name (default: "MemoryHandler")
    """

    def __init__(self, capacity: Optional[int] = None, name: Optional[str] = None):
        super().__init__(name=name)
        if capacity is not None and capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        # Oldest records fall off the left once capacity is reached
        self._records: Deque[LogRecord] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    def publish(self, record: LogRecord) -> None:
        with self._lock:
            self._records.append(record)

    @property
    def records(self) -> List[LogRecord]:
        """Snapshot of the kept records, oldest first."""
        with self._lock:
            return list(self._records)

    def messages(self, min_level: LogLevel = LogLevel.UNSET) -> List[str]:
        """Messages of kept records at or above ``min_level``."""
        return [r.message for r in self.records if r.level >= min_level]

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
