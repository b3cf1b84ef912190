"""
Log record data structure

One immutable snapshot of a log event, built per logging call and handed
read-only to every handler on the dispatch chain.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Dict, Any
import threading

from logtree.core.log_level import LogLevel


@dataclass(frozen=True)
class LogRecord:
    """
    Log record data structure.

    ``timestamp`` is None when the caller suppressed time capture.
    ``index`` is an optional unsigned sequence number.
    """

    logger_name: str
    message: str
    level: LogLevel
    timestamp: Optional[datetime] = field(default_factory=datetime.now)
    index: Optional[int] = None
    thread_id: int = field(default_factory=threading.get_ident)
    thread_name: str = field(default_factory=lambda: threading.current_thread().name)

    def __post_init__(self):
        """Validate log record after initialization."""
        # frozen dataclass: coerce through object.__setattr__
        if not isinstance(self.level, LogLevel):
            object.__setattr__(self, "level", LogLevel(self.level))
        if not isinstance(self.message, str):
            object.__setattr__(self, "message", str(self.message))
        if self.index is not None and self.index < 0:
            raise ValueError(f"index must be unsigned, got {self.index}")

    @property
    def has_index(self) -> bool:
        """True when the record carries a sequence index."""
        return self.index is not None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log record to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "logger_name": self.logger_name,
            "message": self.message,
            "level": self.level.name,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
            "index": self.index,
            "thread_id": self.thread_id,
            "thread_name": self.thread_name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogRecord":
        """
        Create log record from dictionary.

        Args:
            data: Dictionary with log record data

        Returns:
            New LogRecord instance
        """
        timestamp = data.get("timestamp")
        return cls(
            logger_name=data.get("logger_name", ""),
            message=data["message"],
            level=LogLevel[data["level"]],
            timestamp=datetime.fromisoformat(timestamp) if timestamp else None,
            index=data.get("index"),
            thread_id=data.get("thread_id", 0),
            thread_name=data.get("thread_name", ""),
        )

    def __str__(self) -> str:
        """String representation."""
        if self.timestamp is not None:
            when = self.timestamp.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        else:
            when = "-"
        seq = f"[#{self.index}] " if self.has_index else ""
        name = self.logger_name or "root"
        return f"[{when}] [{self.level.name:5}] [{name}] {seq}{self.message}"
