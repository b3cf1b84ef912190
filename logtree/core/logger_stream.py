"""Stream-style text accumulator bound to a logger and level"""

from __future__ import annotations
from typing import Any, List, Optional, TYPE_CHECKING

from logtree.core.log_level import LogLevel

if TYPE_CHECKING:
    from logtree.core.logger import Logger


class LoggerStream:
    """
    Collect text piecewise and emit it as one record per flush.

    A stream created for a disabled level carries UNSET and ignores all
    writes, so building the text costs nothing.

    Example:
        with logger.stream(LogLevel.DEBUG) as out:
            out.write("rows: ").write(len(rows))
    """

    def __init__(self, logger: "Logger", level: LogLevel):
        self._logger = logger
        self._level = LogLevel(level)
        self._parts: List[str] = []

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def enabled(self) -> bool:
        return self._level != LogLevel.UNSET

    def write(self, value: Any) -> LoggerStream:
        """Append ``str(value)``; returns self for chaining."""
        if self.enabled:
            self._parts.append(str(value))
        return self

    def flush(self, index: Optional[int] = None) -> None:
        """Emit the collected text as one record and reset the buffer."""
        if not self._parts:
            return
        message = "".join(self._parts)
        self._parts = []
        self._logger.log(self._level, message, index=index)

    def __enter__(self) -> LoggerStream:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.flush()
