"""
Logger - named node in the logger tree

Each logger owns a level, an additivity flag and a list of handlers.
Records flow from the logger a call was made on up through every additive
ancestor to the root.

Lock order: dispatch holds a logger's handler lock while it calls into the
parent, so locks are always taken child first, then parent. No operation
takes a child's lock while holding a parent's, and the tree is acyclic, so
concurrent dispatch from different loggers cannot deadlock.
"""

from __future__ import annotations
from collections.abc import Mapping
from datetime import datetime
from typing import Optional, List, Any, Tuple, TYPE_CHECKING
import sys
import threading
import weakref

from logtree.core.exceptions import DispatchFailure, InvalidArgumentError
from logtree.core.log_level import LogLevel
from logtree.core.log_record import LogRecord
from logtree.core.logger_stream import LoggerStream

if TYPE_CHECKING:
    from logtree.handlers.base_handler import LogHandler


def _format_message(msg: Any, args: Tuple[Any, ...]) -> str:
    """Render a message, applying %-style args when present."""
    text = str(msg)
    if args:
        # logger.info("%(user)s left", {"user": name})
        if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
            return text % args[0]
        return text % args
    return text


def _to_level(level: Any) -> LogLevel:
    """Convert a caller-supplied level; unknown values map to FATAL."""
    try:
        if isinstance(level, str):
            return LogLevel.from_string(level)
        return LogLevel(level)
    except (TypeError, ValueError):
        return LogLevel.FATAL


def _raw_text(msg: Any) -> str:
    """Message text for a substitute record; must not raise."""
    if isinstance(msg, str):
        return msg
    return object.__repr__(msg)


class Logger:
    """
    Named logger with inherited level, handlers and additivity.

    Loggers are created by a LogManager, which holds the only owning
    references. The parent link is a weak back-reference used for
    traversal only.

    Thread Safety:
        Handler list operations and dispatch are serialized by a re-entrant
        lock per logger. ``level`` and ``additive`` are plain attributes read
        without locking; a level change may briefly be invisible to a call
        already past its gate check.

    Example:
        root = Logger.get_root()
        root.add_handler(ConsoleHandler())
        svc = Logger.get_instance("svc.db")
        svc.info("connected to %s", host)
    """

    def __init__(
        self,
        name: str,
        parent: Optional[Logger] = None,
        level: LogLevel = LogLevel.UNSET,
    ):
        if parent is None and level == LogLevel.UNSET:
            raise InvalidArgumentError("root logger needs a concrete level")

        self._name = name
        self._parent_ref = weakref.ref(parent) if parent is not None else None
        self._level = LogLevel(level)
        self._additive = True
        self._handlers: List["LogHandler"] = []
        self._handler_lock = threading.RLock()

    # ------------------------------------------------------------------
    # Registry pass-throughs
    # ------------------------------------------------------------------

    @staticmethod
    def get_root() -> Logger:
        """Root logger of the default registry."""
        from logtree.core.log_manager import LogManager
        return LogManager.get_default_manager().get_root()

    @staticmethod
    def get_instance(name: str) -> Logger:
        """Create or return the named logger from the default registry."""
        from logtree.core.log_manager import LogManager
        return LogManager.get_default_manager().get_instance(name)

    @staticmethod
    def get_root_level() -> LogLevel:
        return Logger.get_root().level

    @staticmethod
    def set_root_level(level: LogLevel) -> None:
        Logger.get_root().set_level(level)

    @staticmethod
    def shutdown() -> None:
        """Tear down the default registry; existing Logger references go stale."""
        from logtree.core.log_manager import LogManager
        LogManager.shutdown_default()

    # ------------------------------------------------------------------
    # Identity, level and additivity
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def parent(self) -> Optional[Logger]:
        """Parent logger, or None for the root (or once the registry is gone)."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def is_root(self) -> bool:
        return self._parent_ref is None

    @property
    def level(self) -> LogLevel:
        """Level set on this logger; UNSET means inherit."""
        return self._level

    def set_level(self, level: LogLevel) -> None:
        """
        Set this logger's level.

        Args:
            level: New level; UNSET makes a non-root logger inherit again

        Raises:
            InvalidArgumentError: If UNSET is set on the root logger
        """
        level = LogLevel(level)
        if self.is_root and level == LogLevel.UNSET:
            raise InvalidArgumentError("cannot set level UNSET on the root logger")
        self._level = level

    @property
    def additive(self) -> bool:
        """Whether records also flow to the parent's handlers."""
        return self._additive

    @additive.setter
    def additive(self, value: bool) -> None:
        self._additive = bool(value)

    @property
    def effective_level(self) -> LogLevel:
        """
        Level this logger enforces.

        Walks up parent links to the first level that is not UNSET. The
        root is never UNSET, so the walk ends there at the latest. Resolved
        on every call so ancestor changes are visible at once.
        """
        node: Optional[Logger] = self
        while node is not None:
            level = node._level
            if level != LogLevel.UNSET:
                return level
            node = node.parent
        # Detached from a torn-down registry
        return LogLevel.UNSET

    def is_enabled(self, level: LogLevel) -> bool:
        """True if a record at ``level`` passes this logger's gate."""
        threshold = self.effective_level
        # UNSET here means the logger is detached; nothing passes
        return threshold != LogLevel.UNSET and level >= threshold

    # ------------------------------------------------------------------
    # Handler management
    # ------------------------------------------------------------------

    def add_handler(self, handler: "LogHandler") -> None:
        """
        Append a handler unless it is already attached.

        Raises:
            InvalidArgumentError: If handler is None
        """
        if handler is None:
            raise InvalidArgumentError("handler must not be None")

        with self._handler_lock:
            if not any(h is handler for h in self._handlers):
                self._handlers.append(handler)

    def remove_handler(self, handler: "LogHandler") -> None:
        """Detach a handler by identity; no-op if absent."""
        if handler is None:
            return

        with self._handler_lock:
            for i, h in enumerate(self._handlers):
                if h is handler:
                    del self._handlers[i]
                    return

    def remove_handler_by_name(self, name: str) -> None:
        """Detach the first handler reporting ``name``; no-op if absent."""
        with self._handler_lock:
            self.remove_handler(self.get_handler(name))

    def get_handler(self, name: str) -> Optional["LogHandler"]:
        """Return the first attached handler named ``name``, or None."""
        with self._handler_lock:
            for handler in self._handlers:
                if handler.get_name() == name:
                    return handler
            return None

    def get_handlers(self) -> List["LogHandler"]:
        """Snapshot copy of the attached handlers, in insertion order."""
        with self._handler_lock:
            return list(self._handlers)

    def clear_handlers(self) -> None:
        with self._handler_lock:
            self._handlers.clear()

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def call_handlers(self, record: LogRecord) -> None:
        """
        Publish a record to this logger's handlers, then to its ancestors'.

        The lock stays held while the parent dispatches (child before
        parent). A handler that raises stops the pass; the exception
        propagates to the caller.
        """
        with self._handler_lock:
            # Iterate a copy: a handler may add or remove handlers here
            for handler in list(self._handlers):
                handler.publish(record)

            if self._additive:
                parent = self.parent
                if parent is not None:
                    parent.call_handlers(record)

    # ------------------------------------------------------------------
    # Logging API
    # ------------------------------------------------------------------

    def log(self, level: LogLevel, msg: Any, *args: Any, index: Optional[int] = None) -> None:
        """
        Log a message at ``level``.

        ``msg`` is a %-style format string for ``args``, or any object
        rendered with ``str()``. Nothing is formatted when the level is
        disabled. Never raises.

        Args:
            level: Record level (LogLevel, int value or level name); a
                level that cannot be converted is logged as FATAL
            msg: Format string or message object
            *args: Format arguments
            index: Optional unsigned sequence number
        """
        level = _to_level(level)
        if level > LogLevel.UNSET and self.is_enabled(level):
            self._log(level, msg, args, index, capture_time=True)

    def log_no_time(self, level: LogLevel, msg: Any, *args: Any, index: Optional[int] = None) -> None:
        """Like log(), but the record carries no timestamp."""
        level = _to_level(level)
        if level > LogLevel.UNSET and self.is_enabled(level):
            self._log(level, msg, args, index, capture_time=False)

    def debug(self, msg: Any, *args: Any, index: Optional[int] = None) -> None:
        """Log debug message."""
        if self.is_enabled(LogLevel.DEBUG):
            self._log(LogLevel.DEBUG, msg, args, index, capture_time=True)

    def info(self, msg: Any, *args: Any, index: Optional[int] = None) -> None:
        """Log info message."""
        if self.is_enabled(LogLevel.INFO):
            self._log(LogLevel.INFO, msg, args, index, capture_time=True)

    def warn(self, msg: Any, *args: Any, index: Optional[int] = None) -> None:
        """Log warning message."""
        if self.is_enabled(LogLevel.WARN):
            self._log(LogLevel.WARN, msg, args, index, capture_time=True)

    def error(self, msg: Any, *args: Any, index: Optional[int] = None) -> None:
        """Log error message."""
        if self.is_enabled(LogLevel.ERROR):
            self._log(LogLevel.ERROR, msg, args, index, capture_time=True)

    def alert(self, msg: Any, *args: Any, index: Optional[int] = None) -> None:
        """Log alert message."""
        if self.is_enabled(LogLevel.ALERT):
            self._log(LogLevel.ALERT, msg, args, index, capture_time=True)

    def fatal(self, msg: Any, *args: Any, index: Optional[int] = None) -> None:
        """Log fatal message."""
        if self.is_enabled(LogLevel.FATAL):
            self._log(LogLevel.FATAL, msg, args, index, capture_time=True)

    def stream(self, level: LogLevel) -> LoggerStream:
        """
        Text stream that emits one record at ``level`` per flush.

        The stream is inert if ``level`` is disabled when it is created.
        """
        return LoggerStream(self, level if self.is_enabled(level) else LogLevel.UNSET)

    def _log(
        self,
        level: LogLevel,
        msg: Any,
        args: Tuple[Any, ...],
        index: Optional[int],
        capture_time: bool,
    ) -> None:
        """Build and dispatch a record; on failure dispatch one FATAL substitute."""
        failure = self._attempt(level, msg, args, index, capture_time)
        if failure is None:
            return

        try:
            substitute = LogRecord(
                logger_name=self._name,
                message=failure.message if failure.message is not None else _raw_text(msg),
                level=LogLevel.FATAL,
                timestamp=datetime.now() if capture_time else None,
                index=index if isinstance(index, int) and index >= 0 else None,
            )
            self.call_handlers(substitute)
        except Exception as e:
            print(f"Logger '{self._name}' dropped a record: {failure.cause!r}; retry failed: {e!r}",
                  file=sys.stderr)

    def _attempt(
        self,
        level: LogLevel,
        msg: Any,
        args: Tuple[Any, ...],
        index: Optional[int],
        capture_time: bool,
    ) -> Optional[DispatchFailure]:
        """Format and dispatch once; return the failure instead of raising."""
        text: Optional[str] = None
        try:
            text = _format_message(msg, args)
            record = LogRecord(
                logger_name=self._name,
                message=text,
                level=level,
                timestamp=datetime.now() if capture_time else None,
                index=index,
            )
            self.call_handlers(record)
        except Exception as e:
            return DispatchFailure(self._name, e, message=text)
        return None

    def __repr__(self) -> str:
        """String representation."""
        return f"Logger(name={self._name!r}, level={self._level.name}, additive={self._additive})"
