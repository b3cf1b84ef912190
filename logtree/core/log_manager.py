"""
Logger registry

Maps dotted names to Logger instances and owns them. Parent links follow
the name structure: "a.b.c" is a child of "a.b", "a" is a child of the
root, and the root is named "".
"""

from __future__ import annotations
from typing import Dict, List, Optional
import atexit
import sys
import threading

from logtree.core.exceptions import InvalidArgumentError
from logtree.core.log_level import LogLevel
from logtree.core.logger import Logger

ROOT_NAME = ""


class LogManager:
    """
    Registry of loggers keyed by name.

    The registry dict holds the only strong references to its loggers;
    children reach their parents through weak references. After shutdown()
    every Logger obtained from this manager is stale.
    """

    _default: Optional[LogManager] = None
    _default_lock = threading.Lock()
    _atexit_registered = False

    def __init__(self, root_level: LogLevel = LogLevel.INFO):
        self._lock = threading.RLock()
        self._loggers: Dict[str, Logger] = {}
        self._root = Logger(ROOT_NAME, None, root_level)
        self._loggers[ROOT_NAME] = self._root
        self._closed = False

    @classmethod
    def get_default_manager(cls) -> LogManager:
        """Process-wide manager, created on first use."""
        with cls._default_lock:
            if cls._default is None:
                cls._default = cls()
                if not cls._atexit_registered:
                    atexit.register(cls.shutdown_default)
                    cls._atexit_registered = True
            return cls._default

    @classmethod
    def shutdown_default(cls) -> None:
        """Shut down the process-wide manager; the next lookup creates a fresh one."""
        with cls._default_lock:
            manager, cls._default = cls._default, None
        if manager is not None:
            manager.shutdown()

    def get_root(self) -> Logger:
        """
        Root logger of this registry.

        Raises:
            InvalidArgumentError: If the manager was shut down
        """
        if self._closed:
            raise InvalidArgumentError("log manager has been shut down")
        return self._root

    def get_instance(self, name: Optional[str]) -> Logger:
        """
        Create or return the logger called ``name``.

        Missing ancestors are created on the way so each logger's parent
        is its nearest dotted prefix.

        Args:
            name: Dotted logger name; "" or None for the root

        Returns:
            The logger registered under name

        Raises:
            InvalidArgumentError: If name has empty components or the
                manager was shut down
        """
        with self._lock:
            if self._closed:
                raise InvalidArgumentError("log manager has been shut down")

            if not name:
                return self._root

            logger = self._loggers.get(name)
            if logger is not None:
                return logger

            parts = name.split(".")
            if not all(parts):
                raise InvalidArgumentError(f"invalid logger name: {name!r}")

            parent = self._root
            for depth in range(1, len(parts) + 1):
                path = ".".join(parts[:depth])
                node = self._loggers.get(path)
                if node is None:
                    node = Logger(path, parent)
                    self._loggers[path] = node
                parent = node
            return parent

    def exists(self, name: str) -> bool:
        with self._lock:
            return name in self._loggers

    def get_logger_names(self) -> List[str]:
        """Names of all registered loggers, sorted."""
        with self._lock:
            return sorted(self._loggers)

    def shutdown(self) -> None:
        """
        Flush and close every attached handler, then drop all loggers.

        A handler shared by several loggers is closed once.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            loggers = list(self._loggers.values())
            self._loggers.clear()

        seen = set()
        for logger in loggers:
            for handler in logger.get_handlers():
                if id(handler) in seen:
                    continue
                seen.add(id(handler))
                try:
                    handler.flush()
                    handler.close()
                except Exception as e:
                    print(f"Handler close error: {e}", file=sys.stderr)
            logger.clear_handlers()

    @property
    def closed(self) -> bool:
        return self._closed
