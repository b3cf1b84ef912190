"""Logger builder pattern"""

from typing import List, Optional

from logtree.core.log_level import LogLevel
from logtree.core.log_manager import LogManager
from logtree.core.logger import Logger
from logtree.handlers.base_handler import LogHandler
from logtree.handlers.console_handler import ConsoleHandler
from logtree.handlers.file_handler import FileHandler


class LoggerBuilder:
    """
    Builder that configures one named logger in a registry.

    Example:
        logger = (LoggerBuilder()
            .with_name("svc.db")
            .with_level(LogLevel.DEBUG)
            .with_additivity(False)
            .with_console(colored=False)
            .build())
    """

    def __init__(self):
        self._manager: Optional[LogManager] = None
        self._name = ""
        self._level: Optional[LogLevel] = None
        self._additive: Optional[bool] = None
        self._console_enabled = False
        self._colored = True
        self._file_path: Optional[str] = None
        self._formatter = None
        self._custom_handlers: List[LogHandler] = []

    def with_manager(self, manager: LogManager) -> "LoggerBuilder":
        """Use this registry instead of the default one."""
        self._manager = manager
        return self

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name ("" for the root)."""
        self._name = name
        return self

    def with_level(self, level: LogLevel) -> "LoggerBuilder":
        """Set the logger's own level."""
        self._level = level
        return self

    def with_additivity(self, additive: bool = True) -> "LoggerBuilder":
        """Set whether records flow on to the parent's handlers."""
        self._additive = additive
        return self

    def with_console(self, colored: bool = True) -> "LoggerBuilder":
        """Attach a console handler."""
        self._console_enabled = True
        self._colored = colored
        return self

    def with_file(self, filepath: str) -> "LoggerBuilder":
        """Attach a file handler."""
        self._file_path = filepath
        return self

    def with_formatter(self, formatter) -> "LoggerBuilder":
        """Formatter for the console and file handlers created by build()."""
        self._formatter = formatter
        return self

    def add_handler(self, handler: LogHandler) -> "LoggerBuilder":
        """
        Attach a custom handler.

        Args:
            handler: Handler instance

        Returns:
            Self for method chaining
        """
        self._custom_handlers.append(handler)
        return self

    def build(self) -> Logger:
        """
        Look up the logger and apply the collected settings.

        Raises:
            InvalidArgumentError: If UNSET is set on the root logger or a
                custom handler is None
        """
        manager = self._manager or LogManager.get_default_manager()
        logger = manager.get_instance(self._name)

        if self._level is not None:
            logger.set_level(self._level)
        if self._additive is not None:
            logger.additive = self._additive

        if self._console_enabled:
            logger.add_handler(ConsoleHandler(colored=self._colored, formatter=self._formatter))
        if self._file_path:
            logger.add_handler(FileHandler(self._file_path, formatter=self._formatter))

        for handler in self._custom_handlers:
            logger.add_handler(handler)

        return logger
