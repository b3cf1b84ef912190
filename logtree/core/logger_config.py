"""
Logger tree configuration

Declarative settings for a LogManager: root level, per-logger levels and
additivity, and the root handlers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union
from pathlib import Path

from logtree.core.exceptions import InvalidArgumentError
from logtree.core.log_level import LogLevel

LevelLike = Union[LogLevel, int, str]


def _to_level(value: LevelLike) -> LogLevel:
    if isinstance(value, str):
        return LogLevel.from_string(value)
    return LogLevel(value)


@dataclass
class LoggerConfig:
    """
    Logger tree configuration.

    Level values may be given as LogLevel, int or level name; they are
    converted in __post_init__.
    """

    # Level settings
    root_level: LogLevel = LogLevel.INFO
    levels: Dict[str, LogLevel] = field(default_factory=dict)
    additivity: Dict[str, bool] = field(default_factory=dict)

    # Console settings
    console_output: bool = True
    colored_output: bool = True

    # File settings
    log_file: Optional[Path] = None

    # Format settings
    timestamp_format: str = "%Y-%m-%d %H:%M:%S.%f"
    message_template: str = "[{timestamp}] [{level:5}] [{logger}] {message}"

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.root_level = _to_level(self.root_level)
        if self.root_level == LogLevel.UNSET:
            raise InvalidArgumentError("root_level cannot be UNSET")

        self.levels = {name: _to_level(level) for name, level in self.levels.items()}
        if self.levels.get("", self.root_level) == LogLevel.UNSET:
            raise InvalidArgumentError("root logger level cannot be UNSET")

        self.additivity = {name: bool(flag) for name, flag in self.additivity.items()}

        # Convert log_file to Path if it's a string
        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            root_level=LogLevel.DEBUG,
            console_output=True,
            colored_output=True,
        )

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            root_level=LogLevel.WARN,
            console_output=False,
            colored_output=False,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LoggerConfig":
        """
        Create configuration from a mapping, e.g. a parsed JSON document.

        Unknown keys raise InvalidArgumentError.

        Example:
            LoggerConfig.from_dict({
                "root_level": "warn",
                "levels": {"svc.db": "debug"},
                "additivity": {"audit": False},
            })
        """
        known = set(cls.__dataclass_fields__)
        unknown = set(data) - known
        if unknown:
            raise InvalidArgumentError(f"unknown config keys: {sorted(unknown)}")
        return cls(**dict(data))

    def apply(self, manager) -> None:
        """
        Configure a LogManager with these settings.

        Root handlers are only added by this call; handlers already on the
        root stay attached.

        Args:
            manager: LogManager to configure
        """
        from logtree.formatters.text_formatter import TextFormatter
        from logtree.handlers.console_handler import ConsoleHandler
        from logtree.handlers.file_handler import FileHandler

        root = manager.get_root()
        root.set_level(self.root_level)

        for name, level in self.levels.items():
            manager.get_instance(name).set_level(level)

        for name, flag in self.additivity.items():
            manager.get_instance(name).additive = flag

        formatter = TextFormatter(self.message_template, self.timestamp_format)
        if self.console_output:
            root.add_handler(ConsoleHandler(
                colored=self.colored_output,
                formatter=None if self.colored_output else formatter,
            ))
        if self.log_file:
            root.add_handler(FileHandler(str(self.log_file), formatter=formatter))
