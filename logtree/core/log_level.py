"""
Log level enumeration

Severity levels are totally ordered; UNSET sorts below every real level
and means "inherit from the parent logger".
"""

from enum import IntEnum
from typing import Dict


class LogLevel(IntEnum):
    """
    Log level enumeration.

    UNSET is only meaningful as the level of a non-root logger.
    """

    UNSET = 0       # Inherit from parent
    DEBUG = 10      # Debug information
    INFO = 20       # Informational messages
    WARN = 30       # Warning messages
    ERROR = 40      # Error messages
    ALERT = 45      # Needs attention now
    FATAL = 50      # Unrecoverable errors

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @property
    def is_concrete(self) -> bool:
        """True for every level except UNSET."""
        return self is not LogLevel.UNSET

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        name = level_str.strip().upper()
        if name in cls.__members__:
            return cls[name]
        raise ValueError(f"Invalid log level: {level_str}")

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        colors = {
            LogLevel.DEBUG: "\033[36m",     # Cyan
            LogLevel.INFO: "\033[32m",      # Green
            LogLevel.WARN: "\033[33m",      # Yellow
            LogLevel.ERROR: "\033[31m",     # Red
            LogLevel.ALERT: "\033[91m",     # Bright red
            LogLevel.FATAL: "\033[35m",     # Magenta
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


# Short names used by compact output
LEVEL_ABBREVIATIONS: Dict[LogLevel, str] = {
    LogLevel.UNSET: "---",
    LogLevel.DEBUG: "DBG",
    LogLevel.INFO: "INF",
    LogLevel.WARN: "WRN",
    LogLevel.ERROR: "ERR",
    LogLevel.ALERT: "ALR",
    LogLevel.FATAL: "FTL",
}
