"""
Core module for logtree

This module contains the fundamental classes:
- Logger: Named node of the logger tree
- LogManager: Registry that owns the tree
- LogRecord: Immutable log event
- LogLevel: Log level enumeration
- LoggerConfig / LoggerBuilder: Configuration helpers
"""

from logtree.core.exceptions import DispatchFailure, InvalidArgumentError, LogTreeError
from logtree.core.log_level import LogLevel
from logtree.core.log_record import LogRecord
from logtree.core.logger_stream import LoggerStream
from logtree.core.logger import Logger
from logtree.core.log_manager import LogManager
from logtree.core.logger_config import LoggerConfig
from logtree.core.logger_builder import LoggerBuilder

__all__ = [
    "DispatchFailure",
    "InvalidArgumentError",
    "LogTreeError",
    "LogLevel",
    "LogRecord",
    "LoggerStream",
    "Logger",
    "LogManager",
    "LoggerConfig",
    "LoggerBuilder",
]
