"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

logtree - Hierarchical, thread-safe logging with inherited levels,
pluggable handlers and additive propagation
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from logtree.core.exceptions import DispatchFailure, InvalidArgumentError, LogTreeError
from logtree.core.log_level import LogLevel
from logtree.core.log_record import LogRecord
from logtree.core.logger import Logger
from logtree.core.log_manager import LogManager
from logtree.core.logger_config import LoggerConfig
from logtree.core.logger_builder import LoggerBuilder
from logtree.core.logger_stream import LoggerStream

# Import submodules (not all classes by default)
from logtree import formatters
from logtree import handlers

__all__ = [
    "Logger",
    "LogManager",
    "LoggerBuilder",
    "LoggerConfig",
    "LoggerStream",
    "LogRecord",
    "LogLevel",
    "LogTreeError",
    "InvalidArgumentError",
    "DispatchFailure",
    "formatters",
    "handlers",
]
