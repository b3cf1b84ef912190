"""Handlers module - Log output sinks"""

from logtree.handlers.base_handler import LogHandler
from logtree.handlers.console_handler import ConsoleHandler
from logtree.handlers.file_handler import FileHandler
from logtree.handlers.memory_handler import MemoryHandler

__all__ = ["LogHandler", "ConsoleHandler", "FileHandler", "MemoryHandler"]
