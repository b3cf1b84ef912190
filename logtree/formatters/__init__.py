"""
Log formatters module

Formatter implementations used by handlers to render records.
"""

from logtree.formatters.base_formatter import BaseFormatter
from logtree.formatters.text_formatter import TextFormatter
from logtree.formatters.json_formatter import JSONFormatter
from logtree.formatters.compact_formatter import CompactFormatter

__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "JSONFormatter",
    "CompactFormatter",
]
