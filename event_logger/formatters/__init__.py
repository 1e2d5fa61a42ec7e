"""
Log formatters module

Provides formatter implementations for rendering log events as text.
"""

from event_logger.formatters.base_formatter import BaseFormatter
from event_logger.formatters.blob_formatter import BlobFormatter
from event_logger.formatters.json_formatter import JSONFormatter

__all__ = [
    "BaseFormatter",
    "BlobFormatter",
    "JSONFormatter",
]
