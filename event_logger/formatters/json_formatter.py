"""
JSON formatter for exporting events

Formats log events as JSON objects
"""

import json
from event_logger.core.log_event import LogEvent
from event_logger.formatters.base_formatter import BaseFormatter


class JSONFormatter(BaseFormatter):
    """
    Format log events as JSON objects.

    Suitable for sharing a log with tools that read one JSON object
    per line.
    """

    def __init__(
        self,
        include_tags: bool = True,
        include_source_info: bool = True,
        indent: int = None,
        ensure_ascii: bool = False
    ):
        """
        Initialize JSON formatter.

        Args:
            include_tags: Include tag labels in output
            include_source_info: Include file and line
            indent: JSON indentation (None for compact, 2 for readable)
            ensure_ascii: Escape non-ASCII characters

        Example:
            # Compact JSON (one line per event)
            formatter = JSONFormatter()

            # Pretty-printed JSON
            formatter = JSONFormatter(indent=2)
        """
        self.include_tags = include_tags
        self.include_source_info = include_source_info
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def format(self, event: LogEvent) -> str:
        """
        Format log event as JSON.

        Args:
            event: Log event to format

        Returns:
            JSON string
        """
        data = event.to_dict()
        log_dict = {
            "id": data["id"],
            "timestamp": data["created_at"],
            "level": data["level"],
            "message": data["message"],
        }

        if data["error"] is not None:
            log_dict["error"] = data["error"]

        if self.include_source_info:
            log_dict["source"] = {"file": data["file"], "line": data["line"]}

        if self.include_tags and data["tags"]:
            log_dict["tags"] = data["tags"]

        return json.dumps(
            log_dict,
            indent=self.indent,
            ensure_ascii=self.ensure_ascii
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(indent={self.indent})"
