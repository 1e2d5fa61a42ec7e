"""
Blob formatter for the human-readable log export

Produces one line per event:
    <date> <time> <marker>: <message> (File: <file>@<line>)(Error: <error>)
"""

from event_logger.core.log_event import LogEvent
from event_logger.formatters.base_formatter import BaseFormatter


class BlobFormatter(BaseFormatter):
    """
    Format log events as lines of the logger's text blob.

    Date and time are rendered with separate date-only and time-only
    strftime formats, so they follow the process locale at format time.
    """

    DEFAULT_DATE_FORMAT = "%x"
    DEFAULT_TIME_FORMAT = "%X %Z"

    def __init__(self, date_format: str = None, time_format: str = None):
        """
        Initialize blob formatter.

        Args:
            date_format: strftime format for the date part
                         (default: locale's date representation)
            time_format: strftime format for the time part
                         (default: locale's time representation and zone)
        """
        self.date_format = date_format or self.DEFAULT_DATE_FORMAT
        self.time_format = time_format or self.DEFAULT_TIME_FORMAT

    def format(self, event: LogEvent) -> str:
        """
        Format log event as a blob line.

        Args:
            event: Log event to format

        Returns:
            Single line without trailing newline
        """
        date = event.created_at.strftime(self.date_format)
        time = event.created_at.strftime(self.time_format).strip()
        line = (
            f"{date} {time} {event.level.marker}: {event.message} "
            f"(File: {event.metadata.file}@{event.metadata.line})"
        )

        description = event.error_description
        if description is None:
            return line
        return f"{line}(Error: {description})"

    def __repr__(self) -> str:
        """String representation."""
        return f"BlobFormatter(date='{self.date_format}', time='{self.time_format}')"
