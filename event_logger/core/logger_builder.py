"""Logger builder pattern"""

from typing import Iterable, List, Optional

from event_logger.core.dispatcher import BaseDispatcher, create_dispatcher
from event_logger.core.log_event import LogEvent
from event_logger.core.logger import Logger
from event_logger.core.logger_config import DispatchMode, LoggerConfig
from event_logger.formatters.base_formatter import BaseFormatter
from event_logger.formatters.blob_formatter import BlobFormatter


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._config = LoggerConfig()
        self._events: List[LogEvent] = []
        self._dispatcher: Optional[BaseDispatcher] = None
        self._formatter: Optional[BaseFormatter] = None

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._config.name = name
        return self

    def with_events(self, events: Iterable[LogEvent]) -> "LoggerBuilder":
        """Seed the logger with existing events."""
        self._events.extend(events)
        return self

    def with_dispatch_mode(self, mode: DispatchMode) -> "LoggerBuilder":
        """Choose which context is designated for appends."""
        self._config.dispatch_mode = DispatchMode(mode)
        return self

    def with_dispatcher(self, dispatcher: BaseDispatcher) -> "LoggerBuilder":
        """
        Use a custom dispatcher.

        Overrides the dispatch mode.

        Args:
            dispatcher: Dispatcher instance

        Returns:
            Self for method chaining

        Example:
            logger = (LoggerBuilder()
                .with_dispatcher(ImmediateDispatcher())
                .build())
        """
        self._dispatcher = dispatcher
        return self

    def with_formatter(self, formatter: BaseFormatter) -> "LoggerBuilder":
        """Use a custom formatter for the blob. Overrides date/time formats."""
        self._formatter = formatter
        return self

    def with_date_format(self, date_format: str) -> "LoggerBuilder":
        """Set strftime format of the blob's date part."""
        if not date_format:
            raise ValueError("date_format must not be empty")
        self._config.date_format = date_format
        return self

    def with_time_format(self, time_format: str) -> "LoggerBuilder":
        """Set strftime format of the blob's time part."""
        if not time_format:
            raise ValueError("time_format must not be empty")
        self._config.time_format = time_format
        return self

    def with_queue_size(self, size: int) -> "LoggerBuilder":
        """Set worker queue bound (0 for unbounded)."""
        if size < 0:
            raise ValueError("queue_size cannot be negative")
        self._config.queue_size = size
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        return Logger(
            name=self._config.name,
            events=self._events,
            dispatcher=self._dispatcher or create_dispatcher(
                self._config.dispatch_mode, self._config.name, self._config.queue_size
            ),
            formatter=self._formatter or BlobFormatter(
                self._config.date_format, self._config.time_format
            ),
            line_separator=self._config.line_separator,
        )
