"""
Main Logger class - thread-safe in-memory event log

Appends are serialized onto a designated context by a dispatcher and
guarded by a lock; reads take a snapshot under the same lock.
"""

from __future__ import annotations
from functools import partial
from typing import Any, ClassVar, Iterable, List, Optional, Tuple
import threading

from event_logger.core.dispatcher import BaseDispatcher, MainThreadDispatcher, create_dispatcher
from event_logger.core.log_event import EventMetadata, LogEvent, caller_location
from event_logger.core.log_level import Level
from event_logger.core.logger_config import LoggerConfig
from event_logger.formatters.base_formatter import BaseFormatter
from event_logger.formatters.blob_formatter import BlobFormatter


class Logger:
    """
    Append-only log of events.

    Thread Safety:
        Any method may be called from any thread. Appends made off the
        designated context are re-dispatched onto it and return without
        waiting; their relative order with other off-context callers is
        not defined. Reads never observe a partial append.
    """

    _default: ClassVar[Optional["Logger"]] = None
    _default_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        name: Optional[str] = None,
        events: Optional[Iterable[LogEvent]] = None,
        dispatcher: Optional[BaseDispatcher] = None,
        formatter: Optional[BaseFormatter] = None,
        line_separator: str = "\n",
    ):
        self._name = name
        self._events: List[LogEvent] = list(events or ())
        self._lock = threading.Lock()
        self._dispatcher = dispatcher or MainThreadDispatcher()
        self._formatter = formatter or BlobFormatter()
        self._line_separator = line_separator
        self._metrics = {"logged": 0, "dispatched": 0}

    @classmethod
    def from_config(cls, config: LoggerConfig, events: Optional[Iterable[LogEvent]] = None) -> "Logger":
        """
        Create a logger from configuration.

        Args:
            config: Logger configuration
            events: Initial events

        Returns:
            New Logger instance
        """
        return cls(
            name=config.name,
            events=events,
            dispatcher=create_dispatcher(config.dispatch_mode, config.name, config.queue_size),
            formatter=BlobFormatter(config.date_format, config.time_format),
            line_separator=config.line_separator,
        )

    @classmethod
    def default(cls) -> "Logger":
        """
        Return the process-wide default logger.

        Created on first use and shared for the life of the process.
        Prefer passing a logger explicitly where isolation matters.

        The default logger designates the main thread. Appends from other
        threads wait until the host calls ``flush()`` on the main thread;
        a host without a main loop that pumps should build its own logger
        from ``LoggerConfig.background_config()`` instead.
        """
        if cls._default is None:
            with cls._default_lock:
                if cls._default is None:
                    cls._default = cls()
        return cls._default

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def dispatcher(self) -> BaseDispatcher:
        return self._dispatcher

    @property
    def entries(self) -> Tuple[LogEvent, ...]:
        """Snapshot of the events in insertion order."""
        with self._lock:
            return tuple(self._events)

    @property
    def blob(self) -> str:
        """All events rendered one per line."""
        with self._lock:
            snapshot = list(self._events)
        return self._line_separator.join(self._formatter.format(event) for event in snapshot)

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def _append(
        self,
        level: Level,
        message: str,
        error: Optional[Any],
        tags: Tuple[Any, ...],
        file: str,
        line: int,
    ) -> None:
        """Construct and store an event (designated context)."""
        event = LogEvent(
            level=level,
            message=message,
            error=error,
            metadata=EventMetadata(file, line, tags),
        )
        with self._lock:
            self._events.append(event)
            self._metrics["logged"] += 1

    def log(
        self,
        level: Level,
        message: str,
        error: Optional[Any] = None,
        tags: Optional[Iterable[Any]] = (),
        file: Optional[str] = None,
        line: Optional[int] = None,
        stacklevel: int = 1,
    ) -> None:
        """
        Log a message.

        Args:
            level: Event level
            message: Free-form text, may be empty
            error: Optional attached error
            tags: Tags for grouping by consumers
            file: Source file override (default: caller's file)
            line: Source line override (default: caller's line)
            stacklevel: How many frames above the caller to attribute

        Raises:
            TypeError: If level is not a Level, on every thread
        """
        if not isinstance(level, Level):
            raise TypeError("level must be Level enum")

        if file is None or line is None:
            caller_file, caller_line = caller_location(stacklevel)
            file = caller_file if file is None else file
            line = caller_line if line is None else line

        append = partial(self._append, level, message, error, tuple(tags or ()), file, line)
        if self._dispatcher.is_designated():
            append()
            return

        with self._lock:
            self._metrics["dispatched"] += 1
        self._dispatcher.dispatch(append)

    def success(self, message: str, tags: Iterable[Any] = (), file: Optional[str] = None,
                line: Optional[int] = None, stacklevel: int = 1) -> None:
        """Log success message."""
        self.log(Level.SUCCESS, message, None, tags, file, line, stacklevel + 1)

    def debug(self, message: str, tags: Iterable[Any] = (), file: Optional[str] = None,
              line: Optional[int] = None, stacklevel: int = 1) -> None:
        """Log debug message."""
        self.log(Level.DEBUG, message, None, tags, file, line, stacklevel + 1)

    def info(self, message: str, tags: Iterable[Any] = (), file: Optional[str] = None,
             line: Optional[int] = None, stacklevel: int = 1) -> None:
        """Log info message."""
        self.log(Level.INFO, message, None, tags, file, line, stacklevel + 1)

    def warning(self, message: str, tags: Iterable[Any] = (), file: Optional[str] = None,
                line: Optional[int] = None, stacklevel: int = 1) -> None:
        """Log warning message."""
        self.log(Level.WARNING, message, None, tags, file, line, stacklevel + 1)

    def error(self, message: str, error: Optional[Any] = None, tags: Iterable[Any] = (),
              file: Optional[str] = None, line: Optional[int] = None, stacklevel: int = 1) -> None:
        """Log error message with an optional error value."""
        self.log(Level.ERROR, message, error, tags, file, line, stacklevel + 1)

    def fatal(self, message: str, error: Optional[Any] = None, tags: Iterable[Any] = (),
              file: Optional[str] = None, line: Optional[int] = None, stacklevel: int = 1) -> None:
        """Log fatal message with an optional error value."""
        self.log(Level.FATAL, message, error, tags, file, line, stacklevel + 1)

    def flush(self) -> None:
        """Deliver appends still pending on the dispatcher, where possible."""
        self._dispatcher.flush()

    def shutdown(self) -> None:
        """Stop the dispatcher. Entries stay readable."""
        self._dispatcher.shutdown()

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        with self._lock:
            return self._metrics.copy()

    def __repr__(self) -> str:
        return f"Logger(name={self._name!r}, entries={len(self)})"
