"""
Base formatter interface

A Logger renders its blob by passing each stored event through one
formatter; export tools can use the same formatters on ``Logger.entries``.
"""

from abc import ABC, abstractmethod
from event_logger.core.log_event import LogEvent


class BaseFormatter(ABC):
    """
    Renders one LogEvent as one line of text.

    Called by ``Logger.blob`` outside the logger's lock, once per event
    of the snapshot. Implementations must not return embedded newlines
    if the output is meant to be split back into events.
    """

    @abstractmethod
    def format(self, event: LogEvent) -> str:
        """Render a single event without a trailing newline."""
        pass

    def __call__(self, event: LogEvent) -> str:
        return self.format(event)
