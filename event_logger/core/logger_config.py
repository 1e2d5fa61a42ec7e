"""
Logger configuration management
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DispatchMode(Enum):
    """Which context a logger treats as designated for appends."""

    MAIN_THREAD = "main_thread"
    WORKER_THREAD = "worker_thread"
    IMMEDIATE = "immediate"


@dataclass
class LoggerConfig:
    """
    Logger configuration.
    """

    # Basic settings
    name: Optional[str] = None
    dispatch_mode: DispatchMode = DispatchMode.MAIN_THREAD

    # Queue settings (for worker thread mode, 0 is unbounded)
    queue_size: int = 0

    # Format settings
    date_format: str = "%x"
    time_format: str = "%X %Z"
    line_separator: str = "\n"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.dispatch_mode, str):
            self.dispatch_mode = DispatchMode(self.dispatch_mode)
        if self.queue_size < 0:
            raise ValueError("queue_size cannot be negative")
        if not self.date_format:
            raise ValueError("date_format must not be empty")
        if not self.time_format:
            raise ValueError("time_format must not be empty")

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging and single-threaded scripts."""
        return cls(dispatch_mode=DispatchMode.IMMEDIATE)

    @classmethod
    def background_config(cls) -> "LoggerConfig":
        """Create configuration that appends on a background worker thread."""
        return cls(dispatch_mode=DispatchMode.WORKER_THREAD, queue_size=10000)
