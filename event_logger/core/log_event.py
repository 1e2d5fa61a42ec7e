"""
Log event data structure

A LogEvent is one immutable log occurrence: level, message, optional
error, creation time, identity and source-location metadata.
"""

import os
import sys
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, Optional, Tuple

from event_logger.core.log_level import Level
from event_logger.core.log_tag import tag_label


def _now() -> datetime:
    return datetime.now().astimezone()


def caller_location(stacklevel: int = 1) -> Tuple[str, int]:
    """
    Resolve the source location of a caller.

    Args:
        stacklevel: 1 is the caller of the function that calls this one,
                    following the meaning of ``stacklevel`` in ``logging``.

    Returns:
        (file basename, line number), or ("<unknown>", 0) when the stack
        is shallower than requested
    """
    try:
        frame = sys._getframe(stacklevel + 1)
    except ValueError:
        return "<unknown>", 0
    return os.path.basename(frame.f_code.co_filename), frame.f_lineno


@dataclass(frozen=True)
class EventMetadata:
    """Where an event was logged from and how it was tagged."""

    file: str
    line: int
    tags: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class LogEvent:
    """
    Log event data structure.

    Contains all information about a single log occurrence. Instances
    are frozen; the tags sequence is stored as a tuple.
    """

    level: Level
    message: str
    error: Optional[Any] = None
    metadata: EventMetadata = field(default_factory=lambda: EventMetadata("", 0))
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=_now)

    def __post_init__(self):
        """Validate event after initialization."""
        if not isinstance(self.level, Level):
            raise TypeError("level must be Level enum")
        if not isinstance(self.message, str):
            object.__setattr__(self, "message", str(self.message))
        if not isinstance(self.metadata.tags, tuple):
            object.__setattr__(
                self,
                "metadata",
                EventMetadata(self.metadata.file, self.metadata.line, tuple(self.metadata.tags)),
            )

    @classmethod
    def create(
        cls,
        level: Level,
        message: str,
        error: Optional[Any] = None,
        tags: Optional[Iterable[Any]] = (),
        file: Optional[str] = None,
        line: Optional[int] = None,
        stacklevel: int = 1,
    ) -> "LogEvent":
        """
        Create an event, defaulting the source location to the caller.

        Args:
            level: Event level
            message: Free-form text, may be empty
            error: Optional attached error
            tags: Tags for grouping by consumers
            file: Source file override
            line: Source line override
            stacklevel: How many frames above the caller to attribute

        Returns:
            New LogEvent instance
        """
        if file is None or line is None:
            caller_file, caller_line = caller_location(stacklevel)
            file = caller_file if file is None else file
            line = caller_line if line is None else line
        return cls(
            level=level,
            message=message,
            error=error,
            metadata=EventMetadata(file, line, tuple(tags or ())),
        )

    @property
    def error_description(self) -> Optional[str]:
        """Human-readable description of the attached error, if any."""
        if self.error is None:
            return None
        return str(self.error) or type(self.error).__name__

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert event to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "id": str(self.id),
            "created_at": self.created_at.isoformat(),
            "level": self.level.name,
            "message": self.message,
            "error": self.error_description,
            "file": self.metadata.file,
            "line": self.metadata.line,
            "tags": [tag_label(tag) for tag in self.metadata.tags],
        }

    def __str__(self) -> str:
        """String representation."""
        return f"[{self.level.name}] {self.message}"
