"""Tag capability attached to log events"""

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LogTag(Protocol):
    """Anything with a human-readable ``label`` can tag an event."""

    @property
    def label(self) -> str:
        ...


@dataclass(frozen=True)
class Tag:
    """Plain string tag."""

    label: str

    def __str__(self) -> str:
        return self.label


def tag_label(tag: Any) -> str:
    """Return the label of a tag, falling back to ``str(tag)``."""
    if isinstance(tag, LogTag):
        return tag.label
    return str(tag)
