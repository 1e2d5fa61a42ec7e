"""
Core module for the event logger

This module contains the fundamental classes:
- Logger: Thread-safe append-only event log
- LoggerBuilder: Builder pattern for logger construction
- LogEvent: Immutable log event
- Level: Event level enumeration
- LoggerConfig: Configuration management
- Dispatchers: Designated-context scheduling
"""

from event_logger.core.logger import Logger
from event_logger.core.logger_builder import LoggerBuilder
from event_logger.core.log_event import EventMetadata, LogEvent
from event_logger.core.log_level import Level
from event_logger.core.log_tag import LogTag, Tag
from event_logger.core.logger_config import DispatchMode, LoggerConfig
from event_logger.core.dispatcher import (
    BaseDispatcher,
    ImmediateDispatcher,
    MainThreadDispatcher,
    WorkerThreadDispatcher,
)

__all__ = [
    "Logger",
    "LoggerBuilder",
    "EventMetadata",
    "LogEvent",
    "Level",
    "LogTag",
    "Tag",
    "DispatchMode",
    "LoggerConfig",
    "BaseDispatcher",
    "ImmediateDispatcher",
    "MainThreadDispatcher",
    "WorkerThreadDispatcher",
]
