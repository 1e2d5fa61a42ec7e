"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Event Logger - A thread-safe in-memory event log for interactive applications
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

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

# Import submodules (not all classes by default)
from event_logger import formatters

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
    "formatters",
]
