"""Basic tests for the event logger"""

import inspect
import threading
from datetime import datetime, timezone

import pytest

from event_logger import (
    EventMetadata,
    ImmediateDispatcher,
    Level,
    LogEvent,
    Logger,
    LoggerBuilder,
    LoggerConfig,
    MainThreadDispatcher,
    Tag,
)
from event_logger.core.logger_config import DispatchMode


T = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def make_event(error=None):
    return LogEvent(
        level=Level.INFO,
        message="started",
        error=error,
        metadata=EventMetadata("Main", 42),
        created_at=T,
    )


def expected_prefix():
    return f"{T.strftime('%x')} {T.strftime('%X %Z')} {Level.INFO.marker}"


@pytest.fixture
def logger():
    return Logger(name="test", dispatcher=ImmediateDispatcher())


class TestLevel:
    """Test level functionality."""

    def test_declaration_order(self):
        assert [level.name for level in Level] == [
            "SUCCESS", "DEBUG", "INFO", "WARNING", "ERROR", "FATAL"
        ]
        assert [int(level) for level in Level] == [0, 1, 2, 3, 4, 5]

    def test_from_string(self):
        assert Level.from_string("warning") == Level.WARNING
        assert Level.from_string("FATAL") == Level.FATAL

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            Level.from_string("verbose")

    def test_colors_and_markers(self):
        assert Level.SUCCESS.color == "green"
        assert Level.DEBUG.color == "brown"
        assert Level.FATAL.color == "purple"
        assert len({level.marker for level in Level}) == 6
        assert all(len(level.marker) == 1 for level in Level)


class TestLoggerAppend:
    """Test appending events."""

    def test_append_preserves_order(self, logger):
        for i in range(50):
            logger.info(f"message {i}")

        assert [event.message for event in logger.entries] == [
            f"message {i}" for i in range(50)
        ]

    def test_log_records_all_fields(self, logger):
        err = ValueError("bad")
        tags = [Tag("net")]
        logger.log(Level.ERROR, "failed", err, tags, "Main", 7)

        (event,) = logger.entries
        assert event.level == Level.ERROR
        assert event.message == "failed"
        assert event.error is err
        assert event.metadata == EventMetadata("Main", 7, (Tag("net"),))

    def test_shorthands_set_level(self, logger):
        logger.success("a")
        logger.debug("b")
        logger.info("c")
        logger.warning("d")
        logger.error("e", RuntimeError("x"))
        logger.fatal("f")

        assert [event.level for event in logger.entries] == list(Level)
        assert logger.entries[4].error is not None
        assert logger.entries[5].error is None

    def test_shorthand_equivalent_to_log(self, logger):
        logger.warning(message="x", tags=[], file="Main", line=42)
        logger.log(level=Level.WARNING, message="x", error=None, tags=[], file="Main", line=42)

        first, second = logger.entries
        assert (first.level, first.message, first.error, first.metadata) == (
            second.level, second.message, second.error, second.metadata
        )
        assert first.id != second.id

    def test_location_defaults_to_call_site(self, logger):
        logger.info("here")
        line = inspect.currentframe().f_lineno - 1

        event = logger.entries[0]
        assert event.metadata.file == "test_logger.py"
        assert event.metadata.line == line

    def test_location_of_direct_log_call(self, logger):
        logger.log(Level.DEBUG, "direct")
        line = inspect.currentframe().f_lineno - 1

        assert logger.entries[0].metadata.line == line

    def test_stacklevel_attributes_wrapper_caller(self, logger):
        def helper():
            logger.info("from helper", stacklevel=2)

        helper()
        line = inspect.currentframe().f_lineno - 1

        assert logger.entries[0].metadata.line == line

    def test_initial_events(self):
        event = make_event()
        logger = Logger(events=[event], dispatcher=ImmediateDispatcher())
        assert logger.entries == (event,)
        assert len(logger) == 1

    def test_none_tags(self, logger):
        logger.log(Level.INFO, "x", tags=None)
        logger.warning("y", tags=None)
        assert [event.metadata.tags for event in logger.entries] == [(), ()]

    def test_metrics(self, logger):
        logger.info("one")
        logger.info("two")
        assert logger.get_metrics() == {"logged": 2, "dispatched": 0}


class TestLoggerBlob:
    """Test blob rendering."""

    def test_empty_blob(self, logger):
        assert logger.blob == ""

    def test_blob_line_without_error(self):
        logger = Logger(events=[make_event()])
        assert logger.blob == f"{expected_prefix()}: started (File: Main@42)"

    def test_blob_line_with_error(self):
        logger = Logger(events=[make_event(error=RuntimeError("boom"))])
        assert logger.blob == f"{expected_prefix()}: started (File: Main@42)(Error: boom)"

    def test_blob_joins_lines(self, logger):
        logger.info("one")
        logger.info("two")
        logger.info("three")

        lines = logger.blob.split("\n")
        assert len(lines) == 3
        assert lines[0].endswith(f"{Level.INFO.marker}: one (File: test_logger.py@{logger.entries[0].metadata.line})")

    def test_custom_formats(self):
        logger = (LoggerBuilder()
            .with_events([make_event()])
            .with_date_format("%Y-%m-%d")
            .with_time_format("%H:%M:%S")
            .with_dispatch_mode(DispatchMode.IMMEDIATE)
            .build())
        assert logger.blob == f"2024-01-02 03:04:05 {Level.INFO.marker}: started (File: Main@42)"


class TestEventImmutability:
    """Events never change once stored."""

    def test_fields_are_frozen(self, logger):
        logger.info("fixed")
        event = logger.entries[0]
        with pytest.raises(AttributeError):
            event.message = "changed"

    def test_later_activity_leaves_event_unchanged(self, logger):
        tags = [Tag("a")]
        logger.info("first", tags=tags)
        event = logger.entries[0]
        snapshot = event.to_dict()

        tags.append(Tag("b"))
        for i in range(10):
            logger.error(f"later {i}", ValueError(i))

        assert logger.entries[0] is event
        assert event.to_dict() == snapshot
        assert event.metadata.tags == (Tag("a"),)

    def test_entries_snapshot_is_detached(self, logger):
        logger.info("one")
        snapshot = logger.entries
        logger.info("two")
        assert len(snapshot) == 1
        assert len(logger.entries) == 2


class TestDefaultLogger:
    """Test the shared default instance."""

    def test_off_thread_append_waits_for_main_thread_flush(self, monkeypatch):
        monkeypatch.setattr(Logger, "_default", None)
        logger = Logger.default()
        assert isinstance(logger.dispatcher, MainThreadDispatcher)

        thread = threading.Thread(target=lambda: Logger.default().info("queued"))
        thread.start()
        thread.join()
        assert len(logger) == 0

        logger.flush()
        assert [event.message for event in logger.entries] == ["queued"]

    def test_same_instance(self):
        assert Logger.default() is Logger.default()

    def test_append_visible_through_other_reference(self):
        first = Logger.default()
        second = Logger.default()
        before = len(second)

        first.info("shared")

        assert len(second) == before + 1
        assert second.entries[-1].message == "shared"

    def test_concurrent_first_use_creates_one_instance(self, monkeypatch):
        monkeypatch.setattr(Logger, "_default", None)
        seen = []
        barrier = threading.Barrier(8)

        def grab():
            barrier.wait()
            seen.append(Logger.default())

        threads = [threading.Thread(target=grab) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len({id(instance) for instance in seen}) == 1


class TestLoggerConfig:
    """Test logger configuration."""

    def test_default_config(self):
        config = LoggerConfig.default()
        assert config.name is None
        assert config.dispatch_mode is DispatchMode.MAIN_THREAD
        assert config.date_format == "%x"

    def test_presets(self):
        assert LoggerConfig.debug_config().dispatch_mode is DispatchMode.IMMEDIATE
        assert LoggerConfig.background_config().dispatch_mode is DispatchMode.WORKER_THREAD

    def test_mode_from_string(self):
        assert LoggerConfig(dispatch_mode="immediate").dispatch_mode is DispatchMode.IMMEDIATE

    @pytest.mark.parametrize("kwargs", [
        {"queue_size": -1},
        {"date_format": ""},
        {"time_format": ""},
        {"dispatch_mode": "sometimes"},
    ])
    def test_invalid_config(self, kwargs):
        with pytest.raises(ValueError):
            LoggerConfig(**kwargs)

    def test_from_config(self):
        logger = Logger.from_config(LoggerConfig(name="cfg", dispatch_mode=DispatchMode.IMMEDIATE))
        assert logger.name == "cfg"
        assert isinstance(logger.dispatcher, ImmediateDispatcher)


class TestLoggerBuilder:
    """Test builder pattern."""

    def test_builder_pattern(self):
        logger = (LoggerBuilder()
            .with_name("builder_test")
            .build())

        assert logger.name == "builder_test"
        assert isinstance(logger.dispatcher, MainThreadDispatcher)

    def test_custom_dispatcher(self):
        dispatcher = ImmediateDispatcher()
        logger = LoggerBuilder().with_dispatcher(dispatcher).build()
        assert logger.dispatcher is dispatcher

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            LoggerBuilder().with_queue_size(-5)
        with pytest.raises(ValueError):
            LoggerBuilder().with_date_format("")
