"""Tests for the shell audit log.

The logger records structured entries for everything the shell does,
so a session can be traced after the fact.
"""

import pytest

from tinysh.logging import LogEntry, Logger, LogLevel


class TestLogLevel:
    """Verify log level ordering and lookup."""

    def test_levels_are_ordered(self) -> None:
        """DEBUG < INFO < WARNING < ERROR."""
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARNING
        assert LogLevel.WARNING < LogLevel.ERROR

    def test_from_name_ignores_case(self) -> None:
        """Level names are looked up case-insensitively."""
        assert LogLevel.from_name("warning") is LogLevel.WARNING
        assert LogLevel.from_name(" Debug ") is LogLevel.DEBUG

    def test_from_name_unknown(self) -> None:
        """An unknown name raises KeyError."""
        with pytest.raises(KeyError):
            LogLevel.from_name("loud")


class TestLogEntry:
    """Verify log entry structure."""

    def test_entry_has_fields(self) -> None:
        """A log entry should store level, message, and source."""
        entry = LogEntry(level=LogLevel.INFO, message="listed", source="ls")
        assert entry.level is LogLevel.INFO
        assert entry.message == "listed"
        assert entry.source == "ls"

    def test_entry_str(self) -> None:
        """String form is ``[LEVEL] source: message``."""
        entry = LogEntry(level=LogLevel.WARNING, message="disk full", source="ls")
        assert str(entry) == "[WARNING] ls: disk full"


class TestLogger:
    """Verify the logger."""

    def test_log_stores_entries(self) -> None:
        """Logged entries should be retrievable."""
        logger = Logger()
        logger.log(LogLevel.INFO, "started", source="shell")
        assert len(logger) == 1
        assert logger.entries[0].message == "started"

    def test_entries_are_ordered(self) -> None:
        """Entries should be in chronological order."""
        logger = Logger()
        logger.log(LogLevel.INFO, "first", source="test")
        logger.log(LogLevel.INFO, "second", source="test")
        assert [e.message for e in logger.entries] == ["first", "second"]

    def test_entries_is_a_copy(self) -> None:
        """Mutating the returned list does not touch the log."""
        logger = Logger()
        logger.log(LogLevel.INFO, "kept", source="test")
        logger.entries.clear()
        assert len(logger) == 1

    def test_filter_by_level(self) -> None:
        """Filtering should return only entries at or above the level."""
        logger = Logger()
        logger.log(LogLevel.DEBUG, "debug msg", source="test")
        logger.log(LogLevel.INFO, "info msg", source="test")
        logger.log(LogLevel.ERROR, "error msg", source="test")
        warnings_and_above = logger.filter(min_level=LogLevel.WARNING)
        assert len(warnings_and_above) == 1
        assert warnings_and_above[0].level is LogLevel.ERROR

    def test_filter_by_source(self) -> None:
        """Filtering by source should return matching entries."""
        logger = Logger()
        logger.log(LogLevel.INFO, "echo event", source="echo")
        logger.log(LogLevel.INFO, "ls event", source="ls")
        ls_logs = logger.filter(source="ls")
        assert [e.message for e in ls_logs] == ["ls event"]

    def test_filter_since(self) -> None:
        """Filtering with since skips earlier entries."""
        logger = Logger()
        logger.log(LogLevel.INFO, "old", source="test")
        mark = len(logger)
        logger.log(LogLevel.INFO, "new", source="test")
        assert [e.message for e in logger.filter(since=mark)] == ["new"]

    def test_clear(self) -> None:
        """Clearing should remove all entries."""
        logger = Logger()
        logger.log(LogLevel.INFO, "test", source="test")
        logger.clear()
        assert len(logger.entries) == 0
