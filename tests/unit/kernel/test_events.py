"""Unit tests for LogLevel and LogEvent."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from applogger.kernel.events import LogEvent, LogLevel, level_label


class TestLogLevel:
    def test_values_are_ordered(self) -> None:
        assert [int(level) for level in LogLevel] == [0, 1, 2, 3, 4, 5]
        assert LogLevel.TRACE < LogLevel.DEBUG < LogLevel.INFO < LogLevel.WARNING
        assert LogLevel.WARNING < LogLevel.ERROR < LogLevel.CRITICAL

    def test_compares_with_plain_ints(self) -> None:
        assert LogLevel.INFO == 2
        assert 4 >= LogLevel.WARNING

    @pytest.mark.parametrize(
        ("level", "label"),
        [
            (LogLevel.TRACE, "Trace"),
            (LogLevel.DEBUG, "Debug"),
            (LogLevel.INFO, "Info"),
            (LogLevel.WARNING, "Warning"),
            (LogLevel.ERROR, "Error"),
            (LogLevel.CRITICAL, "Critical"),
        ],
    )
    def test_label(self, level: LogLevel, label: str) -> None:
        assert level.label == label

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (LogLevel.ERROR, LogLevel.ERROR),
            (3, LogLevel.WARNING),
            ("warning", LogLevel.WARNING),
            ("CRITICAL", LogLevel.CRITICAL),
            (" debug ", LogLevel.DEBUG),
            ("0", LogLevel.TRACE),
        ],
    )
    def test_parse(self, raw: object, expected: LogLevel) -> None:
        assert LogLevel.parse(raw) is expected  # type: ignore[arg-type]

    @pytest.mark.parametrize("raw", ["loud", 9, "-1"])
    def test_parse_rejects_unknown(self, raw: object) -> None:
        with pytest.raises(ValueError):
            LogLevel.parse(raw)  # type: ignore[arg-type]

    def test_level_label_falls_back_to_number(self) -> None:
        assert level_label(LogLevel.INFO) == "Info"
        assert level_label(7) == "7"


class TestLogEvent:
    def _ts(self) -> datetime:
        return datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    def test_basic_creation(self) -> None:
        event = LogEvent(timestamp=self._ts(), level=LogLevel.INFO, message="hello")
        assert event.extra is None
        assert event.has_extra is False
        assert event.level_label == "Info"

    def test_extra_is_passed_through_untouched(self) -> None:
        payload = {"id": 123, "tags": ["a"]}
        event = LogEvent(self._ts(), LogLevel.ERROR, "boom", payload)
        assert event.extra is payload
        assert event.has_extra is True

    def test_falsy_extra_still_counts(self) -> None:
        assert LogEvent(self._ts(), LogLevel.INFO, "x", 0).has_extra is True

    def test_is_frozen(self) -> None:
        event = LogEvent(self._ts(), LogLevel.INFO, "hi")
        with pytest.raises((AttributeError, TypeError)):
            event.message = "changed"  # type: ignore[misc]
