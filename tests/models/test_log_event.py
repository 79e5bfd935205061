"""Tests for log events"""

import time
from datetime import datetime, timezone
from typing import Iterator

import pytest

from lambdalog.models.log_event import LogEvent, from_epoch_millis, to_epoch_millis

# 2024-05-15 12:30:45.123 UTC
TIMESTAMP = 1715776245123


@pytest.fixture(autouse=True)
def _utc_timezone(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Format local times in UTC"""
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def test_from_api() -> None:
    """Test creating an event from a filter_log_events item"""
    # Act
    event = LogEvent.from_api(
        {
            "logStreamName": "2024/05/15/[$LATEST]abc",
            "timestamp": TIMESTAMP,
            "message": "START RequestId: 1\n",
            "ingestionTime": TIMESTAMP + 500,
            "eventId": "1",
        }
    )

    # Assert
    assert event == LogEvent(TIMESTAMP, "START RequestId: 1\n", TIMESTAMP + 500)


def test_from_api_defaults_missing_fields() -> None:
    """Test that missing fields default to zero and empty"""
    # Assert
    assert LogEvent.from_api({}) == LogEvent(0, "", 0)


def test_epoch_millis_round_trip() -> None:
    """Test converting between epoch milliseconds and datetimes"""
    # Arrange
    moment = datetime(2024, 5, 15, 12, 30, 45, 123000, tzinfo=timezone.utc)

    # Assert
    assert to_epoch_millis(moment) == TIMESTAMP
    assert from_epoch_millis(TIMESTAMP) == moment


def test_format_time() -> None:
    """Test the list and the detail timestamp formats"""
    # Arrange
    event = LogEvent(TIMESTAMP, "message", TIMESTAMP)

    # Assert
    assert event.format_time() == "2024-05-15 12:30:45"
    assert event.format_time(precise=True) == "2024-05-15 12:30:45.123"


def test_summary_is_single_line() -> None:
    """Test that the list shows messages on one line"""
    # Arrange
    event = LogEvent(TIMESTAMP, "  first\nsecond\tthird\r\n", TIMESTAMP)

    # Assert
    assert event.summary == "first second third"


def test_detail_lines_plain_text() -> None:
    """Test that plain messages are split into their lines"""
    # Arrange
    event = LogEvent(TIMESTAMP, "line one\nline two\n", TIMESTAMP)

    # Assert
    assert event.detail_lines() == ["line one", "line two"]


def test_detail_lines_pretty_prints_json() -> None:
    """Test that a JSON message is indented"""
    # Arrange
    event = LogEvent(TIMESTAMP, '{"level": "info", "items": [1]}', TIMESTAMP)

    # Assert
    assert event.detail_lines() == [
        "{",
        '  "level": "info",',
        '  "items": [',
        "    1",
        "  ]",
        "}",
    ]


def test_detail_lines_keeps_lambda_prefix() -> None:
    """Test that the tab separated prefix stays above the JSON payload"""
    # Arrange
    message = '2024-05-15T12:30:45.123Z\treq-1\tINFO\t{"ok": true}\n'
    event = LogEvent(TIMESTAMP, message, TIMESTAMP)

    # Assert
    assert event.detail_lines() == [
        "2024-05-15T12:30:45.123Z req-1 INFO",
        "{",
        '  "ok": true',
        "}",
    ]


def test_detail_lines_invalid_json() -> None:
    """Test that broken JSON is shown as is"""
    # Arrange
    event = LogEvent(TIMESTAMP, "req-1\t{not json", TIMESTAMP)

    # Assert
    assert event.detail_lines() == ["req-1\t{not json"]


def test_detail_lines_empty_message() -> None:
    """Test that an empty message still has one line"""
    # Assert
    assert LogEvent(0, "", 0).detail_lines() == [""]
