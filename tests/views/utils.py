"""Test data and helpers for view tests"""

from datetime import datetime, timezone

from lambdalog.helpers.curses_utils import Size
from lambdalog.models.account import AccountContext
from lambdalog.models.log_event import LogEvent
from lambdalog.views.app import App

PROFILES = [AccountContext("dev", "us-east-1"), AccountContext("prod", "eu-west-1")]
FUNCTIONS = ["orders-api", "payments-api", "billing-export"]
NOW = datetime(2024, 5, 15, 12, 0, tzinfo=timezone.utc)
EVENTS = [
    LogEvent(1715770800000, "START RequestId: 1", 1715770800100),
    LogEvent(1715770801000, '{"level": "error", "message": "boom"}', 1715770801100),
    LogEvent(1715770802000, "END RequestId: 1", 1715770802100),
]
TERMINAL_SIZE = Size(24, 80)


def press(app: App, keys: str | list[int]) -> None:
    """Send keys to the app, drawing after each one"""
    if isinstance(keys, str):
        keys = [ord(char) for char in keys]
    for key in keys:
        app.handle_key(key)
        app.draw()
