"""Log events returned by the remote log fetcher"""

import dataclasses
import json
from datetime import datetime, timedelta, timezone
from typing import Any

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def from_epoch_millis(millis: int) -> datetime:
    """Convert a millisecond epoch instant to a local aware datetime"""
    return (EPOCH + timedelta(milliseconds=millis)).astimezone()


def to_epoch_millis(moment: datetime) -> int:
    """Convert an aware datetime to a millisecond epoch instant"""
    return (moment - EPOCH) // timedelta(milliseconds=1)


@dataclasses.dataclass(frozen=True)
class LogEvent:
    """Represents a single log event of a function"""

    timestamp: int
    message: str
    ingestion_time: int

    @classmethod
    def from_api(cls, event: dict[str, Any]) -> "LogEvent":
        """Create a LogEvent from a filter_log_events response item"""
        return cls(
            timestamp=event.get("timestamp") or 0,
            message=event.get("message") or "",
            ingestion_time=event.get("ingestionTime") or 0,
        )

    @property
    def time(self) -> datetime:
        """Get the event timestamp as a local datetime"""
        return from_epoch_millis(self.timestamp)

    @property
    def ingested_at(self) -> datetime:
        """Get the ingestion time as a local datetime"""
        return from_epoch_millis(self.ingestion_time)

    def format_time(self, precise: bool = False) -> str:
        """Format the event timestamp, with milliseconds when precise"""
        if precise:
            return self.time.strftime(TIMESTAMP_FORMAT + ".%f")[:-3]
        return self.time.strftime(TIMESTAMP_FORMAT)

    @property
    def summary(self) -> str:
        """Get the message as a single line"""
        return self.message.strip().replace("\n", " ").replace("\r", "").replace("\t", " ")

    def detail_lines(self) -> list[str]:
        """Get the message as lines, pretty-printing JSON payloads

        Lambda runtimes prefix JSON log lines with tab separated fields
        (timestamp, request id, level). Those are kept on the first line and
        the JSON payload is indented below them.
        """
        message = self.message.rstrip("\n")
        prefix, _, payload = message.rpartition("\t")
        parsed = _try_parse_json(payload)
        if parsed is None:
            return message.splitlines() or [""]

        lines = [prefix.replace("\t", " ")] if prefix else []
        lines.extend(json.dumps(parsed, indent=2, ensure_ascii=False).splitlines())
        return lines


def _try_parse_json(text: str) -> dict | list | None:
    text = text.strip()
    if not text.startswith(("{", "[")):
        return None
    try:
        value = json.loads(text)
    except ValueError:
        return None
    if not isinstance(value, (dict, list)):
        return None
    return value
