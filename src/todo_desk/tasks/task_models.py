# src/todo_desk/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any

# On-disk key order is part of the file format.
FIELD_TEXT = "todo"
FIELD_DONE = "isdone"
FIELD_PRIORITY = "ispriority"
FIELD_CREATED_AT = "created_at"
FIELD_UPDATED_AT = "updated_at"

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"

# "2024-01-01 09:00:00.123456 +07", optionally without the fraction, with up
# to nine fraction digits, or with a zone abbreviation instead of an offset.
_TIMESTAMP_RE = re.compile(
    r"^(?P<stamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<frac>\d{1,9}))?"
    r" (?P<zone>[+-]\d{2}(?:\d{2})?|[A-Z]{2,5})$"
)

# Abbreviations found in files written by older builds.
_ZONE_ABBREVIATIONS = {
    "WIB": timedelta(hours=7),
    "UTC": timedelta(0),
    "GMT": timedelta(0),
}


def format_offset(dt: datetime) -> str:
    """
    Short UTC offset: "+07" for whole hours, "+0530" otherwise.
    """
    offset = dt.utcoffset()
    if offset is None:
        return "+00"
    total_minutes = int(offset.total_seconds() // 60)
    sign = "+" if total_minutes >= 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    if minutes:
        return f"{sign}{hours:02d}{minutes:02d}"
    return f"{sign}{hours:02d}"


def format_timestamp(moment: datetime, tz: tzinfo) -> str:
    """Render `moment` in `tz` as "YYYY-MM-DD HH:MM:SS.ffffff +07"."""
    local = moment.astimezone(tz)
    return f"{local.strftime(TIMESTAMP_FORMAT)} {format_offset(local)}"


def _parse_zone(zone: str) -> timezone:
    if zone in _ZONE_ABBREVIATIONS:
        return timezone(_ZONE_ABBREVIATIONS[zone])
    if zone[0] not in "+-":
        raise ValueError(f"unknown zone abbreviation {zone!r}")
    sign = 1 if zone[0] == "+" else -1
    hours = int(zone[1:3])
    minutes = int(zone[3:5]) if len(zone) == 5 else 0
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def parse_timestamp(raw: str) -> datetime:
    """
    Parse a task timestamp back into an aware datetime.

    Accepts format_timestamp() output, the same without fraction, and
    "2024-01-01 09:00:00.123456789 WIB" from older files. Sub-microsecond
    digits are dropped. Raises ValueError on anything else.
    """
    m = _TIMESTAMP_RE.match(raw.strip())
    if m is None:
        raise ValueError(f"not a task timestamp: {raw!r}")
    base = datetime.strptime(m["stamp"], "%Y-%m-%d %H:%M:%S")
    frac = (m["frac"] or "")[:6].ljust(6, "0")
    return base.replace(microsecond=int(frac), tzinfo=_parse_zone(m["zone"]))


def _require(data: dict[str, Any], key: str, kind: type) -> Any:
    if key not in data:
        raise ValueError(f"missing field {key!r}")
    value = data[key]
    if not isinstance(value, kind):
        raise ValueError(f"field {key!r} must be {kind.__name__}, got {type(value).__name__}")
    return value


@dataclass(slots=True)
class Task:
    """
    A single to-do entry.

    Tasks have no identity of their own: the store addresses them by position.
    """

    text: str
    done: bool = False
    priority: bool = False
    created_at: str = ""
    updated_at: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            FIELD_TEXT: self.text,
            FIELD_DONE: self.done,
            FIELD_PRIORITY: self.priority,
            FIELD_CREATED_AT: self.created_at,
            FIELD_UPDATED_AT: self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Task:
        if not isinstance(data, dict):
            raise ValueError(f"task entry must be an object, got {type(data).__name__}")
        return cls(
            text=_require(data, FIELD_TEXT, str),
            done=_require(data, FIELD_DONE, bool),
            priority=_require(data, FIELD_PRIORITY, bool),
            created_at=_require(data, FIELD_CREATED_AT, str),
            updated_at=_require(data, FIELD_UPDATED_AT, str),
        )
