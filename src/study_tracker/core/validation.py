from __future__ import annotations

import re
from datetime import date
from typing import Iterable, Optional, Protocol, Tuple

from ..domain import (
    CrossesMidnight,
    InvalidDuration,
    InvalidFormat,
    MissingField,
    Overlap,
    Session,
)

MINUTES_PER_DAY = 24 * 60

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_PATTERN = re.compile(r"^(?P<hour>[01]\d|2[0-3]):(?P<minute>[0-5]\d)$")


class SessionFields(Protocol):
    title: str
    subject: str
    date: str
    start_time: str
    duration: int


def parse_minutes(start_time: str) -> int:
    """Convert ``HH:mm`` into minutes since local midnight."""

    if not isinstance(start_time, str):
        raise InvalidFormat("start time", start_time, "HH:mm")
    match = _TIME_PATTERN.match(start_time)
    if not match:
        raise InvalidFormat("start time", start_time, "HH:mm")
    return int(match.group("hour")) * 60 + int(match.group("minute"))


def format_minutes(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def parse_day(value: str) -> date:
    if not isinstance(value, str) or not _DATE_PATTERN.match(value):
        raise InvalidFormat("date", value, "YYYY-MM-DD")
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise InvalidFormat("date", value, "YYYY-MM-DD") from exc


def session_interval(session: SessionFields) -> Tuple[int, int]:
    """Half-open ``[start, end)`` interval in minutes since midnight."""

    start = parse_minutes(session.start_time)
    return start, start + int(session.duration)


def validate(
    candidate: SessionFields,
    existing_sessions: Iterable[Session],
    exclude_id: Optional[str] = None,
) -> None:
    """Reject ``candidate`` with the first rule it breaks.

    Field checks run before the overlap scan. Touching intervals
    (10:00-11:00 then 11:00-12:00) do not overlap.
    """

    for name in ("title", "subject"):
        value = getattr(candidate, name)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise MissingField(name)
        if not isinstance(value, str):
            raise InvalidFormat(name, value, "text")
    parse_day(candidate.date)
    start = parse_minutes(candidate.start_time)

    duration = candidate.duration
    if isinstance(duration, bool) or not isinstance(duration, int) or duration <= 0:
        raise InvalidDuration(duration)
    end = start + duration
    if end > MINUTES_PER_DAY:
        raise CrossesMidnight()

    for other in existing_sessions:
        if other.date != candidate.date or other.id == exclude_id:
            continue
        other_start, other_end = session_interval(other)
        if start < other_end and end > other_start:
            raise Overlap(other.title)


__all__ = [
    "MINUTES_PER_DAY",
    "SessionFields",
    "format_minutes",
    "parse_day",
    "parse_minutes",
    "session_interval",
    "validate",
]
