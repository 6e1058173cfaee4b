"""Time and duration helpers."""

import math
from datetime import datetime, timedelta, timezone

from dateutil.parser import isoparse


def whole_minutes(delta: timedelta) -> int:
    """Round a duration to whole minutes, halves rounding up."""

    return math.floor(delta.total_seconds() / 60 + 0.5)


def minutes_between(start: datetime, end: datetime) -> int:
    return whole_minutes(end - start)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""

    parsed = isoparse(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def from_epoch(seconds: int) -> datetime:
    return datetime.fromtimestamp(seconds, tz=timezone.utc)
