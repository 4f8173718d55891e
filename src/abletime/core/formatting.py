"""Pure formatting helpers for durations and timestamps."""

from __future__ import annotations

import re
from datetime import datetime, timedelta

_DURATION_RE = re.compile(r"^(?P<sign>-?)(?P<hours>\d+):(?P<minutes>[0-5]\d):(?P<seconds>[0-5]\d)\.(?P<millis>\d{3})$")


def format_duration(duration: timedelta) -> str:
    """Format `duration` as `H:MM:SS.mmm`.

    Hours are unbounded (no day rollover) and milliseconds are truncated,
    never rounded up.
    """

    sign = ""
    if duration < timedelta(0):
        sign = "-"
        duration = -duration

    total_ms = duration // timedelta(milliseconds=1)
    hours, rest = divmod(total_ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    seconds, millis = divmod(rest, 1_000)
    return f"{sign}{hours}:{minutes:02}:{seconds:02}.{millis:03}"


def parse_duration(text: str) -> timedelta:
    """Inverse of `format_duration`."""

    match = _DURATION_RE.match(text.strip())
    if match is None:
        raise ValueError(f"not a H:MM:SS.mmm duration: {text!r}")

    value = timedelta(
        hours=int(match["hours"]),
        minutes=int(match["minutes"]),
        seconds=int(match["seconds"]),
        milliseconds=int(match["millis"]),
    )
    return -value if match["sign"] else value


def format_start_time(moment: datetime) -> str:
    """Format as e.g. `Tue Mar  5 14:07:09` (day padded to two columns)."""

    return f"{moment:%a %b} {moment.day:>2} {moment:%H:%M:%S}"
