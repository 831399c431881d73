"""Human readable relative times ("3 hours ago", "in 2 weeks") and ISO stamps."""

from __future__ import annotations

import re
import time
from datetime import datetime, timedelta
from typing import Dict, Optional, Union

_SPECS = {
    "Y": ("year", 0, 9999, 4),
    "m": ("month", 1, 12, 2),
    "d": ("day", 1, 31, 2),
    "H": ("hour", 0, 23, 2),
    "M": ("minute", 0, 59, 2),
    "S": ("second", 0, 61, 2),
}
_NUMBERS = {width: re.compile(r"\s*(\d{1,%d})" % width) for width in (2, 4)}
_FORMAT_PART = re.compile(r"%(?P<spec>[YmdHMS])|(?P<space>\s+)|(?P<lit>.)", re.S)
_SPACES = re.compile(r"\s*")

# Tried in order; each attempt keeps the fields it managed to set.
_FORMATS = ("%H:%M", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S", "%Y")


def time_ago(epoch: float, now: Optional[float] = None) -> str:
    """Describe ``epoch`` relative to ``now`` (default: the current time)."""
    current = int(time.time() if now is None else now)
    ss = current - int(epoch)
    s = abs(ss)
    m = (s + 30) // 60
    h = (m + 30) // 60
    d = (h + 12) // 24
    w = (2 * d + 7) // 14
    months = (d + 15) // 30
    years = (d + 365 // 2) // 365
    decades = (years + 5) // 10
    centuries = (years + 50) // 100

    steps = (
        (s, 90, "s"),
        (m, 90, "minutes"),
        (h, 72, "hours"),
        (d, 30, "day"),
        (w, 11, "weeks"),
        (months, 18, "months"),
        (years, 64, "years"),
        (decades, 9, "decades"),
    )
    text = next(
        (f"{value} {unit}" for value, limit, unit in steps if value <= limit),
        f"{centuries} hundred years",
    )
    if ss < 0:
        return "in " + text
    if ss > 0:
        return text + " ago"
    return text


def _parse_into(text: str, fmt: str, fields: Dict[str, int]) -> bool:
    """Match ``text`` against ``fmt`` from the start, updating ``fields`` as it goes.

    Trailing text is ignored.  Fields parsed before a mismatch stay set.
    """
    pos = 0
    for part in _FORMAT_PART.finditer(fmt):
        if part["spec"]:
            name, low, high, width = _SPECS[part["spec"]]
            number = _NUMBERS[width].match(text, pos)
            if not number:
                return False
            value = int(number.group(1))
            if not low <= value <= high:
                return False
            fields[name] = value
            pos = number.end()
        elif part["space"]:
            pos = _SPACES.match(text, pos).end()
        elif text.startswith(part["lit"], pos):
            pos += 1
        else:
            return False
    return True


def _local_epoch(fields: Dict[str, int]) -> float:
    moment = datetime(fields["year"], fields["month"], 1) + timedelta(
        days=fields["day"] - 1,
        hours=fields["hour"],
        minutes=fields["minute"],
        seconds=fields["second"],
    )
    return moment.timestamp()


def iso_ago(iso: str, now: Optional[float] = None) -> str:
    """Describe an ISO-like local time stamp relative to ``now``.

    Accepts ``HH:MM`` (today), ``YYYY-MM-DDTHH:MM:SS``, the same with a
    space, or a leading year; fields not given come from ``now``.
    Unrecognised text is returned unchanged.
    """
    current = int(time.time() if now is None else now)
    base = datetime.fromtimestamp(current)
    fields = {
        "year": base.year,
        "month": base.month,
        "day": base.day,
        "hour": base.hour,
        "minute": base.minute,
        "second": base.second,
    }
    if not any(_parse_into(iso, fmt, fields) for fmt in _FORMATS):
        return iso
    try:
        epoch = _local_epoch(fields)
    except (ValueError, OverflowError, OSError):
        return iso
    return time_ago(epoch, current)


def iso_time(when: Union[None, float, datetime] = None) -> str:
    """Local time as ``YYYY-MM-DDTHH:MM:SS+hhmm`` (default: now)."""
    if when is None:
        moment = datetime.now().astimezone()
    elif isinstance(when, datetime):
        moment = when.astimezone()
    else:
        moment = datetime.fromtimestamp(when).astimezone()
    return moment.strftime("%Y-%m-%dT%H:%M:%S%z")