# -*- coding: utf-8 -*-
"""
Value Encodings - DCMI encoding schemes for dates, periods and durations.

Converts between Python values and the textual encodings used in
DublinCore catalogs: W3C-DTF dates, DCMI Period values and ISO 8601
durations.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

# Standard library
import re
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple


_DATE_FORMATS = {
    'year': "%Y",
    'month': "%Y-%m",
    'day': "%Y-%m-%d",
    'minute': "%Y-%m-%dT%H:%MZ",
    'second': "%Y-%m-%dT%H:%M:%SZ",
}

_W3CDTF_RE = re.compile(
    r"^(?P<year>\d{4})"
    r"(?:-(?P<month>\d{2})"
    r"(?:-(?P<day>\d{2})"
    r"(?:T(?P<hour>\d{2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:\.(?P<fraction>\d+))?)?"
    r"(?P<tz>Z|[+-]\d{2}:\d{2})?)?)?)?$"
)

_DURATION_RE = re.compile(
    r"^PT(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?"
    r"(?:(?P<seconds>\d+(?:\.\d+)?)S)?$"
)

PERIOD_SCHEME = "W3C-DTF"


def _to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def encode_date(value: datetime, precision: str = 'second') -> str:
    """Encode a datetime as a W3C-DTF string in UTC.

    Naive datetimes are taken to be UTC.

    Parameters
    ----------
    value : datetime
        Date to encode.
    precision : str
        One of 'year', 'month', 'day', 'minute', 'second', 'fraction'.

    Returns
    -------
    str
    """
    value = _to_utc(value)
    if precision == 'fraction':
        millis = value.microsecond // 1000
        return value.strftime("%Y-%m-%dT%H:%M:%S") + f".{millis:03d}Z"
    try:
        fmt = _DATE_FORMATS[precision]
    except KeyError:
        raise ValueError(f"Unknown date precision: {precision!r}") from None
    return value.strftime(fmt)


def decode_date(text: str) -> Optional[datetime]:
    """Decode a W3C-DTF string into an aware UTC datetime.

    Returns
    -------
    Optional[datetime]
        None if ``text`` is not a W3C-DTF date.
    """
    m = _W3CDTF_RE.match(text.strip())
    if m is None:
        return None
    parts = m.groupdict()
    fraction = parts['fraction'] or "0"
    try:
        value = datetime(
            int(parts['year']),
            int(parts['month'] or 1),
            int(parts['day'] or 1),
            int(parts['hour'] or 0),
            int(parts['minute'] or 0),
            int(parts['second'] or 0),
            int(fraction[:6].ljust(6, "0")),
        )
    except ValueError:
        return None
    tz = parts['tz']
    if tz and tz != "Z":
        value = datetime.fromisoformat(value.isoformat() + tz)
    return _to_utc(value)


def encode_period(
    start: Optional[datetime],
    end: Optional[datetime],
    name: Optional[str] = None,
    precision: str = 'second',
) -> str:
    """Encode a DCMI Period.

    Either bound may be None for an open period.
    """
    fields = []
    if name:
        fields.append(f"name={name};")
    if start is not None:
        fields.append(f"start={encode_date(start, precision)};")
    if end is not None:
        fields.append(f"end={encode_date(end, precision)};")
    fields.append(f"scheme={PERIOD_SCHEME};")
    return " ".join(fields)


def decode_period(
    text: str,
) -> Optional[Tuple[Optional[datetime], Optional[datetime], Optional[str]]]:
    """Decode a DCMI Period.

    Returns
    -------
    Optional[Tuple[Optional[datetime], Optional[datetime], Optional[str]]]
        ``(start, end, name)``, or None when ``text`` has neither a
        start nor an end, or uses a scheme other than W3C-DTF.
    """
    fields: Dict[str, str] = {}
    for part in text.split(";"):
        key, sep, value = part.partition("=")
        if sep:
            fields[key.strip()] = value.strip()
    if fields.get('scheme', PERIOD_SCHEME) != PERIOD_SCHEME:
        return None
    start = decode_date(fields['start']) if 'start' in fields else None
    end = decode_date(fields['end']) if 'end' in fields else None
    if start is None and end is None:
        return None
    return start, end, fields.get('name')


def encode_duration(millis: int) -> str:
    """Encode a duration in milliseconds as ISO 8601, e.g. ``PT1H2M3.004S``."""
    if millis < 0:
        raise ValueError(f"Duration must not be negative, got {millis}")
    hours, rest = divmod(millis, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    seconds, ms = divmod(rest, 1000)
    return f"PT{hours}H{minutes}M{seconds}.{ms:03d}S"


def decode_duration(text: str) -> Optional[int]:
    """Decode an ISO 8601 duration, or a plain millisecond count.

    Returns
    -------
    Optional[int]
        Duration in milliseconds, or None if ``text`` is not a duration.
    """
    text = text.strip()
    if text.isdigit():
        return int(text)
    m = _DURATION_RE.match(text)
    if m is None or text == "PT":
        return None
    hours = int(m.group('hours') or 0)
    minutes = int(m.group('minutes') or 0)
    seconds = float(m.group('seconds') or 0)
    return hours * 3_600_000 + minutes * 60_000 + round(seconds * 1000)
