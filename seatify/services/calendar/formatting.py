from __future__ import annotations

import re
import secrets
import string
import time
from datetime import datetime, timedelta, timezone

DEFAULT_DURATION = timedelta(hours=1)
UID_DOMAIN = "seatify.app"
FOLD_LIMIT = 75
CRLF = "\r\n"

_BASE36 = string.digits + string.ascii_lowercase
_ICS_DATE_RE = re.compile(r"(\d{4})(\d{2})(\d{2})T(\d{2})(\d{2})(\d{2})Z")
_ESCAPED_RE = re.compile(r"\\([\\;,n])")
_UNESCAPES = {"\\": "\\", ";": ";", ",": ",", "n": "\n"}


def to_utc(instant: datetime) -> datetime:
    """Read an instant through its UTC fields; naive values are already UTC."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def resolve_end_date(start: datetime, end: datetime | None) -> datetime:
    return end if end is not None else start + DEFAULT_DURATION


def format_ics_date(instant: datetime) -> str:
    utc = to_utc(instant)
    return (
        f"{utc.year:04d}{utc.month:02d}{utc.day:02d}"
        f"T{utc.hour:02d}{utc.minute:02d}{utc.second:02d}Z"
    )


def format_google_date(instant: datetime) -> str:
    return format_ics_date(instant)


def format_outlook_date(instant: datetime) -> str:
    utc = to_utc(instant).replace(tzinfo=None)
    return utc.isoformat(timespec="milliseconds") + "Z"


def parse_ics_date(text: str) -> datetime:
    match = _ICS_DATE_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"Not a UTC iCalendar date-time: {text!r}")
    year, month, day, hour, minute, second = (int(part) for part in match.groups())
    return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)


def generate_uid(domain: str = UID_DOMAIN) -> str:
    timestamp = int(time.time() * 1000)
    token = "".join(secrets.choice(_BASE36) for _ in range(9))
    return f"{timestamp}-{token}@{domain}"


def escape_ics_text(text: str) -> str:
    # Backslash first so the escapes added below are not doubled.
    return (
        text.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\n", "\\n")
    )


def unescape_ics_text(text: str) -> str:
    return _ESCAPED_RE.sub(lambda match: _UNESCAPES[match.group(1)], text)


def fold_ics_line(line: str) -> str:
    if len(line) <= FOLD_LIMIT:
        return line

    chunks = [line[:FOLD_LIMIT]]
    remaining = line[FOLD_LIMIT:]
    step = FOLD_LIMIT - 1
    for offset in range(0, len(remaining), step):
        chunks.append(" " + remaining[offset : offset + step])
    return CRLF.join(chunks)


def unfold_ics_lines(text: str) -> str:
    return text.replace(CRLF + " ", "")
