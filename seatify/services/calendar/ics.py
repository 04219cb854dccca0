from __future__ import annotations

from datetime import datetime, timezone

from seatify.domain.schemas.calendar import CalendarEvent
from seatify.services.calendar.formatting import (
    CRLF,
    escape_ics_text,
    fold_ics_line,
    format_ics_date,
    generate_uid,
    resolve_end_date,
)

PRODUCT_ID = "-//Seatify//Calendar//EN"
MEDIA_TYPE = "text/calendar; charset=utf-8"


def generate_ics(
    event: CalendarEvent,
    *,
    now: datetime | None = None,
    uid: str | None = None,
    product_id: str = PRODUCT_ID,
) -> str:
    """Serialize one event as a complete VCALENDAR document with CRLF line endings.

    ``now`` and ``uid`` default to the current UTC time and a fresh identifier;
    pass them to get byte-stable output.
    """
    stamp = now or datetime.now(tz=timezone.utc)
    end_date = resolve_end_date(event.start_date, event.end_date)

    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{product_id}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
        "BEGIN:VEVENT",
        f"UID:{uid or generate_uid()}",
        f"DTSTAMP:{format_ics_date(stamp)}",
        f"DTSTART:{format_ics_date(event.start_date)}",
        f"DTEND:{format_ics_date(end_date)}",
        fold_ics_line(f"SUMMARY:{escape_ics_text(event.title)}"),
    ]

    if event.description:
        lines.append(fold_ics_line(f"DESCRIPTION:{escape_ics_text(event.description)}"))
    if event.location:
        lines.append(fold_ics_line(f"LOCATION:{escape_ics_text(event.location)}"))
    if event.url:
        lines.append(fold_ics_line(f"URL:{event.url}"))

    lines.extend(["END:VEVENT", "END:VCALENDAR"])
    return CRLF.join(lines)
