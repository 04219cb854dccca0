from __future__ import annotations

from typing import Any
from urllib.parse import urlencode

from seatify.domain.schemas.calendar import CalendarEvent
from seatify.services.calendar.formatting import (
    format_google_date,
    format_outlook_date,
    resolve_end_date,
)

GOOGLE_CALENDAR_URL = "https://calendar.google.com/calendar/render"
OUTLOOK_CALENDAR_URL = "https://outlook.live.com/calendar/0/deeplink/compose"


def build_event_details(event: CalendarEvent) -> str | None:
    details_parts = []
    if event.description:
        details_parts.append(event.description)
    if event.url:
        details_parts.append(f"More info: {event.url}")
    if not details_parts:
        return None
    return "\n\n".join(details_parts)


def generate_google_calendar_url(event: CalendarEvent) -> str:
    end_date = resolve_end_date(event.start_date, event.end_date)
    params: dict[str, Any] = {
        "action": "TEMPLATE",
        "text": event.title,
        "dates": f"{format_google_date(event.start_date)}/{format_google_date(end_date)}",
    }

    details = build_event_details(event)
    if details:
        params["details"] = details
    if event.location:
        params["location"] = event.location

    return f"{GOOGLE_CALENDAR_URL}?{urlencode(params)}"


def generate_outlook_calendar_url(event: CalendarEvent) -> str:
    end_date = resolve_end_date(event.start_date, event.end_date)
    params: dict[str, Any] = {
        "subject": event.title,
        "startdt": format_outlook_date(event.start_date),
        "enddt": format_outlook_date(end_date),
        "path": "/calendar/action/compose",
        "rru": "addevent",
    }

    body = build_event_details(event)
    if body:
        params["body"] = body
    if event.location:
        params["location"] = event.location

    return f"{OUTLOOK_CALENDAR_URL}?{urlencode(params)}"
