from seatify.db.models.event import Event
from seatify.domain.schemas.calendar import CalendarEvent


def event_to_calendar_event(event: Event, event_url: str | None = None) -> CalendarEvent:
    location_parts = [part for part in (event.venue_name, event.venue_address) if part]
    return CalendarEvent(
        title=event.name,
        start_date=event.event_date,
        end_date=event.end_date,
        description=event.description,
        location=", ".join(location_parts) or None,
        url=event_url,
    )
