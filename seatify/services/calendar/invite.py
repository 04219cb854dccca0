from __future__ import annotations

import logging

from seatify.config import Settings
from seatify.core.urls import build_ics_url, build_rsvp_url
from seatify.db.models.event import Event
from seatify.db.models.rsvp_settings import RsvpSettings
from seatify.domain.schemas.calendar import CalendarEvent, CalendarLinks
from seatify.services.calendar.links import (
    generate_google_calendar_url,
    generate_outlook_calendar_url,
)
from seatify.services.calendar.mapper import event_to_calendar_event

logger = logging.getLogger(__name__)


def build_calendar_links(calendar_event: CalendarEvent, ics_url: str) -> CalendarLinks:
    return CalendarLinks(
        google_url=generate_google_calendar_url(calendar_event),
        outlook_url=generate_outlook_calendar_url(calendar_event),
        ics_url=ics_url,
    )


def build_invite_links(
    event: Event,
    rsvp_settings: RsvpSettings,
    config: Settings,
) -> CalendarLinks | None:
    """Links for the "Add to Calendar" block of an RSVP confirmation.

    Returns None when the host turned calendar invites off.
    """
    if not rsvp_settings.include_calendar_invite:
        logger.info("Calendar invite disabled for event id=%s", event.id)
        return None

    event_id = str(event.id)
    calendar_event = event_to_calendar_event(
        event,
        event_url=build_rsvp_url(config.APP_BASE_URL, event_id),
    )
    return build_calendar_links(
        calendar_event,
        ics_url=build_ics_url(config.APP_BASE_URL, event_id),
    )
