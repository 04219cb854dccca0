import logging
import re
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from seatify.config import Settings, settings
from seatify.core.urls import build_rsvp_url
from seatify.db.models.event import Event
from seatify.db.models.rsvp_settings import get_rsvp_settings
from seatify.db.session import get_session
from seatify.domain.schemas.calendar import CalendarLinks
from seatify.services.calendar.download import build_calendar_file
from seatify.services.calendar.invite import build_invite_links
from seatify.services.calendar.mapper import event_to_calendar_event

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events")

_HEADER_UNSAFE_RE = re.compile(r"[^A-Za-z0-9_-]")


def get_settings() -> Settings:
    return settings


def _load_event(session: Session, event_id: UUID) -> Event:
    event = session.get(Event, event_id)
    if event is None:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


@router.get("/{event_id}/calendar.ics")
def download_event_ics(
    event_id: UUID,
    filename: str | None = None,
    session: Session = Depends(get_session),
    config: Settings = Depends(get_settings),
) -> Response:
    event = _load_event(session, event_id)
    calendar_event = event_to_calendar_event(
        event,
        event_url=build_rsvp_url(config.APP_BASE_URL, str(event.id)),
    )
    if filename:
        filename = _HEADER_UNSAFE_RE.sub("_", filename)
    calendar_file = build_calendar_file(calendar_event, filename)
    logger.info("Serving %s for event id=%s", calendar_file.filename, event.id)
    return Response(
        content=calendar_file.content,
        media_type=calendar_file.media_type,
        headers={"Content-Disposition": f'attachment; filename="{calendar_file.filename}"'},
    )


@router.get("/{event_id}/calendar-links", response_model=CalendarLinks)
def get_event_calendar_links(
    event_id: UUID,
    session: Session = Depends(get_session),
    config: Settings = Depends(get_settings),
) -> CalendarLinks:
    event = _load_event(session, event_id)
    links = build_invite_links(event, get_rsvp_settings(session, event.id), config)
    if links is None:
        raise HTTPException(status_code=404, detail="Calendar invites disabled")
    return links
