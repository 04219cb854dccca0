from datetime import datetime, timezone
from uuid import uuid4

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from seatify.api.calendar import get_settings
from seatify.config import Settings
from seatify.db.base import Base
from seatify.db.models.event import Event
from seatify.db.models.rsvp_settings import RsvpSettings
from seatify.db.session import get_session
from seatify.main import app


def _make_client():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine, future=True)()

    def override_session():
        yield session

    app.dependency_overrides[get_session] = override_session
    app.dependency_overrides[get_settings] = lambda: Settings(APP_BASE_URL="https://example.com")
    return TestClient(app), session


def _add_event(session) -> Event:
    event = Event(
        id=uuid4(),
        name="Wedding Reception",
        event_date=datetime(2026, 6, 1, 18, 0, tzinfo=timezone.utc),
        venue_name="Grand Hotel",
        venue_address="1 Main St",
    )
    session.add(event)
    session.commit()
    return event


def test_ping() -> None:
    client = TestClient(app)
    assert client.get("/ping").json() == {"message": "pong"}


def test_download_event_ics_returns_attachment() -> None:
    client, session = _make_client()
    try:
        event = _add_event(session)

        response = client.get(f"/events/{event.id}/calendar.ics")

        assert response.status_code == 200
        assert response.headers["content-type"] == "text/calendar; charset=utf-8"
        assert response.headers["content-disposition"] == 'attachment; filename="Wedding_Reception.ics"'
        lines = response.text.split("\r\n")
        assert "SUMMARY:Wedding Reception" in lines
        assert "LOCATION:Grand Hotel\\, 1 Main St" in lines
        assert "DTSTART:20260601T180000Z" in lines
        assert "DTEND:20260601T190000Z" in lines
        assert f"URL:https://example.com/rsvp/{event.id}" in lines
    finally:
        app.dependency_overrides.clear()


def test_download_event_ics_accepts_filename_override() -> None:
    client, session = _make_client()
    try:
        event = _add_event(session)

        response = client.get(f"/events/{event.id}/calendar.ics", params={"filename": "smith jones"})

        assert response.headers["content-disposition"] == 'attachment; filename="smith_jones.ics"'
    finally:
        app.dependency_overrides.clear()


def test_download_event_ics_missing_event_returns_404() -> None:
    client, _ = _make_client()
    try:
        response = client.get(f"/events/{uuid4()}/calendar.ics")
        assert response.status_code == 404
        assert response.json()["detail"] == "Event not found"
    finally:
        app.dependency_overrides.clear()


def test_calendar_links_returns_all_three_links() -> None:
    client, session = _make_client()
    try:
        event = _add_event(session)

        response = client.get(f"/events/{event.id}/calendar-links")

        assert response.status_code == 200
        body = response.json()
        assert body["google_url"].startswith("https://calendar.google.com/calendar/render?action=TEMPLATE")
        assert body["outlook_url"].startswith("https://outlook.live.com/calendar/0/deeplink/compose?")
        assert body["ics_url"] == f"https://example.com/events/{event.id}/calendar.ics"
    finally:
        app.dependency_overrides.clear()


def test_calendar_links_disabled_by_rsvp_settings() -> None:
    client, session = _make_client()
    try:
        event = _add_event(session)
        session.add(RsvpSettings(event_id=event.id, include_calendar_invite=False))
        session.commit()

        response = client.get(f"/events/{event.id}/calendar-links")

        assert response.status_code == 404
        assert response.json()["detail"] == "Calendar invites disabled"
    finally:
        app.dependency_overrides.clear()
