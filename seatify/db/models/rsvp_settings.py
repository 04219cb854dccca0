from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import Boolean, DateTime, ForeignKey, Uuid, select
from sqlalchemy.orm import Mapped, Session, mapped_column, relationship

from seatify.db.base import Base

if TYPE_CHECKING:
    from seatify.db.models.event import Event


class RsvpSettings(Base):
    __tablename__ = "rsvp_settings"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    event_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("events.id"),
        unique=True,
    )
    enabled: Mapped[bool] = mapped_column(Boolean, default=False)
    deadline: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    send_confirmation_email: Mapped[bool] = mapped_column(Boolean, default=True)
    include_calendar_invite: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(tz=timezone.utc),
    )

    event: Mapped[Event] = relationship(back_populates="rsvp_settings")


def get_rsvp_settings(session: Session, event_id: UUID) -> RsvpSettings:
    """Stored settings for the event, or an unsaved row carrying the defaults."""
    existing = session.scalar(select(RsvpSettings).where(RsvpSettings.event_id == event_id))
    if existing:
        return existing
    return RsvpSettings(
        event_id=event_id,
        enabled=False,
        send_confirmation_email=True,
        include_calendar_invite=True,
    )
