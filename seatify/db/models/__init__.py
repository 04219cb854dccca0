from seatify.db.models.event import Event
from seatify.db.models.rsvp_settings import RsvpSettings

__all__ = [
    "Event",
    "RsvpSettings",
]
