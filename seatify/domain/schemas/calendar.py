from datetime import datetime

from pydantic import BaseModel, ConfigDict


class CalendarEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    start_date: datetime
    end_date: datetime | None = None
    description: str | None = None
    location: str | None = None
    url: str | None = None


class CalendarLinks(BaseModel):
    google_url: str
    outlook_url: str
    ics_url: str
