from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class CalendarFile:
    filename: str
    content: bytes
    media_type: str


class FileSaver(Protocol):
    def save(self, calendar_file: CalendarFile) -> None:
        ...
