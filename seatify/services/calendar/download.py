from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path

from seatify.config import settings
from seatify.domain.schemas.calendar import CalendarEvent
from seatify.services.calendar.base import CalendarFile, FileSaver
from seatify.services.calendar.ics import MEDIA_TYPE, generate_ics

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_RE = re.compile(r"[^A-Za-z0-9]")


def ics_filename(event: CalendarEvent, filename: str | None = None) -> str:
    stem = filename or _UNSAFE_FILENAME_RE.sub("_", event.title)
    return f"{stem}.ics"


def build_calendar_file(event: CalendarEvent, filename: str | None = None) -> CalendarFile:
    return CalendarFile(
        filename=ics_filename(event, filename),
        content=generate_ics(event).encode("utf-8"),
        media_type=MEDIA_TYPE,
    )


class DirectoryFileSaver(FileSaver):
    def __init__(self, output_dir: str | os.PathLike[str] | None = None) -> None:
        self.output_dir = Path(output_dir or settings.ICS_OUTPUT_DIR)
        self.last_saved: Path | None = None

    def save(self, calendar_file: CalendarFile) -> None:
        """Write through a temp file in the target directory, then move it into place.

        The temp handle is closed on every path and removed if anything fails.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        target = self.output_dir / calendar_file.filename
        handle = tempfile.NamedTemporaryFile(
            dir=self.output_dir,
            prefix=".seatify-",
            suffix=".ics.part",
            delete=False,
        )
        try:
            with handle:
                handle.write(calendar_file.content)
            os.replace(handle.name, target)
        except Exception as exc:
            logger.error("Saving %s failed: %s", target, exc)
            Path(handle.name).unlink(missing_ok=True)
            raise

        self.last_saved = target
        logger.info("Saved calendar file %s (%d bytes)", target, len(calendar_file.content))


def download_ics(
    event: CalendarEvent,
    filename: str | None = None,
    saver: FileSaver | None = None,
) -> None:
    calendar_file = build_calendar_file(event, filename)
    (saver or DirectoryFileSaver()).save(calendar_file)
