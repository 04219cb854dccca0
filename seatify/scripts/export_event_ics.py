from __future__ import annotations

import argparse
import logging
from datetime import datetime
from pathlib import Path

from seatify.config import settings
from seatify.core.env import load_env
from seatify.domain.schemas.calendar import CalendarEvent
from seatify.logging import configure_logging
from seatify.services.calendar.download import DirectoryFileSaver, download_ics
from seatify.services.calendar.links import (
    generate_google_calendar_url,
    generate_outlook_calendar_url,
)

logger = logging.getLogger(__name__)


def export_event(
    calendar_event: CalendarEvent,
    output_dir: str,
    filename: str | None = None,
    show_links: bool = False,
) -> Path | None:
    saver = DirectoryFileSaver(output_dir)
    download_ics(calendar_event, filename=filename, saver=saver)
    logger.info("Exported %r to %s", calendar_event.title, saver.last_saved)
    print(f"saved={saver.last_saved}")

    if show_links:
        print(f"google={generate_google_calendar_url(calendar_event)}")
        print(f"outlook={generate_outlook_calendar_url(calendar_event)}")
    return saver.last_saved


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export an event as an .ics file.")
    parser.add_argument("--title", required=True)
    parser.add_argument("--start", required=True, type=datetime.fromisoformat, help="ISO-8601, naive means UTC")
    parser.add_argument("--end", type=datetime.fromisoformat, default=None)
    parser.add_argument("--description", default=None)
    parser.add_argument("--location", default=None)
    parser.add_argument("--url", default=None)
    parser.add_argument("--filename", default=None, help="File name without the .ics suffix")
    parser.add_argument("--output-dir", default=None)
    parser.add_argument("--links", action="store_true", help="Also print Google and Outlook links")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    load_env()
    configure_logging(settings.LOG_LEVEL)
    args = _parse_args(argv)

    calendar_event = CalendarEvent(
        title=args.title,
        start_date=args.start,
        end_date=args.end,
        description=args.description,
        location=args.location,
        url=args.url,
    )
    export_event(
        calendar_event,
        output_dir=args.output_dir or settings.ICS_OUTPUT_DIR,
        filename=args.filename,
        show_links=args.links,
    )


if __name__ == "__main__":
    main()
