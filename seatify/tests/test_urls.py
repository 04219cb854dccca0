from seatify.core.urls import build_ics_url, build_rsvp_url, join_url


def test_join_url_handles_slashes() -> None:
    assert join_url("https://seatify.app/", "/rsvp/1") == "https://seatify.app/rsvp/1"
    assert join_url("https://example.com/app", "events") == "https://example.com/app/events"


def test_join_url_adds_https_when_scheme_missing() -> None:
    assert join_url(" seatify.app ", "rsvp/1") == "https://seatify.app/rsvp/1"


def test_build_rsvp_and_ics_urls() -> None:
    assert build_rsvp_url("https://seatify.app", "abc") == "https://seatify.app/rsvp/abc"
    assert build_ics_url("https://seatify.app", "abc") == "https://seatify.app/events/abc/calendar.ics"
