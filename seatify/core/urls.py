from urllib.parse import urlparse, urlunparse


def join_url(base_url: str, path: str) -> str:
    cleaned = base_url.strip()
    if "://" not in cleaned:
        cleaned = f"https://{cleaned}"

    parsed = urlparse(cleaned)
    base_path = parsed.path.rstrip("/")
    full_path = f"{base_path}/{path.lstrip('/')}"
    return urlunparse((parsed.scheme, parsed.netloc, full_path, "", "", ""))


def build_rsvp_url(base_url: str, event_id: str) -> str:
    return join_url(base_url, f"rsvp/{event_id}")


def build_ics_url(base_url: str, event_id: str) -> str:
    return join_url(base_url, f"events/{event_id}/calendar.ics")
