from __future__ import annotations

import re
from urllib.parse import urlsplit, urlunsplit

from domain.models import ApplicationUrls

_APPLICATION_SUFFIX = re.compile(r"/application/?$")


def normalize_application_url(url: str) -> ApplicationUrls:
    """Derive the job page and application form URLs from either one.

    Only the path is rewritten: the query string is kept and the
    fragment dropped, so normalizing either output yields the same pair.
    """
    parts = urlsplit(url.strip())
    path = _APPLICATION_SUFFIX.sub("", parts.path).rstrip("/")
    base_url = urlunsplit((parts.scheme, parts.netloc, path, parts.query, ""))
    application_url = urlunsplit(
        (parts.scheme, parts.netloc, f"{path}/application", parts.query, ""),
    )
    return ApplicationUrls(base_url=base_url, application_url=application_url)


def ensure_url_scheme(url: str) -> str:
    if url.startswith("http://") or url.startswith("https://"):
        return url
    return f"https://{url}"


def validate_url(url: str) -> str:
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.netloc or " " in parts.netloc:
        raise ValueError(f"Invalid URL: {url}")
    return url
