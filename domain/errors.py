from __future__ import annotations


class FileFetchError(RuntimeError):
    """A remote file could not be downloaded (non-2xx status or network error)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Could not fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class BrowserProvisioningError(RuntimeError):
    """The cloud browser service refused or failed to create a browser."""
