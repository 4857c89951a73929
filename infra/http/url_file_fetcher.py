from __future__ import annotations

import asyncio
import http.client
import urllib.error
import urllib.request

from domain.errors import FileFetchError


class UrlFileFetcher:
    """Implements ``FileFetcherPort`` with ``urllib.request``.

    Any non-2xx status or transport failure is raised as ``FileFetchError``.
    """

    def __init__(self, *, timeout: int = 30, user_agent: str = "job-apply-kernel/0.1") -> None:
        self._timeout = timeout
        self._user_agent = user_agent

    async def fetch(self, url: str) -> bytes:
        return await asyncio.to_thread(self._get, url)

    def _get(self, url: str) -> bytes:
        req = urllib.request.Request(url, method="GET")
        req.add_header("User-Agent", self._user_agent)
        try:
            with urllib.request.urlopen(req, timeout=self._timeout) as resp:
                status = getattr(resp, "status", 200)
                if not 200 <= status < 300:
                    raise FileFetchError(url, f"HTTP {status}")
                return resp.read()
        except urllib.error.HTTPError as exc:
            raise FileFetchError(url, f"HTTP {exc.code} {exc.reason}") from exc
        except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError) as exc:
            raise FileFetchError(url, str(exc)) from exc
