"""Kernel cloud browser provisioning over its REST API.

Uses ``urllib.request`` like the other HTTP adapters in this codebase.
"""

from __future__ import annotations

import asyncio
import http.client
import json
import urllib.error
import urllib.request
from typing import Any

from domain.errors import BrowserProvisioningError
from domain.models import ProvisionedBrowser


class KernelBrowserProvisioner:
    """Implements ``BrowserProvisionerPort`` against ``POST /browsers``."""

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = "https://api.onkernel.com",
        timeout: int = 60,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def create(
        self,
        *,
        invocation_id: str | None = None,
        persistence_id: str | None = None,
        stealth: bool = False,
    ) -> ProvisionedBrowser:
        payload: dict[str, Any] = {}
        if invocation_id:
            payload["invocation_id"] = invocation_id
        if persistence_id:
            payload["persistence"] = {"id": persistence_id}
        if stealth:
            payload["stealth"] = True

        data = await asyncio.to_thread(self._post, "/browsers", payload)
        cdp_ws_url = data.get("cdp_ws_url")
        if not cdp_ws_url:
            raise BrowserProvisioningError(f"Kernel response missing cdp_ws_url: {data}")
        return ProvisionedBrowser(
            cdp_ws_url=cdp_ws_url,
            live_view_url=data.get("browser_live_view_url"),
            session_id=data.get("session_id"),
        )

    # -- internal helpers ---------------------------------------------------

    def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        req = urllib.request.Request(
            f"{self._base_url}{path}",
            data=json.dumps(payload).encode("utf-8"),
            method="POST",
        )
        req.add_header("Authorization", f"Bearer {self._api_key}")
        req.add_header("Content-Type", "application/json")
        try:
            with urllib.request.urlopen(req, timeout=self._timeout) as resp:
                data = json.loads(resp.read().decode("utf-8"))
        except urllib.error.HTTPError as exc:
            raise BrowserProvisioningError(
                f"Kernel browser creation failed: {exc.code} {exc.reason}",
            ) from exc
        except urllib.error.URLError as exc:
            raise BrowserProvisioningError(f"Kernel API unreachable: {exc.reason}") from exc
        except (http.client.HTTPException, OSError) as exc:
            raise BrowserProvisioningError(f"Kernel API request failed: {exc!r}") from exc
        except ValueError as exc:
            raise BrowserProvisioningError(f"Kernel API returned invalid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise BrowserProvisioningError(f"Kernel API returned unexpected payload: {data!r}")
        return data
