from __future__ import annotations

from typing import Any


class PlaywrightBrowserSession:
    """
    Playwright-backed implementation of BrowserSessionPort.

    With a ``cdp_ws_url`` the session attaches to a remote (cloud) browser
    and reuses its first context and page; otherwise a local Chromium is
    launched. Requires ``playwright`` to be installed, plus
    ``playwright install chromium`` for local launches.

    Call ``close()`` when finished.
    """

    def __init__(
        self,
        *,
        cdp_ws_url: str | None = None,
        live_view_url: str | None = None,
        headless: bool = True,
    ) -> None:
        self._cdp_ws_url = cdp_ws_url
        self._live_view_url = live_view_url
        self._headless = headless
        self._playwright: Any = None
        self._browser: Any = None
        self._page: Any = None

    @property
    def page(self) -> Any:
        if self._page is None:
            raise RuntimeError("Browser not launched. Call launch() first.")
        return self._page

    @property
    def live_view_url(self) -> str | None:
        return self._live_view_url

    async def launch(self) -> None:
        from playwright.async_api import async_playwright

        self._playwright = await async_playwright().start()
        if self._cdp_ws_url:
            self._browser = await self._playwright.chromium.connect_over_cdp(self._cdp_ws_url)
            contexts = self._browser.contexts
            context = contexts[0] if contexts else await self._browser.new_context()
            pages = context.pages
            self._page = pages[0] if pages else await context.new_page()
        else:
            self._browser = await self._playwright.chromium.launch(headless=self._headless)
            self._page = await self._browser.new_page()

    async def close(self) -> None:
        try:
            if self._browser:
                await self._browser.close()
        finally:
            if self._playwright:
                await self._playwright.stop()
            self._browser = None
            self._playwright = None
            self._page = None
