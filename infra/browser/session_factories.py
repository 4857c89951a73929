from __future__ import annotations

from domain.ports import BrowserProvisionerPort, LoggerPort
from infra.browser.playwright_session import PlaywrightBrowserSession


class KernelBrowserSessionFactory:
    """Provisions a cloud browser per invocation and attaches Playwright over CDP."""

    def __init__(self, *, provisioner: BrowserProvisionerPort, logger: LoggerPort) -> None:
        self._provisioner = provisioner
        self._logger = logger

    async def open(self, invocation_id: str) -> PlaywrightBrowserSession:
        provisioned = await self._provisioner.create(invocation_id=invocation_id)
        self._logger.info(
            "kernel_browser_created",
            invocation_id=invocation_id,
            session_id=provisioned.session_id,
            live_view_url=provisioned.live_view_url,
        )
        session = PlaywrightBrowserSession(
            cdp_ws_url=provisioned.cdp_ws_url,
            live_view_url=provisioned.live_view_url,
        )
        await _launch_or_close(session)
        return session


class LocalBrowserSessionFactory:
    """Launches a local Chromium; handy for development without cloud browsers."""

    def __init__(self, *, headless: bool = True) -> None:
        self._headless = headless

    async def open(self, invocation_id: str) -> PlaywrightBrowserSession:
        session = PlaywrightBrowserSession(headless=self._headless)
        await _launch_or_close(session)
        return session


async def _launch_or_close(session: PlaywrightBrowserSession) -> None:
    try:
        await session.launch()
    except BaseException:
        await session.close()
        raise
