from __future__ import annotations

import asyncio
import http.server
import pathlib
import threading
from typing import Generator

import pytest

_MOCK_SITES_DIR = pathlib.Path(__file__).parent / "mock_sites"


class _SilentHandler(http.server.SimpleHTTPRequestHandler):
    def __init__(self, *args: object, **kwargs: object) -> None:
        super().__init__(*args, directory=str(_MOCK_SITES_DIR), **kwargs)  # type: ignore[arg-type]

    def log_message(self, *_args: object) -> None:
        pass


@pytest.fixture(scope="session")
def mock_site_server() -> Generator[str, None, None]:
    """Start a local HTTP server serving the mock job board pages."""
    server = http.server.HTTPServer(("127.0.0.1", 0), _SilentHandler)
    port = server.server_address[1]
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{port}"
    server.shutdown()


@pytest.fixture(scope="session")
def local_chromium() -> None:
    """Skip unless Playwright and its Chromium build are installed."""
    async_api = pytest.importorskip("playwright.async_api")

    async def _probe() -> None:
        async with async_api.async_playwright() as pw:
            browser = await pw.chromium.launch(headless=True)
            await browser.close()

    try:
        asyncio.run(_probe())
    except Exception as exc:
        pytest.skip(f"Chromium is not available: {exc}")
