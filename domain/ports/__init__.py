from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from domain.models import ProvisionedBrowser


@runtime_checkable
class BrowserSessionPort(Protocol):
    """
    One connected browser plus the single page used for a whole run.

    ``page`` exposes the Playwright ``Page`` API (navigation, locators,
    console events). The owner must call ``close()`` on every exit path.
    """

    @property
    def page(self) -> Any:
        ...

    @property
    def live_view_url(self) -> str | None:
        ...

    async def close(self) -> None:
        ...


@runtime_checkable
class BrowserSessionFactoryPort(Protocol):
    """Creates a ready-to-use browser session for one invocation."""

    async def open(self, invocation_id: str) -> BrowserSessionPort:
        ...


@runtime_checkable
class BrowserProvisionerPort(Protocol):
    """Cloud browser provisioning service (remote CDP endpoints)."""

    async def create(
        self,
        *,
        invocation_id: str | None = None,
        persistence_id: str | None = None,
        stealth: bool = False,
    ) -> ProvisionedBrowser:
        ...


@runtime_checkable
class LLMClientPort(Protocol):
    """Thin abstraction over an LLM text completion API."""

    async def complete(
        self,
        prompt: str,
        *,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> str:
        ...


@runtime_checkable
class FileFetcherPort(Protocol):
    """Downloads a remote file. Raises ``FileFetchError`` on any failure."""

    async def fetch(self, url: str) -> bytes:
        ...


@runtime_checkable
class IdGeneratorPort(Protocol):
    """Generation of identifiers for invocations."""

    def new_invocation_id(self) -> str:
        ...


@runtime_checkable
class LoggerPort(Protocol):
    """Structured, testable logging abstraction."""

    def info(self, message: str, **fields: Any) -> None:
        ...

    def warning(self, message: str, **fields: Any) -> None:
        ...

    def error(self, message: str, **fields: Any) -> None:
        ...


__all__ = [
    "BrowserSessionPort",
    "BrowserSessionFactoryPort",
    "BrowserProvisionerPort",
    "LLMClientPort",
    "FileFetcherPort",
    "IdGeneratorPort",
    "LoggerPort",
]
