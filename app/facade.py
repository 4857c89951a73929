from __future__ import annotations

from typing import Any, Mapping

from domain.models import ApplicationRequest
from domain.ports import (
    BrowserProvisionerPort,
    BrowserSessionFactoryPort,
    IdGeneratorPort,
    LoggerPort,
)
from domain.services import JobApplicationPipeline
from domain.utils import ensure_url_scheme, validate_url

PERSISTED_BROWSER_ID = "persisted-browser"


class JobApplyFacade:
    """
    Caller-facing actions: apply to a job, read a page title, and create a
    persisted cloud browser. Payloads and results are plain dicts.
    """

    def __init__(
        self,
        *,
        pipeline: JobApplicationPipeline,
        session_factory: BrowserSessionFactoryPort,
        provisioner: BrowserProvisionerPort | None,
        id_generator: IdGeneratorPort,
        logger: LoggerPort,
    ) -> None:
        self._pipeline = pipeline
        self._session_factory = session_factory
        self._provisioner = provisioner
        self._id_generator = id_generator
        self._logger = logger

    async def apply_to_job(self, payload: Mapping[str, Any] | None) -> dict[str, Any]:
        result = await self._pipeline.apply(ApplicationRequest.from_payload(payload))
        return result.to_payload()

    async def get_page_title(self, payload: Mapping[str, Any] | None) -> dict[str, str]:
        url = (payload or {}).get("url")
        if not url:
            raise ValueError("URL is required")
        url = validate_url(ensure_url_scheme(str(url)))

        session = await self._session_factory.open(self._id_generator.new_invocation_id())
        try:
            await session.page.goto(url)
            title = await session.page.title()
        finally:
            await session.close()
        self._logger.info("page_title_read", url=url, title=title)
        return {"title": title}

    async def create_persisted_browser(self) -> dict[str, str | None]:
        if self._provisioner is None:
            raise RuntimeError("Persisted browsers require the cloud browser provisioner.")
        provisioned = await self._provisioner.create(
            invocation_id=self._id_generator.new_invocation_id(),
            persistence_id=PERSISTED_BROWSER_ID,
            stealth=True,
        )
        self._logger.info("persisted_browser_created", live_view_url=provisioned.live_view_url)
        return {"browser_live_view_url": provisioned.live_view_url}
