from __future__ import annotations

import re
from pathlib import Path, PurePosixPath
from typing import Any, Sequence
from urllib.parse import urlsplit

from domain.errors import FileFetchError
from domain.models import ApplicationRequest, DetectedField, ResumeSource
from domain.ports import FileFetcherPort, LoggerPort
from domain.services.control_locators import (
    FILE_CONTROLS,
    ControlLocatorStrategy,
    FirstOfKindLocator,
    LabelLocator,
)

RESUME_LABEL_PATTERN = re.compile(r"resume|\bcv\b", re.IGNORECASE)
_STAGED_EXTENSIONS = {".pdf", ".doc", ".docx", ".rtf", ".txt"}


class ResumeResolver:
    """Resolves the resume bytes source: local path first, then remote fetch.

    Fetched resumes are written to a fixed staging path that is overwritten
    on every invocation.
    """

    def __init__(
        self,
        *,
        fetcher: FileFetcherPort,
        staging_dir: str,
        logger: LoggerPort,
    ) -> None:
        self._fetcher = fetcher
        self._staging_dir = Path(staging_dir)
        self._logger = logger

    async def resolve(self, request: ApplicationRequest) -> ResumeSource | None:
        if request.resume_path:
            if Path(request.resume_path).is_file():
                return ResumeSource(path=request.resume_path, origin="path")
            self._logger.warning("resume_path_not_found", path=request.resume_path)

        if request.resume_url:
            return await self._fetch(request.resume_url)

        self._logger.info("resume_source_not_provided")
        return None

    def staging_path(self, url: str) -> Path:
        suffix = PurePosixPath(urlsplit(url).path).suffix.lower()
        if suffix not in _STAGED_EXTENSIONS:
            suffix = ".pdf"
        return self._staging_dir / f"resume{suffix}"

    async def _fetch(self, url: str) -> ResumeSource | None:
        try:
            content = await self._fetcher.fetch(url)
        except FileFetchError as exc:
            self._logger.warning("resume_fetch_failed", url=url, error=str(exc))
            return None
        if not content:
            self._logger.warning("resume_fetch_failed", url=url, error="empty response body")
            return None

        staged = self.staging_path(url)
        try:
            staged.parent.mkdir(parents=True, exist_ok=True)
            staged.write_bytes(content)
        except OSError as exc:
            self._logger.warning("resume_staging_failed", path=str(staged), error=str(exc))
            return None
        self._logger.info("resume_staged", url=url, path=str(staged), size=len(content))
        return ResumeSource(path=str(staged), origin="url")


class ResumeAttacher:
    """Uploads a resume into the best file-input candidate on the form.

    Labeled resume/CV file inputs are tried in document order; when none
    exist the first file input anywhere on the page is used. Every upload
    attempt is guarded so one broken control does not stop the next.
    """

    def __init__(
        self,
        *,
        logger: LoggerPort,
        labeled: ControlLocatorStrategy | None = None,
        fallback: ControlLocatorStrategy | None = None,
    ) -> None:
        self._logger = logger
        self._labeled = labeled or LabelLocator(control_selector=FILE_CONTROLS, id_filter='[type="file"]')
        self._fallback = fallback or FirstOfKindLocator(FILE_CONTROLS)

    async def attach(self, page: Any, source: ResumeSource) -> bool:
        candidates = await self._collect(self._labeled, page)
        if not candidates:
            candidates = await self._collect(self._fallback, page)

        for detected in candidates:
            try:
                await detected.control.set_input_files(source.path)
            except Exception as exc:
                self._logger.warning(
                    "resume_upload_attempt_failed",
                    strategy=detected.strategy.value,
                    error=str(exc),
                )
                continue
            self._logger.info("resume_uploaded", strategy=detected.strategy.value, path=source.path)
            return True

        self._logger.warning("resume_upload_failed", candidates=len(candidates))
        return False

    @staticmethod
    async def _collect(strategy: ControlLocatorStrategy, page: Any) -> Sequence[DetectedField]:
        return [detected async for detected in strategy.candidates(page, RESUME_LABEL_PATTERN)]
