from __future__ import annotations

from typing import Any, Sequence

from domain.models import JobContext
from domain.ports import LoggerPort

# Most specific first: Ashby's job body marker, then generic containers.
JOB_DESCRIPTION_SELECTORS: tuple[str, ...] = (
    '[data-ashby-body="true"]',
    '[class*="job-description"]',
    "article",
    "main",
)


class JobContextScraper:
    """Extracts job-description text used to ground generated answers."""

    def __init__(
        self,
        *,
        logger: LoggerPort,
        selectors: Sequence[str] = JOB_DESCRIPTION_SELECTORS,
    ) -> None:
        self._logger = logger
        self._selectors = tuple(selectors)

    async def scrape(self, page: Any, url: str) -> JobContext:
        """Visit ``url`` and return its description; never raises."""
        try:
            await page.goto(url)
            for selector in self._selectors:
                locator = page.locator(selector)
                if not await locator.count():
                    continue
                text = ((await locator.first.inner_text()) or "").strip()
                if text:
                    self._logger.info("job_description_scraped", selector=selector, length=len(text))
                    return JobContext(text=text, source=selector)

            text = ((await page.inner_text("body")) or "").strip()
            if text:
                self._logger.warning("job_description_fallback_to_body", url=url)
                return JobContext(text=text, source="body")
            self._logger.warning("job_description_not_found", url=url)
        except Exception as exc:
            self._logger.warning("job_description_scrape_failed", url=url, error=str(exc))
        return JobContext()
