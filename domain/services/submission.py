from __future__ import annotations

import re
from typing import Any

from domain.models import SubmissionOutcome, SubmissionState
from domain.ports import LoggerPort

SUBMIT_BUTTON_SELECTOR = 'button[type="submit"]'
SUBMIT_TEXT_PATTERN = re.compile(r"submit", re.IGNORECASE)
CONFIRMATION_URL_PATTERN = re.compile(r"/application/submitted/?(?:[?#].*)?$")
VALIDATION_ERROR_SELECTOR = '.ashby-application-form-errors__error-message, [role="alert"]'
SUCCESS_TEXT_PATTERN = re.compile(
    r"Thank you for your application|Application submitted",
    re.IGNORECASE,
)


class SubmissionVerifier:
    """
    Clicks the submit control and classifies what happened.

    Idle -> Submitted once the button is clicked. From Submitted the first
    matching check wins: navigation to the confirmation URL within the wait
    window (Confirmed), inline validation errors (ValidationFailed), an
    on-page success message (Confirmed). Otherwise the outcome is Ambiguous.
    Only a timeout counts as "no navigation"; any other failure while
    waiting propagates.
    """

    def __init__(self, *, logger: LoggerPort, timeout_ms: int = 10_000) -> None:
        self._logger = logger
        self._timeout_ms = timeout_ms

    async def submit(self, page: Any) -> SubmissionOutcome:
        button = page.locator(SUBMIT_BUTTON_SELECTOR, has_text=SUBMIT_TEXT_PATTERN)
        if not await button.count():
            self._logger.error("submit_button_not_found")
            return SubmissionOutcome(state=SubmissionState.IDLE)

        await button.first.click()
        self._logger.info("application_submitted", state=SubmissionState.SUBMITTED.value)
        return await self.verify(page)

    async def verify(self, page: Any) -> SubmissionOutcome:
        try:
            await page.wait_for_url(CONFIRMATION_URL_PATTERN, timeout=self._timeout_ms)
        except Exception as exc:
            if not _is_timeout(exc):
                self._logger.error(
                    "confirmation_wait_failed",
                    error_type=type(exc).__name__,
                    error=str(exc),
                )
                raise
            self._logger.info(
                "confirmation_navigation_not_observed",
                timeout_ms=self._timeout_ms,
                error=str(exc),
            )
        else:
            self._logger.info("application_confirmed", via="navigation", url=page.url)
            return SubmissionOutcome(state=SubmissionState.CONFIRMED, confirmed_by="navigation")

        markers = page.locator(VALIDATION_ERROR_SELECTOR)
        if await markers.count():
            messages = [text.strip() for text in await markers.all_inner_texts() if text.strip()]
            if messages:
                self._logger.error("submission_validation_failed", errors=messages)
                return SubmissionOutcome(
                    state=SubmissionState.VALIDATION_FAILED,
                    errors=tuple(messages),
                )

        if await page.get_by_text(SUCCESS_TEXT_PATTERN).count():
            self._logger.info("application_confirmed", via="success_text")
            return SubmissionOutcome(state=SubmissionState.CONFIRMED, confirmed_by="success_text")

        self._logger.warning("submission_confirmation_unclear")
        return SubmissionOutcome(state=SubmissionState.AMBIGUOUS)


def _is_timeout(exc: BaseException) -> bool:
    # Browser libraries ship their own TimeoutError outside the builtin hierarchy.
    return isinstance(exc, TimeoutError) or any(
        cls.__name__ == "TimeoutError" for cls in type(exc).__mro__
    )
