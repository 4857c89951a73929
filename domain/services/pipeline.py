from __future__ import annotations

from typing import Any

from domain.models import (
    ApplicationRequest,
    ApplicationResult,
    StepResult,
    StepStatus,
    SubmissionOutcome,
    SubmissionState,
)
from domain.ports import (
    BrowserSessionFactoryPort,
    BrowserSessionPort,
    FileFetcherPort,
    IdGeneratorPort,
    LLMClientPort,
    LoggerPort,
)
from domain.services.context_scraper import JobContextScraper
from domain.services.field_mapper import FieldMapper, profile_field_bindings
from domain.services.questions import AnswerGenerator, OpenEndedQuestionExtractor
from domain.services.resume import ResumeAttacher, ResumeResolver
from domain.services.submission import SubmissionVerifier
from domain.services.validation import validate_application_request
from domain.utils import normalize_application_url

MSG_INVALID_REQUEST = "Missing required fields"
MSG_SUBMITTED = "Application submitted successfully."
MSG_UNCONFIRMED = "Application submitted, but confirmation could not be verified."
MSG_VALIDATION_FAILED = "Submission failed with validation errors."
MSG_NO_SUBMIT = "Could not find submit button."
MSG_UNEXPECTED = "An unexpected error occurred during the process."


class ConsoleErrorCollector:
    """Records browser console errors for the lifetime of a session."""

    def __init__(self, logger: LoggerPort) -> None:
        self._logger = logger
        self.errors: list[str] = []

    def attach(self, page: Any) -> None:
        page.on("console", self._on_console)

    def _on_console(self, message: Any) -> None:
        if message.type != "error":
            return
        self._logger.error("browser_console_error", text=message.text)
        self.errors.append(message.text)


class JobApplicationPipeline:
    """
    Fills and submits one job application inside a single browser session.

    Collaborators are injected per pipeline so that each invocation is
    independent. ``apply`` always returns an ``ApplicationResult``; it never
    raises.
    """

    def __init__(
        self,
        *,
        session_factory: BrowserSessionFactoryPort,
        llm: LLMClientPort,
        file_fetcher: FileFetcherPort,
        id_generator: IdGeneratorPort,
        logger: LoggerPort,
        resume_staging_dir: str,
        submission_timeout_ms: int = 10_000,
    ) -> None:
        self._session_factory = session_factory
        self._id_generator = id_generator
        self._logger = logger
        self._scraper = JobContextScraper(logger=logger)
        self._field_mapper = FieldMapper(logger=logger)
        self._resume_resolver = ResumeResolver(
            fetcher=file_fetcher,
            staging_dir=resume_staging_dir,
            logger=logger,
        )
        self._resume_attacher = ResumeAttacher(logger=logger)
        self._question_extractor = OpenEndedQuestionExtractor(logger=logger)
        self._answer_generator = AnswerGenerator(llm=llm, logger=logger)
        self._verifier = SubmissionVerifier(logger=logger, timeout_ms=submission_timeout_ms)

    async def apply(self, request: ApplicationRequest) -> ApplicationResult:
        errors = validate_application_request(request)
        if errors:
            self._logger.warning("application_request_invalid", errors=errors)
            return ApplicationResult(success=False, message=MSG_INVALID_REQUEST, errors=errors)

        console = ConsoleErrorCollector(self._logger)
        session: BrowserSessionPort | None = None
        try:
            session = await self._session_factory.open(self._id_generator.new_invocation_id())
            if session.live_view_url:
                self._logger.info("browser_live_view", url=session.live_view_url)
            console.attach(session.page)
            return await self._run(session.page, request, console)
        except Exception as exc:
            self._logger.error("application_failed_unexpectedly", url=request.url, error=str(exc))
            return ApplicationResult(
                success=False,
                message=MSG_UNEXPECTED,
                errors=[str(exc) or type(exc).__name__, *console.errors],
            )
        finally:
            if session is not None:
                await self._release(session)

    async def _run(
        self,
        page: Any,
        request: ApplicationRequest,
        console: ConsoleErrorCollector,
    ) -> ApplicationResult:
        steps: list[StepResult] = []
        urls = normalize_application_url(request.url)

        context = await self._scraper.scrape(page, urls.base_url)
        if context.source is None:
            steps.append(_degraded("scrape_job_context", "Job description could not be scraped."))

        await page.goto(urls.application_url)

        mapping = await self._field_mapper.fill(page, profile_field_bindings(request))
        if mapping.missing_required:
            steps.append(
                _degraded(
                    "fill_profile_fields",
                    f"Could not find form fields for: {', '.join(mapping.missing_required)}.",
                ),
            )

        source = await self._resume_resolver.resolve(request)
        if source is None:
            if request.resume_path or request.resume_url:
                steps.append(_degraded("attach_resume", "Resume could not be resolved; upload skipped."))
        elif not await self._resume_attacher.attach(page, source):
            steps.append(_degraded("attach_resume", "Resume could not be attached to any file input."))

        questions = await self._question_extractor.extract(page)
        if questions:
            answers = await self._answer_generator.answer_all(questions, context.text)
            for label in answers.failed:
                steps.append(
                    _degraded("answer_questions", f'No answer generated for question "{label}".'),
                )

        outcome = await self._verifier.submit(page)
        steps.append(_submission_step(outcome))
        return self._to_result(outcome, steps, console.errors)

    def _to_result(
        self,
        outcome: SubmissionOutcome,
        steps: list[StepResult],
        console_errors: list[str],
    ) -> ApplicationResult:
        warnings = [s.detail for s in steps if s.status is StepStatus.DEGRADED and s.detail]
        for step in steps:
            if step.status is not StepStatus.OK:
                self._logger.info("pipeline_step", step=step.step, status=step.status.value, detail=step.detail)

        if outcome.state is SubmissionState.IDLE:
            return ApplicationResult(
                success=False,
                message=MSG_NO_SUBMIT,
                errors=["Submit button not found on page.", *console_errors],
                warnings=warnings,
            )
        if outcome.state is SubmissionState.VALIDATION_FAILED:
            return ApplicationResult(
                success=False,
                message=MSG_VALIDATION_FAILED,
                errors=[*outcome.errors, *console_errors],
                warnings=warnings,
            )
        if outcome.state is SubmissionState.AMBIGUOUS:
            return ApplicationResult(success=True, message=MSG_UNCONFIRMED, warnings=warnings)
        return ApplicationResult(success=True, message=MSG_SUBMITTED, warnings=warnings)

    async def _release(self, session: BrowserSessionPort) -> None:
        try:
            await session.close()
        except Exception as exc:
            self._logger.warning("browser_close_failed", error=str(exc))


def _degraded(step: str, detail: str) -> StepResult:
    return StepResult(step=step, status=StepStatus.DEGRADED, detail=detail)


def _submission_step(outcome: SubmissionOutcome) -> StepResult:
    if outcome.state in (SubmissionState.IDLE, SubmissionState.VALIDATION_FAILED):
        return StepResult(step="submit", status=StepStatus.FATAL, detail=outcome.state.value)
    if outcome.state is SubmissionState.AMBIGUOUS:
        return StepResult(
            step="submit",
            status=StepStatus.DEGRADED,
            detail="Submission could not be positively confirmed.",
        )
    return StepResult(step="submit", status=StepStatus.OK, detail=outcome.confirmed_by)
