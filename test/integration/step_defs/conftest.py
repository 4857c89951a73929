"""Shared fixtures and context for BDD step definitions."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest

from domain.models import ApplicationRequest, ApplicationResult
from domain.services import JobApplicationPipeline
from test.fixtures import JOB_URL, application_form, ashby_page
from test.mocks import (
    FakeBrowserSessionFactory,
    FakeElement,
    FakeFileFetcher,
    InMemoryLogger,
    ScriptedLLMClient,
    SequentialIdGenerator,
)


@dataclass
class ApplyContext:
    """Holds mutable state shared across BDD steps."""

    staging_dir: Path
    request: dict[str, Any] = field(default_factory=lambda: {"url": JOB_URL})
    form: FakeElement = field(default_factory=application_form)
    factory: FakeBrowserSessionFactory | None = None
    llm: ScriptedLLMClient = field(default_factory=ScriptedLLMClient)
    fetcher: FakeFileFetcher = field(default_factory=FakeFileFetcher)
    logger: InMemoryLogger = field(default_factory=InMemoryLogger)
    result: ApplicationResult | None = None

    def use_page(self, on_submit: str, form: FakeElement | None = None) -> None:
        if form is not None:
            self.form = form
        self.factory = FakeBrowserSessionFactory(ashby_page(self.form, on_submit=on_submit))


@pytest.fixture()
def ctx(tmp_path: Path) -> ApplyContext:
    return ApplyContext(staging_dir=tmp_path)


def run_apply(ctx: ApplyContext) -> None:
    """Execute the application pipeline synchronously for tests."""
    if ctx.factory is None:
        ctx.use_page("navigate")
    pipeline = JobApplicationPipeline(
        session_factory=ctx.factory,  # type: ignore[arg-type]
        llm=ctx.llm,
        file_fetcher=ctx.fetcher,
        id_generator=SequentialIdGenerator(),
        logger=ctx.logger,
        resume_staging_dir=str(ctx.staging_dir / "staging"),
        submission_timeout_ms=1_000,
    )
    ctx.result = asyncio.run(pipeline.apply(ApplicationRequest.from_payload(ctx.request)))
