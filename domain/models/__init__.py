from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Sequence


@dataclass(frozen=True)
class ApplicationRequest:
    """Applicant profile plus the job posting to apply to.

    ``resume_path`` wins over ``resume_url`` when both resolve to a file.
    """

    url: str
    name: str
    email: str
    linkedin: str
    resume_path: str | None = None
    resume_url: str | None = None
    phone: str | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any] | None) -> "ApplicationRequest":
        """Build a request from an invocation record.

        Accepts the camelCase keys of the action payload as well as
        snake_case. Missing required keys become empty strings so the
        validator can report them together.
        """
        data = dict(payload or {})

        def pick(*keys: str) -> str | None:
            for key in keys:
                value = data.get(key)
                if value is not None:
                    return str(value)
            return None

        return cls(
            url=pick("url") or "",
            name=pick("name") or "",
            email=pick("email") or "",
            linkedin=pick("linkedin") or "",
            resume_path=pick("resumePath", "resume_path"),
            resume_url=pick("resumeUrl", "resume_url"),
            phone=pick("phone"),
        )


@dataclass(frozen=True)
class ApplicationUrls:
    """Job-description page and application-form page derived from one URL."""

    base_url: str
    application_url: str


@dataclass(frozen=True)
class FieldBinding:
    """Declarative rule mapping one profile value onto a form control.

    Position in the binding list is the match priority.
    """

    name: str
    matcher: re.Pattern[str]
    value: str
    optional: bool = False


class MatchStrategy(str, Enum):
    """How a form control was located."""

    BY_LABEL = "by_label"
    BY_WRAPPED_LABEL = "by_wrapped_label"
    BY_PLACEHOLDER = "by_placeholder"
    FIRST_OF_KIND = "first_of_kind"


@dataclass(frozen=True)
class DetectedField:
    """A concrete form control plus the strategy that found it."""

    control: Any
    strategy: MatchStrategy
    matched_text: str = ""


@dataclass(frozen=True)
class FieldMappingReport:
    filled: Sequence[str] = field(default_factory=tuple)
    missing_required: Sequence[str] = field(default_factory=tuple)
    missing_optional: Sequence[str] = field(default_factory=tuple)


@dataclass(frozen=True)
class JobContext:
    """Scraped job-description text.

    ``source`` is the selector that produced the text, ``"body"`` for the
    full-page fallback, or ``None`` when nothing could be scraped.
    """

    text: str = ""
    source: str | None = None


@dataclass(frozen=True)
class ResumeSource:
    path: str
    origin: str  # "path" | "url"


@dataclass(frozen=True)
class OpenEndedQuestion:
    """Free-text control awaiting a generated answer. ``label`` may be empty."""

    label: str
    control: Any


@dataclass(frozen=True)
class AnswerReport:
    answered: Sequence[str] = field(default_factory=tuple)
    failed: Sequence[str] = field(default_factory=tuple)


class SubmissionState(str, Enum):
    """States of the submission verifier.

    ``IDLE`` as a final outcome means no submit control was found.
    """

    IDLE = "idle"
    SUBMITTED = "submitted"
    CONFIRMED = "confirmed"
    VALIDATION_FAILED = "validation_failed"
    AMBIGUOUS = "ambiguous"


@dataclass(frozen=True)
class SubmissionOutcome:
    state: SubmissionState
    errors: Sequence[str] = field(default_factory=tuple)
    confirmed_by: str | None = None  # "navigation" | "success_text"


class StepStatus(str, Enum):
    OK = "ok"
    DEGRADED = "degraded"
    FATAL = "fatal"


@dataclass(frozen=True)
class StepResult:
    """Outcome of one pipeline stage.

    Degraded steps are recoverable: they are logged and reported as
    warnings while the pipeline carries on. Fatal steps end the run.
    """

    step: str
    status: StepStatus
    detail: str | None = None


@dataclass(frozen=True)
class ApplicationResult:
    """Terminal output of one application attempt."""

    success: bool
    message: str
    errors: Sequence[str] = field(default_factory=tuple)
    warnings: Sequence[str] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(self.errors))
        object.__setattr__(self, "warnings", tuple(self.warnings))

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"success": self.success, "message": self.message}
        if self.errors:
            payload["errors"] = list(self.errors)
        if self.warnings:
            payload["warnings"] = list(self.warnings)
        return payload


@dataclass(frozen=True)
class ProvisionedBrowser:
    """Remote browser handed out by the cloud provisioning service."""

    cdp_ws_url: str
    live_view_url: str | None = None
    session_id: str | None = None


@dataclass(frozen=True)
class AppConfig:
    """Application-level configuration loaded from config.json and the environment."""

    openai_key: str
    kernel_api_key: str | None = None
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-4o"
    kernel_base_url: str = "https://api.onkernel.com"
    submission_timeout_ms: int = 10_000
    resume_staging_dir: str = ""


__all__ = [
    "ApplicationRequest",
    "ApplicationUrls",
    "FieldBinding",
    "MatchStrategy",
    "DetectedField",
    "FieldMappingReport",
    "JobContext",
    "ResumeSource",
    "OpenEndedQuestion",
    "AnswerReport",
    "SubmissionState",
    "SubmissionOutcome",
    "StepStatus",
    "StepResult",
    "ApplicationResult",
    "ProvisionedBrowser",
    "AppConfig",
]
