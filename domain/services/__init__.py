"""
Domain services.

One module per stage of the application-filling pipeline plus the pipeline
itself. Services depend only on domain models and ports so that browser,
LLM and HTTP adapters stay in the infra layer.
"""

from .context_scraper import JOB_DESCRIPTION_SELECTORS, JobContextScraper
from .control_locators import (
    ControlLocatorStrategy,
    FirstOfKindLocator,
    LabelLocator,
    PlaceholderLocator,
    locate_first,
)
from .field_mapper import FieldMapper, profile_field_bindings
from .pipeline import ConsoleErrorCollector, JobApplicationPipeline
from .questions import AnswerGenerator, OpenEndedQuestionExtractor
from .resume import ResumeAttacher, ResumeResolver
from .submission import SubmissionVerifier
from .validation import validate_application_request

__all__ = [
    "JOB_DESCRIPTION_SELECTORS",
    "JobContextScraper",
    "ControlLocatorStrategy",
    "LabelLocator",
    "PlaceholderLocator",
    "FirstOfKindLocator",
    "locate_first",
    "FieldMapper",
    "profile_field_bindings",
    "ResumeResolver",
    "ResumeAttacher",
    "OpenEndedQuestionExtractor",
    "AnswerGenerator",
    "SubmissionVerifier",
    "ConsoleErrorCollector",
    "JobApplicationPipeline",
    "validate_application_request",
]
