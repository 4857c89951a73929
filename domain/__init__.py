"""
Domain layer package.

This package contains the application-filling logic, its models and the
ports it depends on, independent of Playwright or any HTTP client.
"""

from .models import (  # noqa: F401
    ApplicationRequest,
    ApplicationResult,
    ApplicationUrls,
    DetectedField,
    FieldBinding,
    OpenEndedQuestion,
    SubmissionState,
)
from .ports import (  # noqa: F401
    BrowserProvisionerPort,
    BrowserSessionFactoryPort,
    BrowserSessionPort,
    FileFetcherPort,
    IdGeneratorPort,
    LLMClientPort,
    LoggerPort,
)

__all__ = [
    # Models
    "ApplicationRequest",
    "ApplicationResult",
    "ApplicationUrls",
    "FieldBinding",
    "DetectedField",
    "OpenEndedQuestion",
    "SubmissionState",
    # Ports
    "BrowserSessionPort",
    "BrowserSessionFactoryPort",
    "BrowserProvisionerPort",
    "LLMClientPort",
    "FileFetcherPort",
    "IdGeneratorPort",
    "LoggerPort",
]
