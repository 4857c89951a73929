"""
Reusable fakes and in-memory implementations for tests.
"""

from .fake_browser_session import (
    FakeBrowserProvisioner,
    FakeBrowserSession,
    FakeBrowserSessionFactory,
)
from .fake_file_fetcher import FakeFileFetcher
from .fake_page import FakeConsoleMessage, FakeElement, FakePage, FakeTimeoutError, el
from .fake_runtime import InMemoryLogger, SequentialIdGenerator
from .scripted_llm_client import ScriptedLLMClient

__all__ = [
    "FakeBrowserProvisioner",
    "FakeBrowserSession",
    "FakeBrowserSessionFactory",
    "FakeConsoleMessage",
    "FakeElement",
    "FakeFileFetcher",
    "FakePage",
    "FakeTimeoutError",
    "el",
    "InMemoryLogger",
    "SequentialIdGenerator",
    "ScriptedLLMClient",
]
