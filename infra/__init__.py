"""Infrastructure adapters – concrete implementations of domain ports."""

from .browser import (
    KernelBrowserProvisioner,
    KernelBrowserSessionFactory,
    LocalBrowserSessionFactory,
    PlaywrightBrowserSession,
)
from .config import FileSystemConfigProvider
from .http import UrlFileFetcher
from .llm import OpenAIChatClient
from .runtime import StructuredLogger, UuidIdGenerator

__all__ = [
    "KernelBrowserProvisioner",
    "KernelBrowserSessionFactory",
    "LocalBrowserSessionFactory",
    "PlaywrightBrowserSession",
    "FileSystemConfigProvider",
    "UrlFileFetcher",
    "OpenAIChatClient",
    "UuidIdGenerator",
    "StructuredLogger",
]
