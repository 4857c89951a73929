"""Application layer package."""

from .facade import PERSISTED_BROWSER_ID, JobApplyFacade

__all__ = ["JobApplyFacade", "PERSISTED_BROWSER_ID"]
