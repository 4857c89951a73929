from .kernel_provisioner import KernelBrowserProvisioner
from .playwright_session import PlaywrightBrowserSession
from .session_factories import KernelBrowserSessionFactory, LocalBrowserSessionFactory

__all__ = [
    "KernelBrowserProvisioner",
    "PlaywrightBrowserSession",
    "KernelBrowserSessionFactory",
    "LocalBrowserSessionFactory",
]
