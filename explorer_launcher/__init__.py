"""Explorer launcher - declares and launches the explorer frontend inside an enclave."""

from .application.explorer_frontend import ExplorerFrontendLauncher, LaunchExplorerFrontendRequest
from .infrastructure.factories import LauncherFactory

__all__ = ["ExplorerFrontendLauncher", "LaunchExplorerFrontendRequest", "LauncherFactory"]
__version__ = "0.1.0"
