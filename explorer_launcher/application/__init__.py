"""Application layer for explorer-launcher."""

from .explorer_frontend import ExplorerFrontendLauncher, LaunchExplorerFrontendRequest

__all__ = ["ExplorerFrontendLauncher", "LaunchExplorerFrontendRequest"]
