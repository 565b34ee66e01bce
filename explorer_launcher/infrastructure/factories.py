"""Factory for wiring the launcher with infrastructure adapters."""

from __future__ import annotations

from ..application.explorer_frontend import ExplorerFrontendLauncher
from ..ports.logger import LoggerPort
from ..ports.orchestration import EnclaveContextPort
from .config import ExplorerFrontendConfig
from .port_availability_checker import TcpPortAvailabilityChecker
from .service_url_resolver import ServiceContextUrlResolver
from .simple_logger import SimpleLogger


class LauncherFactory:
    """Factory for creating launchers following hexagonal architecture."""

    @staticmethod
    def create_logger() -> LoggerPort:
        """Create the default logger."""
        return SimpleLogger()

    @classmethod
    def create_explorer_frontend_launcher(
        cls,
        enclave: EnclaveContextPort,
        config: ExplorerFrontendConfig | None = None,
        logger: LoggerPort | None = None,
    ) -> ExplorerFrontendLauncher:
        """Create an explorer frontend launcher.

        Args:
            enclave: Enclave to launch into
            config: Launch configuration, read from the environment when omitted
            logger: Logger shared by the launcher and its adapters

        Returns:
            Launcher wired with the TCP readiness checker and URL resolver
        """
        logger = logger or cls.create_logger()
        return ExplorerFrontendLauncher(
            enclave=enclave,
            port_checker=TcpPortAvailabilityChecker(logger=logger),
            url_resolver=ServiceContextUrlResolver(),
            config=config or ExplorerFrontendConfig.from_environment(),
            logger=logger,
        )
