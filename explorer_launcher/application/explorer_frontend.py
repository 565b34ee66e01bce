"""Use case launching the explorer frontend into an enclave.

The launch is one linear sequence: build the descriptor, submit it, optionally
wait for the frontend port, resolve the URLs. The first failing step aborts
the sequence and its error propagates to the caller.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..domain.exceptions import LauncherError, ServiceLaunchError
from ..domain.models import ExplorerFrontendInfo, LaunchDescriptor
from ..domain.services import (
    PORT_ID,
    PORT_PROTOCOL,
    PRIVATE_PORT_NUM,
    SERVICE_ID,
    FrontendDescriptorBuilder,
)
from ..domain.value_objects import BackendAddresses, ServiceUrl
from ..infrastructure.config import ExplorerFrontendConfig
from ..ports.logger import LoggerPort
from ..ports.orchestration import EnclaveContextPort
from ..ports.readiness import PortAvailabilityPort
from ..ports.service_url import ServiceUrlResolverPort


class LaunchExplorerFrontendRequest(BaseModel):
    """Request model for the explorer frontend launch."""

    model_config = ConfigDict(frozen=True)

    backend_private_url: ServiceUrl = Field(..., description="Backend URL inside the enclave")
    backend_public_url: ServiceUrl = Field(..., description="Backend URL outside the enclave")
    backend_ip_address: str | None = Field(
        default=None,
        min_length=1,
        description="Host browsers use to reach the backend, replaces the public IP",
    )

    @property
    def backend(self) -> BackendAddresses:
        return BackendAddresses(
            private_url=self.backend_private_url, public_url=self.backend_public_url
        )


class ExplorerFrontendLauncher:
    """Launches the explorer frontend and returns where it can be reached."""

    def __init__(
        self,
        enclave: EnclaveContextPort,
        port_checker: PortAvailabilityPort,
        url_resolver: ServiceUrlResolverPort,
        config: ExplorerFrontendConfig | None = None,
        logger: LoggerPort | None = None,
    ):
        """Initialize the launcher with required ports.

        Args:
            enclave: Enclave the frontend is launched into
            port_checker: Readiness probe for the frontend port
            url_resolver: Resolves the URLs of the launched service
            config: Launch configuration, defaults apply when omitted
            logger: Logger for launch progress

        Raises:
            UnknownFrontendImageError: If the configured image has no profile
        """
        self._enclave = enclave
        self._port_checker = port_checker
        self._url_resolver = url_resolver
        self._config = config or ExplorerFrontendConfig()
        self._logger = logger or self._create_default_logger()
        self._builder = FrontendDescriptorBuilder(
            image=self._config.image, network_name=self._config.network_name
        )

    def _create_default_logger(self) -> LoggerPort:
        """Create a default logger if none provided."""
        from ..infrastructure.simple_logger import SimpleLogger

        return SimpleLogger()

    @property
    def config(self) -> ExplorerFrontendConfig:
        return self._config

    def build_descriptor(self, request: LaunchExplorerFrontendRequest) -> LaunchDescriptor:
        """Build the descriptor that a launch with this request submits."""
        descriptor = self._builder.build(request.backend, request.backend_ip_address)
        self._logger.debug(
            "Built explorer frontend launch descriptor",
            image=descriptor.image,
            env_var_count=len(descriptor.env_vars),
        )
        return descriptor

    async def launch(self, request: LaunchExplorerFrontendRequest) -> ExplorerFrontendInfo:
        """Launch the explorer frontend.

        Args:
            request: Backend addresses the frontend is pointed at

        Returns:
            Info holding the public URL of the frontend

        Raises:
            ServiceLaunchError: If the enclave rejects the launch
            ReadinessTimeoutError: If the frontend port does not open in time
            AddressResolutionError: If the frontend URLs cannot be resolved
        """
        descriptor = self.build_descriptor(request)

        def descriptor_supplier(ip_address: str) -> LaunchDescriptor:
            return descriptor

        self._logger.info(
            "Adding explorer frontend service", service_id=str(SERVICE_ID), image=descriptor.image
        )
        try:
            service_ctx = await self._enclave.add_service(SERVICE_ID, descriptor_supplier)
        except Exception as e:
            self._logger.error(
                "Enclave rejected explorer frontend service",
                service_id=str(SERVICE_ID),
                error=str(e),
            )
            if isinstance(e, LauncherError):
                raise
            raise ServiceLaunchError(
                f"An error occurred adding the explorer frontend service: {e}",
                service_id=str(SERVICE_ID),
            ) from e

        if self._config.resolved_wait_for_readiness():
            private_ip = service_ctx.get_private_ip_address()
            self._logger.info(
                "Waiting for explorer frontend port",
                ip_address=private_ip,
                port=PRIVATE_PORT_NUM,
                timeout_ms=self._config.readiness_timeout_ms,
            )
            await self._port_checker.wait_for_port_availability(
                PRIVATE_PORT_NUM,
                private_ip,
                self._config.retry_interval,
                self._config.timeout,
            )
            self._logger.info("Explorer frontend port is available", ip_address=private_ip)

        private_url, public_url = self._url_resolver.get_private_and_public_urls(
            service_ctx, PORT_ID, PORT_PROTOCOL, ""
        )

        self._logger.info("Explorer frontend launched", public_url=str(public_url))
        return ExplorerFrontendInfo(public_url=public_url, private_url=private_url)
