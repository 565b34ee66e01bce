"""Service URL port - resolving reachable URLs of a launched service."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..domain.value_objects import ServiceUrl
from .orchestration import ServiceContextPort


class ServiceUrlResolverPort(ABC):
    """Abstract interface for turning a service context into URLs."""

    @abstractmethod
    def get_private_and_public_urls(
        self,
        service_ctx: ServiceContextPort,
        port_id: str,
        protocol: str,
        path: str,
    ) -> tuple[ServiceUrl, ServiceUrl]:
        """Resolve the private and public URLs of one port.

        Args:
            service_ctx: Context of the running service
            port_id: Port identifier declared in the launch descriptor
            protocol: URL scheme to use
            path: Path suffix appended to both URLs

        Returns:
            Tuple of (private_url, public_url)

        Raises:
            AddressResolutionError: If either URL cannot be built
        """
        ...
