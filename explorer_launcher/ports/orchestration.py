"""Orchestration ports - the enclave that runs containers.

The enclave owns all runtime state of a launched container. The launcher only
hands it a descriptor supplier and reads addresses back from the returned
service context.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from ..domain.models import LaunchDescriptor
from ..domain.value_objects import PortSpec, ServiceId

# Receives the private IP the enclave will assign to the service and returns
# the descriptor to launch. Raising aborts the launch.
DescriptorSupplier = Callable[[str], LaunchDescriptor]


class ServiceContextPort(ABC):
    """Handle to a service running inside an enclave."""

    @property
    @abstractmethod
    def service_id(self) -> ServiceId:
        """Identifier the service was launched under."""
        ...

    @abstractmethod
    def get_private_ip_address(self) -> str:
        """IP address of the service on the enclave network."""
        ...

    @abstractmethod
    def get_maybe_public_ip_address(self) -> str | None:
        """IP address reachable from outside the enclave, if any."""
        ...

    @abstractmethod
    def get_private_ports(self) -> dict[str, PortSpec]:
        """Ports the service listens on, keyed by port id."""
        ...

    @abstractmethod
    def get_public_ports(self) -> dict[str, PortSpec]:
        """Ports published outside the enclave, keyed by port id."""
        ...


class EnclaveContextPort(ABC):
    """Abstract interface to an enclave accepting service launch requests."""

    @abstractmethod
    async def add_service(
        self, service_id: ServiceId, descriptor_supplier: DescriptorSupplier
    ) -> ServiceContextPort:
        """Launch a service.

        Args:
            service_id: Identifier unique within the enclave
            descriptor_supplier: Builds the descriptor from the assigned IP

        Returns:
            Context of the running service

        Raises:
            OrchestrationError: If the enclave rejects the request
        """
        ...
