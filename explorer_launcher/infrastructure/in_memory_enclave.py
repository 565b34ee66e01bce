"""In-memory enclave for development and testing.

Nothing is actually run: the enclave assigns addresses, invokes the
descriptor supplier and keeps the resulting descriptors so callers can
inspect what would have been launched.
"""

from __future__ import annotations

import ipaddress

from ..domain.exceptions import LauncherError, ServiceLaunchError
from ..domain.models import LaunchDescriptor
from ..domain.value_objects import PortSpec, ServiceId
from ..ports.orchestration import DescriptorSupplier, EnclaveContextPort, ServiceContextPort


class InMemoryServiceContext(ServiceContextPort):
    """Service context backed by the descriptor the service was launched with."""

    def __init__(
        self,
        service_id: ServiceId,
        private_ip_address: str,
        public_ip_address: str | None,
        descriptor: LaunchDescriptor,
    ) -> None:
        self._service_id = service_id
        self._private_ip_address = private_ip_address
        self._public_ip_address = public_ip_address
        self._descriptor = descriptor

    @property
    def service_id(self) -> ServiceId:
        return self._service_id

    @property
    def descriptor(self) -> LaunchDescriptor:
        return self._descriptor

    def get_private_ip_address(self) -> str:
        return self._private_ip_address

    def get_maybe_public_ip_address(self) -> str | None:
        return self._public_ip_address

    def get_private_ports(self) -> dict[str, PortSpec]:
        return dict(self._descriptor.used_ports)

    def get_public_ports(self) -> dict[str, PortSpec]:
        return dict(self._descriptor.public_ports)


class InMemoryEnclaveContext(EnclaveContextPort):
    """In-memory implementation of EnclaveContextPort for testing."""

    def __init__(self, subnet: str = "172.16.0.0/24", public_ip_address: str | None = "127.0.0.1"):
        """Initialize the enclave.

        Args:
            subnet: Network private IPs are allocated from; the first host
                address is reserved for the gateway
            public_ip_address: Public IP reported for every service
        """
        hosts = ipaddress.ip_network(subnet).hosts()
        next(hosts, None)
        self._free_ips = hosts
        self._released_ips: list[ipaddress.IPv4Address | ipaddress.IPv6Address] = []
        self._public_ip_address = public_ip_address
        self._services: dict[str, InMemoryServiceContext] = {}

    async def add_service(
        self, service_id: ServiceId, descriptor_supplier: DescriptorSupplier
    ) -> ServiceContextPort:
        key = str(service_id)
        if key in self._services:
            raise ServiceLaunchError(
                f"Service '{key}' already exists in the enclave", service_id=key
            )

        ip_address = self._allocate_ip()
        if ip_address is None:
            raise ServiceLaunchError(
                f"No free IP address left for service '{key}'", service_id=key
            )

        try:
            descriptor = descriptor_supplier(str(ip_address))
        except LauncherError:
            self._release_ip(ip_address)
            raise
        except Exception as e:
            self._release_ip(ip_address)
            raise ServiceLaunchError(
                f"Failed to build the launch descriptor of service '{key}': {e}", service_id=key
            ) from e

        service_ctx = InMemoryServiceContext(
            service_id=service_id,
            private_ip_address=str(ip_address),
            public_ip_address=self._public_ip_address,
            descriptor=descriptor,
        )
        self._services[key] = service_ctx
        return service_ctx

    async def remove_service(self, service_id: ServiceId) -> None:
        """Remove a service and free its IP; unknown ids are ignored."""
        service_ctx = self._services.pop(str(service_id), None)
        if service_ctx is not None:
            self._release_ip(ipaddress.ip_address(service_ctx.get_private_ip_address()))

    def _allocate_ip(self) -> ipaddress.IPv4Address | ipaddress.IPv6Address | None:
        if self._released_ips:
            self._released_ips.sort()
            return self._released_ips.pop(0)
        return next(self._free_ips, None)

    def _release_ip(self, ip_address: ipaddress.IPv4Address | ipaddress.IPv6Address) -> None:
        self._released_ips.append(ip_address)

    def get_service(self, service_id: ServiceId | str) -> InMemoryServiceContext | None:
        """Get the context of a launched service."""
        return self._services.get(str(service_id))

    def list_service_ids(self) -> list[str]:
        """List the ids of all launched services."""
        return list(self._services)
