"""Resolves the reachable URLs of a port from a service context."""

from __future__ import annotations

from ..domain.exceptions import AddressResolutionError
from ..domain.value_objects import ServiceUrl
from ..ports.orchestration import ServiceContextPort
from ..ports.service_url import ServiceUrlResolverPort


class ServiceContextUrlResolver(ServiceUrlResolverPort):
    """Builds URLs from the IPs and port maps a service context reports."""

    def get_private_and_public_urls(
        self,
        service_ctx: ServiceContextPort,
        port_id: str,
        protocol: str,
        path: str,
    ) -> tuple[ServiceUrl, ServiceUrl]:
        service_id = str(service_ctx.service_id)

        private_port = service_ctx.get_private_ports().get(port_id)
        if private_port is None:
            raise AddressResolutionError(
                f"Expected service '{service_id}' to have a private port with ID '{port_id}' "
                "but none was found",
                service_id=service_id,
                port_id=port_id,
            )

        public_port = service_ctx.get_public_ports().get(port_id)
        if public_port is None:
            raise AddressResolutionError(
                f"Expected service '{service_id}' to have a public port with ID '{port_id}' "
                "but none was found",
                service_id=service_id,
                port_id=port_id,
            )

        public_ip = service_ctx.get_maybe_public_ip_address()
        if not public_ip:
            raise AddressResolutionError(
                f"Service '{service_id}' has no public IP address",
                service_id=service_id,
                port_id=port_id,
            )

        private_url = ServiceUrl(
            protocol=protocol,
            ip_address=service_ctx.get_private_ip_address(),
            port_number=private_port.number,
            path=path,
        )
        public_url = ServiceUrl(
            protocol=protocol,
            ip_address=public_ip,
            port_number=public_port.number,
            path=path,
        )
        return private_url, public_url
