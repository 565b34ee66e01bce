"""Readiness port - waiting for a launched service to accept connections."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..domain.value_objects import Duration


class PortAvailabilityPort(ABC):
    """Abstract interface for port availability polling."""

    @abstractmethod
    async def wait_for_port_availability(
        self,
        port: int,
        ip_address: str,
        retry_interval: Duration,
        timeout: Duration,
    ) -> None:
        """Block until the port accepts connections.

        Probes are sequential and spaced by ``retry_interval``. Once ``timeout``
        has elapsed no further probes are made.

        Raises:
            ReadinessTimeoutError: If the port did not open within the timeout
        """
        ...
