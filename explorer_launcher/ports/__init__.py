"""Ports (interfaces) for explorer-launcher following hexagonal architecture."""

from .logger import LoggerPort
from .orchestration import DescriptorSupplier, EnclaveContextPort, ServiceContextPort
from .readiness import PortAvailabilityPort
from .service_url import ServiceUrlResolverPort

__all__ = [
    "DescriptorSupplier",
    "EnclaveContextPort",
    "LoggerPort",
    "PortAvailabilityPort",
    "ServiceContextPort",
    "ServiceUrlResolverPort",
]
