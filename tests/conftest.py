"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock, Mock

import pytest

from explorer_launcher.domain.services import ITEMIZED_IMAGE, NETWORK_DESCRIPTOR_IMAGE
from explorer_launcher.domain.value_objects import BackendAddresses, PortSpec, ServiceId, ServiceUrl
from explorer_launcher.infrastructure.config import ExplorerFrontendConfig
from explorer_launcher.ports.logger import LoggerPort
from explorer_launcher.ports.orchestration import EnclaveContextPort, ServiceContextPort
from explorer_launcher.ports.readiness import PortAvailabilityPort
from explorer_launcher.ports.service_url import ServiceUrlResolverPort


@pytest.fixture
def backend_private_url():
    """Backend URL inside the enclave."""
    return ServiceUrl(protocol="ws", ip_address="10.0.0.5", port_number=8080, path="/ws")


@pytest.fixture
def backend_public_url():
    """Backend URL outside the enclave."""
    return ServiceUrl(protocol="ws", ip_address="203.0.113.9", port_number=443, path="/ws")


@pytest.fixture
def backend(backend_private_url, backend_public_url):
    """Backend addresses used across tests."""
    return BackendAddresses(private_url=backend_private_url, public_url=backend_public_url)


@pytest.fixture
def mock_logger():
    """Create a mock logger."""
    return Mock(spec=LoggerPort)


@pytest.fixture
def mock_service_ctx():
    """Create a mock service context of a launched frontend."""
    ctx = Mock(spec=ServiceContextPort)
    ctx.service_id = ServiceId(value="explorer-frontend")
    ctx.get_private_ip_address.return_value = "172.16.0.7"
    ctx.get_maybe_public_ip_address.return_value = "127.0.0.1"
    ctx.get_private_ports.return_value = {"http": PortSpec(number=3000)}
    ctx.get_public_ports.return_value = {"http": PortSpec(number=8331)}
    return ctx


@pytest.fixture
def mock_enclave(mock_service_ctx):
    """Create a mock enclave that accepts every launch."""
    enclave = Mock(spec=EnclaveContextPort)
    enclave.add_service = AsyncMock(return_value=mock_service_ctx)
    return enclave


@pytest.fixture
def mock_port_checker():
    """Create a mock readiness checker that succeeds immediately."""
    checker = Mock(spec=PortAvailabilityPort)
    checker.wait_for_port_availability = AsyncMock(return_value=None)
    return checker


@pytest.fixture
def mock_url_resolver():
    """Create a mock URL resolver."""
    resolver = Mock(spec=ServiceUrlResolverPort)
    resolver.get_private_and_public_urls.return_value = (
        ServiceUrl(protocol="http", ip_address="172.16.0.7", port_number=3000),
        ServiceUrl(protocol="http", ip_address="127.0.0.1", port_number=8331),
    )
    return resolver


@pytest.fixture
def descriptor_config():
    """Configuration for the network descriptor image with readiness enabled."""
    return ExplorerFrontendConfig(image=NETWORK_DESCRIPTOR_IMAGE, wait_for_readiness=True)


@pytest.fixture
def itemized_config():
    """Configuration for the itemized image."""
    return ExplorerFrontendConfig(image=ITEMIZED_IMAGE)
