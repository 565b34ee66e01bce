"""Domain services that assemble the explorer frontend launch descriptor.

Everything here is pure: given the same backend addresses and settings the
builder returns value-equal descriptors, and nothing touches the enclave.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .enums import EnvironmentSchema, TransportProtocol
from .exceptions import UnknownFrontendImageError, UnsupportedNetworkNameError
from .models import (
    BackendEndpoint,
    FrontendEnvironment,
    FrontendImageProfile,
    ItemizedEnvironment,
    LaunchDescriptor,
    NearNetwork,
    NetworkDescriptorEnvironment,
)
from .value_objects import BackendAddresses, PortSpec, ServiceId, format_host

SERVICE_ID = ServiceId(value="explorer-frontend")
PORT_ID = "http"
PORT_PROTOCOL = "http"

PRIVATE_PORT_NUM = 3000
PUBLIC_PORT_NUM = 8331
PRIVATE_PORT_SPEC = PortSpec(number=PRIVATE_PORT_NUM, protocol=TransportProtocol.TCP)
PUBLIC_PORT_SPEC = PortSpec(number=PUBLIC_PORT_NUM, protocol=TransportProtocol.TCP)

NETWORK_DESCRIPTOR_IMAGE = "kurtosistech/near-explorer_frontend:5ef5b6c"
# Placeholder tag for the build that reads itemized NEAR_EXPLORER_CONFIG__ variables.
# Replace it with the published tag of that build.
ITEMIZED_IMAGE = "kurtosistech/near-explorer_frontend:e6e4e6f"
DEFAULT_IMAGE = NETWORK_DESCRIPTOR_IMAGE

DEFAULT_NETWORK_NAME = "localnet"

STATIC_ENV_VARS: Mapping[str, str] = MappingProxyType(
    {
        "PORT": str(PRIVATE_PORT_NUM),
        "NEAR_EXPLORER_DATA_SOURCE": "INDEXER_BACKEND",
    }
)

FRONTEND_IMAGE_PROFILES: Mapping[str, FrontendImageProfile] = MappingProxyType(
    {
        NETWORK_DESCRIPTOR_IMAGE: FrontendImageProfile(
            image=NETWORK_DESCRIPTOR_IMAGE,
            environment_schema=EnvironmentSchema.NETWORK_DESCRIPTOR,
            wait_for_readiness=False,
        ),
        ITEMIZED_IMAGE: FrontendImageProfile(
            image=ITEMIZED_IMAGE,
            environment_schema=EnvironmentSchema.ITEMIZED,
            wait_for_readiness=True,
        ),
    }
)


def get_image_profile(image: str) -> FrontendImageProfile:
    """Look up the profile of a frontend image.

    Raises:
        UnknownFrontendImageError: If the image has no registered profile
    """
    try:
        return FRONTEND_IMAGE_PROFILES[image]
    except KeyError:
        raise UnknownFrontendImageError(image) from None


class FrontendDescriptorBuilder:
    """Builds the launch descriptor of the explorer frontend for one image."""

    def __init__(self, image: str = DEFAULT_IMAGE, network_name: str = DEFAULT_NETWORK_NAME):
        """Initialize the builder.

        Args:
            image: Frontend image reference; selects the environment schema
            network_name: Network name written into the network descriptor;
                the itemized schema only supports the default

        Raises:
            UnknownFrontendImageError: If the image has no registered profile
            UnsupportedNetworkNameError: If the itemized image is given another
                network name
        """
        self._profile = get_image_profile(image)
        if (
            self._profile.environment_schema == EnvironmentSchema.ITEMIZED
            and network_name != DEFAULT_NETWORK_NAME
        ):
            raise UnsupportedNetworkNameError(image, network_name, DEFAULT_NETWORK_NAME)
        self._network_name = network_name

    @property
    def profile(self) -> FrontendImageProfile:
        return self._profile

    @staticmethod
    def build_port_maps() -> tuple[dict[str, PortSpec], dict[str, PortSpec]]:
        """Return the used-port and public-port maps."""
        return {PORT_ID: PRIVATE_PORT_SPEC}, {PORT_ID: PUBLIC_PORT_SPEC}

    def build_environment(
        self, backend: BackendAddresses, backend_ip_address: str | None = None
    ) -> FrontendEnvironment:
        """Build the typed environment record for the configured image.

        Args:
            backend: Backend URLs, private and public
            backend_ip_address: Host used instead of the backend's public IP
                wherever the browser has to reach the backend
        """
        if self._profile.environment_schema == EnvironmentSchema.ITEMIZED:
            return ItemizedEnvironment(
                port=PRIVATE_PORT_NUM,
                data_source=STATIC_ENV_VARS["NEAR_EXPLORER_DATA_SOURCE"],
                network_name=self._network_name,
                ssr_backend=BackendEndpoint.from_url(backend.private_url),
                browser_backend=BackendEndpoint.from_url(backend.public_url, backend_ip_address),
            )

        external_host = backend_ip_address or backend.public_url.ip_address
        return NetworkDescriptorEnvironment(
            port=PRIVATE_PORT_NUM,
            data_source=STATIC_ENV_VARS["NEAR_EXPLORER_DATA_SOURCE"],
            wamp_internal_url=str(backend.private_url),
            wamp_external_url=backend.public_url.to_string_with_ip_address_override(external_host),
            networks=(
                NearNetwork(
                    name=self._network_name,
                    explorer_link=f"http://{format_host(external_host)}:{PRIVATE_PORT_NUM}/",
                ),
            ),
        )

    def build_env_vars(
        self, backend: BackendAddresses, backend_ip_address: str | None = None
    ) -> dict[str, str]:
        """Build the environment variables, baseline included."""
        env_vars = dict(STATIC_ENV_VARS)
        env_vars.update(self.build_environment(backend, backend_ip_address).to_env_vars())
        return env_vars

    def build(
        self, backend: BackendAddresses, backend_ip_address: str | None = None
    ) -> LaunchDescriptor:
        """Build the complete launch descriptor."""
        used_ports, public_ports = self.build_port_maps()
        return LaunchDescriptor(
            image=self._profile.image,
            used_ports=used_ports,
            public_ports=public_ports,
            env_vars=self.build_env_vars(backend, backend_ip_address),
        )
