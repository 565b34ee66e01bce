"""Domain models for the explorer frontend launch."""

from __future__ import annotations

import json
from abc import abstractmethod
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .enums import EnvironmentSchema
from .value_objects import PortSpec, ServiceUrl

# Logical network aliases of the itemized schema. In a local enclave all of
# them resolve to the single backend.
NETWORK_ALIASES: tuple[str, ...] = ("MAINNET", "TESTNET", "GUILDNET")


class NearNetwork(BaseModel):
    """One entry of the JSON network list read by the frontend."""

    model_config = ConfigDict(frozen=True, strict=True)

    name: str = Field(..., min_length=1, description="Network name shown by the explorer")
    explorer_link: str = Field(..., min_length=1, description="Link to this explorer instance")
    aliases: tuple[str, ...] = Field(
        default=("localhost:3000", "127.0.0.1:3000"), description="Host aliases"
    )
    near_wallet_profile_prefix: str = Field(
        default="https://wallet.testnet.near.org/profile",
        min_length=1,
        description="Wallet profile URL prefix",
    )

    def to_wire(self) -> dict[str, Any]:
        """Convert to the camelCase object the frontend expects."""
        return {
            "name": self.name,
            "explorerLink": self.explorer_link,
            "aliases": list(self.aliases),
            "nearWalletProfilePrefix": self.near_wallet_profile_prefix,
        }


class BackendEndpoint(BaseModel):
    """Host, port and transport security of one backend access path."""

    model_config = ConfigDict(frozen=True, strict=True)

    host: str = Field(..., min_length=1, description="Backend host or IP address")
    port: int = Field(..., ge=1, le=65535, description="Backend port")
    secure: bool = Field(default=False, description="Whether the backend uses TLS")

    @classmethod
    def from_url(cls, url: ServiceUrl, host_override: str | None = None) -> BackendEndpoint:
        """Build an endpoint from a service URL, optionally replacing its host."""
        return cls(host=host_override or url.ip_address, port=url.port_number, secure=url.is_secure)


class FrontendEnvironment(BaseModel):
    """Base for the typed environment records of the frontend container.

    Subclasses name every variable as a field and serialise to the
    key-value wire format only in ``to_env_vars``.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    port: int = Field(..., ge=1, le=65535, description="Port the frontend listens on")
    data_source: str = Field(
        default="INDEXER_BACKEND",
        min_length=1,
        description="Tells the frontend to use the indexer backend rather than legacy sqlite",
    )

    def base_env_vars(self) -> dict[str, str]:
        """Variables shared by every schema."""
        return {
            "PORT": str(self.port),
            "NEAR_EXPLORER_DATA_SOURCE": self.data_source,
        }

    @abstractmethod
    def to_env_vars(self) -> dict[str, str]:
        """Serialise to environment variables."""
        ...


class NetworkDescriptorEnvironment(FrontendEnvironment):
    """Backend WAMP URLs plus a JSON list describing the networks."""

    wamp_internal_url: str = Field(..., min_length=1, description="Backend URL for server-side use")
    wamp_external_url: str = Field(..., min_length=1, description="Backend URL for browsers")
    networks: tuple[NearNetwork, ...] = Field(..., min_length=1, description="Known networks")

    def to_env_vars(self) -> dict[str, str]:
        env_vars = self.base_env_vars()
        env_vars["WAMP_NEAR_EXPLORER_INTERNAL_URL"] = self.wamp_internal_url
        env_vars["NEAR_NETWORKS"] = json.dumps([network.to_wire() for network in self.networks])
        env_vars["WAMP_NEAR_EXPLORER_URL"] = self.wamp_external_url
        return env_vars


class ItemizedEnvironment(FrontendEnvironment):
    """One backend host entry per logical network, for both access paths.

    The SSR endpoint is used by the frontend server inside the enclave, the
    browser endpoint by clients outside it.
    """

    network_name: str = Field(default="localnet", min_length=1, description="Network name")
    ssr_backend: BackendEndpoint = Field(..., description="Backend reachable inside the enclave")
    browser_backend: BackendEndpoint = Field(..., description="Backend reachable from outside")
    network_aliases: tuple[str, ...] = Field(default=NETWORK_ALIASES, min_length=1)

    def to_env_vars(self) -> dict[str, str]:
        env_vars = self.base_env_vars()
        env_vars["NEAR_EXPLORER_CONFIG__NETWORK_NAME"] = self.network_name
        for prefix, endpoint in (
            ("NEAR_EXPLORER_CONFIG__BACKEND_SSR", self.ssr_backend),
            ("NEAR_EXPLORER_CONFIG__BACKEND", self.browser_backend),
        ):
            for alias in self.network_aliases:
                env_vars[f"{prefix}__HOSTS__{alias}"] = endpoint.host
            env_vars[f"{prefix}__PORT"] = str(endpoint.port)
            env_vars[f"{prefix}__SECURE"] = "true" if endpoint.secure else "false"
        return env_vars


class FrontendImageProfile(BaseModel):
    """What a specific frontend image build expects from its launcher."""

    model_config = ConfigDict(frozen=True, strict=True)

    image: str = Field(..., min_length=1, description="Container image reference")
    environment_schema: EnvironmentSchema = Field(..., description="Environment variable layout")
    wait_for_readiness: bool = Field(
        default=True, description="Whether to wait for the port after launch by default"
    )


class LaunchDescriptor(BaseModel):
    """Immutable request to run one container in an enclave."""

    model_config = ConfigDict(frozen=True, strict=True)

    image: str = Field(..., min_length=1, description="Container image reference")
    used_ports: dict[str, PortSpec] = Field(..., description="Ports the container listens on")
    public_ports: dict[str, PortSpec] = Field(..., description="Ports exposed outside the enclave")
    env_vars: dict[str, str] = Field(
        default_factory=dict, validate_default=True, description="Environment overrides"
    )

    @field_validator("used_ports", "public_ports", "env_vars")
    @classmethod
    def make_read_only(cls, v: dict[str, Any]) -> Mapping[str, Any]:
        """Store maps as read-only views so a built descriptor never changes."""
        return MappingProxyType(dict(v))

    @field_serializer("used_ports", "public_ports", "env_vars")
    def serialize_map(self, v: Mapping[str, Any]) -> dict[str, Any]:
        return dict(v)

    def __hash__(self) -> int:
        return hash(
            (
                self.image,
                frozenset(self.used_ports.items()),
                frozenset(self.public_ports.items()),
                frozenset(self.env_vars.items()),
            )
        )


class ExplorerFrontendInfo(BaseModel):
    """Result of a successful frontend launch."""

    model_config = ConfigDict(frozen=True)

    public_url: ServiceUrl = Field(..., description="URL reachable from outside the enclave")
    private_url: ServiceUrl | None = Field(default=None, description="URL inside the enclave")
