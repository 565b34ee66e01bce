"""Value objects for the explorer frontend launch.

These value objects give the launcher's primitive inputs (service names,
ports, URLs and durations) validation and a clear meaning.
"""

import ipaddress
import re
from typing import Any
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import TransportProtocol


def format_host(host: str) -> str:
    """Return the host as it appears in a URL authority, bracketing IPv6 literals."""
    try:
        is_ipv6 = ipaddress.ip_address(host).version == 6
    except ValueError:
        return host
    return f"[{host}]" if is_ipv6 else host


class ServiceId(BaseModel):
    """Value object naming a service uniquely within its enclave."""

    model_config = ConfigDict(frozen=True, strict=True)

    value: str = Field(..., min_length=1, max_length=63, description="The service identifier")

    @field_validator("value")
    @classmethod
    def validate_service_id(cls, v: str) -> str:
        """Service ids are lowercase letters, digits and hyphens, not ending in a hyphen."""
        if not re.match(r"^[a-z0-9][a-z0-9-]*[a-z0-9]$|^[a-z0-9]$", v):
            raise ValueError(
                f"Invalid service id '{v}'. Must contain only lowercase letters, "
                "numbers and hyphens, and start and end with a letter or number."
            )
        return v

    def __str__(self) -> str:
        return self.value

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ServiceId):
            return self.value == other.value
        if isinstance(other, str):
            return self.value == other
        return False

    def __hash__(self) -> int:
        return hash(self.value)


class PortSpec(BaseModel):
    """Value object describing a listening endpoint of a container."""

    model_config = ConfigDict(frozen=True, strict=True)

    number: int = Field(..., ge=1, le=65535, description="Port number")
    protocol: TransportProtocol = Field(
        default=TransportProtocol.TCP, description="Transport protocol"
    )

    def __str__(self) -> str:
        return f"{self.number}/{self.protocol.value}"


class Duration(BaseModel):
    """Non-negative span of time used for readiness intervals and timeouts."""

    model_config = ConfigDict(frozen=True, strict=True)

    seconds: float = Field(..., ge=0, description="Duration in seconds")

    @classmethod
    def from_milliseconds(cls, milliseconds: float) -> "Duration":
        """Build a duration from a millisecond setting such as `500`."""
        return cls(seconds=milliseconds / 1000)

    def total_seconds(self) -> float:
        return self.seconds

    def to_milliseconds(self) -> float:
        return self.seconds * 1000

    def __str__(self) -> str:
        return f"{self.to_milliseconds():g}ms"


class ServiceUrl(BaseModel):
    """Value object for a URL at which a service port can be reached.

    Renders as ``{protocol}://{ip_address}:{port_number}{path}``.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    protocol: str = Field(..., min_length=1, description="URL scheme, e.g. http or ws")
    ip_address: str = Field(..., min_length=1, description="Host or IP address")
    port_number: int = Field(..., ge=1, le=65535, description="Port number")
    path: str = Field(default="", description="Path suffix, empty or starting with '/'")

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Ensure a non-empty path starts with a slash."""
        if v and not v.startswith("/"):
            raise ValueError(f"URL path must be empty or start with '/', got '{v}'")
        return v

    @classmethod
    def parse(cls, url: str) -> "ServiceUrl":
        """Parse a URL string of the form ``protocol://host:port/path``.

        Raises:
            ValueError: If the scheme, host or port is missing, or the URL
                carries a query string or fragment
        """
        parts = urlsplit(url)
        try:
            port = parts.port
        except ValueError as e:
            raise ValueError(f"Invalid port in URL '{url}'") from e
        if not parts.scheme or not parts.hostname or port is None:
            raise ValueError(f"URL '{url}' must have the form protocol://host:port[/path]")
        if parts.query or parts.fragment:
            raise ValueError(f"URL '{url}' must not carry a query string or fragment")
        return cls(
            protocol=parts.scheme, ip_address=parts.hostname, port_number=port, path=parts.path
        )

    @property
    def is_secure(self) -> bool:
        """Whether the URL uses a TLS transport."""
        return self.protocol.lower() in ("https", "wss")

    def with_ip_address(self, ip_address: str) -> "ServiceUrl":
        """Return a copy of this URL pointing at another host."""
        return self.model_copy(update={"ip_address": ip_address})

    def to_string_with_ip_address_override(self, ip_address: str) -> str:
        """Render the URL with the host replaced."""
        return str(self.with_ip_address(ip_address))

    def __str__(self) -> str:
        return f"{self.protocol}://{format_host(self.ip_address)}:{self.port_number}{self.path}"


class BackendAddresses(BaseModel):
    """Private and public URLs of the backend the frontend talks to."""

    model_config = ConfigDict(frozen=True, strict=True)

    private_url: ServiceUrl = Field(..., description="URL reachable inside the enclave network")
    public_url: ServiceUrl = Field(..., description="URL reachable from outside the enclave")
