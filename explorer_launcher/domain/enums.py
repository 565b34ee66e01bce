"""Domain enumerations."""

from enum import Enum


class TransportProtocol(str, Enum):
    """Transport protocol of a container port."""

    TCP = "TCP"
    UDP = "UDP"


class EnvironmentSchema(str, Enum):
    """Environment variable layout expected by a frontend image.

    NETWORK_DESCRIPTOR passes backend URLs and a JSON network list.
    ITEMIZED passes one host entry per logical network plus port and secure flags.
    """

    NETWORK_DESCRIPTOR = "network_descriptor"
    ITEMIZED = "itemized"
