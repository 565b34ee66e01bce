"""Domain-specific exceptions following DDD principles."""


class LauncherError(Exception):
    """Base exception for all explorer-launcher errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(LauncherError):
    """Domain validation errors."""

    pass


class UnknownFrontendImageError(ValidationError):
    """Raised when no environment schema is registered for an image."""

    def __init__(self, image: str):
        super().__init__(
            f"No environment schema is registered for frontend image '{image}'",
            details={"image": image},
        )
        self.image = image


class UnsupportedNetworkNameError(ValidationError):
    """Raised when an image cannot be configured with the requested network name."""

    def __init__(self, image: str, network_name: str, supported: str):
        super().__init__(
            f"Frontend image '{image}' only supports network '{supported}', "
            f"got '{network_name}'",
            details={"image": image, "network_name": network_name, "supported": supported},
        )
        self.image = image
        self.network_name = network_name
        self.supported = supported


class OrchestrationError(LauncherError):
    """Errors raised by the orchestration layer."""

    pass


class ServiceLaunchError(OrchestrationError):
    """Raised when the enclave rejects a service launch request."""

    def __init__(self, message: str, service_id: str | None = None):
        super().__init__(message)
        self.service_id = service_id
        if service_id:
            self.details["service_id"] = service_id


class ReadinessTimeoutError(LauncherError):
    """Raised when a launched service does not accept connections in time."""

    def __init__(self, ip_address: str, port: int, timeout_ms: float):
        super().__init__(
            f"Timed out after {timeout_ms:g}ms waiting for port {port} on {ip_address} "
            "to become available",
            details={"ip_address": ip_address, "port": port, "timeout_ms": timeout_ms},
        )
        self.ip_address = ip_address
        self.port = port
        self.timeout_ms = timeout_ms


class AddressResolutionError(LauncherError):
    """Raised when the addresses of a launched service cannot be resolved."""

    def __init__(self, message: str, service_id: str | None = None, port_id: str | None = None):
        super().__init__(message)
        self.service_id = service_id
        self.port_id = port_id
        if service_id:
            self.details["service_id"] = service_id
        if port_id:
            self.details["port_id"] = port_id
