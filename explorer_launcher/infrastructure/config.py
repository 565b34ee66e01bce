"""Configuration objects for the explorer frontend launch."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..domain.models import FrontendImageProfile
from ..domain.services import DEFAULT_IMAGE, DEFAULT_NETWORK_NAME, get_image_profile
from ..domain.value_objects import Duration

ENV_PREFIX = "EXPLORER_FRONTEND_"
_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


class ExplorerFrontendConfig(BaseModel):
    """Strongly-typed configuration for launching the explorer frontend.

    ``wait_for_readiness`` left as None defers to the image profile.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        str_strip_whitespace=True,
        strict=True,
    )

    image: str = Field(default=DEFAULT_IMAGE, min_length=1, description="Frontend image")
    network_name: str = Field(
        default=DEFAULT_NETWORK_NAME, min_length=1, description="Network name for the frontend"
    )
    wait_for_readiness: bool | None = Field(
        default=None, description="Wait for the frontend port after launch"
    )
    readiness_retry_interval_ms: int = Field(
        default=500, gt=0, le=60_000, description="Milliseconds between port probes"
    )
    readiness_timeout_ms: int = Field(
        default=5_000, gt=0, le=600_000, description="Milliseconds before giving up on the port"
    )

    @field_validator("readiness_timeout_ms")
    @classmethod
    def validate_timeout(cls, v: int, info) -> int:
        """Ensure the timeout is not shorter than one retry interval."""
        interval = info.data.get("readiness_retry_interval_ms")
        if interval is not None and v < interval:
            raise ValueError("Readiness timeout must be at least one retry interval")
        return v

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] | None = None) -> ExplorerFrontendConfig:
        """Build configuration from ``EXPLORER_FRONTEND_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Raises:
            ValueError: If a variable holds an invalid value
        """
        environ = os.environ if environ is None else environ
        values: dict[str, Any] = {}

        for field in ("image", "network_name"):
            raw = environ.get(ENV_PREFIX + field.upper())
            if raw:
                values[field] = raw

        raw = environ.get(ENV_PREFIX + "WAIT_FOR_READINESS")
        if raw:
            values["wait_for_readiness"] = _parse_bool(raw)

        for field in ("readiness_retry_interval_ms", "readiness_timeout_ms"):
            raw = environ.get(ENV_PREFIX + field.upper())
            if raw:
                try:
                    values[field] = int(raw)
                except ValueError:
                    raise ValueError(
                        f"{ENV_PREFIX + field.upper()} must be an integer, got '{raw}'"
                    ) from None

        return cls(**values)

    def profile(self) -> FrontendImageProfile:
        """Profile of the configured image.

        Raises:
            UnknownFrontendImageError: If the image has no registered profile
        """
        return get_image_profile(self.image)

    def resolved_wait_for_readiness(self) -> bool:
        """Whether to wait for readiness, falling back to the image default."""
        if self.wait_for_readiness is not None:
            return self.wait_for_readiness
        return self.profile().wait_for_readiness

    @property
    def retry_interval(self) -> Duration:
        return Duration.from_milliseconds(self.readiness_retry_interval_ms)

    @property
    def timeout(self) -> Duration:
        return Duration.from_milliseconds(self.readiness_timeout_ms)


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{ENV_PREFIX}WAIT_FOR_READINESS must be a boolean, got '{raw}'")
