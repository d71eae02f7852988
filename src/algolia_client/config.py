# src/algolia_client/config.py

"""Centralized configuration for algolia_client.

This module provides the library-wide defaults (timeouts, batch size, polling
interval) and the per-API configuration models used to build clients.
"""

import os
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from algolia_client.version import __version__


def _env_float(name: str, default: float) -> float:
    return float(os.getenv(name, default))


class Config:
    """Library-wide configuration settings."""

    APP_ID_ENV: str = "ALGOLIA_APP_ID"
    """Environment variable holding the application ID."""

    API_KEY_ENV: str = "ALGOLIA_API_KEY"
    """Environment variable holding the API key."""

    CONNECT_TIMEOUT: float = _env_float("ALGOLIA_CONNECT_TIMEOUT", 2.0)
    """Seconds allowed to open a connection to one host."""

    READ_TIMEOUT: float = _env_float("ALGOLIA_READ_TIMEOUT", 5.0)
    """Seconds allowed for a read (search) call against one host.

    Can be overridden with ALGOLIA_READ_TIMEOUT environment variable.
    """

    WRITE_TIMEOUT: float = _env_float("ALGOLIA_WRITE_TIMEOUT", 30.0)
    """Seconds allowed for a write (indexing) call against one host.

    Can be overridden with ALGOLIA_WRITE_TIMEOUT environment variable.
    """

    HOST_TTL: float = _env_float("ALGOLIA_HOST_TTL", 300.0)
    """Cooldown after which a failed host is considered reachable again."""

    BATCH_SIZE: int = int(os.getenv("ALGOLIA_BATCH_SIZE", "1000"))
    """Maximum number of operations sent in one batch call."""

    WAIT_TASK_INTERVAL: float = _env_float("ALGOLIA_WAIT_TASK_INTERVAL", 0.1)
    """Seconds between two task status polls."""

    USER_AGENT: str = f"Algolia for Python ({__version__})"
    """User-Agent header sent with every request."""


class ClientConfig(BaseModel):
    """Settings shared by every API client."""

    model_config = ConfigDict(validate_assignment=True)

    app_id: str
    """The Algolia application ID."""

    api_key: str
    """The API key sent with every request."""

    hosts: list[str] | None = None
    """Explicit host names. Overrides the default cluster when set."""

    connect_timeout: float = Field(default_factory=lambda: Config.CONNECT_TIMEOUT)
    read_timeout: float = Field(default_factory=lambda: Config.READ_TIMEOUT)
    write_timeout: float = Field(default_factory=lambda: Config.WRITE_TIMEOUT)

    total_timeout: float | None = None
    """Deadline in seconds for one logical call across all hosts, if any."""

    host_ttl: float = Field(default_factory=lambda: Config.HOST_TTL)

    default_headers: dict[str, str] = Field(default_factory=dict)
    """Extra headers sent with every request."""

    @classmethod
    def create(cls, app_id: str | None = None, api_key: str | None = None, **kwargs):
        """Build a configuration, falling back to environment variables.

        Args:
            app_id: Application ID. Defaults to $ALGOLIA_APP_ID.
            api_key: API key. Defaults to $ALGOLIA_API_KEY.
            **kwargs: Any other field of the configuration model.

        Raises:
            ValueError: If the application ID or API key cannot be resolved.
        """
        app_id = app_id or os.getenv(Config.APP_ID_ENV)
        api_key = api_key or os.getenv(Config.API_KEY_ENV)
        if not app_id:
            raise ValueError(
                f"Application ID required. Set {Config.APP_ID_ENV} or pass app_id."
            )
        if not api_key:
            raise ValueError(
                f"API key required. Set {Config.API_KEY_ENV} or pass api_key."
            )
        return cls(app_id=app_id, api_key=api_key, **kwargs)

    def headers(self) -> dict[str, str]:
        """Headers sent with every request, authentication included."""
        return {
            "X-Algolia-Application-Id": self.app_id,
            "X-Algolia-API-Key": self.api_key,
            "User-Agent": Config.USER_AGENT,
            "Content-Type": "application/json; charset=utf-8",
            **self.default_headers,
        }


class SearchConfig(ClientConfig):
    """Configuration of the Search API client."""

    batch_size: int = Field(default_factory=lambda: Config.BATCH_SIZE, gt=0)
    wait_task_interval: float = Field(
        default_factory=lambda: Config.WAIT_TASK_INTERVAL, ge=0
    )

    default_forward_to_replicas: bool | None = None
    """When set, sent as forwardToReplicas on settings, synonym and rule writes."""


class RegionalConfig(ClientConfig):
    """Configuration of an API served from one regional host."""

    ALLOWED_REGIONS: ClassVar[tuple[str, ...]] = ("us", "de")

    region: str = "us"

    @field_validator("region")
    @classmethod
    def _check_region(cls, value: str) -> str:
        value = value.lower()
        if value not in cls.ALLOWED_REGIONS:
            allowed = ", ".join(cls.ALLOWED_REGIONS)
            raise ValueError(f"region must be one of: {allowed}")
        return value


class AnalyticsConfig(RegionalConfig):
    """Configuration of the Analytics API client."""


class InsightsConfig(RegionalConfig):
    """Configuration of the Insights API client."""


class PersonalizationConfig(RegionalConfig):
    """Configuration of the Personalization API client.

    The region has no default: profiles are stored in the region chosen for
    the application and must be named explicitly.
    """

    ALLOWED_REGIONS: ClassVar[tuple[str, ...]] = ("us", "eu")

    region: str
