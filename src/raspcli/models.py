"""Canonical Pydantic models shared across all raspcli modules.

The models fall into two groups:

**Configuration models** -- serialised as JSON in the user's config directory:
    :class:`RequestConfig`, :class:`CacheConfig`, :class:`OutputConfig`, and
    :class:`GlobalConfig`.

**Data models** -- produced and consumed at runtime:
    :class:`CacheRecord` (the on-disk cache file) and :class:`TripRecord`
    (one normalised itinerary, never persisted).
"""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

UNKNOWN = "unknown"
"""Sentinel substituted for any provider string field that is absent or mistyped."""

DEFAULT_TTL_SECONDS = 86400
"""Freshness window for disk cache records (24 hours)."""


# --- Configuration ---


class RequestConfig(BaseModel):
    """Settings for calls to the schedule-search endpoint."""

    base_url: str = Field(
        default="https://api.rasp.yandex.net/v3.0",
        description="API root; the search endpoint is <base_url>/search/",
    )
    timeout: int = Field(default=30, gt=0, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    lang: str = Field(default="ru_RU", description="Response language")
    limit: int = Field(default=100, gt=0, description="Maximum number of segments requested")


class CacheConfig(BaseModel):
    """Disk cache settings stored in :class:`GlobalConfig`.

    The memory tier has no settings; it lives exactly as long as the process.
    """

    enabled: bool = Field(default=True, description="Enable the disk cache tier")
    ttl_seconds: int = Field(
        default=DEFAULT_TTL_SECONDS, gt=0, description="Disk record freshness window in seconds"
    )
    directory: Optional[str] = Field(
        default=None, description="Cache directory (defaults to the XDG cache dir)"
    )


class OutputConfig(BaseModel):
    """Default output format preferences stored in :class:`GlobalConfig`."""

    format: Literal["auto", "json", "plain", "rich"] = Field(
        default="auto", description="Output format: auto, json, plain, rich"
    )


class GlobalConfig(BaseModel):
    """User-wide configuration persisted at ``~/.config/raspcli/config.json``.

    Loaded and saved by :func:`~raspcli.config.load_global_config` and
    :func:`~raspcli.config.save_global_config`. Fields here have the
    lowest precedence and can be overridden by project config, environment
    variables, or CLI flags. See :func:`~raspcli.config.resolve_config`
    for the full precedence chain.
    """

    api_key_source: str = Field(
        default="env:RASP_API_KEY",
        description="Credential source for the API key: env:VAR, file:/path, prompt",
    )
    request: RequestConfig = Field(default_factory=RequestConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


# --- Data ---


class CacheRecord(BaseModel):
    """One durable cache file.

    ``data`` is the raw provider document exactly as it was returned; the
    ``timestamp`` marks when it was written, not any provider-side time.
    """

    timestamp: int
    data: Any = None


class TripRecord(BaseModel):
    """A single itinerary extracted from a provider segment.

    Every string field falls back to :data:`UNKNOWN` and every numeric field
    to zero when the provider omits it or sends the wrong type.
    """

    route_title: str = UNKNOWN
    transport_type: str = UNKNOWN
    vehicle: str = UNKNOWN
    departure: str = UNKNOWN
    arrival: str = UNKNOWN
    departure_station: str = UNKNOWN
    arrival_station: str = UNKNOWN
    departure_terminal: str = UNKNOWN
    arrival_terminal: str = UNKNOWN
    duration: float = 0.0
    transfer_count: int = 0

    @property
    def duration_minutes(self) -> float:
        """Duration in minutes, for display only."""
        return self.duration / 60
