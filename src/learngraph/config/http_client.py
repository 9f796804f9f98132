"""Configuration for the catalog HTTP client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(slots=True, frozen=True)
class HttpClientConfig:
    """Transport settings for one best-effort request; no retries, no HTTP cache."""

    name: str
    base_url: str | None = None
    timeout_seconds: float = 30.0
    follow_redirects: bool = True
    default_headers: Mapping[str, str] | None = None
