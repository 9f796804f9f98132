"""Learning catalog source configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from .env import env_flag, optional_env_var
from .http_client import HttpClientConfig

DEFAULT_CATALOG_URL: Final[str] = "https://docs.microsoft.com/api/learn/catalog/"
DEFAULT_LOCALE: Final[str] = "en-us"
DEFAULT_CACHE_NAMESPACE: Final[str] = "mslearn-catalog-data"
CATALOG_TIMEOUT_SECONDS: Final[float] = 60.0


def _default_http() -> HttpClientConfig:
    return HttpClientConfig(
        name="catalog",
        timeout_seconds=CATALOG_TIMEOUT_SECONDS,
        default_headers={"Accept": "application/json"},
    )


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Where the catalog lives and how the sourcing run treats the cache."""

    endpoint_url: str = DEFAULT_CATALOG_URL
    locale: str = DEFAULT_LOCALE
    namespace: str = DEFAULT_CACHE_NAMESPACE
    cache_response: bool = False
    force_clear: bool = False
    http: HttpClientConfig = field(default_factory=_default_http)


def get_catalog_config(
    *,
    cache_response: bool | None = None,
    locale: str | None = None,
    force_clear: bool | None = None,
) -> CatalogConfig:
    """Build the catalog configuration from the environment.

    Explicit keyword arguments win over environment values.
    """

    return CatalogConfig(
        endpoint_url=optional_env_var("LEARNGRAPH_CATALOG_URL", DEFAULT_CATALOG_URL),
        locale=locale or optional_env_var("LEARNGRAPH_LOCALE", DEFAULT_LOCALE),
        namespace=optional_env_var("LEARNGRAPH_CACHE_NAMESPACE", DEFAULT_CACHE_NAMESPACE),
        cache_response=(
            cache_response
            if cache_response is not None
            else env_flag("LEARNGRAPH_CACHE_RESPONSE")
        ),
        force_clear=(
            force_clear if force_clear is not None else env_flag("LEARNGRAPH_FORCE_CLEAR_CACHE")
        ),
    )
