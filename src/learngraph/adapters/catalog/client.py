"""HTTP client for the learning catalog endpoint."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Any

import httpx

from learngraph.adapters.http_client import HttpClient
from learngraph.config.catalog import CatalogConfig, get_catalog_config

from .schema import CatalogPayload

if TYPE_CHECKING:
    from collections.abc import Callable

    from learngraph.config.http_client import HttpClientConfig

log = getLogger(__name__)


class FetchError(RuntimeError):
    """Raised when the catalog cannot be retrieved or decoded."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _default_client_factory(config: HttpClientConfig) -> HttpClient:
    return HttpClient(config)


@dataclass(slots=True)
class CatalogClient:
    """Single best-effort GET of the full catalog document.

    The configured locale is sent as the ``locale`` query parameter so the
    payload matches the locale-qualified cache key.
    """

    config: CatalogConfig = field(default_factory=get_catalog_config)
    client_factory: Callable[[HttpClientConfig], HttpClient] = field(
        default=_default_client_factory
    )

    async def __call__(self) -> dict[str, Any]:
        return await self.fetch_catalog()

    def fetch_catalog_sync(self) -> dict[str, Any]:
        return asyncio.run(self.fetch_catalog())

    async def fetch_catalog(self) -> dict[str, Any]:
        url = self.config.endpoint_url
        params = {"locale": self.config.locale}
        log.info("Fetching catalog from %s (locale=%s)", url, self.config.locale)

        try:
            async with self.client_factory(self.config.http) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                f"Catalog request failed with status {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"Catalog request failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise FetchError("Catalog response is not valid JSON") from exc
        if not isinstance(payload, dict):
            raise FetchError(f"Unexpected catalog payload: {type(payload).__name__}")

        _log_payload_summary(payload)
        return payload


def _log_payload_summary(payload: dict[str, Any]) -> None:
    sizes = CatalogPayload.model_validate(payload).collection_sizes()
    summary = ", ".join(
        f"{name}={'missing' if size is None else size}" for name, size in sizes.items()
    )
    log.info("Catalog payload: %s", summary)
