"""Gateway over the host key-value cache for the catalog document."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .model import CatalogDocument
    from .ports import KeyValueCache

log = getLogger(__name__)


def build_cache_key(namespace: str, locale: str) -> str:
    return f"{namespace}-{locale}"


@dataclass(slots=True)
class CacheGateway:
    """Read/write the single catalog slot.

    A missing key and an empty stored value (``None``, ``{}``) are both reported
    as ``None`` so callers can clear the slot by writing ``None``.
    """

    cache: KeyValueCache
    key: str

    async def get(self) -> CatalogDocument | None:
        value = await self.cache.get(self.key)
        if not value:
            return None
        return value

    async def set(self, document: CatalogDocument | None) -> None:
        await self.cache.set(self.key, document)

    async def invalidate(self) -> None:
        log.warning("Invalidating cached catalog data under key %s", self.key)
        await self.cache.set(self.key, None)
