"""Process-lifetime key-value cache."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class InMemoryCache:
    entries: dict[str, Any] = field(default_factory=dict[str, Any])

    async def get(self, key: str) -> Any | None:
        return self.entries.get(key)

    async def set(self, key: str, value: Any | None) -> None:
        self.entries[key] = value
