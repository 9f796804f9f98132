"""Node store adapters."""

from __future__ import annotations

from .memory import InMemoryNodeStore

__all__ = ["InMemoryNodeStore"]
