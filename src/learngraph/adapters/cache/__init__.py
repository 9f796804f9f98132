"""Key-value cache backends for the catalog document."""

from __future__ import annotations

from .memory import InMemoryCache
from .sqlalchemy import SqlAlchemyCache, cache_entry_table

__all__ = ["InMemoryCache", "SqlAlchemyCache", "cache_entry_table"]
