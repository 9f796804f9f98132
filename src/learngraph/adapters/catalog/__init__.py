"""Public interface for the learning catalog adapter."""

from __future__ import annotations

from .client import CatalogClient, FetchError
from .schema import CatalogPayload

__all__ = ["CatalogClient", "CatalogPayload", "FetchError"]
