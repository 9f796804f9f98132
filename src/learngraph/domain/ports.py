"""Ports implemented by the host (cache, node store) and the fetch adapter."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .model import CatalogDocument
    from .schema import TypeDeclaration


@runtime_checkable
class KeyValueCache(Protocol):
    """String-keyed store; eviction and persistence belong to the implementation."""

    async def get(self, key: str) -> Any | None: ...

    async def set(self, key: str, value: Any | None) -> None: ...


@runtime_checkable
class CatalogFetcher(Protocol):
    """Callable port retrieving the full catalog document in one request."""

    async def __call__(self) -> CatalogDocument: ...


@runtime_checkable
class NodeStore(Protocol):
    """Receives created nodes and the type declarations used to resolve links."""

    def create_node(self, record: Mapping[str, Any]) -> None: ...

    def declare_types(self, declarations: tuple[TypeDeclaration, ...]) -> None: ...


__all__ = ["CatalogFetcher", "KeyValueCache", "NodeStore"]
