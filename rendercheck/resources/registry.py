"""Registry mapping apiVersion/kind pairs to resource types."""

from __future__ import annotations

import typing as typ

from .models import (
    ConfigMap,
    DaemonSet,
    Deployment,
    Pod,
    Resource,
    Service,
    StatefulSet,
)

if typ.TYPE_CHECKING:
    from collections import abc as cabc

KindKey = tuple[str, str]

DEFAULT_KINDS: tuple[tuple[str, str, type[Resource]], ...] = (
    ("apps/v1", "Deployment", Deployment),
    ("apps/v1", "StatefulSet", StatefulSet),
    ("apps/v1", "DaemonSet", DaemonSet),
    ("v1", "Pod", Pod),
    ("v1", "Service", Service),
    ("v1", "ConfigMap", ConfigMap),
)


class SchemaRegistry:
    """Resolve the struct type used to decode a given resource kind.

    Examples
    --------
    >>> registry = SchemaRegistry()
    >>> registry.register("apps/v1", "Deployment", Deployment)
    >>> registry.resolve("apps/v1", "Deployment") is Deployment
    True

    """

    def __init__(self) -> None:
        """Create an empty registry."""
        self._types: dict[KindKey, type[Resource]] = {}

    def register(self, api_version: str, kind: str, type_: type[Resource]) -> None:
        """Register ``type_`` for documents tagged ``api_version``/``kind``.

        Raises
        ------
        ValueError
            If the pair is already registered.

        """
        key = (api_version, kind)
        if key in self._types:
            msg = f"kind {kind!r} in version {api_version!r} is already registered"
            raise ValueError(msg)
        self._types[key] = type_

    def resolve(self, api_version: str, kind: str) -> type[Resource] | None:
        """Return the registered type, or None when the pair is unknown."""
        return self._types.get((api_version, kind))

    def kinds(self) -> list[KindKey]:
        """Return the registered pairs in registration order."""
        return list(self._types)

    def __contains__(self, key: object) -> bool:
        """Return True when ``key`` is a registered (apiVersion, kind) pair."""
        return key in self._types

    def __iter__(self) -> cabc.Iterator[KindKey]:
        """Iterate over the registered pairs."""
        return iter(self._types)

    def __len__(self) -> int:
        """Return the number of registered kinds."""
        return len(self._types)


def default_registry() -> SchemaRegistry:
    """Return a new registry seeded with the core workload and config kinds."""
    registry = SchemaRegistry()
    for api_version, kind, type_ in DEFAULT_KINDS:
        registry.register(api_version, kind, type_)
    return registry


__all__ = ["DEFAULT_KINDS", "KindKey", "SchemaRegistry", "default_registry"]
