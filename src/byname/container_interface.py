from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeAlias, runtime_checkable


@runtime_checkable
class ServiceResolver(Protocol):
    """Resolve a dependency key to an instance.

    This is the only capability a named factory needs from a container. Any
    failure the container raises is passed through to the caller unchanged.
    """

    def resolve(self, key: Any, /) -> Any:
        """Return an instance for ``key``."""
        ...


ServiceFactory: TypeAlias = Callable[[ServiceResolver], Any]
"""Deferred constructor invoked by the container with its resolve capability."""


@runtime_checkable
class ServiceRegistrar(Protocol):
    """Install a lazily invoked factory function under a dependency key.

    The container decides when to call ``factory`` (typically on first
    request) and passes its own ``ServiceResolver`` to it.
    """

    def register(self, key: Any, factory: ServiceFactory, /) -> Any:
        """Register ``factory`` as the provider of ``key``."""
        ...


__all__ = ["ServiceFactory", "ServiceRegistrar", "ServiceResolver"]
