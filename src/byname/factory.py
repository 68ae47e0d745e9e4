from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from byname.container_interface import ServiceResolver
from byname.exceptions import ByNameUnregisteredNameError
from byname.registrations import NameRegistrations

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

logger = logging.getLogger(__name__)


class IServiceByNameFactory(ABC, Generic[T_co]):
    """Provide instances of services registered under a name.

    Resolve ``IServiceByNameFactory[Shape]`` from the container to get the
    factory for the ``Shape`` abstraction. Use ``get_by_name`` where the
    abstraction is known statically and ``get_object_by_name`` when it is only
    known at runtime, for example while iterating over many abstractions.
    """

    @abstractmethod
    def get_by_name(self, name: str) -> T_co:
        """Return the instance registered under ``name``."""

    @abstractmethod
    def get_object_by_name(self, name: str) -> object:
        """Return the instance registered under ``name`` without a static type."""


def named_factory_key(service_type: Any) -> Any:
    """Return the container key a named factory for ``service_type`` is registered under.

    Args:
        service_type: Abstraction the named registrations implement.

    Returns:
        The parametrized ``IServiceByNameFactory[service_type]`` alias. Aliases
        built from the same ``service_type`` compare and hash equal.

    """
    return IServiceByNameFactory[service_type]  # type: ignore[valid-type]


class ServiceByNameFactory(IServiceByNameFactory[T]):
    """Translate a name into an implementation type and resolve it from the container.

    The factory never builds instances itself and caches nothing: each call asks
    the resolver again, so lifetimes are whatever the implementation types were
    registered with.
    """

    __slots__ = ("_registrations", "_resolver", "_service_type")

    def __init__(
        self,
        resolver: ServiceResolver,
        registrations: NameRegistrations,
        service_type: Any = None,
    ) -> None:
        self._resolver = resolver
        self._registrations = registrations
        self._service_type = service_type

    @property
    def service_type(self) -> Any:
        return self._service_type

    @property
    def names(self) -> tuple[str, ...]:
        """Registered names, as originally spelled."""
        return tuple(self._registrations)

    def get_by_name(self, name: str) -> T:
        """Return the instance registered under ``name``.

        Args:
            name: Registered service name, compared using the registration
                policy (case-sensitive unless configured otherwise).

        Raises:
            ByNameUnregisteredNameError: If ``name`` was never registered.

        """
        return self._resolve_by_name(name)

    def get_object_by_name(self, name: str) -> object:
        return self._resolve_by_name(name)

    def _resolve_by_name(self, name: str) -> Any:
        implementation_type = self._registrations.get(name)
        if implementation_type is None:
            raise ByNameUnregisteredNameError(name, self._service_type)
        logger.debug("Resolving service name '%s' as %r", name, implementation_type)
        return self._resolver.resolve(implementation_type)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(service_type={self._service_type!r}, names={self.names!r})"


__all__ = ["IServiceByNameFactory", "ServiceByNameFactory", "named_factory_key"]
