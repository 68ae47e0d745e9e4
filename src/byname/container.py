from __future__ import annotations

import logging
from typing import Any, Literal, TypeVar, cast

from diwire import Container, Lifetime

from byname.builder import ServicesByNameBuilder, TypedServicesByNameBuilder
from byname.container_interface import ServiceFactory
from byname.exceptions import ByNameInvalidRegistrationError
from byname.factory import IServiceByNameFactory, named_factory_key
from byname.settings import NameBuilderSettings

T = TypeVar("T")

logger = logging.getLogger(__name__)


class NamedServices:
    """Expose a diwire ``Container`` as the registrar and resolver of named services.

    Construction, dependency injection, lifetimes and autoregistration all stay
    with the wrapped container. Implementations added by name still have to be
    resolvable from it, either registered (``add_concrete``) or autoregistered.

    Examples:
        .. code-block:: python

            container = Container()
            services = NamedServices(container)
            services.add_by_name(Shape).add("circle", Circle).build()

            circle = services.get_by_name(Shape, "circle")

    """

    def __init__(self, container: Container | None = None) -> None:
        """Wrap ``container``, or a new default ``Container`` when omitted."""
        self._container = container if container is not None else Container()

    @property
    def container(self) -> Container:
        return self._container

    def register(
        self,
        key: Any,
        factory: ServiceFactory,
        /,
        *,
        lifetime: Lifetime | Literal["from_container"] = "from_container",
    ) -> None:
        """Register ``factory`` as the container provider of ``key``.

        ``factory`` is called lazily by the container, with this object as its
        ``ServiceResolver``. Errors raised by the container propagate unchanged.

        Args:
            key: Dependency key.
            factory: Callable receiving a ``ServiceResolver``.
            lifetime: Provider lifetime, or ``"from_container"``.

        Raises:
            ByNameInvalidRegistrationError: If ``factory`` is not callable.

        """
        if not callable(factory):
            msg = f"Factory for {key!r} must be callable, got {factory!r}"
            raise ByNameInvalidRegistrationError(msg)
        self._container.add_factory(lambda: factory(self), provides=key, lifetime=lifetime)
        logger.debug("Registered provider for %r", key)

    def resolve(self, key: Any, /) -> Any:
        return self._container.resolve(key)

    def add_by_name(
        self,
        service_type: Any,
        settings: NameBuilderSettings | None = None,
    ) -> ServicesByNameBuilder:
        """Start named registrations of ``service_type`` backed by the container."""
        return ServicesByNameBuilder(self, service_type, settings)

    def add_typed_by_name(
        self,
        service_type: type[T],
        settings: NameBuilderSettings | None = None,
    ) -> TypedServicesByNameBuilder[T]:
        """Start strongly typed named registrations of ``service_type``."""
        return TypedServicesByNameBuilder(self, service_type, settings)

    def get_by_name(self, service_type: type[T], name: str) -> T:
        """Resolve the named factory for ``service_type`` and return ``name`` from it."""
        factory = cast("IServiceByNameFactory[T]", self.resolve(named_factory_key(service_type)))
        return factory.get_by_name(name)


__all__ = ["NamedServices"]
