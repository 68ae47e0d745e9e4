from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from byname.container_interface import ServiceRegistrar, ServiceResolver
from byname.exceptions import ByNameInvalidImplementationError, ByNameInvalidRegistrationError
from byname.factory import ServiceByNameFactory, named_factory_key
from byname.registrations import NameRegistrations
from byname.settings import DEFAULT_SETTINGS, NameBuilderSettings
from byname.type_checks import implements, is_abstraction, is_runtime_class

T = TypeVar("T")
C = TypeVar("C", bound=type[Any])

logger = logging.getLogger(__name__)


class ServicesByNameBuilder:
    """Collect named implementations of one abstraction and install a named factory.

    This is the type-erased builder: the abstraction is a runtime value, so it
    works when registrations are generated in a loop over many abstractions.
    Every ``add`` checks that the implementation satisfies the abstraction.

    Each implementation must also be resolvable from the container, otherwise
    ``get_by_name`` fails with the container's own error at resolution time.

    Examples:
        .. code-block:: python

            builder = ServicesByNameBuilder(container, Shape)
            builder.add("circle", Circle).add("square", Square).build()

            factory = container.resolve(IServiceByNameFactory[Shape])
            circle = factory.get_by_name("circle")

    """

    def __init__(
        self,
        registrar: ServiceRegistrar,
        service_type: Any,
        settings: NameBuilderSettings | None = None,
    ) -> None:
        """Create a builder for ``service_type``.

        Args:
            registrar: Container capability used by ``build()``.
            service_type: Abstraction all registered implementations satisfy.
            settings: Name comparison settings. Defaults to case-sensitive names.

        Raises:
            ByNameInvalidRegistrationError: If ``service_type`` is not a class or
                parametrized generic class.

        """
        if not is_abstraction(service_type):
            msg = f"Named services require a class abstraction, got {service_type!r}"
            raise ByNameInvalidRegistrationError(msg)
        resolved_settings = settings if settings is not None else DEFAULT_SETTINGS
        self._registrar = registrar
        self._service_type = service_type
        self._settings = resolved_settings
        self._registrations = NameRegistrations(
            case_insensitive=resolved_settings.case_insensitive_names,
            service_type=service_type,
        )

    @property
    def service_type(self) -> Any:
        return self._service_type

    @property
    def settings(self) -> NameBuilderSettings:
        return self._settings

    @property
    def registrations(self) -> NameRegistrations:
        return self._registrations

    def add(self, name: str, implementation_type: type[Any]) -> ServicesByNameBuilder:
        """Map ``name`` to ``implementation_type``.

        Args:
            name: Service name, unique within this builder.
            implementation_type: Class satisfying the builder abstraction.

        Returns:
            This builder, for chained calls.

        Raises:
            ByNameInvalidImplementationError: If ``implementation_type`` does not
                satisfy the abstraction. Nothing is inserted.
            ByNameDuplicateNameError: If ``name`` is already registered.

        """
        if not implements(implementation_type, self._service_type):
            raise ByNameInvalidImplementationError(self._service_type, implementation_type)
        self._add(name, implementation_type)
        return self

    def build(self) -> None:
        """Register ``IServiceByNameFactory[service_type]`` with the container.

        The registrations are frozen into a snapshot shared by every factory the
        container creates from this registration. No factory is created here;
        the container invokes the registered function when the factory is first
        requested. Errors raised by the container's ``register`` propagate.
        """
        registrations = self._registrations.freeze()
        service_type = self._service_type

        def create_factory(resolver: ServiceResolver) -> ServiceByNameFactory[Any]:
            return ServiceByNameFactory(resolver, registrations, service_type)

        self._registrar.register(named_factory_key(service_type), create_factory)
        logger.debug(
            "Registered named factory for %r with names %s",
            service_type,
            list(registrations),
        )

    def _add(self, name: str, implementation_type: type[Any]) -> None:
        self._registrations.add(name, implementation_type)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._service_type!r}, {self._registrations!r})"


class TypedServicesByNameBuilder(ServicesByNameBuilder, Generic[T]):
    """Strongly typed builder for an abstraction known statically.

    ``add`` only accepts ``type[T]``, so the contract is checked by static type
    checkers and no runtime contract check is performed. ``register`` provides
    the decorator form that takes the implementation from the decorated class.

    Examples:
        .. code-block:: python

            shapes = TypedServicesByNameBuilder(container, Shape)

            @shapes.register("circle")
            class Circle(Shape): ...

            shapes.build()

    """

    def __init__(
        self,
        registrar: ServiceRegistrar,
        service_type: type[T],
        settings: NameBuilderSettings | None = None,
    ) -> None:
        super().__init__(registrar, service_type, settings)

    def add(self, name: str, implementation_type: type[T]) -> TypedServicesByNameBuilder[T]:  # type: ignore[override]
        """Map ``name`` to ``implementation_type`` without a runtime contract check.

        Raises:
            ByNameInvalidRegistrationError: If ``implementation_type`` is not a class.
            ByNameDuplicateNameError: If ``name`` is already registered.

        """
        if not is_runtime_class(implementation_type):
            msg = f"Implementation for service name '{name}' must be a class, got {implementation_type!r}"
            raise ByNameInvalidRegistrationError(msg)
        self._add(name, implementation_type)
        return self

    def register(self, name: str) -> Callable[[C], C]:
        """Return a class decorator that adds the decorated class under ``name``.

        Args:
            name: Service name for the decorated implementation.

        Returns:
            A decorator returning the class unchanged.

        """

        def decorator(implementation_type: C) -> C:
            self.add(name, implementation_type)
            return implementation_type

        return decorator


__all__ = ["ServicesByNameBuilder", "TypedServicesByNameBuilder"]
