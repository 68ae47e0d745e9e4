from __future__ import annotations

from typing import Any


class ByNameError(Exception):
    """Represent a base class for all byname-specific failures.

    Catch this type when you want to handle any byname error path without
    matching each concrete exception class individually.
    """


class ByNameInvalidRegistrationError(ByNameError):
    """Signal invalid named-registration input.

    Raised by ``ServicesByNameBuilder`` and ``TypedServicesByNameBuilder`` when
    a name is not a non-empty string, when the abstraction is not a class, or
    when the implementation passed to the typed builder is not a class.
    """


class ByNameInvalidImplementationError(ByNameInvalidRegistrationError):
    """Signal that an implementation does not satisfy its abstraction.

    Raised by ``ServicesByNameBuilder.add`` when ``implementation_type`` is not
    a subclass of the abstraction (or, for protocols, lacks one of its
    methods). The registration is not inserted.

    Typical fixes include inheriting from the abstraction or implementing the
    missing protocol methods.
    """

    def __init__(self, service_type: Any, implementation_type: Any) -> None:
        self.service_type = service_type
        self.implementation_type = implementation_type
        super().__init__(
            f"Provided implementation {_describe(implementation_type)} "
            f"does not implement {_describe(service_type)}",
        )


class ByNameDuplicateNameError(ByNameInvalidRegistrationError):
    """Signal that a name is registered twice for the same abstraction.

    Names are unique within one registration set. The existing mapping is kept
    and the second registration is rejected rather than overwriting it.
    """

    def __init__(self, name: str, existing_type: Any, service_type: Any = None) -> None:
        self.name = name
        self.existing_type = existing_type
        self.service_type = service_type
        target = "" if service_type is None else f" for {_describe(service_type)}"
        super().__init__(
            f"Service name '{name}' is already registered{target} "
            f"with {_describe(existing_type)}",
        )


class ByNameRegistrationsFrozenError(ByNameError):
    """Signal mutation of a registration map that was frozen by ``build()``.

    Factories installed into a container hold frozen snapshots. Add further
    names through the builder and call ``build()`` again instead.
    """


class ByNameUnregisteredNameError(ByNameError):
    """Signal that a requested name was never registered.

    Raised by ``IServiceByNameFactory.get_by_name`` and
    ``get_object_by_name``. The requested name is kept on ``name``.
    """

    def __init__(self, name: str, service_type: Any = None) -> None:
        self.name = name
        self.service_type = service_type
        super().__init__(f"Service name '{name}' is not registered")


def _describe(value: Any) -> str:
    qualname = getattr(value, "__qualname__", None)
    if isinstance(value, type) and qualname is not None:
        return f"{value.__module__}.{qualname}"
    return repr(value)
