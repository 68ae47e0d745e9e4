from __future__ import annotations

import types
from typing import Any, TypeGuard, get_origin

from typing_extensions import get_protocol_members, is_protocol


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def is_abstraction(candidate: object) -> bool:
    """Return true when candidate can act as the contract of a named registration.

    Classes, ABCs, protocols, and parametrized generics such as ``Repo[int]``
    qualify.

    Args:
        candidate: Value being checked.

    """
    return is_runtime_class(candidate) or is_runtime_class(get_origin(candidate))


def implements(implementation_type: object, service_type: Any) -> bool:
    """Return whether ``implementation_type`` satisfies the ``service_type`` contract.

    Classes and ABCs are checked nominally with ``issubclass``. Protocols are
    checked structurally against their methods: each must be a callable
    attribute of the implementation class. Protocol data members are not
    checked, since implementations commonly set them in ``__init__``.
    Parametrized generics are checked against their origin class.

    Args:
        implementation_type: Candidate implementation class.
        service_type: Abstraction the implementation must satisfy.

    Returns:
        ``True`` when the contract is satisfied, ``False`` otherwise (including
        when ``implementation_type`` is not a class).

    """
    if not is_runtime_class(implementation_type):
        return False

    target = get_origin(service_type) or service_type
    if not is_runtime_class(target):
        return False

    if is_protocol(target):
        if issubclass_safe(implementation_type, target):
            return True
        return all(
            callable(getattr(implementation_type, member, None))
            for member in protocol_methods(target)
        )

    return issubclass_safe(implementation_type, target)


def protocol_methods(protocol: type[Any]) -> frozenset[str]:
    """Return the members of ``protocol`` that are methods rather than data members."""
    return frozenset(
        member
        for member in get_protocol_members(protocol)
        if callable(getattr(protocol, member, None))
    )


def issubclass_safe(candidate: type[Any], target: type[Any]) -> bool:
    try:
        return issubclass(candidate, target)
    except TypeError:
        # non-runtime protocols and protocols with data members reject issubclass()
        return False


__all__ = ["implements", "is_abstraction", "is_runtime_class", "issubclass_safe", "protocol_methods"]
