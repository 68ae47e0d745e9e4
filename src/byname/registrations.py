from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from byname.exceptions import (
    ByNameDuplicateNameError,
    ByNameInvalidRegistrationError,
    ByNameRegistrationsFrozenError,
)


class NameRegistrations(Mapping[str, type[Any]]):
    """Map service names to implementation types under one comparison policy.

    Keys are unique under the policy: with ``case_insensitive=True`` the names
    ``"Circle"`` and ``"CIRCLE"`` collide. Iteration yields names as they were
    first spelled.

    A map is mutable until ``freeze()`` produces a frozen copy. Builders keep
    the mutable map and hand frozen copies to the factories they install.
    """

    __slots__ = ("_case_insensitive", "_entries", "_frozen", "_service_type")

    def __init__(
        self,
        *,
        case_insensitive: bool = False,
        service_type: Any = None,
    ) -> None:
        self._case_insensitive = case_insensitive
        self._service_type = service_type
        # normalized name -> (name as added, implementation type)
        self._entries: dict[str, tuple[str, type[Any]]] = {}
        self._frozen = False

    @property
    def case_insensitive(self) -> bool:
        return self._case_insensitive

    @property
    def frozen(self) -> bool:
        return self._frozen

    def add(self, name: str, implementation_type: type[Any]) -> None:
        """Insert ``name`` without ever overwriting an existing entry.

        Args:
            name: Service name, a non-empty string.
            implementation_type: Type resolved from the container for ``name``.

        Raises:
            ByNameInvalidRegistrationError: If ``name`` is not a non-empty string.
            ByNameDuplicateNameError: If ``name`` is already present.
            ByNameRegistrationsFrozenError: If the map is frozen.

        """
        if self._frozen:
            msg = f"Cannot add service name '{name}': registrations are frozen"
            raise ByNameRegistrationsFrozenError(msg)
        key = self._normalize(name)
        existing = self._entries.get(key)
        if existing is not None:
            raise ByNameDuplicateNameError(name, existing[1], self._service_type)
        self._entries[key] = (name, implementation_type)

    def freeze(self) -> NameRegistrations:
        """Return a frozen copy that later ``add`` calls on this map do not affect."""
        frozen = NameRegistrations(
            case_insensitive=self._case_insensitive,
            service_type=self._service_type,
        )
        frozen._entries = dict(self._entries)
        frozen._frozen = True
        return frozen

    def __getitem__(self, name: str) -> type[Any]:
        if not isinstance(name, str):
            raise KeyError(name)
        return self._entries[self._fold(name)][1]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._fold(name) in self._entries

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        items = ", ".join(
            f"{name!r}: {implementation.__qualname__}"
            for name, implementation in self._entries.values()
        )
        return f"{type(self).__name__}({{{items}}}, case_insensitive={self._case_insensitive})"

    def _normalize(self, name: object) -> str:
        if not isinstance(name, str) or not name:
            msg = f"Service name must be a non-empty string, got {name!r}"
            raise ByNameInvalidRegistrationError(msg)
        return self._fold(name)

    def _fold(self, name: str) -> str:
        return name.lower() if self._case_insensitive else name


__all__ = ["NameRegistrations"]
