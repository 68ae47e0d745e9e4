from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class NameBuilderSettings:
    """Configure how a named-registration builder compares names.

    The comparison policy is fixed when the builder is created and applies to
    every name added to it and every name looked up through the factories it
    builds.

    Examples:
        .. code-block:: python

            builder = container.add_by_name(
                Shape,
                NameBuilderSettings(case_insensitive_names=True),
            )

    """

    case_insensitive_names: bool = False
    """Match names ignoring case (``"Circle"`` and ``"circle"`` are one name)."""


DEFAULT_SETTINGS = NameBuilderSettings()
