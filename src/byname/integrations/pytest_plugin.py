from __future__ import annotations

import pytest
from diwire import Container

from byname.container import NamedServices


@pytest.fixture()
def byname_container() -> Container:
    """Create a per-test diwire container for named registrations.

    Enable with ``pytest_plugins = ["byname.integrations.pytest_plugin"]``. The
    fixture is function-scoped, so registrations are isolated between tests
    unless users override it.

    Returns:
        A new ``Container`` instance.

    """
    return Container()


@pytest.fixture()
def byname_services(byname_container: Container) -> NamedServices:
    """Wrap ``byname_container`` so builders can register named factories into it."""
    return NamedServices(byname_container)
