"""Shared pytest fixtures for byname tests."""

import pytest
from diwire import Container

from byname.container import NamedServices
from tests.stubs import RecordingRegistrar, RecordingResolver


@pytest.fixture()
def container() -> Container:
    """Default diwire container with auto-registration enabled."""
    return Container()


@pytest.fixture()
def services(container: Container) -> NamedServices:
    """Named-service registrar and resolver over ``container``."""
    return NamedServices(container)


@pytest.fixture()
def strict_services() -> NamedServices:
    """Named services over a container with autoregistration disabled."""
    return NamedServices(
        Container(
            autoregister_concrete_types=False,
            autoregister_dependencies=False,
        ),
    )


@pytest.fixture()
def registrar() -> RecordingRegistrar:
    return RecordingRegistrar()


@pytest.fixture()
def resolver() -> RecordingResolver:
    return RecordingResolver()
