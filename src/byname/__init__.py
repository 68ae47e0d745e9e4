from byname.builder import ServicesByNameBuilder, TypedServicesByNameBuilder
from byname.container import NamedServices
from byname.container_interface import ServiceFactory, ServiceRegistrar, ServiceResolver
from byname.exceptions import (
    ByNameDuplicateNameError,
    ByNameError,
    ByNameInvalidImplementationError,
    ByNameInvalidRegistrationError,
    ByNameRegistrationsFrozenError,
    ByNameUnregisteredNameError,
)
from byname.factory import IServiceByNameFactory, ServiceByNameFactory, named_factory_key
from byname.registrations import NameRegistrations
from byname.settings import NameBuilderSettings

__all__ = [
    "ByNameDuplicateNameError",
    "ByNameError",
    "ByNameInvalidImplementationError",
    "ByNameInvalidRegistrationError",
    "ByNameRegistrationsFrozenError",
    "ByNameUnregisteredNameError",
    "IServiceByNameFactory",
    "NameBuilderSettings",
    "NameRegistrations",
    "NamedServices",
    "ServiceByNameFactory",
    "ServiceFactory",
    "ServiceRegistrar",
    "ServiceResolver",
    "ServicesByNameBuilder",
    "TypedServicesByNameBuilder",
    "named_factory_key",
]
