from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, cast

from byname.container_interface import ServiceResolver
from byname.exceptions import ByNameUnregisteredNameError
from byname.factory import IServiceByNameFactory, named_factory_key

try:
    from fastapi import HTTPException, status
except ModuleNotFoundError as exc:  # pragma: no cover - exercised in optional import scenarios
    message = "FastAPI integration requires fastapi. Install with 'diwire-byname[fastapi]'."
    raise ModuleNotFoundError(message) from exc


def by_name_dependency(
    container: ServiceResolver,
    service_type: Any,
    *,
    parameter: str = "name",
) -> Callable[..., Any]:
    """Build a FastAPI dependency that resolves a named service from a request parameter.

    The returned callable declares a single ``str`` parameter called
    ``parameter``. FastAPI binds it to the path parameter of that name when the
    route declares one, otherwise to a query parameter.

    Args:
        container: Container holding the ``IServiceByNameFactory[service_type]``
            registration.
        service_type: Abstraction the named registrations implement.
        parameter: Request parameter carrying the service name.

    Returns:
        A dependency callable for ``fastapi.Depends``. Unregistered names are
        answered with ``404 Not Found``.

    Examples:
        .. code-block:: python

            ShapeByKind = Depends(by_name_dependency(container, Shape, parameter="kind"))

            @app.get("/shapes/{kind}")
            def describe(shape: Shape = ShapeByKind) -> dict[str, str]:
                return {"kind": shape.kind}

    """
    if not parameter.isidentifier():
        msg = f"Dependency parameter must be a valid identifier, got {parameter!r}"
        raise ValueError(msg)

    def dependency(**kwargs: str) -> Any:
        name = kwargs[parameter]
        factory = cast("IServiceByNameFactory[Any]", container.resolve(named_factory_key(service_type)))
        try:
            return factory.get_object_by_name(name)
        except ByNameUnregisteredNameError as error:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error)) from error

    dependency.__signature__ = inspect.Signature(  # type: ignore[attr-defined]
        parameters=[
            inspect.Parameter(parameter, inspect.Parameter.KEYWORD_ONLY, annotation=str),
        ],
    )
    dependency.__name__ = f"{getattr(service_type, '__name__', 'service')}_by_{parameter}"
    return dependency


__all__ = ["by_name_dependency"]
