"""Markup extension plumbing shared by all extensions.

A host template engine instantiates an extension per use site and calls
:meth:`MarkupExtension.provide_value` with a service provider. The provider
supplies the binding target and a :class:`~bindkit.core.types.TypeResolver`
for type names written by the description author.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Protocol

from ..core.errors import MissingServiceError
from ..core.types import TypeResolver


class ServiceProvider(Protocol):
    """Protocol for objects handing services to markup extensions."""

    def get_service(self, service_type: Any) -> Any | None:
        """Return the service registered under ``service_type`` or ``None``."""
        ...


@dataclass(slots=True, frozen=True)
class ProvideValueTarget:
    """The object and property an extension is providing a value for."""

    target_object: Any = None
    target_property: Any = None


class ServiceContainer:
    """Minimal :class:`ServiceProvider` keyed by service type."""

    def __init__(self, services: Dict[Any, Any] | None = None) -> None:
        self._services: Dict[Any, Any] = dict(services or {})

    def add_service(self, service_type: Any, service: Any) -> None:
        self._services[service_type] = service

    def get_service(self, service_type: Any) -> Any | None:
        return self._services.get(service_type)

    def __contains__(self, service_type: object) -> bool:
        return service_type in self._services


class MarkupExtension(ABC):
    """Base class exposing the target and type resolution to subclasses."""

    def __init__(self) -> None:
        self._type_resolver: TypeResolver | None = None
        self.service_provider: ServiceProvider | None = None

    def provide_value(self, service_provider: ServiceProvider) -> Any:
        type_resolver = service_provider.get_service(TypeResolver)
        if type_resolver is None:
            raise MissingServiceError.for_service(TypeResolver)
        target = service_provider.get_service(ProvideValueTarget)
        if target is None:
            raise MissingServiceError.for_service(ProvideValueTarget)

        self._type_resolver = type_resolver
        self.service_provider = service_provider
        return self._provide_value(target.target_object, target.target_property)

    @abstractmethod
    def _provide_value(self, target_object: Any, target_property: Any) -> Any:
        """Provide the value for ``target_property`` on ``target_object``."""

    def resolve_type(self, qualified_name: str | type) -> type:
        """Resolve a type name via the provider's :class:`TypeResolver`.

        Only available while or after :meth:`provide_value` runs.
        """
        if self._type_resolver is None:
            raise MissingServiceError.for_service(TypeResolver)
        return self._type_resolver.resolve(qualified_name)


__all__ = [
    "MarkupExtension",
    "ProvideValueTarget",
    "ServiceContainer",
    "ServiceProvider",
]
