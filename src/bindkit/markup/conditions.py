"""Markup extensions that provide condition converters."""

from __future__ import annotations

import enum
from abc import abstractmethod
from typing import Any, Iterable

from ..converters.base import ConditionConverter
from ..converters.kinds import ConverterKind
from ..converters.variants import Comparison
from ..core.coercion import CoercionRegistry, build_default_registry
from ..core.types import TypeResolver
from ..resolver import ConditionResolver, ResolutionRequest
from ..services.settings import Settings
from .extension import MarkupExtension


class ConditionExtension(MarkupExtension):
    """Provides a converter associating a value with each outcome of a condition.

    Attributes:
        type: Type of the two associated values, as a type or a type name.
        if_true: Value returned when the condition holds. When ``type`` is
            not given (or is ``bool``) and neither value is set, ``True`` is
            used.
        if_false: Value returned otherwise; ``False`` under the same rule.
    """

    def __init__(
        self,
        *,
        type: type | str | None = None,
        if_true: Any = None,
        if_false: Any = None,
    ) -> None:
        super().__init__()
        self.type = type
        self.if_true = if_true
        self.if_false = if_false

    def _provide_value(self, target_object: Any, target_property: Any) -> ConditionConverter[Any]:
        declared_type = self._declared_type()
        request = ResolutionRequest(declared_type, self.if_true, self.if_false)
        return _ExtensionResolver(self, self._registry()).resolve(request)

    def _declared_type(self) -> type | None:
        if self.type is None:
            return None
        settings = self._settings()
        if isinstance(self.type, str) and settings is not None and settings.type_aliases:
            # Aliases from settings take precedence over the provider's resolver.
            configured = {name.strip().lower() for name in settings.type_aliases}
            if self.type.strip().lower() in configured:
                return TypeResolver(settings.type_aliases).resolve(self.type)
        return self.resolve_type(self.type)

    def _settings(self) -> Settings | None:
        provider = self.service_provider
        if provider is None:
            return None
        return provider.get_service(Settings)

    def _registry(self) -> CoercionRegistry:
        provider = self.service_provider
        if provider is not None:
            registry = provider.get_service(CoercionRegistry)
            if registry is not None:
                return registry
        settings = self._settings()
        if settings is not None:
            return build_default_registry(settings)
        return build_default_registry()

    @abstractmethod
    def create_condition_converter(self, result_type: type) -> ConditionConverter[Any]:
        """Return an unpopulated converter producing ``result_type`` values."""


class _ExtensionResolver(ConditionResolver):
    def __init__(self, extension: ConditionExtension, registry: CoercionRegistry) -> None:
        super().__init__(registry)
        self._extension = extension

    def create_converter(self, result_type: type) -> ConditionConverter[Any]:
        return self._extension.create_condition_converter(result_type)


class IsTrueExtension(ConditionExtension):
    def create_condition_converter(self, result_type: type) -> ConditionConverter[Any]:
        return ConverterKind.BOOLEAN.create(result_type)


class IsNullExtension(ConditionExtension):
    def create_condition_converter(self, result_type: type) -> ConditionConverter[Any]:
        return ConverterKind.NULL.create(result_type)


class CompareExtension(ConditionExtension):
    """Compares the bound value against ``value`` using ``operator``."""

    def __init__(
        self,
        *,
        operator: Comparison | str = Comparison.EQUAL,
        value: Any = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.operator = Comparison.parse(operator)
        self.value = value

    def create_condition_converter(self, result_type: type) -> ConditionConverter[Any]:
        return ConverterKind.COMPARISON.create(result_type, operator=self.operator, reference=self.value)


class InListExtension(ConditionExtension):
    """Holds when the bound value is one of ``values``."""

    def __init__(self, *, values: Iterable[Any] = (), **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.values = tuple(values)

    def create_condition_converter(self, result_type: type) -> ConditionConverter[Any]:
        return ConverterKind.MEMBERSHIP.create(result_type, values=self.values)


class HasFlagExtension(ConditionExtension):
    """Holds when the bound value has every bit of ``flag`` set."""

    def __init__(self, *, flag: enum.Flag | int = 0, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.flag = flag

    def create_condition_converter(self, result_type: type) -> ConditionConverter[Any]:
        return ConverterKind.FLAG.create(result_type, flag=self.flag)


__all__ = [
    "CompareExtension",
    "ConditionExtension",
    "HasFlagExtension",
    "InListExtension",
    "IsNullExtension",
    "IsTrueExtension",
]
