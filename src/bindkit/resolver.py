"""Resolution of two candidate values into a condition converter.

A UI description declares an optional type and two optional literals. The
resolver coerces the literals, applies the boolean defaults, asks a factory
for a converter and installs the results on it::

    converter = resolve(ResolutionRequest(int, "1", "0"))
    converter.convert(True)   # -> 1
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from .converters.base import ConditionConverter
from .converters.kinds import ConverterKind
from .core.coercion import CoercionRegistry, build_default_registry
from .core.errors import InvalidSpecializationError

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ResolutionRequest:
    """Inputs for a single binding instantiation.

    Attributes:
        declared_type: Type the two values are coerced into, or ``None``.
        true_value: Raw value used when the condition holds.
        false_value: Raw value used when it does not.
    """

    declared_type: type | None = None
    true_value: Any = None
    false_value: Any = None


@dataclass(slots=True, frozen=True)
class ResolvedPair:
    """The two values installed on a converter."""

    true_result: Any
    false_result: Any

    @classmethod
    def from_converter(cls, converter: ConditionConverter[Any]) -> "ResolvedPair":
        return cls(converter.if_true, converter.if_false)


class ConditionResolver(ABC):
    """Builds populated condition converters from resolution requests.

    Subclasses decide which converter shape is produced by implementing
    :meth:`create_converter`. The resolver keeps no per-call state, so a
    single instance may serve any number of requests.
    """

    def __init__(self, registry: CoercionRegistry | None = None) -> None:
        self._registry = registry if registry is not None else build_default_registry()

    @property
    def registry(self) -> CoercionRegistry:
        return self._registry

    def resolve(self, request: ResolutionRequest) -> ConditionConverter[Any]:
        """Return a converter holding the resolved values of ``request``.

        Raises:
            UnsupportedTypeError: No strategy exists for the declared type.
            ValueConversionError: A raw value is not valid for the declared type.
            InvalidSpecializationError: :meth:`create_converter` returned an
                object that is not a matching :class:`ConditionConverter`.
        """
        pair = self.resolve_pair(request)
        result_type = request.declared_type or object

        converter = self.create_converter(result_type)
        if not isinstance(converter, ConditionConverter):
            raise InvalidSpecializationError.for_object(converter, expected_type=result_type)
        actual_type = getattr(converter, "result_type", None)
        if actual_type is not result_type:
            raise InvalidSpecializationError.for_result_type(converter, actual_type, result_type)

        converter.if_true = pair.true_result
        converter.if_false = pair.false_result
        LOGGER.debug("Resolved %r into %r", request, converter)
        return converter

    def resolve_pair(self, request: ResolutionRequest) -> ResolvedPair:
        """Compute the values :meth:`resolve` installs, without building a converter."""

        declared_type = request.declared_type
        if_true = request.true_value
        if_false = request.false_value

        if declared_type is not None:
            strategy = self._registry.lookup(declared_type)
            if_true = strategy.convert_from(request.true_value)
            if_false = strategy.convert_from(request.false_value)

        # Checks the raw inputs; overrides whatever coercion produced above.
        if (
            (declared_type is None or declared_type is bool)
            and request.true_value is None
            and request.false_value is None
        ):
            LOGGER.debug("No values supplied; defaulting to True/False")
            if_true = True
            if_false = False

        return ResolvedPair(if_true, if_false)

    @abstractmethod
    def create_converter(self, result_type: type) -> ConditionConverter[Any]:
        """Return an unpopulated converter producing ``result_type`` values."""


class KindResolver(ConditionResolver):
    """Resolver producing converters of a fixed :class:`ConverterKind`."""

    def __init__(
        self,
        kind: ConverterKind | str = ConverterKind.BOOLEAN,
        registry: CoercionRegistry | None = None,
        **options: Any,
    ) -> None:
        super().__init__(registry)
        self.kind = ConverterKind.parse(kind)
        self._options = dict(options)

    def create_converter(self, result_type: type) -> ConditionConverter[Any]:
        return self.kind.create(result_type, **self._options)


def resolve(
    request: ResolutionRequest,
    kind: ConverterKind | str = ConverterKind.BOOLEAN,
    *,
    registry: CoercionRegistry | None = None,
    **options: Any,
) -> ConditionConverter[Any]:
    """Resolve ``request`` into a converter of the given ``kind``."""

    return KindResolver(kind, registry, **options).resolve(request)


__all__ = [
    "ConditionResolver",
    "KindResolver",
    "ResolutionRequest",
    "ResolvedPair",
    "resolve",
]
