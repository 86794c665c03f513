"""Declarative UI helpers centred on conditional value converters."""

from .converters import ConditionConverter, ConverterKind
from .core import (
    BindingError,
    CoercionRegistry,
    Color,
    InvalidSpecializationError,
    TypeResolver,
    UnsupportedTypeError,
    ValueConversionError,
    build_default_registry,
)
from .resolver import ConditionResolver, KindResolver, ResolutionRequest, ResolvedPair, resolve

__version__ = "0.1.0"

__all__ = [
    "BindingError",
    "CoercionRegistry",
    "Color",
    "ConditionConverter",
    "ConditionResolver",
    "ConverterKind",
    "InvalidSpecializationError",
    "KindResolver",
    "ResolutionRequest",
    "ResolvedPair",
    "TypeResolver",
    "UnsupportedTypeError",
    "ValueConversionError",
    "build_default_registry",
    "resolve",
    "__version__",
]
