"""Core domain types: errors, colors, coercion and type names."""

from .coercion import CoercionRegistry, CoercionStrategy, build_default_registry
from .colors import Color, normalize_color
from .errors import (
    BindingError,
    ErrorCode,
    InvalidSpecializationError,
    MissingServiceError,
    UnknownTypeNameError,
    UnsupportedTypeError,
    ValueConversionError,
)
from .types import TypeResolver

__all__ = [
    "BindingError",
    "CoercionRegistry",
    "CoercionStrategy",
    "Color",
    "ErrorCode",
    "InvalidSpecializationError",
    "MissingServiceError",
    "TypeResolver",
    "UnknownTypeNameError",
    "UnsupportedTypeError",
    "ValueConversionError",
    "build_default_registry",
    "normalize_color",
]
