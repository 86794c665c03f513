"""Standardized error types for condition resolution.

This module provides a hierarchy of error classes with consistent
dictionary serialization so hosts can surface them to UI description
authors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Mapping


# -----------------------------------------------------------------------------
# Error Code Constants
# -----------------------------------------------------------------------------

class ErrorCode:
    """Constants for error codes carried by binding errors."""

    # Configuration errors made by description authors
    UNSUPPORTED_TYPE = "unsupported_type"
    VALUE_CONVERSION = "value_conversion"
    UNKNOWN_TYPE_NAME = "unknown_type_name"
    MISSING_SERVICE = "missing_service"

    # Programmer errors in extensions
    INVALID_SPECIALIZATION = "invalid_specialization"

    # General errors
    INTERNAL_ERROR = "internal_error"


def describe_type(target: Any) -> str:
    """Return a readable name for a type (or the type of a non-type value)."""

    if target is None:
        return "None"
    if not isinstance(target, type):
        target = type(target)
    module = getattr(target, "__module__", "")
    name = getattr(target, "__qualname__", None) or getattr(target, "__name__", repr(target))
    if module in ("", "builtins"):
        return name
    return f"{module}.{name}"


# -----------------------------------------------------------------------------
# Base Error Class
# -----------------------------------------------------------------------------

@dataclass
class BindingError(Exception):
    """Base exception class for all binding errors.

    Attributes:
        error_code: Machine-readable error identifier.
        message: Human-readable error description.
        details: Additional structured error information.
        suggestion: Actionable guidance for recovery.
    """

    error_code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    severity: ClassVar[str] = "error"

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dictionary."""
        result: dict[str, Any] = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = dict(self.details)
        if self.suggestion:
            result["suggestion"] = self.suggestion
        return result

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# -----------------------------------------------------------------------------
# Configuration Errors
# -----------------------------------------------------------------------------

@dataclass
class UnsupportedTypeError(BindingError):
    """Raised when no coercion strategy is registered for a declared type."""

    error_code: str = field(default=ErrorCode.UNSUPPORTED_TYPE)
    message: str = field(default="No coercion strategy is registered for the declared type")
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = field(default="Register a CoercionStrategy for the type or declare a supported type")

    target_type: str | None = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.target_type is not None:
            result["target_type"] = self.target_type
        return result

    @classmethod
    def for_type(cls, target_type: Any) -> "UnsupportedTypeError":
        name = describe_type(target_type)
        return cls(
            message=f"No coercion strategy is registered for type '{name}'",
            target_type=name,
        )


@dataclass
class ValueConversionError(BindingError):
    """Raised when a raw value cannot be coerced into the declared type."""

    error_code: str = field(default=ErrorCode.VALUE_CONVERSION)
    message: str = field(default="The value cannot be converted to the declared type")
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = field(default="Supply a literal that is valid for the declared type")

    value: Any = field(default=None)
    target_type: str | None = field(default=None)
    reason: str | None = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["value"] = repr(self.value)
        if self.target_type is not None:
            result["target_type"] = self.target_type
        if self.reason:
            result["reason"] = self.reason
        return result

    @classmethod
    def for_value(
        cls,
        value: Any,
        target_type: Any,
        *,
        reason: str | None = None,
    ) -> "ValueConversionError":
        name = describe_type(target_type)
        message = f"Cannot convert {value!r} to '{name}'"
        if reason:
            message = f"{message}: {reason}"
        return cls(message=message, value=value, target_type=name, reason=reason)


@dataclass
class UnknownTypeNameError(BindingError):
    """Raised when a type name cannot be resolved to a Python type."""

    error_code: str = field(default=ErrorCode.UNKNOWN_TYPE_NAME)
    message: str = field(default="The type name could not be resolved")
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = field(default="Use a built-in alias or a qualified 'package.module:Name' path")

    type_name: str | None = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.type_name is not None:
            result["type_name"] = self.type_name
        return result

    @classmethod
    def for_name(cls, type_name: str, *, reason: str | None = None) -> "UnknownTypeNameError":
        message = f"Unknown type name '{type_name}'"
        if reason:
            message = f"{message}: {reason}"
        return cls(message=message, type_name=type_name)


@dataclass
class MissingServiceError(BindingError):
    """Raised when a service provider lacks a service an extension needs."""

    error_code: str = field(default=ErrorCode.MISSING_SERVICE)
    message: str = field(default="A required service is not available")
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = field(default="Register the service on the ServiceContainer before providing values")

    service: str | None = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.service is not None:
            result["service"] = self.service
        return result

    @classmethod
    def for_service(cls, service: Any) -> "MissingServiceError":
        name = describe_type(service)
        return cls(message=f"Service provider does not supply '{name}'", service=name)


# -----------------------------------------------------------------------------
# Programmer Errors
# -----------------------------------------------------------------------------

@dataclass
class InvalidSpecializationError(BindingError):
    """Raised when a converter factory returns an object of the wrong shape.

    This signals a bug in a resolver specialization, not an authoring mistake.
    """

    error_code: str = field(default=ErrorCode.INVALID_SPECIALIZATION)
    message: str = field(default="create_converter() returned an object that is not a ConditionConverter")
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = field(default="Return a ConditionConverter whose result_type matches the requested type")

    returned_type: str | None = field(default=None)
    expected_type: str | None = field(default=None)

    severity: ClassVar[str] = "critical"

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.returned_type is not None:
            result["returned_type"] = self.returned_type
        if self.expected_type is not None:
            result["expected_type"] = self.expected_type
        return result

    @classmethod
    def for_object(cls, returned: Any, *, expected_type: Any = None) -> "InvalidSpecializationError":
        returned_name = describe_type(returned)
        expected_name = describe_type(expected_type) if expected_type is not None else None
        message = (
            "create_converter() should return a ConditionConverter "
            f"but returns a '{returned_name}'"
        )
        return cls(message=message, returned_type=returned_name, expected_type=expected_name)

    @classmethod
    def for_result_type(cls, returned: Any, actual: Any, expected: Any) -> "InvalidSpecializationError":
        returned_name = describe_type(returned)
        return cls(
            message=(
                f"create_converter() returned a '{returned_name}' producing "
                f"'{describe_type(actual)}' values, expected '{describe_type(expected)}'"
            ),
            returned_type=returned_name,
            expected_type=describe_type(expected),
        )


# -----------------------------------------------------------------------------
# Utility Functions
# -----------------------------------------------------------------------------

def error_from_dict(data: Mapping[str, Any]) -> BindingError:
    """Reconstruct a BindingError from its dictionary representation.

    Args:
        data: Dictionary with 'error' (code) and 'message' keys.

    Returns:
        BindingError instance (base class, not specific subclass).
    """
    return BindingError(
        error_code=data.get("error", ErrorCode.INTERNAL_ERROR),
        message=data.get("message", "Unknown error"),
        details=dict(data.get("details", {})),
        suggestion=data.get("suggestion", ""),
    )


__all__ = [
    "ErrorCode",
    "BindingError",
    "UnsupportedTypeError",
    "ValueConversionError",
    "UnknownTypeNameError",
    "MissingServiceError",
    "InvalidSpecializationError",
    "describe_type",
    "error_from_dict",
]
