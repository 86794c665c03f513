"""Markup extensions for declarative UI descriptions."""

from .conditions import (
    CompareExtension,
    ConditionExtension,
    HasFlagExtension,
    InListExtension,
    IsNullExtension,
    IsTrueExtension,
)
from .extension import MarkupExtension, ProvideValueTarget, ServiceContainer, ServiceProvider

__all__ = [
    "CompareExtension",
    "ConditionExtension",
    "HasFlagExtension",
    "InListExtension",
    "IsNullExtension",
    "IsTrueExtension",
    "MarkupExtension",
    "ProvideValueTarget",
    "ServiceContainer",
    "ServiceProvider",
]
