"""Condition converters and the kinds that build them."""

from .base import ConditionConverter
from .kinds import ConverterKind
from .variants import (
    BooleanConditionConverter,
    Comparison,
    ComparisonConditionConverter,
    FlagConditionConverter,
    MembershipConditionConverter,
    NullConditionConverter,
)

__all__ = [
    "BooleanConditionConverter",
    "Comparison",
    "ComparisonConditionConverter",
    "ConditionConverter",
    "ConverterKind",
    "FlagConditionConverter",
    "MembershipConditionConverter",
    "NullConditionConverter",
]
