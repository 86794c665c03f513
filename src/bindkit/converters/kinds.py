"""Enumeration of the converter shapes shipped with bindkit."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from .base import ConditionConverter
from .variants import (
    BooleanConditionConverter,
    ComparisonConditionConverter,
    FlagConditionConverter,
    MembershipConditionConverter,
    NullConditionConverter,
)


class ConverterKind(Enum):
    """Known condition converter shapes."""

    BOOLEAN = "boolean"
    NULL = "null"
    COMPARISON = "comparison"
    MEMBERSHIP = "membership"
    FLAG = "flag"

    def create(self, result_type: type = object, **options: Any) -> ConditionConverter[Any]:
        """Build a converter of this kind producing ``result_type`` values.

        ``options`` are forwarded to the converter constructor, e.g.
        ``operator``/``reference`` for comparisons or ``values`` for
        membership tests.
        """
        factory = _FACTORIES[self]
        return factory(result_type, **options)

    @classmethod
    def parse(cls, value: "ConverterKind | str") -> "ConverterKind":
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if member.value == text:
                return member
        raise ValueError(f"Unknown converter kind '{value}'")


_FACTORIES: dict[ConverterKind, Callable[..., ConditionConverter[Any]]] = {
    ConverterKind.BOOLEAN: BooleanConditionConverter,
    ConverterKind.NULL: NullConditionConverter,
    ConverterKind.COMPARISON: ComparisonConditionConverter,
    ConverterKind.MEMBERSHIP: MembershipConditionConverter,
    ConverterKind.FLAG: FlagConditionConverter,
}


__all__ = ["ConverterKind"]
