"""Concrete condition converters."""

from __future__ import annotations

import enum
import operator
from typing import Any, Callable, Iterable

from .base import ConditionConverter, T


class Comparison(enum.Enum):
    """Comparison operators usable by :class:`ComparisonConditionConverter`."""

    EQUAL = "=="
    NOT_EQUAL = "!="
    LESS = "<"
    LESS_OR_EQUAL = "<="
    GREATER = ">"
    GREATER_OR_EQUAL = ">="

    @property
    def function(self) -> Callable[[Any, Any], bool]:
        return _OPERATOR_FUNCTIONS[self]

    @classmethod
    def parse(cls, value: "Comparison | str") -> "Comparison":
        """Accept a member, its symbol (``"<="``) or its name (``"less_or_equal"``)."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for member in cls:
            if member.value == text:
                return member
        key = text.upper().replace("-", "_").replace(" ", "_")
        if key in cls.__members__:
            return cls.__members__[key]
        if key == "=":
            return cls.EQUAL
        raise ValueError(f"Unknown comparison operator '{value}'")


_OPERATOR_FUNCTIONS: dict[Comparison, Callable[[Any, Any], bool]] = {
    Comparison.EQUAL: operator.eq,
    Comparison.NOT_EQUAL: operator.ne,
    Comparison.LESS: operator.lt,
    Comparison.LESS_OR_EQUAL: operator.le,
    Comparison.GREATER: operator.gt,
    Comparison.GREATER_OR_EQUAL: operator.ge,
}


class BooleanConditionConverter(ConditionConverter[T]):
    """Holds when the value is truthy."""

    def evaluate(self, value: Any) -> bool:
        return bool(value)


class NullConditionConverter(ConditionConverter[T]):
    """Holds when the value is ``None``."""

    def evaluate(self, value: Any) -> bool:
        return value is None


class ComparisonConditionConverter(ConditionConverter[T]):
    """Holds when ``value <operator> reference`` is true.

    Values that cannot be ordered against the reference never satisfy the
    condition.
    """

    def __init__(
        self,
        result_type: type = object,
        *,
        operator: Comparison | str = Comparison.EQUAL,
        reference: Any = None,
    ) -> None:
        super().__init__(result_type)
        self.operator = Comparison.parse(operator)
        self.reference = reference

    def evaluate(self, value: Any) -> bool:
        try:
            return bool(self.operator.function(value, self.reference))
        except TypeError:
            return False


class MembershipConditionConverter(ConditionConverter[T]):
    """Holds when the value is one of ``values``."""

    def __init__(self, result_type: type = object, *, values: Iterable[Any] = ()) -> None:
        super().__init__(result_type)
        self.values: tuple[Any, ...] = tuple(values)

    def evaluate(self, value: Any) -> bool:
        return value in self.values


class FlagConditionConverter(ConditionConverter[T]):
    """Holds when every bit of ``flag`` is set on the value."""

    def __init__(self, result_type: type = object, *, flag: enum.Flag | int = 0) -> None:
        super().__init__(result_type)
        self.flag = flag

    def evaluate(self, value: Any) -> bool:
        if value is None:
            return False
        try:
            return (value & self.flag) == self.flag
        except TypeError:
            return False


__all__ = [
    "Comparison",
    "BooleanConditionConverter",
    "NullConditionConverter",
    "ComparisonConditionConverter",
    "MembershipConditionConverter",
    "FlagConditionConverter",
]
