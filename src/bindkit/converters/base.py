"""Base class for condition converters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ConditionConverter(ABC, Generic[T]):
    """Maps a live value onto one of two results.

    ``evaluate`` decides whether the condition holds for a value; ``convert``
    returns :attr:`if_true` or :attr:`if_false` accordingly. Both results are
    assigned once after construction by a resolver.
    """

    def __init__(self, result_type: type = object) -> None:
        self.result_type: type = result_type
        self.if_true: T | None = None
        self.if_false: T | None = None

    @abstractmethod
    def evaluate(self, value: Any) -> bool:
        """Return whether the condition holds for ``value``."""

    def convert(self, value: Any) -> T | None:
        return self.if_true if self.evaluate(value) else self.if_false

    def __call__(self, value: Any) -> T | None:
        return self.convert(value)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(result_type={self.result_type.__name__}, "
            f"if_true={self.if_true!r}, if_false={self.if_false!r})"
        )


__all__ = ["ConditionConverter"]
