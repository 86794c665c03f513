"""Shared test helpers and stub classes.

Import from here instead of duplicating these classes in individual test files.
"""

from __future__ import annotations

import enum
from typing import Any, Callable


class Visibility(enum.Enum):
    VISIBLE = 0
    HIDDEN = 1
    COLLAPSED = 2


class Permission(enum.Flag):
    READ = 1
    WRITE = 2
    EXECUTE = 4


class StubSignal:
    """Stand-in for a Qt signal exposing ``connect``/``disconnect``/``emit``."""

    def __init__(self) -> None:
        self.slots: list[Callable[[Any], Any]] = []

    def connect(self, slot: Callable[[Any], Any]) -> None:
        self.slots.append(slot)

    def disconnect(self, slot: Callable[[Any], Any]) -> None:
        self.slots.remove(slot)

    def emit(self, value: Any) -> None:
        for slot in list(self.slots):
            slot(value)


class StubWidget:
    visible: Any = None
