"""Pushes condition converter output onto widget properties.

Qt is optional: Qt objects are updated through ``QObject.setProperty`` while
any other target gets a plain attribute assignment, which keeps the glue
usable in headless tests.
"""

from __future__ import annotations

import logging
from typing import Any

from ..converters.base import ConditionConverter

try:  # pragma: no cover - Qt imports are optional during tests
    from PySide6.QtCore import QObject
except Exception:  # pragma: no cover - PySide6 not available
    QObject = None  # type: ignore[assignment,misc]

LOGGER = logging.getLogger(__name__)

_UNSET = object()


def apply_condition(
    target: Any,
    property_name: str,
    converter: ConditionConverter[Any],
    value: Any,
) -> Any:
    """Set ``property_name`` on ``target`` to ``converter.convert(value)`` and return it."""

    result = converter.convert(value)
    if QObject is not None and isinstance(target, QObject):
        if not target.setProperty(property_name, result):
            LOGGER.debug("Stored %s as a dynamic property on %r", property_name, target)
    else:
        setattr(target, property_name, result)
    return result


class ConditionBinding:
    """Keeps a target property in sync with a signal carrying the condition value.

    ``signal`` is anything exposing ``connect``/``disconnect``, typically a
    bound Qt signal.
    """

    def __init__(
        self,
        signal: Any,
        target: Any,
        property_name: str,
        converter: ConditionConverter[Any],
        *,
        initial: Any = _UNSET,
    ) -> None:
        self._signal = signal
        self._target = target
        self._property_name = property_name
        self._converter = converter
        self._connected = False
        self.last_value: Any = None
        signal.connect(self.update)
        self._connected = True
        if initial is not _UNSET:
            self.update(initial)

    @property
    def connected(self) -> bool:
        return self._connected

    def update(self, value: Any) -> Any:
        self.last_value = apply_condition(self._target, self._property_name, self._converter, value)
        return self.last_value

    def disconnect(self) -> None:
        if not self._connected:
            return
        try:
            self._signal.disconnect(self.update)
        except (RuntimeError, TypeError) as exc:  # pragma: no cover - Qt raises when already gone
            LOGGER.debug("Signal for %s was already disconnected: %s", self._property_name, exc)
        self._connected = False


__all__ = ["ConditionBinding", "apply_condition"]
