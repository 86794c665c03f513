"""Resolution of type names written in UI descriptions."""

from __future__ import annotations

import importlib
import logging
from decimal import Decimal
from typing import Any, Dict, Mapping

from .colors import Color
from .errors import UnknownTypeNameError

LOGGER = logging.getLogger(__name__)

_BUILTIN_ALIASES: Mapping[str, type] = {
    "bool": bool,
    "boolean": bool,
    "int": int,
    "int32": int,
    "int64": int,
    "integer": int,
    "float": float,
    "double": float,
    "single": float,
    "decimal": Decimal,
    "str": str,
    "string": str,
    "object": object,
    "color": Color,
}


class TypeResolver:
    """Maps type names such as ``"int32"`` or ``"pkg.mod:Name"`` to Python types.

    Aliases are matched case-insensitively. Alias targets may be types or
    dotted paths, which are imported the first time they are resolved.
    """

    def __init__(self, aliases: Mapping[str, type | str] | None = None) -> None:
        self._aliases: Dict[str, type | str] = dict(_BUILTIN_ALIASES)
        for name, target in (aliases or {}).items():
            self.register(name, target)

    def register(self, name: str, target: type | str) -> None:
        key = name.strip().lower()
        if not key:
            raise ValueError("Type aliases cannot be empty")
        self._aliases[key] = target

    def aliases(self) -> Dict[str, type | str]:
        return dict(self._aliases)

    def resolve(self, qualified_name: str | type) -> type:
        """Return the type named by ``qualified_name``.

        Raises:
            UnknownTypeNameError: If the name is neither an alias nor importable.
        """
        if isinstance(qualified_name, type):
            return qualified_name
        text = (qualified_name or "").strip()
        if not text:
            raise UnknownTypeNameError.for_name(str(qualified_name), reason="name is empty")
        target = self._aliases.get(text.lower())
        if target is None:
            if "." not in text and ":" not in text:
                raise UnknownTypeNameError.for_name(text)
            target = text
        if isinstance(target, str):
            return self._import(text, target)
        return target

    def _import(self, requested: str, path: str) -> type:
        if ":" in path:
            module_name, _, attribute = path.partition(":")
        else:
            module_name, _, attribute = path.rpartition(".")
        if not module_name or not attribute:
            raise UnknownTypeNameError.for_name(requested, reason=f"'{path}' is not a qualified path")
        try:
            module = importlib.import_module(module_name)
        except ImportError as exc:
            raise UnknownTypeNameError.for_name(requested, reason=str(exc)) from exc
        resolved: Any = module
        for part in attribute.split("."):
            try:
                resolved = getattr(resolved, part)
            except AttributeError as exc:
                raise UnknownTypeNameError.for_name(requested, reason=str(exc)) from exc
        if not isinstance(resolved, type):
            raise UnknownTypeNameError.for_name(requested, reason=f"'{path}' is not a type")
        LOGGER.debug("Resolved type name %s to %r", requested, resolved)
        return resolved


__all__ = ["TypeResolver"]
