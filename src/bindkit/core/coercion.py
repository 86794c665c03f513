"""Coercion strategies turning raw literals into declared types.

UI descriptions supply candidate values as raw literals (usually strings).
A :class:`CoercionStrategy` knows how to turn such a literal into one
concrete type, and a :class:`CoercionRegistry` maps types to strategies.
Registries are plain objects handed to resolvers, so two resolvers can use
different tables side by side.
"""

from __future__ import annotations

import enum
import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Dict, Generic, Iterable, List, Sequence, TypeVar

from ..services.settings import DEFAULT_FALSE_TOKENS, DEFAULT_TRUE_TOKENS, Settings
from .colors import Color, normalize_color
from .errors import UnsupportedTypeError, ValueConversionError

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

_CONVERSION_ERRORS: tuple[type[BaseException], ...] = (
    ValueError,
    TypeError,
    KeyError,
    ArithmeticError,
)


class CoercionStrategy(ABC, Generic[T]):
    """Converts raw values into ``target_type``."""

    target_type: type = object

    def convert_from(self, raw: Any) -> T | None:
        """Return ``raw`` converted into :attr:`target_type`.

        ``None`` is handed to :meth:`convert_absent`; values that are already
        of the target type pass through unchanged.

        Raises:
            ValueConversionError: If ``raw`` is not convertible.
        """
        if raw is None:
            return self.convert_absent()
        if self.accepts(raw):
            return raw
        try:
            return self._convert(raw)
        except ValueConversionError:
            raise
        except _CONVERSION_ERRORS as exc:
            raise ValueConversionError.for_value(raw, self.target_type, reason=str(exc)) from exc

    def convert_absent(self) -> T | None:
        """Value produced for an absent raw value."""
        return None

    def accepts(self, raw: Any) -> bool:
        return isinstance(raw, self.target_type)

    @abstractmethod
    def _convert(self, raw: Any) -> T:
        """Convert a non-``None`` value that is not already of the target type."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(target_type={self.target_type.__name__})"


class PassthroughStrategy(CoercionStrategy[Any]):
    """Strategy for ``object``: every value is kept as supplied."""

    target_type = object

    def _convert(self, raw: Any) -> Any:  # pragma: no cover - accepts() covers everything
        return raw


class BooleanStrategy(CoercionStrategy[bool]):
    target_type = bool

    def __init__(
        self,
        true_tokens: Iterable[str] = DEFAULT_TRUE_TOKENS,
        false_tokens: Iterable[str] = DEFAULT_FALSE_TOKENS,
    ) -> None:
        self._true_tokens = frozenset(token.strip().lower() for token in true_tokens)
        self._false_tokens = frozenset(token.strip().lower() for token in false_tokens)

    def _convert(self, raw: Any) -> bool:
        if isinstance(raw, str):
            token = raw.strip().lower()
            if token in self._true_tokens:
                return True
            if token in self._false_tokens:
                return False
            raise ValueError(f"'{raw}' is not a recognised boolean literal")
        if isinstance(raw, int) and raw in (0, 1):
            return bool(raw)
        raise TypeError(f"{type(raw).__name__} values cannot be read as booleans")


class IntegerStrategy(CoercionStrategy[int]):
    target_type = int

    def accepts(self, raw: Any) -> bool:
        return isinstance(raw, int) and not isinstance(raw, bool)

    def _convert(self, raw: Any) -> int:
        if isinstance(raw, bool):
            raise TypeError("booleans are not integers here")
        if isinstance(raw, str):
            text = raw.strip().replace("_", "")
            sign = ""
            if text[:1] in ("-", "+"):
                sign, text = text[0], text[1:]
            if text.lower().startswith("0x"):
                return int(sign + text[2:], 16)
            return int(sign + text, 10)
        if isinstance(raw, float):
            if not raw.is_integer():
                raise ValueError("value has a fractional part")
            return int(raw)
        if isinstance(raw, Decimal):
            if raw != raw.to_integral_value():
                raise ValueError("value has a fractional part")
            return int(raw)
        raise TypeError(f"{type(raw).__name__} values cannot be read as integers")


class FloatStrategy(CoercionStrategy[float]):
    target_type = float

    def _convert(self, raw: Any) -> float:
        if isinstance(raw, bool):
            raise TypeError("booleans are not numbers here")
        if isinstance(raw, str):
            return float(raw.strip())
        if isinstance(raw, (int, Decimal)):
            return float(raw)
        raise TypeError(f"{type(raw).__name__} values cannot be read as floats")


class DecimalStrategy(CoercionStrategy[Decimal]):
    target_type = Decimal

    def _convert(self, raw: Any) -> Decimal:
        if isinstance(raw, bool):
            raise TypeError("booleans are not numbers here")
        if isinstance(raw, str):
            return Decimal(raw.strip())
        if isinstance(raw, int):
            return Decimal(raw)
        if isinstance(raw, float):
            return Decimal(str(raw))
        raise TypeError(f"{type(raw).__name__} values cannot be read as decimals")


class StringStrategy(CoercionStrategy[str]):
    """Strings accept any value; an absent value becomes ``absent_value``."""

    target_type = str

    def __init__(self, absent_value: str = "") -> None:
        self._absent_value = absent_value

    def convert_absent(self) -> str:
        return self._absent_value

    def _convert(self, raw: Any) -> str:
        return str(raw)


class ColorStrategy(CoercionStrategy[Color]):
    target_type = Color

    def _convert(self, raw: Any) -> Color:
        return normalize_color(raw)


class EnumStrategy(CoercionStrategy[enum.Enum]):
    """Reads enum members by name or value.

    Comma separated names are combined with ``|`` for :class:`enum.Flag`
    types, so ``"READ, WRITE"`` yields ``Perm.READ | Perm.WRITE``.
    """

    def __init__(self, enum_type: type[enum.Enum], *, case_insensitive: bool = True) -> None:
        self.target_type = enum_type
        self._case_insensitive = case_insensitive

    def _convert(self, raw: Any) -> enum.Enum:
        enum_type = self.target_type
        if isinstance(raw, str):
            names = [part.strip() for part in raw.split(",") if part.strip()]
            if not names:
                raise ValueError("enum literal is empty")
            if len(names) > 1:
                if not issubclass(enum_type, enum.Flag):
                    raise ValueError(f"{enum_type.__name__} does not support combined values")
                members = [self._member(name) for name in names]
                combined = members[0]
                for member in members[1:]:
                    combined = combined | member
                return combined
            return self._member(names[0])
        return enum_type(raw)

    def _member(self, name: str) -> enum.Enum:
        enum_type = self.target_type
        members = enum_type.__members__
        if name in members:
            return members[name]
        if self._case_insensitive:
            folded = name.casefold()
            for key, member in members.items():
                if key.casefold() == folded:
                    return member
        # Fall back to the member value, as literals are often numbers.
        for member in enum_type:
            if str(member.value) == name:
                return member
        raise KeyError(f"'{name}' is not a member of {enum_type.__name__}")


class CoercionRegistry:
    """Table mapping types to the strategy that coerces into them."""

    def __init__(
        self,
        strategies: Iterable[CoercionStrategy[Any]] | None = None,
        *,
        case_insensitive_enums: bool = True,
    ) -> None:
        self._strategies: Dict[type, CoercionStrategy[Any]] = {}
        self._case_insensitive_enums = case_insensitive_enums
        if strategies:
            for strategy in strategies:
                self.register(strategy)

    def register(self, strategy: CoercionStrategy[Any], *, overwrite: bool = True) -> None:
        key = strategy.target_type
        if not overwrite and key in self._strategies:
            raise ValueError(f"A strategy for '{key.__name__}' is already registered")
        self._strategies[key] = strategy

    def lookup(self, target_type: type) -> CoercionStrategy[Any]:
        """Return the strategy for ``target_type``.

        Enum types without an explicit registration get an
        :class:`EnumStrategy` built on demand.

        Raises:
            UnsupportedTypeError: If no strategy can handle ``target_type``.
        """
        strategy = self._strategies.get(target_type)
        if strategy is not None:
            return strategy
        if isinstance(target_type, type) and issubclass(target_type, enum.Enum):
            return EnumStrategy(target_type, case_insensitive=self._case_insensitive_enums)
        LOGGER.debug("No coercion strategy registered for %r", target_type)
        raise UnsupportedTypeError.for_type(target_type)

    def supports(self, target_type: type) -> bool:
        try:
            self.lookup(target_type)
        except UnsupportedTypeError:
            return False
        return True

    def registered_types(self) -> List[type]:
        return list(self._strategies)

    def __contains__(self, target_type: object) -> bool:
        return target_type in self._strategies

    def __len__(self) -> int:
        return len(self._strategies)


def default_strategies(settings: Settings | None = None) -> Sequence[CoercionStrategy[Any]]:
    settings = settings or Settings()
    return (
        PassthroughStrategy(),
        BooleanStrategy(settings.true_tokens, settings.false_tokens),
        IntegerStrategy(),
        FloatStrategy(),
        DecimalStrategy(),
        StringStrategy(settings.absent_string),
        ColorStrategy(),
    )


def build_default_registry(settings: Settings | None = None) -> CoercionRegistry:
    """Return a registry covering the built-in literal types."""

    settings = settings or Settings()
    return CoercionRegistry(
        default_strategies(settings),
        case_insensitive_enums=settings.case_insensitive_enums,
    )


__all__ = [
    "CoercionStrategy",
    "CoercionRegistry",
    "PassthroughStrategy",
    "BooleanStrategy",
    "IntegerStrategy",
    "FloatStrategy",
    "DecimalStrategy",
    "StringStrategy",
    "ColorStrategy",
    "EnumStrategy",
    "build_default_registry",
    "default_strategies",
]
