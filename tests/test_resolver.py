"""Tests for the conditional value resolver."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

import pytest

from bindkit.converters import (
    BooleanConditionConverter,
    ComparisonConditionConverter,
    ConditionConverter,
    ConverterKind,
    MembershipConditionConverter,
)
from bindkit.core.coercion import CoercionRegistry, CoercionStrategy, StringStrategy
from bindkit.core.colors import Color
from bindkit.core.errors import (
    InvalidSpecializationError,
    UnsupportedTypeError,
    ValueConversionError,
)
from bindkit.resolver import (
    ConditionResolver,
    KindResolver,
    ResolutionRequest,
    ResolvedPair,
    resolve,
)
from tests.helpers import Visibility


class _WrongShapeResolver(ConditionResolver):
    def create_converter(self, result_type: type) -> Any:
        return {"if_true": None, "if_false": None}


class _WrongTypeResolver(ConditionResolver):
    def create_converter(self, result_type: type) -> ConditionConverter[Any]:
        return BooleanConditionConverter(str)


class _UninitializedConverter(BooleanConditionConverter):
    def __init__(self) -> None:
        pass


class _UninitializedResolver(ConditionResolver):
    def create_converter(self, result_type: type) -> ConditionConverter[Any]:
        return _UninitializedConverter()


class _CountingResolver(ConditionResolver):
    def __init__(self, registry: CoercionRegistry | None = None) -> None:
        super().__init__(registry)
        self.created = 0

    def create_converter(self, result_type: type) -> ConditionConverter[Any]:
        self.created += 1
        return BooleanConditionConverter(result_type)


def test_no_type_and_no_values_defaults_to_booleans() -> None:
    converter = resolve(ResolutionRequest(None, None, None))

    assert converter.if_true is True
    assert converter.if_false is False
    assert converter.result_type is object
    assert converter.convert(True) is True
    assert converter.convert(False) is False


def test_bool_type_without_values_overrides_coercion_of_absent_values() -> None:
    converter = resolve(ResolutionRequest(bool))

    assert converter.if_true is True
    assert converter.if_false is False
    assert converter.result_type is bool


def test_int32_literals_are_coerced() -> None:
    converter = resolve(ResolutionRequest(int, "1", "0"))

    assert converter.if_true == 1
    assert converter.if_false == 0
    assert isinstance(converter.if_true, int)


def test_string_type_uses_empty_string_for_absent_value() -> None:
    converter = resolve(ResolutionRequest(str, None, "no"))

    assert converter.if_true == ""
    assert converter.if_false == "no"


def test_non_string_type_uses_none_for_absent_value() -> None:
    converter = resolve(ResolutionRequest(int, "5", None))

    assert converter.if_true == 5
    assert converter.if_false is None


def test_bool_type_with_one_value_does_not_apply_defaults() -> None:
    converter = resolve(ResolutionRequest(bool, "yes", None))

    assert converter.if_true is True
    assert converter.if_false is None


def test_untyped_values_pass_through_unchanged() -> None:
    payload = {"color": "red"}
    converter = resolve(ResolutionRequest(None, payload, "plain"))

    assert converter.if_true is payload
    assert converter.if_false == "plain"


def test_untyped_single_value_keeps_other_absent() -> None:
    converter = resolve(ResolutionRequest(None, "Visible", None))

    assert converter.if_true == "Visible"
    assert converter.if_false is None


def test_enum_and_color_types_are_coerced() -> None:
    visibility = resolve(ResolutionRequest(Visibility, "Visible", "collapsed"))
    colors = resolve(ResolutionRequest(Color, "#ff0000", "0, 0, 255"))

    assert visibility.if_true is Visibility.VISIBLE
    assert visibility.if_false is Visibility.COLLAPSED
    assert colors.if_true == Color(255, 0, 0)
    assert colors.if_false == Color(0, 0, 255)


def test_decimal_literals_are_coerced() -> None:
    converter = resolve(ResolutionRequest(Decimal, "1.50", "0"))

    assert converter.if_true == Decimal("1.50")
    assert converter.if_false == Decimal("0")


def test_unregistered_type_raises_unsupported_type_error() -> None:
    resolver = _CountingResolver()

    with pytest.raises(UnsupportedTypeError) as excinfo:
        resolver.resolve(ResolutionRequest(complex, "1j", "0j"))

    assert excinfo.value.target_type == "complex"
    assert "complex" in str(excinfo.value)
    assert resolver.created == 0


def test_unconvertible_literal_raises_value_conversion_error() -> None:
    resolver = _CountingResolver()

    with pytest.raises(ValueConversionError) as excinfo:
        resolver.resolve(ResolutionRequest(int, "one", "0"))

    assert excinfo.value.value == "one"
    assert excinfo.value.target_type == "int"
    assert resolver.created == 0


def test_factory_returning_wrong_shape_is_rejected() -> None:
    with pytest.raises(InvalidSpecializationError) as excinfo:
        _WrongShapeResolver().resolve(ResolutionRequest())

    assert excinfo.value.returned_type == "dict"
    assert "dict" in excinfo.value.message


def test_factory_returning_wrong_result_type_is_rejected() -> None:
    with pytest.raises(InvalidSpecializationError) as excinfo:
        _WrongTypeResolver().resolve(ResolutionRequest(int, "1", "0"))

    assert excinfo.value.expected_type == "int"
    assert "BooleanConditionConverter" in (excinfo.value.returned_type or "")


def test_converter_without_result_type_is_rejected() -> None:
    with pytest.raises(InvalidSpecializationError) as excinfo:
        _UninitializedResolver().resolve(ResolutionRequest(int, "1", "0"))

    assert excinfo.value.expected_type == "int"
    assert "_UninitializedConverter" in (excinfo.value.returned_type or "")
    assert "'None' values" in excinfo.value.message


def test_equal_requests_yield_equal_but_distinct_converters() -> None:
    resolver = KindResolver()
    request = ResolutionRequest(int, "1", "0")

    first = resolver.resolve(request)
    second = resolver.resolve(ResolutionRequest(int, "1", "0"))

    assert first is not second
    assert ResolvedPair.from_converter(first) == ResolvedPair.from_converter(second)


def test_resolve_pair_matches_installed_values() -> None:
    resolver = KindResolver()
    request = ResolutionRequest(str, None, "no")

    pair = resolver.resolve_pair(request)

    assert pair == ResolvedPair("", "no")
    assert ResolvedPair.from_converter(resolver.resolve(request)) == pair


def test_injected_registry_controls_coercion() -> None:
    registry = CoercionRegistry([StringStrategy(absent_value="n/a")])

    converter = resolve(ResolutionRequest(str, None, "off"), registry=registry)

    assert converter.if_true == "n/a"
    with pytest.raises(UnsupportedTypeError):
        resolve(ResolutionRequest(int, "1", "0"), registry=registry)


def test_custom_strategy_sees_absent_values() -> None:
    seen: list[Any] = []

    class Recording(CoercionStrategy[bool]):
        target_type = bool

        def convert_absent(self) -> bool:
            seen.append(None)
            return False

        def _convert(self, raw: Any) -> bool:
            seen.append(raw)
            return raw == "on"

    converter = resolve(ResolutionRequest(bool), registry=CoercionRegistry([Recording()]))

    assert seen == [None, None]
    assert (converter.if_true, converter.if_false) == (True, False)


def test_comparison_kind_receives_options() -> None:
    converter = resolve(
        ResolutionRequest(str, "adult", "minor"),
        ConverterKind.COMPARISON,
        operator=">=",
        reference=18,
    )

    assert isinstance(converter, ComparisonConditionConverter)
    assert converter.convert(21) == "adult"
    assert converter.convert(12) == "minor"


def test_kind_resolver_accepts_kind_names() -> None:
    resolver = KindResolver("membership", values=("draft", "review"))

    converter = resolver.resolve(ResolutionRequest())

    assert isinstance(converter, MembershipConditionConverter)
    assert converter.convert("draft") is True
    assert converter.convert("published") is False
