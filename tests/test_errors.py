"""Tests for the binding error hierarchy."""

from __future__ import annotations

from bindkit.core.errors import (
    BindingError,
    ErrorCode,
    InvalidSpecializationError,
    MissingServiceError,
    UnknownTypeNameError,
    UnsupportedTypeError,
    ValueConversionError,
    describe_type,
    error_from_dict,
)
from tests.helpers import Visibility


class TestBindingError:
    """Tests for the base BindingError class."""

    def test_str_includes_code(self) -> None:
        error = BindingError(error_code="custom", message="Something went wrong")

        assert str(error) == "[custom] Something went wrong"
        assert error.severity == "error"

    def test_to_dict_omits_empty_fields(self) -> None:
        error = BindingError(error_code="custom", message="Oops")

        assert error.to_dict() == {"error": "custom", "message": "Oops"}

    def test_to_dict_includes_details_and_suggestion(self) -> None:
        error = BindingError(error_code="custom", message="Oops", details={"n": 1}, suggestion="Retry")

        assert error.to_dict() == {
            "error": "custom",
            "message": "Oops",
            "details": {"n": 1},
            "suggestion": "Retry",
        }

    def test_error_from_dict(self) -> None:
        error = error_from_dict({"error": ErrorCode.VALUE_CONVERSION, "message": "bad"})

        assert isinstance(error, BindingError)
        assert error.error_code == "value_conversion"
        assert error_from_dict({}).error_code == ErrorCode.INTERNAL_ERROR


class TestSpecificErrors:
    """Tests for the factory constructors of each error."""

    def test_unsupported_type(self) -> None:
        error = UnsupportedTypeError.for_type(Visibility)

        assert error.error_code == ErrorCode.UNSUPPORTED_TYPE
        assert error.target_type == "tests.helpers.Visibility"
        assert error.to_dict()["target_type"] == "tests.helpers.Visibility"
        assert isinstance(error, BindingError)

    def test_value_conversion(self) -> None:
        error = ValueConversionError.for_value("abc", int, reason="not a number")

        assert error.message == "Cannot convert 'abc' to 'int': not a number"
        payload = error.to_dict()
        assert payload["value"] == "'abc'"
        assert payload["reason"] == "not a number"

    def test_invalid_specialization_is_critical(self) -> None:
        error = InvalidSpecializationError.for_object(42, expected_type=str)

        assert error.severity == "critical"
        assert error.returned_type == "int"
        assert error.expected_type == "str"
        assert "'int'" in error.message

    def test_unknown_type_name_and_missing_service(self) -> None:
        unknown = UnknownTypeNameError.for_name("widget")
        missing = MissingServiceError.for_service(dict)

        assert unknown.to_dict()["type_name"] == "widget"
        assert missing.service == "dict"

    def test_errors_are_exceptions(self) -> None:
        error = UnsupportedTypeError.for_type(bytes)

        assert isinstance(error, Exception)
        assert error.args == (error.message,)


def test_describe_type_handles_instances_and_none() -> None:
    assert describe_type(None) == "None"
    assert describe_type(3) == "int"
    assert describe_type(Visibility.VISIBLE) == "tests.helpers.Visibility"
