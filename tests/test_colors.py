"""Unit tests for color parsing."""

from __future__ import annotations

import pytest

from bindkit.core.colors import Color, normalize_color


def test_normalize_color_accepts_common_formats() -> None:
    assert normalize_color("#fff") == Color(255, 255, 255)
    assert normalize_color("102030") == Color(16, 32, 48)
    assert normalize_color("10, 20, 30") == Color(10, 20, 30)
    assert normalize_color(" Orange ") == Color(255, 165, 0)
    assert normalize_color([300, -5, 7]) == Color(255, 0, 7)


def test_color_helpers() -> None:
    color = Color.parse("#0a0b0c")

    assert color.to_hex() == "#0a0b0c"
    assert color.red == 10
    assert Color.parse(color) is color


@pytest.mark.parametrize("value", ["", "#12", "1,2", [1, 2]])
def test_normalize_color_rejects_malformed_values(value: object) -> None:
    with pytest.raises(ValueError):
        normalize_color(value)


def test_normalize_color_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        normalize_color(3.5)


def test_rgb_triplets_read_components_as_decimal() -> None:
    assert normalize_color("010, 020, 030") == Color(10, 20, 30)
    assert normalize_color("#000, 255, 007") == Color(0, 255, 7)
    assert normalize_color("0x10, 0X0a, -5") == Color(16, 10, 0)
