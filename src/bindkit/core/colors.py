"""Color values that condition converters commonly hand to widgets."""

from __future__ import annotations

from typing import Any, Dict, NamedTuple, Sequence

_NAMED_COLORS: Dict[str, tuple[int, int, int]] = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (255, 0, 0),
    "green": (0, 128, 0),
    "lime": (0, 255, 0),
    "blue": (0, 0, 255),
    "yellow": (255, 255, 0),
    "orange": (255, 165, 0),
    "gray": (128, 128, 128),
    "grey": (128, 128, 128),
    "lightgray": (211, 211, 211),
    "darkgray": (169, 169, 169),
}


class Color(NamedTuple):
    """An RGB color with 0-255 channels."""

    red: int
    green: int
    blue: int

    def to_hex(self) -> str:
        return "#" + "".join(f"{component:02x}" for component in self)

    @classmethod
    def parse(cls, value: Any) -> "Color":
        return normalize_color(value)


def _clamp_channel(value: Any) -> int:
    channel = int(value)
    if channel < 0:
        return 0
    if channel > 255:
        return 255
    return channel


def _parse_component(text: str) -> int:
    if text.lower().lstrip("+-").startswith("0x"):
        sign = -1 if text.startswith("-") else 1
        return sign * int(text.lstrip("+-")[2:], 16)
    return int(text, 10)


def normalize_color(value: Any) -> Color:
    """Convert ``value`` into a :class:`Color`, accepting names, hex strings or sequences."""

    if isinstance(value, Color):
        return value

    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("Color strings cannot be empty")
        named = _NAMED_COLORS.get(text.lower())
        if named is not None:
            return Color(*named)
        if text.startswith("#"):
            text = text[1:]
        if "," in text:
            parts = [part.strip() for part in text.split(",") if part.strip()]
            if len(parts) != 3:
                raise ValueError(f"Color '{value}' must have exactly 3 components")
            return Color(*(_clamp_channel(_parse_component(part)) for part in parts))
        if len(text) in (3, 6):
            if len(text) == 3:
                text = "".join(ch * 2 for ch in text)
            return Color(*(int(text[i : i + 2], 16) for i in range(0, 6, 2)))
        raise ValueError(f"Unsupported color format: {value!r}")

    if isinstance(value, Sequence):
        items = list(value)
        if len(items) != 3:
            raise ValueError(f"RGB sequences must contain 3 values, received {value!r}")
        return Color(*(_clamp_channel(component) for component in items))

    raise TypeError(f"Cannot convert {type(value)!r} to an RGB color")


__all__ = ["Color", "normalize_color"]
