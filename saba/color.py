"""Named CSS colours, their hex codes and RGB values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

_NAMED_COLORS = {
    "black": ("#000000", (0.0, 0.0, 0.0)),
    "silver": ("#c0c0c0", (0.752, 0.752, 0.752)),
    "gray": ("#808080", (0.501, 0.501, 0.501)),
    "white": ("#ffffff", (1.0, 1.0, 1.0)),
    "maroon": ("#800000", (0.501, 0.0, 0.0)),
    "red": ("#ff0000", (1.0, 0.0, 0.0)),
    "purple": ("#800080", (0.501, 0.0, 0.501)),
    "fuchsia": ("#ff00ff", (1.0, 0.0, 1.0)),
    "green": ("#008000", (0.0, 0.501, 0.0)),
    "lime": ("#00ff00", (0.0, 1.0, 0.0)),
    "olive": ("#808000", (0.501, 0.501, 0.0)),
    "yellow": ("#ffff00", (1.0, 1.0, 0.0)),
    "navy": ("#000080", (0.0, 0.0, 0.501)),
    "blue": ("#0000ff", (0.0, 0.0, 1.0)),
    "teal": ("#008080", (0.0, 0.501, 0.501)),
    "aqua": ("#00ffff", (0.0, 1.0, 1.0)),
    "orange": ("#ffa500", (1.0, 0.647, 0.0)),
    "lightgray": ("#d3d3d3", (0.827, 0.827, 0.827)),
}

_NAMES_BY_CODE = {code: name for name, (code, _) in _NAMED_COLORS.items()}


class UnsupportedValueError(ValueError):
    """Raised for a colour name or code that is not supported."""


@dataclass(frozen=True)
class Color:
    name: Optional[str]
    code: str
    rgb: Tuple[float, float, float]

    @classmethod
    def from_name(cls, name: str) -> "Color":
        try:
            code, rgb = _NAMED_COLORS[name]
        except KeyError:
            raise UnsupportedValueError(
                f'color name "{name}" is not supported yet'
            ) from None
        return cls(name, code, rgb)

    @classmethod
    def from_code(cls, code: str) -> "Color":
        if not code.startswith("#") or len(code) != 7:
            raise UnsupportedValueError(f"invalid color code {code}")
        try:
            name = _NAMES_BY_CODE[code]
        except KeyError:
            raise UnsupportedValueError(
                f'color code "{code}" is not supported yet'
            ) from None
        rgb = tuple(int(code[i:i + 2], 16) / 255 for i in (1, 3, 5))
        return cls(name, code, rgb)

    @classmethod
    def white(cls) -> "Color":
        """The default background colour."""
        return cls("white", "#ffffff", (0.0, 0.0, 0.0))

    @classmethod
    def black(cls) -> "Color":
        """The default text colour."""
        return cls("black", "#000000", (1.0, 1.0, 1.0))

    def code_u32(self) -> int:
        """The colour code as an integer, e.g. 0xff0000 for red."""
        return int(self.code.lstrip("#"), 16)