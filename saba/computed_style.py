"""Computed CSS values for a node, with defaulting and inheritance."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, TypeVar

from saba.color import Color, UnsupportedValueError

_T = TypeVar("_T")


def _require(value: Optional[_T], name: str) -> _T:
    if value is None:
        raise ValueError(f"failed to access CSS property: {name}")
    return value


class DisplayType(Enum):
    BLOCK = "block"
    INLINE = "inline"
    DISPLAY_NONE = "none"

    @classmethod
    def from_str(cls, s: str) -> "DisplayType":
        """Parse the value of a `display` declaration."""
        for member in cls:
            if member.value == s:
                return member
        raise UnsupportedValueError(f'display "{s}" is not supported yet')

    @classmethod
    def default_for(cls, tag: Optional[str], is_block: bool) -> "DisplayType":
        """Default display of a node.

        `tag` is the element's tag name, or None for documents and text;
        `is_block` tells whether the node is a block (a document is one,
        text is not).
        """
        if tag in ("script", "style"):
            return cls.DISPLAY_NONE
        return cls.BLOCK if is_block else cls.INLINE


@dataclass(frozen=True)
class BoxInfo:
    """Widths of the four sides of a margin or padding box."""

    top: float
    right: float
    left: float
    bottom: float


class FontSize(Enum):
    MEDIUM = "medium"
    X_LARGE = "x-large"
    XX_LARGE = "xx-large"

    @classmethod
    def default_for(cls, tag: Optional[str]) -> "FontSize":
        if tag == "h1":
            return cls.XX_LARGE
        if tag == "h2":
            return cls.X_LARGE
        return cls.MEDIUM


class TextDecoration(Enum):
    NONE = "none"
    UNDERLINE = "underline"

    @classmethod
    def default_for(cls, tag: Optional[str]) -> "TextDecoration":
        return cls.UNDERLINE if tag == "a" else cls.NONE


class WhiteSpace(Enum):
    NORMAL = "normal"
    PRE = "pre"

    @classmethod
    def default_for(cls, tag: Optional[str]) -> "WhiteSpace":
        return cls.PRE if tag == "pre" else cls.NORMAL


@dataclass
class ComputedStyle:
    """The computed values of every supported CSS property; None until set."""

    background_color: Optional[Color] = None
    color: Optional[Color] = None
    display: Optional[DisplayType] = None
    font_size: Optional[FontSize] = None
    height: Optional[float] = None
    margin: Optional[BoxInfo] = None
    padding: Optional[BoxInfo] = None
    text_decoration: Optional[TextDecoration] = None
    white_space: Optional[WhiteSpace] = None
    width: Optional[float] = None

    def defaulting(
        self,
        tag: Optional[str],
        is_block: bool,
        parent_style: Optional["ComputedStyle"] = None,
    ) -> None:
        """Fill unset properties, inheriting some from `parent_style`.

        `tag` and `is_block` describe the node as for `DisplayType.default_for`.
        """
        if parent_style is not None:
            parent_background = _require(parent_style.background_color, "background_color")
            if self.background_color is None and parent_background != Color.white():
                self.background_color = parent_background
            parent_color = _require(parent_style.color, "color")
            if self.color is None and parent_color != Color.black():
                self.color = parent_color
            parent_font_size = _require(parent_style.font_size, "font_size")
            if self.font_size is None and parent_font_size is not FontSize.MEDIUM:
                self.font_size = parent_font_size
            parent_decoration = _require(parent_style.text_decoration, "text_decoration")
            if self.text_decoration is None and parent_decoration is not TextDecoration.NONE:
                self.text_decoration = parent_decoration

        if self.background_color is None:
            self.background_color = Color.white()
        if self.color is None:
            self.color = Color.black()
        if self.display is None:
            self.display = DisplayType.default_for(tag, is_block)
        if self.font_size is None:
            self.font_size = FontSize.default_for(tag)
        if self.height is None:
            self.height = 0.0
        if self.margin is None:
            self.margin = BoxInfo(0.0, 0.0, 0.0, 0.0)
        if self.padding is None:
            self.padding = BoxInfo(0.0, 0.0, 0.0, 0.0)
        if self.text_decoration is None:
            self.text_decoration = TextDecoration.default_for(tag)
        if self.white_space is None:
            self.white_space = WhiteSpace.default_for(tag)
        if self.width is None:
            self.width = 0.0

    def _margin(self) -> BoxInfo:
        return _require(self.margin, "margin")

    def _padding(self) -> BoxInfo:
        return _require(self.padding, "padding")

    def margin_top(self) -> float:
        return self._margin().top

    def margin_left(self) -> float:
        return self._margin().left

    def margin_right(self) -> float:
        return self._margin().right

    def margin_bottom(self) -> float:
        return self._margin().bottom

    def padding_top(self) -> float:
        return self._padding().top

    def padding_left(self) -> float:
        return self._padding().left

    def padding_right(self) -> float:
        return self._padding().right

    def padding_bottom(self) -> float:
        return self._padding().bottom