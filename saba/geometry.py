"""Positions and sizes of boxes in the layout tree."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class LayoutPoint:
    """The start point (x, y) of a layout object."""

    x: int = 0
    y: int = 0


@dataclass
class LayoutSize:
    """The width and height of a layout object."""

    width: int = 0
    height: int = 0