"""The drawing surface that scenes and game objects render onto."""

from __future__ import annotations

from typing import Protocol

from jjjengine.types import Pos


class Canvas(Protocol):
    """Something that can draw simple shapes and text."""

    def rectangle(self, left: float, top: float, right: float, bottom: float) -> None:
        """Draw a rectangle bounded by the given edges."""

    def ellipse(self, left: float, top: float, right: float, bottom: float) -> None:
        """Draw an ellipse inscribed in the given bounding box."""

    def line(self, start: Pos, end: Pos) -> None:
        """Draw a straight line from ``start`` to ``end``."""

    def text(self, x: float, y: float, text: str) -> None:
        """Draw ``text`` with its top-left corner at ``(x, y)``."""