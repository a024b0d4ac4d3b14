"""Base class of everything that lives in a play scene."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from jjjengine.canvas import Canvas
from jjjengine.types import GameObjectType, Pos, Stat

if TYPE_CHECKING:
    from jjjengine.context import Context


class Lifecycle(ABC):
    """Something that is set up once, then updated and drawn every frame."""

    @abstractmethod
    def init(self) -> None:
        """Set up the initial state."""

    @abstractmethod
    def update(self) -> None:
        """Advance by one frame."""

    @abstractmethod
    def render(self, canvas: Canvas) -> None:
        """Draw onto the canvas."""


class GameObject(Lifecycle):
    """An object with a type, stats and a position."""

    def __init__(self, object_type: GameObjectType, context: Context) -> None:
        self._type = object_type
        self.context = context
        self.stat = Stat()
        self._pos = Pos()

    @abstractmethod
    def init(self) -> None:
        """Set up the object's stats and position."""

    @abstractmethod
    def update(self) -> None:
        """Advance the object by one frame."""

    @abstractmethod
    def render(self, canvas: Canvas) -> None:
        """Draw the object onto the canvas."""

    @property
    def object_type(self) -> GameObjectType:
        """The kind of object this is."""
        return self._type

    @property
    def pos(self) -> Pos:
        """The object's position."""
        return self._pos

    @pos.setter
    def pos(self, pos: Pos) -> None:
        self._pos = Pos(pos.x, pos.y)

    def _box(self, size: float) -> tuple[float, float, float, float]:
        """A square of ``size`` whose top-left corner is the position."""
        x, y = self._pos.x, self._pos.y
        return x, y, x + size, y + size