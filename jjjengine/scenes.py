"""Scenes: the play field and the line editor."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from jjjengine.canvas import Canvas
from jjjengine.entities import Monster, Player
from jjjengine.game_object import Lifecycle
from jjjengine.types import KeyType, Pos

if TYPE_CHECKING:
    from jjjengine.context import Context

Point = tuple[int, int]


class Scene(Lifecycle):
    """A screen of the game with its own logic and drawing."""

    def __init__(self, context: Context) -> None:
        self.context = context

    @abstractmethod
    def init(self) -> None:
        """Set up the scene."""

    @abstractmethod
    def update(self) -> None:
        """Advance the scene by one frame."""

    @abstractmethod
    def render(self, canvas: Canvas) -> None:
        """Draw the scene onto the canvas."""


class PlayScene(Scene):
    """A player facing a row of monsters."""

    _MONSTER_COUNT = 5

    def init(self) -> None:
        """Place the player and the row of monsters."""
        objects = self.context.objects
        placements = [(Player, Pos(300, 400))] + [
            (Monster, Pos(50.0 + i * 150.0, 50.0)) for i in range(self._MONSTER_COUNT)
        ]
        for cls, pos in placements:
            game_object = objects.create(cls, self.context)
            game_object.pos = pos
            objects.add(game_object)

    def update(self) -> None:
        """Update every object that is still alive when its turn comes."""
        objects = self.context.objects
        for game_object in objects.objects:
            if any(o is game_object for o in objects.objects):
                game_object.update()

    def render(self, canvas: Canvas) -> None:
        """Draw every object."""
        for game_object in self.context.objects.objects:
            game_object.render(canvas)


class EditScene(Scene):
    """Draws connected lines between left clicks; a right click starts afresh."""

    def __init__(self, context: Context) -> None:
        super().__init__(context)
        self.init()

    def init(self) -> None:
        """Start with no lines and the pen lifted."""
        self._lines: list[tuple[Point, Point]] = []
        self._last_position: Point = (0, 0)
        self._set_origin = True

    def update(self) -> None:
        """Record clicks: a left click extends the path, a right click lifts the pen."""
        keys = self.context.input
        if keys.get_key_down(KeyType.LEFT_MOUSE):
            mouse_pos = keys.mouse_pos
            if self._set_origin:
                self._set_origin = False
            else:
                self._lines.append((self._last_position, mouse_pos))
            self._last_position = mouse_pos

        if keys.get_key_down(KeyType.RIGHT_MOUSE):
            self._set_origin = True

    def render(self, canvas: Canvas) -> None:
        """Draw every recorded line."""
        for (x1, y1), (x2, y2) in self._lines:
            canvas.line(Pos(float(x1), float(y1)), Pos(float(x2), float(y2)))

    @property
    def lines(self) -> tuple[tuple[Point, Point], ...]:
        """The recorded lines as pairs of end points."""
        return tuple(self._lines)