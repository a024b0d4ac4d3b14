"""The player, monsters and missiles of the play scene."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from jjjengine.canvas import Canvas
from jjjengine.game_object import GameObject
from jjjengine.types import GameObjectType, KeyType, Pos, Stat

if TYPE_CHECKING:
    from jjjengine.context import Context


class Player(GameObject):
    """Moves with the arrow keys and fires a missile on space."""

    _MOVE_SPEED = 1000.0
    _SIZE = 100
    _DIRECTIONS = (
        (KeyType.UP, 0, -1),
        (KeyType.LEFT, -1, 0),
        (KeyType.DOWN, 0, 1),
        (KeyType.RIGHT, 1, 0),
    )

    def __init__(self, context: Context) -> None:
        super().__init__(GameObjectType.PLAYER, context)

    def init(self) -> None:
        """Set the player's stats and starting position."""
        self.stat = Stat(hp=100, max_hp=100, speed=100)
        self.pos = Pos(400, 500)

    def update(self) -> None:
        """Move while arrow keys are held; fire when space goes down."""
        keys = self.context.input
        step = 0.1 * self._MOVE_SPEED * self.context.time.delta_time
        pos = self.pos
        for key, dx, dy in self._DIRECTIONS:
            if keys.get_key(key):
                pos.x += dx * step
                pos.y += dy * step

        if keys.get_key_down(KeyType.SPACE):
            objects = self.context.objects
            missile = objects.create(Missile, self.context)
            missile.pos = Pos(pos.x + 25, pos.y - 40)
            objects.add(missile)

    def render(self, canvas: Canvas) -> None:
        """Draw the player as a square."""
        canvas.rectangle(*self._box(self._SIZE))


class Monster(GameObject):
    """A stationary target."""

    _SIZE = 50

    def __init__(self, context: Context) -> None:
        super().__init__(GameObjectType.MONSTER, context)

    def init(self) -> None:
        """Set the monster's stats."""
        self.stat = Stat(hp=50, max_hp=50, speed=10)

    def update(self) -> None:
        """Monsters stand still."""

    def render(self, canvas: Canvas) -> None:
        """Draw the monster as a square."""
        canvas.rectangle(*self._box(self._SIZE))


class Missile(GameObject):
    """Flies upward and destroys the first monster it comes close to."""

    _HIT_RADIUS = 30.0
    _SIZE = 50

    def __init__(self, context: Context) -> None:
        super().__init__(GameObjectType.MISSILE, context)

    def init(self) -> None:
        """Set the missile's speed."""
        self.stat = Stat(speed=300.0)

    def update(self) -> None:
        """Fly upward; on a hit remove both objects, off screen remove self."""
        pos = self.pos
        pos.y -= self.stat.speed * self.context.time.delta_time

        objects = self.context.objects
        for other in objects.objects:
            if other is self or other.object_type is not GameObjectType.MONSTER:
                continue
            if math.dist((pos.x, pos.y), (other.pos.x, other.pos.y)) < self._HIT_RADIUS:
                objects.remove(other)
                objects.remove(self)
                return

        if pos.y < 0.0:
            objects.remove(self)

    def render(self, canvas: Canvas) -> None:
        """Draw the missile as a circle."""
        canvas.ellipse(*self._box(self._SIZE))