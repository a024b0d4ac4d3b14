"""The collection of live game objects."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from jjjengine.game_object import GameObject

if TYPE_CHECKING:
    from jjjengine.context import Context

T = TypeVar("T", bound=GameObject)


class GameObjectManager:
    """Holds game objects in the order they were added, each at most once."""

    def __init__(self) -> None:
        self._objects: list[GameObject] = []

    def add(self, game_object: GameObject | None) -> None:
        """Add an object unless it is None or already present."""
        if game_object is None or any(o is game_object for o in self._objects):
            return
        self._objects.append(game_object)

    def remove(self, game_object: GameObject | None) -> None:
        """Remove an object; absent objects and None are ignored."""
        if game_object is None:
            return
        self._objects = [o for o in self._objects if o is not game_object]

    def clear(self) -> None:
        """Remove every object."""
        self._objects.clear()

    @property
    def objects(self) -> tuple[GameObject, ...]:
        """A snapshot of the current objects."""
        return tuple(self._objects)

    def create(self, cls: type[T], context: Context) -> T:
        """Build and initialise an object of ``cls`` without adding it."""
        if not (isinstance(cls, type) and issubclass(cls, GameObject)):
            raise TypeError(f"{cls!r} is not a GameObject subclass")
        game_object = cls(context)
        game_object.init()
        return game_object