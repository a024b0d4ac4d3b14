"""Keyboard and mouse state tracking."""

from __future__ import annotations

from collections.abc import Collection

from jjjengine.types import Key, KeyState, KeyType


class InputManager:
    """Turns the set of held keys into per-frame key states."""

    def __init__(self) -> None:
        self._keys: dict[KeyType, Key] = {}
        self._mouse_pos: tuple[int, int] = (0, 0)

    def init(self) -> None:
        """Start tracking every key, all released."""
        self._keys = {
            key_type: Key(key_type) for key_type in KeyType if key_type is not KeyType.END
        }

    def update(self, pressed: Collection[KeyType], mouse_pos: tuple[int, int]) -> None:
        """Advance one frame given the keys held now and the mouse position."""
        for key in self._keys.values():
            if key.key_type in pressed:
                key.key_state = KeyState.PRESSED if key.is_pressed else KeyState.DOWN
                key.is_pressed = True
            else:
                key.key_state = KeyState.UP if key.is_pressed else KeyState.NONE
                key.is_pressed = False
        self._mouse_pos = (int(mouse_pos[0]), int(mouse_pos[1]))

    def _state(self, key_type: KeyType) -> KeyState:
        try:
            return self._keys[key_type].key_state
        except KeyError:
            raise KeyError(f"key {key_type.name} is not tracked") from None

    def get_key(self, key_type: KeyType) -> bool:
        """True while the key stays held after the frame it went down."""
        return self._state(key_type) is KeyState.PRESSED

    def get_key_down(self, key_type: KeyType) -> bool:
        """True in the frame the key went down."""
        return self._state(key_type) is KeyState.DOWN

    def get_key_up(self, key_type: KeyType) -> bool:
        """True in the frame the key was released."""
        return self._state(key_type) is KeyState.UP

    @property
    def mouse_pos(self) -> tuple[int, int]:
        """Mouse position at the last update, in window coordinates."""
        return self._mouse_pos