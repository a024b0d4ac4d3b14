"""Enumerations and small value types shared across the engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class SceneType(Enum):
    """Kinds of scene the scene manager can switch between."""

    NONE = auto()
    PLAY_SCENE = auto()
    EDIT_SCENE = auto()


class GameObjectType(Enum):
    """Kinds of game object."""

    NONE = auto()
    PLAYER = auto()
    MONSTER = auto()
    MISSILE = auto()


class KeyType(Enum):
    """Keys and mouse buttons tracked by the input manager.

    ``END`` marks the end of the list and is never tracked.
    """

    Q = auto()
    W = auto()
    E = auto()
    R = auto()
    T = auto()
    Y = auto()
    U = auto()
    I = auto()  # noqa: E741
    O = auto()  # noqa: E741
    P = auto()
    A = auto()
    S = auto()
    D = auto()
    F = auto()
    G = auto()
    H = auto()
    J = auto()
    K = auto()
    L = auto()
    Z = auto()
    X = auto()
    C = auto()
    V = auto()
    B = auto()
    N = auto()
    M = auto()
    LEFT = auto()
    RIGHT = auto()
    DOWN = auto()
    UP = auto()
    SPACE = auto()
    LEFT_MOUSE = auto()
    RIGHT_MOUSE = auto()
    END = auto()


class KeyState(Enum):
    """State of a key in the current frame."""

    NONE = auto()
    PRESSED = auto()
    UP = auto()
    DOWN = auto()


@dataclass
class Stat:
    """Hit points and speed of a game object."""

    hp: int = 0
    max_hp: int = 0
    speed: float = 0.0


@dataclass
class Pos:
    """A position on the screen."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Key:
    """Tracked state of one key."""

    key_type: KeyType
    key_state: KeyState = KeyState.NONE
    is_pressed: bool = False