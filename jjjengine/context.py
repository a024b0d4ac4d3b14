"""The shared managers that engine parts reach through."""

from __future__ import annotations

import time
from dataclasses import dataclass

from jjjengine.input import InputManager
from jjjengine.object_manager import GameObjectManager
from jjjengine.timing import TimeManager


@dataclass
class Context:
    """Timing, input and object managers shared by one running engine."""

    time: TimeManager
    input: InputManager
    objects: GameObjectManager

    @classmethod
    def create(cls) -> Context:
        """Build a context with fresh managers driven by the performance counter."""
        return cls(
            time=TimeManager(time.perf_counter),
            input=InputManager(),
            objects=GameObjectManager(),
        )