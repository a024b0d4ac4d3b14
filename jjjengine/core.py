"""The engine core: runs one frame of timing, input and scenes."""

from __future__ import annotations

import dataclasses
import time
from collections.abc import Collection
from pathlib import Path
from typing import Callable

from jjjengine.canvas import Canvas
from jjjengine.context import Context
from jjjengine.resources import ResourceManager
from jjjengine.scene_manager import SceneManager
from jjjengine.timing import TimeManager
from jjjengine.types import KeyType, SceneType


class Core:
    """Ties the managers together and drives them once per frame."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self.context = dataclasses.replace(Context.create(), time=TimeManager(clock))
        self.scenes = SceneManager(self.context)
        self.resources = ResourceManager()

    def init(self) -> None:
        """Initialise every manager and open the editor scene."""
        self.context.time.init()
        self.context.input.init()
        self.scenes.init()
        self.resources.init(Path(""))
        self.scenes.change_scene(SceneType.EDIT_SCENE)

    def update(self, pressed: Collection[KeyType], mouse_pos: tuple[int, int]) -> None:
        """Advance one frame given the held keys and the mouse position."""
        self.context.time.update()
        self.context.input.update(pressed, mouse_pos)
        self.scenes.update()

    def render(self, canvas: Canvas) -> None:
        """Draw the frame rate and then the current scene."""
        self.context.time.render(canvas)
        self.scenes.render(canvas)

    def close(self) -> None:
        """Shut the current scene down."""
        self.scenes.clear()