"""Switching between scenes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from jjjengine.canvas import Canvas
from jjjengine.scenes import EditScene, PlayScene, Scene
from jjjengine.types import SceneType

if TYPE_CHECKING:
    from jjjengine.context import Context

_SCENES: dict[SceneType, type[Scene]] = {
    SceneType.PLAY_SCENE: PlayScene,
    SceneType.EDIT_SCENE: EditScene,
}


class SceneManager:
    """Owns the current scene and forwards the frame to it."""

    def __init__(self, context: Context) -> None:
        self.context = context
        self.init()

    def init(self) -> None:
        """Start with no scene running."""
        self._current_scene: Scene | None = None
        self._scene_type = SceneType.NONE

    def update(self) -> None:
        """Update the current scene, if any."""
        if self._current_scene is not None:
            self._current_scene.update()

    def render(self, canvas: Canvas) -> None:
        """Draw the current scene, if any."""
        if self._current_scene is not None:
            self._current_scene.render(canvas)

    def clear(self) -> None:
        """Drop the current scene."""
        self._current_scene = None

    def change_scene(self, scene_type: SceneType) -> None:
        """Replace the current scene with a fresh one of ``scene_type``.

        Asking for the type already set does nothing.
        """
        if scene_type is self._scene_type:
            return
        try:
            scene_cls = _SCENES[scene_type]
        except KeyError:
            raise ValueError(f"no scene for {scene_type.name}") from None

        scene = scene_cls(self.context)
        self._current_scene = scene
        self._scene_type = scene_type
        scene.init()

    @property
    def scene_type(self) -> SceneType:
        """The type of the scene last switched to."""
        return self._scene_type

    @property
    def current_scene(self) -> Scene | None:
        """The running scene, or None."""
        return self._current_scene