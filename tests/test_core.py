from pathlib import Path

from jjjengine.core import Core
from jjjengine.scenes import EditScene
from jjjengine.types import KeyType, SceneType


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class RecordingCanvas:
    def __init__(self):
        self.calls = []

    def rectangle(self, left, top, right, bottom):
        self.calls.append(("rectangle", left, top, right, bottom))

    def ellipse(self, left, top, right, bottom):
        self.calls.append(("ellipse", left, top, right, bottom))

    def line(self, start, end):
        self.calls.append(("line", start, end))

    def text(self, x, y, text):
        self.calls.append(("text", x, y, text))


def make_core():
    clock = FakeClock()
    core = Core(clock)
    core.init()
    return core, clock


def test_init_opens_edit_scene():
    core, _ = make_core()
    assert core.scenes.scene_type is SceneType.EDIT_SCENE
    assert isinstance(core.scenes.current_scene, EditScene)
    assert core.resources.resource_path == Path("")


def test_update_advances_time():
    core, clock = make_core()
    clock.now += 0.25
    core.update(set(), (0, 0))
    assert core.context.time.delta_time == 0.25


def test_update_feeds_input_to_scene():
    core, _ = make_core()
    core.update({KeyType.LEFT_MOUSE}, (10, 20))
    core.update(set(), (10, 20))
    core.update({KeyType.LEFT_MOUSE}, (30, 40))
    assert core.scenes.current_scene.lines == (((10, 20), (30, 40)),)
    assert core.context.input.mouse_pos == (30, 40)


def test_render_draws_fps_then_scene():
    core, clock = make_core()
    core.update({KeyType.LEFT_MOUSE}, (10, 20))
    core.update(set(), (10, 20))
    core.update({KeyType.LEFT_MOUSE}, (30, 40))
    clock.now += 0.5
    core.update(set(), (30, 40))
    canvas = RecordingCanvas()
    core.render(canvas)
    assert canvas.calls[0] == ("text", 0, 0, core.context.time.fps_text())
    assert canvas.calls[0][3].startswith("FPS : ")
    assert [call[0] for call in canvas.calls[1:]] == ["line"]


def test_close_clears_scene():
    core, _ = make_core()
    core.close()
    assert core.scenes.current_scene is None