# jjjengine

A small 2D game engine. Each frame, `jjjengine.core.Core` drives three parts:

- `TimeManager` (`jjjengine.timing`) measures the time between frames.
- `InputManager` (`jjjengine.input`) tracks keyboard and mouse state.
- `SceneManager` (`jjjengine.scene_manager`) holds the current scene.

These share one `Context` (`jjjengine.context`), which also holds the
`GameObjectManager` that keeps the live game objects.

## Scenes

- **Edit scene** (`EditScene`): the first left click sets a starting point.
  Each later left click adds a line from the previous point to the new one.
  A right click lifts the pen, so the next left click sets a new starting
  point. `EditScene.lines` holds the recorded lines as pairs of end points.
- **Play scene** (`PlayScene`): a player starts at (300, 400) and faces a row
  of five monsters. The player is drawn as a 100-pixel square, moves with the
  arrow keys and fires a missile each time the space bar goes down. Missiles
  fly upward at 300 pixels per second. A missile that comes within 30 pixels
  of a monster removes itself and the monster. A missile that passes the top
  of the screen is removed.

The engine starts in the edit scene. The frame rate is drawn as
`FPS : <n>` in the top-left corner.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Running

```
jjjengine
```

This opens an 800×600 pygame window titled "JJJEngine" that runs the edit
scene. Close the window to quit. `jjjengine --help` shows the usage. The
command takes no other options.

## Using the engine in code

The engine does not need a window. `Core.update` takes the set of held
`KeyType` values and the mouse position. `Core.render` draws onto any object
with the `Canvas` methods `rectangle`, `ellipse`, `line` and `text`
(`jjjengine.canvas`):

```python
from jjjengine.core import Core
from jjjengine.types import KeyType, SceneType

core = Core()
core.init()
core.update({KeyType.LEFT_MOUSE}, (10, 10))
core.update(set(), (10, 10))
core.update({KeyType.LEFT_MOUSE}, (200, 120))
print(core.scenes.current_scene.lines)   # (((10, 10), (200, 120)),)

core.scenes.change_scene(SceneType.PLAY_SCENE)
core.close()
```

`Core` takes an optional clock function that returns seconds. The default is
`time.perf_counter`. Passing a fixed clock makes frame timing deterministic.
Asking `SceneManager.change_scene` for the scene type already running does
nothing. Asking it for `SceneType.NONE` raises `ValueError`.

`jjjengine.app.PygameCanvas` draws onto a pygame surface.
`jjjengine.app.pressed_keys` turns pygame's keyboard and mouse state into the
set of held `KeyType` values.

## What it does not do

- The window has no key or menu for changing scenes. The play scene can only
  be reached from code, through `SceneManager.change_scene`.
- `ResourceManager` only records a resource directory. It loads no images,
  sounds or other files.
- There is no score, no win or lose condition, and monsters do not move.

## Tests

```
pytest
```