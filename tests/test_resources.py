from pathlib import Path

from jjjengine.resources import ResourceManager


def test_default_path_is_empty():
    assert ResourceManager().resource_path == Path("")


def test_init_sets_path():
    manager = ResourceManager()
    manager.init(Path("assets") / "sprites")
    assert manager.resource_path == Path("assets") / "sprites"


def test_init_accepts_string():
    manager = ResourceManager()
    manager.init("data")
    assert manager.resource_path == Path("data")


def test_clear_keeps_path():
    manager = ResourceManager()
    manager.init("data")
    manager.clear()
    assert manager.resource_path == Path("data")