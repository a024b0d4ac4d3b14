from collections import defaultdict

import pygame
import pytest

from jjjengine.app import PygameCanvas, main, pressed_keys
from jjjengine.types import KeyType, Pos

BACKGROUND = (0, 255, 0)


def rgb(surface, point):
    return tuple(surface.get_at(point))[:3]


@pytest.fixture
def surface():
    surf = pygame.Surface((60, 60))
    surf.fill(BACKGROUND)
    return surf


def colours(surface):
    width, height = surface.get_size()
    return {rgb(surface, (x, y)) for x in range(width) for y in range(height)}


def test_pressed_keys_maps_keyboard_and_left_mouse():
    state = defaultdict(bool, {pygame.K_q: True, pygame.K_SPACE: True})
    held = pressed_keys(state, (True, False, False))
    assert held == {KeyType.Q, KeyType.SPACE, KeyType.LEFT_MOUSE}


def test_pressed_keys_maps_arrows_and_right_mouse():
    state = defaultdict(bool, {pygame.K_UP: True, pygame.K_LEFT: True})
    held = pressed_keys(state, (False, True, True))
    assert held == {KeyType.UP, KeyType.LEFT, KeyType.RIGHT_MOUSE}


def test_pressed_keys_nothing_held():
    assert pressed_keys(defaultdict(bool), (False, False, False)) == frozenset()


def test_rectangle_draws_outline_and_fill(surface):
    canvas = PygameCanvas(surface)
    canvas.rectangle(10, 10, 30, 30)
    assert rgb(surface, (5, 5)) == BACKGROUND
    assert rgb(surface, (10, 10)) != BACKGROUND
    assert rgb(surface, (20, 20)) not in (BACKGROUND, rgb(surface, (10, 10)))


def test_ellipse_fills_centre_only(surface):
    canvas = PygameCanvas(surface)
    canvas.ellipse(10, 10, 50, 50)
    assert rgb(surface, (11, 11)) == BACKGROUND
    assert rgb(surface, (30, 30)) != BACKGROUND


def test_line_marks_pixels(surface):
    canvas = PygameCanvas(surface)
    canvas.line(Pos(0, 5), Pos(50, 5))
    assert rgb(surface, (25, 5)) != BACKGROUND
    assert rgb(surface, (25, 20)) == BACKGROUND


def test_text_draws_something(surface):
    canvas = PygameCanvas(surface)
    canvas.text(0, 0, "FPS : 60")
    assert len(colours(surface)) > 1


def test_empty_text_draws_nothing(surface):
    canvas = PygameCanvas(surface)
    canvas.text(0, 0, "")
    assert colours(surface) == {BACKGROUND}


def test_main_help_exits():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0


def test_main_stops_on_quit(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.setattr(pygame.event, "get", lambda *a, **k: [pygame.event.Event(pygame.QUIT)])
    assert main([]) == 0