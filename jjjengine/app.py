"""The windowed application that runs the engine with pygame."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any

import pygame

from jjjengine.core import Core
from jjjengine.types import KeyType, Pos

_WINDOW_SIZE = (800, 600)
_TITLE = "JJJEngine"
_BACKGROUND = (255, 255, 255)
_FILL = (255, 255, 255)
_OUTLINE = (0, 0, 0)
_FONT_SIZE = 20

_KEY_CODES: dict[KeyType, int] = {
    **{KeyType[letter]: getattr(pygame, "K_" + letter.lower())
       for letter in "QWERTYUIOPASDFGHJKLZXCVBNM"},
    KeyType.LEFT: pygame.K_LEFT,
    KeyType.RIGHT: pygame.K_RIGHT,
    KeyType.DOWN: pygame.K_DOWN,
    KeyType.UP: pygame.K_UP,
    KeyType.SPACE: pygame.K_SPACE,
}

_MOUSE_BUTTONS: dict[KeyType, int] = {
    KeyType.LEFT_MOUSE: 0,
    KeyType.RIGHT_MOUSE: 2,
}


def _box(left: float, top: float, right: float, bottom: float) -> pygame.Rect:
    return pygame.Rect(int(left), int(top), int(right) - int(left), int(bottom) - int(top)).normalize() \
        if False else _normalized(int(left), int(top), int(right), int(bottom))


def _normalized(left: int, top: int, right: int, bottom: int) -> pygame.Rect:
    x0, x1 = sorted((left, right))
    y0, y1 = sorted((top, bottom))
    return pygame.Rect(x0, y0, x1 - x0, y1 - y0)


class PygameCanvas:
    """Draws shapes and text onto a pygame surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self._font: pygame.font.Font | None = None

    def rectangle(self, left: float, top: float, right: float, bottom: float) -> None:
        """Draw a filled rectangle with an outline."""
        rect = _normalized(int(left), int(top), int(right), int(bottom))
        pygame.draw.rect(self.surface, _FILL, rect)
        pygame.draw.rect(self.surface, _OUTLINE, rect, 1)

    def ellipse(self, left: float, top: float, right: float, bottom: float) -> None:
        """Draw a filled ellipse with an outline."""
        rect = _normalized(int(left), int(top), int(right), int(bottom))
        pygame.draw.ellipse(self.surface, _FILL, rect)
        pygame.draw.ellipse(self.surface, _OUTLINE, rect, 1)

    def line(self, start: Pos, end: Pos) -> None:
        """Draw a one-pixel line."""
        pygame.draw.line(
            self.surface,
            _OUTLINE,
            (int(start.x), int(start.y)),
            (int(end.x), int(end.y)),
        )

    def text(self, x: float, y: float, text: str) -> None:
        """Draw text with its top-left corner at ``(x, y)``."""
        if not text:
            return
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, _FONT_SIZE)
        image = self._font.render(text, True, _OUTLINE)
        self.surface.blit(image, (int(x), int(y)))


def pressed_keys(key_state: Any, mouse_buttons: Sequence[bool]) -> frozenset[KeyType]:
    """The tracked keys held now, from pygame's keyboard and mouse state."""
    held = {key_type for key_type, code in _KEY_CODES.items() if key_state[code]}
    held.update(
        key_type for key_type, index in _MOUSE_BUTTONS.items()
        if index < len(mouse_buttons) and mouse_buttons[index]
    )
    return frozenset(held)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the engine until it is closed."""
    parser = argparse.ArgumentParser(prog="jjjengine", description="Run the engine in a window.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(_WINDOW_SIZE)
        pygame.display.set_caption(_TITLE)
        canvas = PygameCanvas(screen)
        core = Core()
        core.init()
        try:
            while True:
                if any(event.type == pygame.QUIT for event in pygame.event.get()):
                    break
                core.update(
                    pressed_keys(pygame.key.get_pressed(), pygame.mouse.get_pressed()),
                    pygame.mouse.get_pos(),
                )
                screen.fill(_BACKGROUND)
                core.render(canvas)
                pygame.display.flip()
        finally:
            core.close()
    finally:
        pygame.quit()
    return 0