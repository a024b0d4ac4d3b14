"""A small 2D game engine: frame timing, input tracking, a play scene and a line-drawing edit scene, with a pygame window."""

__version__ = "0.1.0"