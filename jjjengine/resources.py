"""Location of the engine's resource files."""

from __future__ import annotations

import os
from pathlib import Path


class ResourceManager:
    """Remembers the directory that resources are loaded from."""

    def __init__(self) -> None:
        self._resource_path = Path("")
        self._loaded: dict[str, object] = {}

    def init(self, resource_path: str | os.PathLike[str]) -> None:
        """Set the directory that resources are loaded from."""
        self._resource_path = Path(resource_path)

    def clear(self) -> None:
        """Drop every loaded resource."""
        self._loaded.clear()

    @property
    def resource_path(self) -> Path:
        """The directory that resources are loaded from."""
        return self._resource_path