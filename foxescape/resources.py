"""Loading and caching of image files."""

from __future__ import annotations

import logging

import pygame

log = logging.getLogger(__name__)


class ResourceManager:
    """Loads images once and hands out the cached surface afterwards."""

    def __init__(self) -> None:
        self._textures: dict[str, pygame.Surface] = {}

    def __contains__(self, file_path: object) -> bool:
        return file_path in self._textures

    def __len__(self) -> int:
        return len(self._textures)

    def load_texture(self, file_path: str) -> pygame.Surface | None:
        """Return the image at ``file_path``, or None if it cannot be loaded."""
        key = str(file_path)
        cached = self._textures.get(key)
        if cached is not None:
            return cached
        try:
            texture = pygame.image.load(key)
        except (pygame.error, OSError) as exc:
            log.warning("Failed to load texture: %s", exc)
            return None
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            texture = texture.convert_alpha()
        self._textures[key] = texture
        return texture

    def clear(self) -> None:
        """Drop every cached texture."""
        self._textures.clear()