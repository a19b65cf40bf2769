"""The level: a tile map and its debug grid rendering."""

from __future__ import annotations

from typing import Any

import pygame

from .constants import RENDERER_HEIGHT_IN_PIXELS, RENDERER_WIDTH_IN_PIXELS, TILE_SIZE

ROW_LENGTH = 1920 // 32 * 6
GRID_COLOR = (255, 0, 0)

# Block ids that count as solid; no block is solid yet.
SOLID_BLOCKS: frozenset[int] = frozenset()


class Level:
    """Holds the level's tiles and draws its grid."""

    def __init__(self, texture: Any = None) -> None:
        self.texture = texture
        self.tile_map: list[list[int]] = []
        self.elapsed = 0
        self.add_rows(2, 1)
        self.add_rows(1, 2)

    def _add_row(self, block: int) -> None:
        self.tile_map.append([block] * ROW_LENGTH)

    def add_rows(self, rows: int, block: int) -> None:
        """Append ``rows`` rows filled with ``block``."""
        for _ in range(rows):
            self._add_row(block)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the tile grid outline onto ``surface``."""
        for x in range(0, RENDERER_WIDTH_IN_PIXELS, TILE_SIZE):
            for y in range(0, RENDERER_HEIGHT_IN_PIXELS, TILE_SIZE):
                pygame.draw.rect(surface, GRID_COLOR, pygame.Rect(x, y, TILE_SIZE, TILE_SIZE), width=1)

    def update(self, delta_time: int) -> None:
        """Advance the level clock by ``delta_time`` milliseconds."""
        self.elapsed += delta_time

    def is_solid_at_pixel(self, x: float, y: float) -> bool:
        """Report whether the tile under the given pixel is a solid block."""
        if x < 0 or y < 0:
            return False
        row, column = int(y // TILE_SIZE), int(x // TILE_SIZE)
        if row >= len(self.tile_map) or column >= len(self.tile_map[row]):
            return False
        return self.tile_map[row][column] in SOLID_BLOCKS