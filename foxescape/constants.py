"""Screen and tile dimensions shared by the game modules."""

TILE_SIZE = 32
"""Tile size in pixels."""

RENDERER_HEIGHT_IN_TILES = 16
RENDERER_WIDTH_IN_TILES = 32

RENDERER_HEIGHT_IN_PIXELS = RENDERER_HEIGHT_IN_TILES * TILE_SIZE
RENDERER_WIDTH_IN_PIXELS = RENDERER_WIDTH_IN_TILES * TILE_SIZE