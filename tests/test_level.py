import pygame

from foxescape.constants import RENDERER_HEIGHT_IN_PIXELS, RENDERER_WIDTH_IN_PIXELS, TILE_SIZE
from foxescape.level import Level


def test_initial_tile_map_rows():
    level = Level()
    assert [row[0] for row in level.tile_map] == [1, 1, 2]


def test_rows_have_fixed_length_and_single_block():
    level = Level()
    for row in level.tile_map:
        assert len(row) == 1920 // 32 * 6
        assert set(row) == {row[0]}


def test_add_rows_appends():
    level = Level()
    level.add_rows(4, 7)
    assert len(level.tile_map) == 7
    assert all(row == level.tile_map[-1] for row in level.tile_map[-4:])
    assert level.tile_map[-1][0] == 7


def test_rows_are_independent():
    level = Level()
    level.tile_map[0][0] = 9
    assert level.tile_map[1][0] == 1


def test_nothing_is_solid():
    level = Level()
    assert level.is_solid_at_pixel(0, 0) is False
    assert level.is_solid_at_pixel(500.5, 400.0) is False


def test_update_keeps_tile_map():
    level = Level()
    before = [list(r) for r in level.tile_map]
    level.update(16)
    assert level.tile_map == before


def test_render_draws_grid_lines_only():
    surface = pygame.Surface((RENDERER_WIDTH_IN_PIXELS, RENDERER_HEIGHT_IN_PIXELS))
    surface.fill((0, 0, 0))
    Level().render(surface)
    assert surface.get_at((0, 0))[:3] == (255, 0, 0)
    assert surface.get_at((TILE_SIZE, TILE_SIZE))[:3] == (255, 0, 0)
    assert surface.get_at((TILE_SIZE // 2, TILE_SIZE // 2))[:3] == (0, 0, 0)