"""The game window, main loop and entry point."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import pygame

from .constants import RENDERER_HEIGHT_IN_PIXELS, RENDERER_WIDTH_IN_PIXELS, TILE_SIZE
from .entity import Entity
from .level import Level
from .player import Player
from .resources import ResourceManager

log = logging.getLogger(__name__)

TITLE = "Escape of the Fox"
BACKGROUND = (0, 0, 0)


def letterbox(window_width: int, window_height: int) -> tuple[int, int, int, int]:
    """Fit the virtual screen into a window, keeping its aspect ratio.

    Returns ``(offset_x, offset_y, width, height)`` of the centred area.
    """
    scale = min(
        window_width / RENDERER_WIDTH_IN_PIXELS,
        window_height / RENDERER_HEIGHT_IN_PIXELS,
    )
    dest_w = int(RENDERER_WIDTH_IN_PIXELS * scale)
    dest_h = int(RENDERER_HEIGHT_IN_PIXELS * scale)
    return (window_width - dest_w) // 2, (window_height - dest_h) // 2, dest_w, dest_h


class Game:
    """Owns the window, the level and the entities, and runs the loop."""

    def __init__(self, title: str = TITLE, assets_dir: str | Path = "assets") -> None:
        try:
            pygame.init()
            pygame.display.set_caption(title)
            self.window = pygame.display.set_mode((0, 0), pygame.FULLSCREEN | pygame.NOFRAME)
        except pygame.error as exc:
            log.error("Couldn't create window: %s", exc)
            pygame.quit()
            raise RuntimeError(f"Couldn't create window: {exc}") from exc

        self.render_surface = pygame.Surface((RENDERER_WIDTH_IN_PIXELS, RENDERER_HEIGHT_IN_PIXELS))
        self.resources = ResourceManager()
        assets = Path(assets_dir)

        texture = self.resources.load_texture(str(assets / "fox.png"))
        self.entities: list[Entity] = [Player(0, 0, TILE_SIZE * 4, TILE_SIZE * 2, texture)]
        level_texture = self.resources.load_texture(str(assets / "back.png"))
        self.level = Level(level_texture)

        self.running = True

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def run(self) -> None:
        """Process events, update and render until the window is closed."""
        last_time = pygame.time.get_ticks()
        while self.running:
            current_time = pygame.time.get_ticks()
            delta_time = current_time - last_time
            last_time = current_time

            self.process_events()
            self.update(delta_time)
            self.render()

    def process_events(self) -> None:
        """Handle pending window events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

    def update(self, delta_time: int) -> None:
        """Advance the level and every entity."""
        self.level.update(delta_time)
        for entity in self.entities:
            entity.update(delta_time, self.level)

    def render(self) -> None:
        """Draw to the virtual screen, then scale it onto the window."""
        self.render_surface.fill(BACKGROUND)
        self.level.render(self.render_surface)
        for entity in self.entities:
            entity.render(self.render_surface)

        self.window.fill(BACKGROUND)
        offset_x, offset_y, dest_w, dest_h = letterbox(*self.window.get_size())
        scaled = pygame.transform.scale(self.render_surface, (dest_w, dest_h))
        self.window.blit(scaled, (offset_x, offset_y))
        pygame.display.flip()

    def close(self) -> None:
        """Release the cached images and shut the display down."""
        self.running = False
        self.resources.clear()
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="foxescape", description="Run the game.")
    parser.add_argument("--assets", default="assets", help="directory holding the images")
    args = parser.parse_args(argv)
    with Game(TITLE, args.assets) as game:
        game.run()
    return 0