"""The player-controlled fox."""

from __future__ import annotations

from typing import Any

import pygame

from .constants import TILE_SIZE
from .entity import Entity

SPEED_X = 0.5
JUMP_STRENGTH = 0.15 * TILE_SIZE
GRAVITY = 0.02
FLOOR = 13 * TILE_SIZE
PLAYER_COLOR = (255, 100, 100)


class Player(Entity):
    """The fox: walks with A and D, jumps with space and falls to the floor."""

    def __init__(self, x: float, y: float, width: float, height: float, texture: Any) -> None:
        super().__init__(x, y, width, height, texture)
        self.frame_width = TILE_SIZE * 8
        self.frame_height = TILE_SIZE * 4
        self.current_animation = self.animations.get("idle")
        self.on_ground = False
        self.vy = 0.0

    def update(self, delta_time: int, level: Any, keys: Any = None) -> None:
        """Apply input, gravity and the floor for ``delta_time`` milliseconds.

        ``keys`` is indexed by pygame key constants; when omitted the current
        keyboard state is read.
        """
        if keys is None:
            keys = pygame.key.get_pressed()

        if keys[pygame.K_SPACE] and self.on_ground:
            self.vy = -JUMP_STRENGTH
            self.on_ground = False

        if keys[pygame.K_a]:
            self.rect.x -= SPEED_X * delta_time
        if keys[pygame.K_d]:
            self.rect.x += SPEED_X * delta_time

        if not self.on_ground:
            self.vy += GRAVITY * delta_time

        self.rect.y += self.vy * delta_time

        if self.rect.y + self.rect.height >= FLOOR:
            self.rect.y = FLOOR - self.rect.height
            self.on_ground = True
            self.vy = 0.0

        self.update_animation_frame(delta_time)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the player as a filled rectangle."""
        rect = pygame.Rect(
            round(self.rect.x), round(self.rect.y), round(self.rect.width), round(self.rect.height)
        )
        pygame.draw.rect(surface, PLAYER_COLOR, rect)