"""Base class for animated game objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import pygame

from .animation import Animation


@dataclass
class Rect:
    """Position and size of an entity."""

    x: float
    y: float
    width: float
    height: float


class Entity(ABC):
    """An object on screen with a position and sprite-sheet animations."""

    def __init__(self, x: float, y: float, width: float, height: float, texture: Any) -> None:
        self.rect = Rect(x, y, width, height)
        self.texture = texture
        self.animations: dict[str, Animation] = {}
        self.current_animation: Animation | None = None
        self.frame_timer = 0.0
        self.frame_duration = 100.0
        self.current_frame_index = 0
        self.flip_horizontal = False
        self.flip_vertical = False

    def render(self, surface: pygame.Surface) -> None:
        """Draw the current animation frame onto ``surface``."""
        if self.current_animation is None:
            raise RuntimeError("entity has no current animation")
        if self.texture is None:
            raise RuntimeError("entity has no texture")
        sx, sy, sw, sh = self.current_animation.frame_rect(self.current_frame_index)
        frame = self.texture.subsurface(pygame.Rect(int(sx), int(sy), int(sw), int(sh)))
        image = pygame.transform.scale(frame, (int(self.rect.width), int(self.rect.height)))
        if self.flip_horizontal or self.flip_vertical:
            image = pygame.transform.flip(image, self.flip_horizontal, self.flip_vertical)
        surface.blit(image, (self.rect.x, self.rect.y))

    def update_animation_frame(self, delta_time: int) -> None:
        """Advance the animation timer and step to the next frame when due."""
        if self.current_animation is None:
            return
        self.frame_timer += delta_time
        if self.frame_timer >= self.frame_duration:
            self.frame_timer = 0.0
            self.current_frame_index = (
                self.current_frame_index + 1
            ) % self.current_animation.frame_count()

    @abstractmethod
    def update(self, delta_time: int, level: Any) -> None:
        """Advance the entity's state by ``delta_time`` milliseconds."""

    def add_animation(
        self, name: str, row: int, num_frames: int, frame_width: float, frame_height: float
    ) -> None:
        """Register an animation under ``name``, replacing any existing one."""
        self.animations[name] = Animation(row, num_frames, frame_width, frame_height)