"""Sprite-sheet animations laid out as one row of equally sized frames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Animation:
    """A row of frames on a sprite sheet."""

    row: int
    num_frames: int
    frame_width: float
    frame_height: float

    def frame_rect(self, frame_num: int) -> tuple[float, float, float, float]:
        """Return the source rectangle ``(x, y, width, height)`` of a frame."""
        return (
            frame_num * self.frame_width,
            self.row * self.frame_height,
            self.frame_width,
            self.frame_height,
        )

    def frame_count(self) -> int:
        """Return the number of frames in the animation."""
        return self.num_frames