"""A small fullscreen platformer prototype about a fox, built on pygame."""

__version__ = "0.1.0"