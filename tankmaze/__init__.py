"""Two-player tank battle in a randomly generated maze: maze, bullets, tanks and game loop."""

__version__ = "0.1.0"
__all__ = ["maze", "bullet", "tank", "game"]