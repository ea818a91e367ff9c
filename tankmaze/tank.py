"""Player tanks: movement, turning, firing cooldown and rendering."""

from __future__ import annotations

import logging
import math

import pygame

from tankmaze.maze import BLOCK_SIZE, TANK_SIZE, Maze

logger = logging.getLogger(__name__)

TEXTURE_PATH = "Tank Texture.PNG"
TANK_SPEED = 0.05
TURN_RATE = 0.05
START_ANGLE = -90.0


def load_texture(path):
    """Load an image from disk, or return None (with a log entry) if that fails."""
    try:
        image = pygame.image.load(path)
    except (pygame.error, OSError) as exc:
        logger.warning("cannot load image %s: %s", path, exc)
        return None
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


class Tank:
    """A tank positioned in pixels, facing an angle in degrees."""

    def __init__(self, x: float, y: float, color, texture=None) -> None:
        self.x = float(x)
        self.y = float(y)
        self.speed = TANK_SPEED
        self.angle = START_ANGLE
        self.cooldown = 0
        self.color = tuple(color)
        self.alive = True
        self.rect = pygame.Rect(int(x), int(y), TANK_SIZE, TANK_SIZE)
        self.texture = texture

    def move(self, maze: Maze, forward: float) -> None:
        """Drive along the facing direction unless the destination cell is a wall."""
        radians = math.radians(self.angle)
        new_x = self.x + math.cos(radians) * (self.speed * forward)
        new_y = self.y + math.sin(radians) * (self.speed * forward)

        if maze.is_wall(int(new_y / BLOCK_SIZE), int(new_x / BLOCK_SIZE)):
            return
        self.x = new_x
        self.y = new_y
        self.rect.topleft = (int(new_x), int(new_y))

    def rotate(self, direction: float) -> None:
        """Turn by a small step; positive is clockwise on screen."""
        self.angle += direction * TURN_RATE

    def update_cooldown(self) -> None:
        """Count the firing cooldown down by one tick."""
        if self.cooldown > 0:
            self.cooldown -= 1

    def draw(self, surface: pygame.Surface) -> None:
        """Centre the hit box on the tank and blit its tinted, rotated texture."""
        if not self.alive:
            return
        self.rect.topleft = (
            int(self.x - self.rect.w // 2),
            int(self.y - self.rect.h // 2),
        )
        if self.texture is None:
            return
        image = pygame.transform.scale(self.texture, self.rect.size)
        image.fill(self.color, special_flags=pygame.BLEND_RGB_MULT)
        image = pygame.transform.rotate(image, -(self.angle + 90))
        surface.blit(image, image.get_rect(center=self.rect.center))