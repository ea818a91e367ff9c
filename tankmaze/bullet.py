"""Bullets that travel through the maze and bounce off walls."""

from __future__ import annotations

import math

import pygame

from tankmaze.maze import BLOCK_SIZE, BULLET_SIZE, Maze

BULLET_SPEED = 0.1
BULLET_LIFETIME = 30000
BULLET_COLOR = (255, 255, 0)


class Bullet:
    """A square projectile fired at an angle given in degrees."""

    def __init__(self, x: float, y: float, angle: float) -> None:
        self.x = float(x)
        self.y = float(y)
        self.angle = angle
        # Horizontal direction always starts positive; the vertical one
        # follows the sine of the raw angle value.
        self.dir_x = 1
        self.dir_y = 1 if math.sin(angle) > 0 else -1
        self.speed = BULLET_SPEED
        self.lifetime = BULLET_LIFETIME
        self.rect = pygame.Rect(int(x), int(y), BULLET_SIZE, BULLET_SIZE)

    def move(self, maze: Maze) -> None:
        """Advance one tick, flipping direction on every wall the next position touches."""
        radians = math.radians(self.angle)
        next_x = self.x + math.cos(radians) * self.speed * self.dir_x
        next_y = self.y + math.sin(radians) * self.speed * self.dir_y

        width, height = self.rect.w, self.rect.h
        grid_x = int((next_x + width // 2) / BLOCK_SIZE)
        grid_y = int((next_y + height) / BLOCK_SIZE)

        if maze.is_wall(grid_y, int(next_x / BLOCK_SIZE)):
            self.dir_x = -self.dir_x
        if maze.is_wall(grid_y, int((next_x + width) / BLOCK_SIZE)):
            self.dir_x = -self.dir_x
        if maze.is_wall(int(next_y / BLOCK_SIZE), grid_x):
            self.dir_y = -self.dir_y
        if maze.is_wall(int((next_y + height) / BLOCK_SIZE), grid_x):
            self.dir_y = -self.dir_y

        self.x = next_x
        self.y = next_y
        self.rect.topleft = (int(next_x), int(next_y))
        self.lifetime -= 1

    def draw(self, surface: pygame.Surface) -> None:
        """Paint the bullet as a yellow square."""
        surface.fill(BULLET_COLOR, self.rect)