"""Two-player match state, per-frame rules and the interactive entry point."""

from __future__ import annotations

import argparse
import math
import random
from dataclasses import dataclass

import pygame

from tankmaze.bullet import Bullet
from tankmaze.maze import BLOCK_SIZE, MAZE_HEIGHT, MAZE_WIDTH, SCREEN_HEIGHT, SCREEN_WIDTH, Maze
from tankmaze.tank import TEXTURE_PATH, Tank, load_texture

BACKGROUND = (255, 255, 255)
PLAYER_ONE_COLOR = (255, 255, 255)
PLAYER_TWO_COLOR = (255, 255, 0)
PLAYER_TWO_RESET_COLOR = (255, 128, 0)
PLAYER_ONE_RESET_POSITION = (100, 100)
PLAYER_TWO_RESET_POSITION = (600, 400)
MUZZLE_OFFSET = 20
RESET_KEY = pygame.K_r


@dataclass(frozen=True)
class Controls:
    """Key codes that drive one tank."""

    forward: int
    backward: int
    left: int
    right: int
    fire: int


PLAYER_ONE_KEYS = Controls(pygame.K_w, pygame.K_s, pygame.K_a, pygame.K_d, pygame.K_SPACE)
PLAYER_TWO_KEYS = Controls(
    pygame.K_UP, pygame.K_DOWN, pygame.K_LEFT, pygame.K_RIGHT, pygame.K_RETURN
)
_ALL_KEYS = tuple(
    key
    for controls in (PLAYER_ONE_KEYS, PLAYER_TWO_KEYS)
    for key in (controls.forward, controls.backward, controls.left, controls.right, controls.fire)
)

WINNER_MESSAGES = {
    1: "No.1 TANK IS WINNER!",
    2: "NO.2 TANK IS WINNER!",
}


def shoot(tank: Tank, bullets: list) -> Bullet | None:
    """Fire from the tank's muzzle if its cooldown has run out; return the new bullet."""
    if tank.cooldown > 0:
        return None
    radians = math.radians(tank.angle)
    bullet_x = tank.x + math.cos(radians) * (tank.rect.w // 2 + MUZZLE_OFFSET)
    bullet_y = tank.y + math.sin(radians) * (tank.rect.h // 2 + MUZZLE_OFFSET)
    bullet = Bullet(bullet_x, bullet_y, tank.angle)
    bullets.append(bullet)
    tank.cooldown = bullet.lifetime
    return bullet


def random_tank_position(maze: Maze, rng: random.Random) -> tuple[int, int]:
    """Pick the pixel corner of a random open interior cell."""
    has_open = any(
        not maze.is_wall(row, col)
        for row in range(1, maze.height - 1)
        for col in range(1, maze.width - 1)
    )
    if not has_open:
        raise ValueError("maze has no open interior cell")
    while True:
        x = (rng.randrange(maze.width - 2) + 1) * BLOCK_SIZE
        y = (rng.randrange(maze.height - 2) + 1) * BLOCK_SIZE
        if not maze.is_wall(y // BLOCK_SIZE, x // BLOCK_SIZE):
            return x, y


def _drive(tank: Tank, controls: Controls, keys, maze: Maze, bullets: list) -> None:
    if controls.forward in keys:
        tank.move(maze, 1)
    if controls.backward in keys:
        tank.move(maze, -1)
    if controls.left in keys:
        tank.rotate(-1)
    if controls.right in keys:
        tank.rotate(1)
    if controls.fire in keys:
        shoot(tank, bullets)


def _centre_hitbox(tank: Tank) -> None:
    # The hit box is centred on the tank each frame, as rendering does.
    tank.rect.topleft = (int(tank.x - tank.rect.w // 2), int(tank.y - tank.rect.h // 2))


class Game:
    """A match between two tanks in one maze."""

    def __init__(self, maze: Maze, rng: random.Random | None = None, texture=None) -> None:
        self.maze = maze
        self.rng = rng if rng is not None else random.Random()
        self.texture = texture
        x1, y1 = random_tank_position(maze, self.rng)
        x2, y2 = random_tank_position(maze, self.rng)
        self.tank1 = Tank(x1, y1, PLAYER_ONE_COLOR, texture)
        self.tank2 = Tank(x2, y2, PLAYER_TWO_COLOR, texture)
        self.bullets: list[Bullet] = []
        self.running = True
        self.winner: int | None = None

    @property
    def tanks(self) -> tuple[Tank, Tank]:
        return self.tank1, self.tank2

    @property
    def message(self) -> str | None:
        """The announcement for the winner, once there is one."""
        return WINNER_MESSAGES.get(self.winner) if self.winner is not None else None

    def reset(self) -> None:
        """Put both tanks back at fixed spots and clear all bullets."""
        self.tank1 = Tank(*PLAYER_ONE_RESET_POSITION, PLAYER_ONE_COLOR, self.texture)
        self.tank2 = Tank(*PLAYER_TWO_RESET_POSITION, PLAYER_TWO_RESET_COLOR, self.texture)
        self.bullets.clear()

    def step(self, keys) -> int | None:
        """Run one frame with the given pressed key codes; return the winner if decided."""
        if not self.tank1.alive:
            self.winner = 2
            self.running = False
        elif not self.tank2.alive:
            self.winner = 1
            self.running = False

        for tank, controls in ((self.tank1, PLAYER_ONE_KEYS), (self.tank2, PLAYER_TWO_KEYS)):
            if tank.alive:
                _drive(tank, controls, keys, self.maze, self.bullets)

        for tank in self.tanks:
            tank.update_cooldown()
        for tank in self.tanks:
            if tank.alive:
                _centre_hitbox(tank)

        survivors = []
        for bullet in self.bullets:
            bullet.move(self.maze)
            if bullet.lifetime <= 0:
                continue
            for tank in self.tanks:
                if tank.alive and bullet.rect.colliderect(tank.rect):
                    tank.alive = False
                    bullet.lifetime = 0
            if bullet.lifetime > 0:
                survivors.append(bullet)
        self.bullets = survivors
        return self.winner

    def draw(self, surface: pygame.Surface) -> None:
        """Render the background, maze, living tanks and bullets."""
        surface.fill(BACKGROUND)
        self.maze.draw(surface)
        for tank in self.tanks:
            if tank.alive:
                tank.draw(surface)
        for bullet in self.bullets:
            bullet.draw(surface)


def main(argv=None) -> int:
    """Open the game window and play until a tank wins or the window closes."""
    parser = argparse.ArgumentParser(
        prog="tankmaze", description="Two-player tank battle in a random maze."
    )
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Tank Battle")
        rng = random.Random()
        maze = Maze(MAZE_WIDTH, MAZE_HEIGHT)
        maze.generate(rng)
        game = Game(maze, rng, load_texture(TEXTURE_PATH))

        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYDOWN and event.key == RESET_KEY:
                    game.reset()
            pressed = pygame.key.get_pressed()
            keys = {key for key in _ALL_KEYS if pressed[key]}
            if game.step(keys) is not None:
                print(game.message)
            game.draw(screen)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0