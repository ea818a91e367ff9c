import pygame
import pytest

from tankmaze.bullet import BULLET_COLOR, BULLET_LIFETIME, BULLET_SPEED, Bullet
from tankmaze.maze import BULLET_SIZE, OPEN, Maze


def _open_maze():
    maze = Maze(11, 11)
    for r in range(1, 10):
        for c in range(1, 10):
            maze.cells[r][c] = OPEN
    return maze


def test_initial_state():
    bullet = Bullet(100.7, 200.2, 0)
    assert bullet.x == pytest.approx(100.7)
    assert bullet.y == pytest.approx(200.2)
    assert bullet.speed == BULLET_SPEED
    assert bullet.lifetime == BULLET_LIFETIME
    assert bullet.rect == pygame.Rect(100, 200, BULLET_SIZE, BULLET_SIZE)
    assert bullet.dir_x == 1


@pytest.mark.parametrize("angle,expected", [(0, -1), (90, 1), (-90, -1)])
def test_vertical_direction_from_raw_sine(angle, expected):
    assert Bullet(0, 0, angle).dir_y == expected


def test_move_in_open_space():
    bullet = Bullet(100, 100, 0)
    bullet.move(_open_maze())
    assert bullet.x == pytest.approx(100 + BULLET_SPEED)
    assert bullet.y == pytest.approx(100)
    assert bullet.lifetime == BULLET_LIFETIME - 1
    assert bullet.rect.topleft == (int(bullet.x), int(bullet.y))


def test_lifetime_counts_down_each_move():
    maze = _open_maze()
    bullet = Bullet(100, 100, 0)
    for _ in range(5):
        bullet.move(maze)
    assert bullet.lifetime == BULLET_LIFETIME - 5


def test_bounces_off_right_wall():
    maze = _open_maze()
    bullet = Bullet(590, 100, 0)
    bullet.move(maze)
    assert bullet.dir_x == -1
    first_x = bullet.x
    bullet.move(maze)
    assert bullet.x < first_x


def test_draw_paints_yellow_square():
    surface = pygame.Surface((30, 30))
    bullet = Bullet(5, 5, 0)
    bullet.draw(surface)
    assert surface.get_at((5, 5)) == (*BULLET_COLOR, 255)
    assert surface.get_at((5 + BULLET_SIZE - 1, 5 + BULLET_SIZE - 1)) == (*BULLET_COLOR, 255)
    assert surface.get_at((0, 0)) == (0, 0, 0, 255)