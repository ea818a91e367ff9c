import pygame
import pytest

from tankmaze.maze import OPEN, TANK_SIZE, Maze
from tankmaze.tank import START_ANGLE, TANK_SPEED, Tank, load_texture


def _open_maze():
    maze = Maze(11, 11)
    for r in range(1, 10):
        for c in range(1, 10):
            maze.cells[r][c] = OPEN
    return maze


def test_initial_state():
    tank = Tank(120, 130, (1, 2, 3))
    assert tank.x == 120
    assert tank.y == 130
    assert tank.speed == TANK_SPEED
    assert tank.angle == START_ANGLE
    assert tank.cooldown == 0
    assert tank.alive is True
    assert tank.color == (1, 2, 3)
    assert tank.rect == pygame.Rect(120, 130, TANK_SIZE, TANK_SIZE)


def test_move_forward_goes_up_at_start_angle():
    tank = Tank(120, 120, (255, 255, 255))
    tank.move(_open_maze(), 1)
    assert tank.x == pytest.approx(120)
    assert tank.y == pytest.approx(120 - TANK_SPEED)
    assert tank.rect.topleft == (int(tank.x), int(tank.y))


def test_move_backward_goes_down():
    tank = Tank(120, 120, (255, 255, 255))
    tank.move(_open_maze(), -1)
    assert tank.y > 120


def test_move_into_wall_is_blocked():
    tank = Tank(100, 60.02, (255, 255, 255))
    tank.move(_open_maze(), 1)
    assert tank.x == 100
    assert tank.y == pytest.approx(60.02)


def test_rotate_round_trip():
    tank = Tank(0, 0, (0, 0, 0))
    tank.rotate(1)
    assert tank.angle > START_ANGLE
    tank.rotate(-1)
    assert tank.angle == pytest.approx(START_ANGLE)


def test_cooldown_counts_down_to_zero():
    tank = Tank(0, 0, (0, 0, 0))
    tank.cooldown = 2
    tank.update_cooldown()
    assert tank.cooldown == 1
    tank.update_cooldown()
    tank.update_cooldown()
    assert tank.cooldown == 0


def test_draw_centres_rect_without_texture():
    tank = Tank(50, 50, (255, 255, 255))
    tank.draw(pygame.Surface((100, 100)))
    assert tank.rect.center == (50, 50)
    assert tank.rect.size == (TANK_SIZE, TANK_SIZE)


def test_draw_tints_texture():
    texture = pygame.Surface((TANK_SIZE, TANK_SIZE))
    texture.fill((255, 255, 255))
    tank = Tank(50, 50, (255, 0, 0), texture)
    surface = pygame.Surface((100, 100))
    tank.draw(surface)
    assert surface.get_at((50, 50)) == (255, 0, 0, 255)
    assert surface.get_at((5, 5)) == (0, 0, 0, 255)


def test_dead_tank_draws_nothing():
    texture = pygame.Surface((TANK_SIZE, TANK_SIZE))
    texture.fill((255, 255, 255))
    tank = Tank(50, 50, (255, 255, 255), texture)
    tank.alive = False
    surface = pygame.Surface((100, 100))
    tank.draw(surface)
    assert surface.get_at((50, 50)) == (0, 0, 0, 255)


def test_load_texture_missing_file(tmp_path):
    assert load_texture(str(tmp_path / "missing.png")) is None


def test_load_texture_round_trip(tmp_path):
    image = pygame.Surface((12, 8))
    image.fill((10, 20, 30))
    path = tmp_path / "tank.png"
    pygame.image.save(image, str(path))
    loaded = load_texture(str(path))
    assert loaded.get_size() == (12, 8)
    assert loaded.get_at((0, 0))[:3] == (10, 20, 30)