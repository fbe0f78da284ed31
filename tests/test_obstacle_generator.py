import random

import pygame
import pytest

from humania.obstacle_generator import ObstacleGenerator
from humania.obstacles import Bird, Crab, Parrot, Snake


class _ZeroRng:
    def randrange(self, *args):
        return 0


FAR_AWAY = pygame.Rect(0, 0, 1, 1)
EVERYWHERE = pygame.Rect(-100000, -100000, 1000000, 1000000)


@pytest.fixture
def generator():
    gen = ObstacleGenerator(1000, 600, random.Random(7))
    gen.generate_obstacles(200)
    return gen


def test_generates_requested_number(generator):
    assert len(generator.obstacles) == 200


def test_all_kinds_appear(generator):
    kinds = {type(o) for o in generator.obstacles}
    assert kinds == {Parrot, Crab, Snake, Bird}


def test_heights_depend_on_kind(generator):
    for obstacle in generator.obstacles:
        if isinstance(obstacle, (Crab, Snake)):
            assert 405 <= obstacle.rect.y <= 410
        else:
            assert 300 <= obstacle.rect.y < 410


def test_positions_strictly_increase(generator):
    xs = [o.rect.x for o in generator.obstacles]
    assert xs == sorted(xs)
    assert len(set(xs)) == len(xs)
    assert xs[0] >= ObstacleGenerator.FIRST_X + ObstacleGenerator.MIN_X_GAP


def test_zero_rng_places_parrot():
    gen = ObstacleGenerator(1000, 600, _ZeroRng())
    gen.generate_obstacles(1)
    (obstacle,) = gen.obstacles
    assert isinstance(obstacle, Parrot)
    assert obstacle.rect.y == ObstacleGenerator.MIN_Y


def test_render_without_collision_moves_obstacles(generator):
    before = [(o, o.rect.x) for o in generator.obstacles]
    assert generator.render_obstacles(None, FAR_AWAY) is False
    assert len(generator.obstacles) == 200
    for obstacle, x in before:
        assert obstacle.rect.x == x - obstacle.SPEED


def test_render_with_collision_removes_obstacles(capsys):
    gen = ObstacleGenerator(1000, 600, random.Random(3))
    gen.generate_obstacles(5)
    assert gen.render_obstacles(pygame.Surface((100, 100)), EVERYWHERE) is True
    assert gen.obstacles == []
    assert capsys.readouterr().out.count("obstacle deleted") == 5


def test_offscreen_obstacle_respawns_on_the_right():
    gen = ObstacleGenerator(1000, 600, random.Random(11))
    gen.generate_obstacles(1)
    obstacle = gen.obstacles[0]
    obstacle.rect.x = -100
    gen.render_obstacles(None, FAR_AWAY)
    assert ObstacleGenerator.RESPAWN_X <= obstacle.rect.x < (
        ObstacleGenerator.RESPAWN_X + ObstacleGenerator.RESPAWN_RANGE
    )


def test_scroll_moves_every_obstacle(generator):
    before = [(o, o.rect.x) for o in generator.obstacles]
    generator.scroll_obstacles(-8)
    for obstacle, x in before:
        assert obstacle.rect.x == x - obstacle.SCROLL_STEP


def test_clear_removes_everything(generator, capsys):
    generator.clear()
    assert generator.obstacles == []
    assert "All obstacles deleted" in capsys.readouterr().out