"""Creation, movement and collision handling of the level's enemies."""

from __future__ import annotations

import random
from typing import ClassVar

import pygame

from .obstacles import Bird, Crab, Parrot, Snake

_KINDS = (Parrot, Crab, Snake, Bird)
_GROUND_KINDS = (Crab, Snake)


class ObstacleGenerator:
    """Places enemies along the level, draws them and detects hits on the player."""

    MIN_X_GAP: ClassVar[int] = 100
    MIN_Y: ClassVar[int] = 300
    Y_RANGE: ClassVar[int] = 110
    GROUND_Y: ClassVar[int] = 405
    GROUND_RANGE: ClassVar[int] = 6
    FIRST_X: ClassVar[int] = 1000
    OFFSCREEN_X: ClassVar[int] = -15
    RESPAWN_X: ClassVar[int] = 1000
    RESPAWN_RANGE: ClassVar[int] = 500

    def __init__(self, screen_width, screen_height, rng=None):
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.rng = rng if rng is not None else random.Random()
        self.obstacles = []
        self.last_obstacle_x = self.FIRST_X

    def generate_obstacles(self, num_obstacles):
        """Add random enemies, each further right than the last.

        Flyers appear at varying heights, walkers at ground level.
        """
        for _ in range(num_obstacles):
            obstacle_x = self.MIN_X_GAP + self.rng.randrange(self.screen_width - self.MIN_X_GAP)
            obstacle_y = self.MIN_Y + self.rng.randrange(self.Y_RANGE)
            kind = _KINDS[self.rng.randrange(len(_KINDS))]
            if kind in _GROUND_KINDS:
                obstacle_y = self.GROUND_Y + self.rng.randrange(self.GROUND_RANGE)
            self.obstacles.append(kind(obstacle_x + self.last_obstacle_x, obstacle_y))
            self.last_obstacle_x += obstacle_x

    def render_obstacles(self, target, mario_rect):
        """Draw and move every enemy, respawning those that left the screen.

        Enemies that touch the player are removed. Returns True if any did.
        """
        mario_rect = pygame.Rect(mario_rect)
        hit = False
        for obstacle in list(self.obstacles):
            obstacle.render(target)
            if obstacle.rect.x < self.OFFSCREEN_X:
                obstacle.rect.x = self.RESPAWN_X + self.rng.randrange(self.RESPAWN_RANGE)
            if mario_rect.colliderect(obstacle.rect):
                self.obstacles.remove(obstacle)
                print("obstacle deleted")
                hit = True
        return hit

    def scroll_obstacles(self, scrolling_offset):
        """Shift every enemy as the level scrolls."""
        for obstacle in self.obstacles:
            obstacle.scroll_with_background(scrolling_offset)

    def clear(self):
        """Remove all enemies."""
        self.obstacles.clear()
        print("All obstacles deleted")