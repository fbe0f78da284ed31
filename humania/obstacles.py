"""Enemies that walk or fly towards the player."""

from __future__ import annotations

from typing import ClassVar, Tuple

import pygame

from .assets import load_texture

Frame = Tuple[int, int, int, int]


def _draw_frame(target, texture, frame, dest):
    if target is None or texture is None:
        return
    try:
        image = texture.subsurface(frame)
    except ValueError:
        return
    if image.get_size() != dest.size:
        image = pygame.transform.scale(image, dest.size)
    target.blit(image, dest)


class Obstacle:
    """Base enemy: a position rectangle and a looping sprite animation."""

    TEXTURE_PATH: ClassVar[str] = "Images/sprsheet.png"
    FRAMES: ClassVar[Tuple[Frame, ...]] = ()
    SPEED: ClassVar[int] = 0
    SCROLL_STEP: ClassVar[int] = 7

    def __init__(self, x, y):
        self.x = x
        self.y = y
        self.texture = load_texture(self.TEXTURE_PATH)
        self._frame_index = 0
        width, height = self.FRAMES[0][2:] if self.FRAMES else (0, 0)
        self.rect = pygame.Rect(x, y, width, height)

    @property
    def frame_index(self):
        return self._frame_index

    @property
    def frame(self):
        """Sprite-sheet region of the current animation frame, if any."""
        if not self.FRAMES:
            return None
        return pygame.Rect(self.FRAMES[self._frame_index])

    def render(self, target):
        """Draw the current frame onto target, then advance one step."""
        if self.FRAMES:
            _draw_frame(target, self.texture, self.frame, self.rect)
        self.step()

    def step(self):
        """Move left by the obstacle's speed and advance the animation."""
        self.rect.x -= self.SPEED
        if self.FRAMES:
            self._frame_index = (self._frame_index + 1) % len(self.FRAMES)

    def scroll_with_background(self, offset):
        """Shift left as the level scrolls; the step is fixed whatever the offset."""
        self.rect.x -= self.SCROLL_STEP


class Parrot(Obstacle):
    """Flying enemy with a two-frame flap."""

    TEXTURE_PATH = "Images/sprsheet.png"
    FRAMES = ((8, 289, 44, 26), (7, 324, 24, 28))
    SPEED = 6


class Crab(Obstacle):
    """Fast ground enemy with a five-frame sideways walk."""

    TEXTURE_PATH = "Images/obstacles2.png"
    FRAMES = (
        (40, 123, 32, 25),
        (5, 160, 32, 32),
        (45, 160, 32, 32),
        (235, 160, 32, 32),
        (195, 160, 32, 32),
    )
    SPEED = 8


class Snake(Obstacle):
    """Slow ground enemy with a four-frame slither."""

    TEXTURE_PATH = "Images/obstacles2.png"
    FRAMES = (
        (152, 447, 38, 47),
        (102, 447, 38, 47),
        (52, 447, 38, 47),
        (6, 447, 31, 47),
    )
    SPEED = 3


class Bird(Obstacle):
    """Flying enemy with a six-frame wing cycle."""

    TEXTURE_PATH = "Images/obastacle3.png"
    FRAMES = (
        (162, 161, 32, 48),
        (119, 166, 38, 38),
        (79, 170, 38, 29),
        (39, 169, 38, 31),
        (1, 165, 34, 39),
        (159, 217, 38, 36),
    )
    SPEED = 5