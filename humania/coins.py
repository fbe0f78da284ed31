"""Collectible coins and the generator that places them."""

from __future__ import annotations

import random
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


class Coin:
    """A spinning coin that stays put except when the level scrolls."""

    TEXTURE_PATH: ClassVar[str] = "Images/coin.png"
    SIZE: ClassVar[int] = 40
    SCROLL_STEP: ClassVar[int] = 9
    FRAMES: ClassVar[Tuple[Frame, ...]] = (
        (20, 40, 170, 170),
        (230, 40, 130, 170),
        (450, 40, 80, 170),
        (670, 40, 40, 170),
        (860, 40, 80, 170),
        (1040, 40, 130, 170),
    )

    def __init__(self, x, y):
        self.x = x
        self.y = y
        self.texture = load_texture(self.TEXTURE_PATH)
        self._frame_index = 0
        self.rect = pygame.Rect(x, y, self.SIZE, self.SIZE)

    @property
    def frame_index(self):
        return self._frame_index

    @property
    def frame(self):
        """Sprite-sheet region of the current animation frame."""
        return pygame.Rect(self.FRAMES[self._frame_index])

    def render(self, target):
        """Draw the current frame onto target, then advance the animation."""
        _draw_frame(target, self.texture, self.frame, self.rect)
        self.step()

    def step(self):
        """Advance the spin animation by one frame."""
        self._frame_index = (self._frame_index + 1) % len(self.FRAMES)

    def scroll_with_background(self, offset):
        """Shift left as the level scrolls; the step is fixed whatever the offset."""
        self.rect.x -= self.SCROLL_STEP


class CoinGenerator:
    """Places coins along the level, draws them and detects collection."""

    MIN_Y: ClassVar[int] = 300
    Y_RANGE: ClassVar[int] = 110
    OFFSCREEN_X: ClassVar[int] = -10

    def __init__(self, screen_width, screen_height, rng=None):
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.rng = rng if rng is not None else random.Random()
        self.coins = []
        self.last_coin_x = 0

    def generate_coins(self, num_coins):
        """Add coins at random heights, each further right than the last."""
        for _ in range(num_coins):
            coin_x = self.rng.randrange(self.screen_width)
            coin_y = self.MIN_Y + self.rng.randrange(self.Y_RANGE)
            self.coins.append(Coin(coin_x + self.last_coin_x, coin_y))
            self.last_coin_x += coin_x

    def render_coins(self, target, mario_rect):
        """Draw every coin; drop collected and off-screen ones.

        Returns True if the player collected at least one coin.
        """
        mario_rect = pygame.Rect(mario_rect)
        collected = False
        for coin in list(self.coins):
            coin.render(target)
            if mario_rect.colliderect(coin.rect):
                self.coins.remove(coin)
                print("coin deleted")
                collected = True
            elif coin.rect.x < self.OFFSCREEN_X:
                self.coins.remove(coin)
                print("coin deleted")
        return collected

    def scroll_coins(self, scrolling_offset):
        """Shift every coin as the level scrolls."""
        for coin in self.coins:
            coin.scroll_with_background(scrolling_offset)

    def clear(self):
        """Remove all coins."""
        self.coins.clear()
        print("All coins deleted")