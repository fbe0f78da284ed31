"""The player character: movement, jumping, health and score."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from .assets import load_sound, play_sound


@dataclass
class PlayerState:
    """Sprite-sheet regions for the current frame and the walking cycle."""

    src_rect: pygame.Rect
    walk_one: pygame.Rect
    walk_two: pygame.Rect
    walk_three: pygame.Rect


def _right_facing():
    return PlayerState(
        pygame.Rect(12, 8, 26, 44),
        pygame.Rect(12, 8, 26, 44),
        pygame.Rect(42, 8, 26, 44),
        pygame.Rect(72, 8, 26, 44),
    )


class Mario:
    """The player: a position rectangle, a health bar, a score and a jump."""

    WIDTH = 50
    HEIGHT = 90
    JUMP_SPEED = 10
    JUMP_TIME = 900
    COIN_VALUE = 5
    WINNING_SCORE = 25
    HEALTH_LOSS = 60
    KNOCKBACK = 3

    def __init__(self, mover_rect, health_rect, clock=None):
        self.mover_rect = pygame.Rect(mover_rect)
        self.health_rect = pygame.Rect(health_rect)
        self.state = _right_facing()
        self.score = 0
        self.jumping = False
        self._jump_start_time = 0
        self._clock = clock if clock is not None else pygame.time.get_ticks
        self._jump_sound = load_sound("Music/smb_jump.wav")
        self._hit_sound = load_sound("Music/smb_bump.wav")
        self._coin_sound = load_sound("Music/smb_coin.wav")

    def check_jump(self):
        """Move up during the first half of a jump and down during the second."""
        if not self.jumping:
            return
        duration = self._clock() - self._jump_start_time
        if duration < self.JUMP_TIME:
            self.mover_rect.y -= self.JUMP_SPEED
        else:
            self.mover_rect.y += self.JUMP_SPEED
        if duration >= 2 * self.JUMP_TIME:
            self.jumping = False

    def increase_score(self):
        """Add a coin's worth of points; True once the winning score is reached."""
        self.score += self.COIN_VALUE
        play_sound(self._coin_sound)
        return self.score >= self.WINNING_SCORE

    def make_jump(self):
        """Start a jump unless one is already under way."""
        if not self.jumping:
            play_sound(self._jump_sound)
            self.jumping = True
            self._jump_start_time = self._clock()

    def change_state(self):
        """Advance the walking animation by one frame."""
        state = self.state
        current = state.src_rect.topleft
        if current == state.walk_one.topleft:
            state.src_rect = pygame.Rect(state.walk_two)
        elif current == state.walk_two.topleft:
            state.src_rect = pygame.Rect(state.walk_three)
        else:
            state.src_rect = pygame.Rect(state.walk_one)

    def decrease_health(self):
        """Take a hit; True once health is used up."""
        self.health_rect.w -= self.HEALTH_LOSS
        self.mover_rect.x -= self.KNOCKBACK
        play_sound(self._hit_sound)
        return self.health_rect.w <= 0