"""A pausable stopwatch driven by a millisecond clock."""

from __future__ import annotations

import pygame


class Timer:
    """Measures elapsed milliseconds, with pause and resume."""

    def __init__(self, clock=None):
        self._clock = clock if clock is not None else pygame.time.get_ticks
        self._start_ticks = 0
        self._paused_ticks = 0
        self._paused = False
        self._started = False

    def start(self):
        """Start (or restart) timing from now."""
        self._started = True
        self._paused = False
        self._start_ticks = self._clock()

    def stop(self):
        """Stop the timer; its reading drops back to zero."""
        self._started = False
        self._paused = False

    def pause(self):
        """Freeze the reading if the timer is running."""
        if self._started and not self._paused:
            self._paused = True
            self._paused_ticks = self._clock() - self._start_ticks

    def resume(self):
        """Continue from the frozen reading."""
        if self._paused:
            self._paused = False
            self._start_ticks = self._clock() - self._paused_ticks
            self._paused_ticks = 0

    def ticks(self):
        """Milliseconds counted so far."""
        if not self._started:
            return 0
        if self._paused:
            return self._paused_ticks
        return self._clock() - self._start_ticks

    def is_started(self):
        return self._started

    def is_paused(self):
        return self._paused and self._started