"""Loading and playing of image and sound assets."""

from __future__ import annotations

import pygame


def load_texture(path):
    """Load an image file into a surface.

    Returns None, after reporting the problem, when the file cannot be read.
    """
    try:
        surface = pygame.image.load(path)
    except (pygame.error, OSError) as exc:
        print(f"Unable to load image {path}! Error: {exc}")
        return None
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        surface = surface.convert_alpha()
    return surface


def load_sound(path):
    """Load a sound effect, or return None when audio is unavailable or the file is unreadable."""
    if not pygame.mixer.get_init():
        return None
    try:
        return pygame.mixer.Sound(path)
    except (pygame.error, OSError) as exc:
        print(f"Unable to load sound {path}! Error: {exc}")
        return None


def play_sound(sound):
    """Play a sound once on any free channel; a missing sound is silently ignored."""
    if sound is None:
        return None
    return sound.play()