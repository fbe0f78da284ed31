"""Window, main loop and title and end screens of the game."""

from __future__ import annotations

import random

import pygame

from .assets import load_sound, load_texture, play_sound
from .coins import CoinGenerator
from .obstacle_generator import ObstacleGenerator
from .player import Mario


class Game:
    """Owns the window, the assets and the state of one play-through."""

    SCREEN_WIDTH = 1000
    SCREEN_HEIGHT = 600
    TITLE = "HU Mania"
    CLEAR_COLOR = (255, 255, 255)
    HEALTH_RECT = (10, 10, 300, 30)
    MARIO_RECT = (50, 410, 50, 90)
    GREEN_SRC_RECT = (0, 0, 396, 497)
    WHITE_SRC_RECT = (0, 0, 396, 497)
    WHITE_DEST_RECT = (7, 7, 306, 36)
    NUM_OBSTACLES = 50
    NUM_COINS = 50
    WALK_STEP = 10
    SCROLL_STEP = 8
    SCROLL_START_X = 350
    FRAME_DELAY = 50

    def __init__(self, rng=None, clock=None, key_state=None, frame_delay=FRAME_DELAY):
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock if clock is not None else pygame.time.get_ticks
        self.key_state = key_state if key_state is not None else pygame.key.get_pressed
        self.frame_delay = frame_delay
        self.screen = None
        self.background = None
        self.assets = None
        self.green_texture = None
        self.white_texture = None
        self.game_won_sound = None
        self.game_lost_sound = None
        self.obstacle_gen = None
        self.coin_gen = None
        self.mario = None
        self.scrolling_offset = 0
        self._music_loaded = False
        self._scaled_cache = (None, None)

    def init(self):
        """Open the window and the audio device; False if anything failed."""
        try:
            pygame.display.init()
            self.screen = pygame.display.set_mode((self.SCREEN_WIDTH, self.SCREEN_HEIGHT))
            pygame.display.set_caption(self.TITLE)
        except pygame.error as exc:
            print(f"Window could not be created! Error: {exc}")
            return False
        self.screen.fill(self.CLEAR_COLOR)
        try:
            pygame.mixer.init(44100, -16, 2, 2048)
        except pygame.error as exc:
            print(f"Audio could not initialize! Error: {exc}")
            return False
        return True

    def load_media(self):
        """Load images, music and sound effects; False if any required one is missing."""
        self.assets = load_texture("Images/sprsheet.png")
        self.background = load_texture("Images/Game_on.png")
        self.green_texture = load_texture("Images/green.png")
        self.white_texture = load_texture("Images/white.png")
        self._music_loaded = self._load_music("Music/ThemeSong.wav")
        self.game_won_sound = load_sound("Music/smb_world_clear.wav")
        self.game_lost_sound = load_sound("Music/smb_gameover.wav")

        success = True
        if None in (self.assets, self.background, self.green_texture, self.white_texture):
            print("Unable to run: an image could not be loaded")
            success = False
        if not self._music_loaded:
            print("Unable to load music")
            success = False
        return success

    def draw_bg(self):
        """Show the current background stretched over the whole window."""
        if self.screen is None:
            return
        self.screen.fill(self.CLEAR_COLOR)
        background = self._scaled_background()
        if background is not None:
            self.screen.blit(background, (0, 0))
        pygame.display.flip()

    def startup(self):
        """Show the title screen until the player presses P or closes the window."""
        done = False
        while not done:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    done = True
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_p:
                        done = True
                    else:
                        print("Invalid key")
                self._ensure_music()
            self.draw_bg()
        self.background = load_texture("Images/parallax.png")

    def run(self):
        """Play one level; True if the player won, False if lost or quit."""
        done = False
        won = False
        self.scrolling_offset = 0
        self.mario = Mario(self.MARIO_RECT, self.HEALTH_RECT, self.clock)
        self.obstacle_gen = ObstacleGenerator(self.SCREEN_WIDTH, self.SCREEN_HEIGHT, self.rng)
        self.coin_gen = CoinGenerator(self.SCREEN_WIDTH, self.SCREEN_HEIGHT, self.rng)
        self.obstacle_gen.generate_obstacles(self.NUM_OBSTACLES)
        self.coin_gen.generate_coins(self.NUM_COINS)

        while not done:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    done = True
            self._handle_keys(self.key_state())
            mario = self.mario
            mario.check_jump()

            self._draw_scrolling_background()

            if self.obstacle_gen.render_obstacles(self.screen, mario.mover_rect):
                if mario.decrease_health():
                    done = True
            if self.coin_gen.render_coins(self.screen, mario.mover_rect):
                if mario.increase_score():
                    done = True
                    won = True

            if self.scrolling_offset <= -self.SCREEN_WIDTH:
                self.scrolling_offset = 0

            self._blit(self.assets, mario.state.src_rect, mario.mover_rect)
            self._blit(self.white_texture, self.WHITE_SRC_RECT, self.WHITE_DEST_RECT)
            self._blit(self.green_texture, self.GREEN_SRC_RECT, mario.health_rect)
            if self.screen is not None:
                pygame.display.flip()
            pygame.time.delay(self.frame_delay)

        print("Game won" if won else "Game lost")
        return won

    def game_finished(self, won):
        """Show the end screen; True if the player asks to restart with R."""
        if self.obstacle_gen is not None:
            self.obstacle_gen.clear()
        if self.coin_gen is not None:
            self.coin_gen.clear()
        self.mario = None

        if won:
            self.background = load_texture("Images/game_won.jpg")
            play_sound(self.game_won_sound)
        else:
            self.background = load_texture("Images/game-over.jpg")
            play_sound(self.game_lost_sound)

        done = False
        restart = False
        while not done:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    done = True
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_q:
                        done = True
                    elif event.key == pygame.K_r:
                        done = True
                        restart = True
                    else:
                        print("Invalid key")
                self._ensure_music()
            self.draw_bg()
        return restart

    def close(self):
        """Release assets and shut the window and audio down."""
        if pygame.mixer.get_init():
            pygame.mixer.music.stop()
        self._music_loaded = False
        self.assets = None
        self.background = None
        self.green_texture = None
        self.white_texture = None
        self.game_won_sound = None
        self.game_lost_sound = None
        self.screen = None
        self._scaled_cache = (None, None)
        pygame.mixer.quit()
        pygame.display.quit()
        pygame.quit()

    def _handle_keys(self, keys):
        mario = self.mario
        rect = mario.mover_rect
        if keys[pygame.K_LEFT]:
            mario.change_state()
            if rect.x > 0:
                rect.x -= self.WALK_STEP
        if keys[pygame.K_RIGHT]:
            mario.change_state()
            if rect.x + rect.w < self.SCREEN_WIDTH:
                if rect.x < self.SCROLL_START_X:
                    rect.x += self.WALK_STEP
                else:
                    self.scrolling_offset -= self.SCROLL_STEP
                    self.coin_gen.scroll_coins(self.scrolling_offset)
                    self.obstacle_gen.scroll_obstacles(self.scrolling_offset)
        if keys[pygame.K_UP]:
            mario.make_jump()

    def _draw_scrolling_background(self):
        if self.screen is None:
            return
        self.screen.fill(self.CLEAR_COLOR)
        background = self._scaled_background()
        if background is not None:
            self.screen.blit(background, (self.scrolling_offset, 0))
            self.screen.blit(background, (self.scrolling_offset + self.SCREEN_WIDTH, 0))

    def _scaled_background(self):
        source, scaled = self._scaled_cache
        if self.background is None:
            return None
        if source is not self.background:
            scaled = pygame.transform.scale(
                self.background, (self.SCREEN_WIDTH, self.SCREEN_HEIGHT)
            )
            self._scaled_cache = (self.background, scaled)
        return scaled

    def _blit(self, texture, src, dest):
        if self.screen is None or texture is None:
            return
        dest = pygame.Rect(dest)
        src = pygame.Rect(src).clip(texture.get_rect())
        if src.w <= 0 or src.h <= 0 or dest.w <= 0 or dest.h <= 0:
            return
        image = texture.subsurface(src)
        if image.get_size() != dest.size:
            image = pygame.transform.scale(image, dest.size)
        self.screen.blit(image, dest)

    def _load_music(self, path):
        if not pygame.mixer.get_init():
            return False
        try:
            pygame.mixer.music.load(path)
        except (pygame.error, OSError) as exc:
            print(f"Unable to load music {path}! Error: {exc}")
            return False
        return True

    def _ensure_music(self):
        if self._music_loaded and pygame.mixer.get_init() and not pygame.mixer.music.get_busy():
            pygame.mixer.music.play(loops=1)


def main(argv=None):
    """Run the game until the player declines to restart."""
    game = Game()
    game.init()
    while True:
        game.rng.seed()
        game.load_media()
        game.startup()
        won = game.run()
        if not game.game_finished(won):
            break
    game.close()
    return 0