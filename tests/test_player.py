import pygame

from humania.player import Mario, PlayerState


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


def make_mario(clock=None):
    return Mario((50, 410, 50, 90), (10, 10, 300, 30), clock or FakeClock())


def test_initial_state_shows_first_walk_frame():
    mario = make_mario()
    assert mario.state.src_rect == mario.state.walk_one
    assert mario.score == 0
    assert mario.jumping is False
    assert mario.mover_rect == pygame.Rect(50, 410, 50, 90)


def test_player_state_holds_frames():
    rect = pygame.Rect(1, 2, 3, 4)
    state = PlayerState(rect, rect, rect, rect)
    assert state.walk_three == rect


def test_change_state_cycles_walk_frames():
    mario = make_mario()
    seen = []
    for _ in range(3):
        mario.change_state()
        seen.append(pygame.Rect(mario.state.src_rect))
    assert seen == [mario.state.walk_two, mario.state.walk_three, mario.state.walk_one]


def test_each_mario_has_its_own_state():
    first = make_mario()
    second = make_mario()
    first.change_state()
    assert second.state.src_rect == second.state.walk_one
    assert first.state.src_rect == first.state.walk_two


def test_increase_score_wins_at_winning_score():
    mario = make_mario()
    results = [mario.increase_score() for _ in range(Mario.WINNING_SCORE // Mario.COIN_VALUE)]
    assert results[-1] is True
    assert not any(results[:-1])
    assert mario.score == Mario.WINNING_SCORE


def test_decrease_health_shrinks_bar_and_knocks_back():
    mario = make_mario()
    width = mario.health_rect.w
    x = mario.mover_rect.x
    assert mario.decrease_health() is False
    assert mario.health_rect.w == width - Mario.HEALTH_LOSS
    assert mario.mover_rect.x == x - Mario.KNOCKBACK


def test_decrease_health_reports_death_when_empty():
    mario = make_mario()
    hits = mario.health_rect.w // Mario.HEALTH_LOSS
    results = [mario.decrease_health() for _ in range(hits)]
    assert results[-1] is True
    assert not any(results[:-1])
    assert mario.health_rect.w <= 0


def test_jump_rises_then_falls_and_ends():
    clock = FakeClock(1000)
    mario = make_mario(clock)
    start_y = mario.mover_rect.y
    mario.make_jump()
    assert mario.jumping is True

    clock.now += 100
    mario.check_jump()
    assert mario.mover_rect.y == start_y - Mario.JUMP_SPEED

    clock.now = 1000 + Mario.JUMP_TIME
    mario.check_jump()
    assert mario.mover_rect.y == start_y
    assert mario.jumping is True

    clock.now = 1000 + 2 * Mario.JUMP_TIME
    mario.check_jump()
    assert mario.mover_rect.y == start_y + Mario.JUMP_SPEED
    assert mario.jumping is False


def test_check_jump_idle_does_not_move():
    mario = make_mario()
    before = pygame.Rect(mario.mover_rect)
    mario.check_jump()
    assert mario.mover_rect == before


def test_make_jump_does_not_restart_running_jump():
    clock = FakeClock(0)
    mario = make_mario(clock)
    start_y = mario.mover_rect.y
    mario.make_jump()
    clock.now = Mario.JUMP_TIME
    mario.make_jump()
    mario.check_jump()
    # Still in the falling half, so the earlier start time was kept.
    assert mario.mover_rect.y == start_y + Mario.JUMP_SPEED