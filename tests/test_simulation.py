import math

import pytest

from game.breakout.controls import InputState
from game.breakout.events import DisplayUpdate, Sound, SoundTrigger
from game.breakout.simulation import new_game, reset_ball, restart, step
from game.breakout.utils import vec_len


def _controls(left=False, right=False):
    controls = InputState()
    controls.left_pressed = left
    controls.right_pressed = right
    return controls


def _place_ball(state, x, y, dx, dy):
    state.ball.x, state.ball.y, state.ball.dx, state.ball.dy = x, y, dx, dy


def _sounds(events):
    return [e.sound for e in events if isinstance(e, SoundTrigger)]


# ----------------------------
# Initial state / restart
# ----------------------------

def test_new_game_initial_state():
    state = new_game(800, 600)
    assert state.score == 0
    assert state.lives == 3
    assert not state.game_over
    assert (state.paddle.x, state.paddle.y) == (350, 570)
    assert (state.ball.x, state.ball.y, state.ball.dx, state.ball.dy) == (400, 550, 4, -4)
    assert len(state.active_blocks) == 40
    assert state.last_paddle_x == state.paddle.x


def test_new_game_rejects_small_playfield():
    with pytest.raises(ValueError):
        new_game(300, 600)


def test_new_game_rejects_unknown_setting():
    with pytest.raises(ValueError):
        new_game(800, 600, paddle_colour="red")


def test_restart_restores_initial_values():
    state = new_game(800, 600)
    state.score = 120
    state.lives = 0
    state.game_over = True
    state.paddle.x = 0
    _place_ball(state, 10, 10, -3, 5)
    for block in state.blocks[:12]:
        block.active = False

    events = restart(state)

    assert state.score == 0
    assert state.lives == 3
    assert not state.game_over
    assert state.paddle.x == 350
    assert (state.ball.x, state.ball.y, state.ball.dx, state.ball.dy) == (400, 550, 4, -4)
    assert len(state.active_blocks) == 40
    assert events == [DisplayUpdate("score", "0"), DisplayUpdate("lives", "3")]


def test_restart_is_idempotent():
    state = new_game(800, 600)
    restart(state)
    first = (state.score, state.lives, state.game_over, state.paddle.x,
             state.ball.x, state.ball.y, list(state.blocks))
    restart(state)
    second = (state.score, state.lives, state.game_over, state.paddle.x,
              state.ball.x, state.ball.y, list(state.blocks))
    assert first == second


# ----------------------------
# Movement
# ----------------------------

def test_first_tick_moves_ball_diagonally():
    state = new_game(800, 600)
    events = step(state, _controls())
    assert (state.ball.x, state.ball.y) == (404, 546)
    assert events == []


@pytest.mark.parametrize("left,right,expected", [
    (False, True, 700),
    (True, False, 0),
    (True, True, 700),  # right wins
])
def test_paddle_stays_inside_playfield(left, right, expected):
    state = new_game(800, 600)
    controls = _controls(left=left, right=right)
    for _ in range(60):
        step(state, controls)
        assert 0 <= state.paddle.x <= 800 - state.paddle.width
    assert state.paddle.x == expected


def test_paddle_moves_by_speed():
    state = new_game(800, 600)
    step(state, _controls(right=True))
    assert state.paddle.x == 358
    assert state.paddle.dx == 1
    step(state, _controls(left=True))
    assert state.paddle.x == 350
    assert state.paddle.dx == -1
    step(state, _controls())
    assert state.paddle.dx == 0


def test_previous_paddle_x_carried_forward():
    state = new_game(800, 600)
    step(state, _controls(right=True))
    assert state.last_paddle_x == 358


# ----------------------------
# Walls
# ----------------------------

def test_side_wall_flips_dx_and_keeps_speed():
    state = new_game(800, 600)
    _place_ball(state, 795, 300, 4, -4)
    speed_before = vec_len(state.ball.dx, state.ball.dy)

    events = step(state, _controls())

    assert (state.ball.dx, state.ball.dy) == (-4, -4)
    assert vec_len(state.ball.dx, state.ball.dy) == speed_before
    assert _sounds(events) == [Sound.WALL_HIT]


def test_ceiling_flips_dy():
    state = new_game(800, 600)
    _place_ball(state, 400, 10, 4, -4)
    events = step(state, _controls())
    assert state.ball.dy == 4
    assert _sounds(events) == [Sound.WALL_HIT]


def test_corner_triggers_two_wall_hits():
    state = new_game(800, 600)
    _place_ball(state, 795, 10, 4, -4)
    events = step(state, _controls())
    assert (state.ball.dx, state.ball.dy) == (-4, 4)
    assert _sounds(events) == [Sound.WALL_HIT, Sound.WALL_HIT]


# ----------------------------
# Paddle
# ----------------------------

def test_center_paddle_hit_sends_ball_straight_up():
    state = new_game(800, 600)
    _place_ball(state, 396, 560, 4, 4)

    events = step(state, _controls())

    assert state.ball.dx == pytest.approx(0.0)
    assert state.ball.dy == pytest.approx(-math.sqrt(32))
    assert _sounds(events) == [Sound.PADDLE_HIT]


def test_paddle_edge_hit_is_steeper():
    state = new_game(800, 600)
    _place_ball(state, 436, 560, 4, 4)  # lands at x=440, 40px right of center

    step(state, _controls())

    angle = 0.8 * math.pi / 3
    speed = math.sqrt(32)
    assert state.ball.dx == pytest.approx(speed * math.sin(angle))
    assert state.ball.dy == pytest.approx(-speed * math.cos(angle))
    assert state.ball.dy < 0
    assert math.atan2(abs(state.ball.dx), -state.ball.dy) <= math.pi / 3 + 1e-9


def test_moving_paddle_adds_spin():
    state = new_game(800, 600)
    _place_ball(state, 404, 560, 4, 4)  # lands on the center of the moved paddle

    step(state, _controls(right=True))

    assert state.paddle.x == 358
    assert state.ball.dx == pytest.approx(8 * 0.2)
    assert state.ball.dy == pytest.approx(-math.sqrt(32))


def test_ball_outside_paddle_band_is_not_deflected():
    state = new_game(800, 600)
    _place_ball(state, 100, 560, 4, 4)
    events = step(state, _controls())
    assert state.ball.dy == 4
    assert Sound.PADDLE_HIT not in _sounds(events)


# ----------------------------
# Misses
# ----------------------------

def test_miss_with_lives_left_serves_again():
    state = new_game(800, 600)
    state.paddle.x = 0
    _place_ball(state, 400, 590, 4, 4)

    events = step(state, _controls())

    assert state.lives == 2
    assert not state.game_over
    assert (state.ball.x, state.ball.y, state.ball.dx, state.ball.dy) == (400, 550, 4, -4)
    assert state.paddle.x == 0
    assert events == [DisplayUpdate("lives", "2"), SoundTrigger(Sound.LIFE_LOST)]


def test_last_miss_ends_game_without_serving():
    state = new_game(800, 600)
    state.lives = 1
    _place_ball(state, 400, 590, 4, 4)

    events = step(state, _controls())

    assert state.lives == 0
    assert state.game_over
    assert (state.ball.x, state.ball.y) == (404, 594)
    assert events == [DisplayUpdate("lives", "0"), SoundTrigger(Sound.GAME_OVER)]


def test_game_over_state_is_frozen():
    state = new_game(800, 600)
    state.game_over = True
    events = step(state, _controls(right=True))
    assert events == []
    assert (state.ball.x, state.ball.y) == (400, 550)
    assert state.paddle.x == 350


def test_reset_ball_keeps_paddle():
    state = new_game(800, 600)
    state.paddle.x = 12
    _place_ball(state, 1, 2, 3, 4)
    reset_ball(state)
    assert (state.ball.x, state.ball.y, state.ball.dx, state.ball.dy) == (400, 550, 4, -4)
    assert state.paddle.x == 12


# ----------------------------
# Blocks
# ----------------------------

def test_top_edge_hit_breaks_block_and_flips_dy():
    state = new_game(800, 600)
    target = state.blocks[32]  # bottom row, first column: (45, 170)
    _place_ball(state, 85, 164, 0, 4)

    events = step(state, _controls())

    assert not target.active
    assert state.ball.dy == -4
    assert state.score == 10
    assert events == [DisplayUpdate("score", "10"), SoundTrigger(Sound.BLOCK_BREAK)]
    assert len(state.active_blocks) == 39


def test_side_hit_flips_dx():
    state = new_game(800, 600)
    _place_ball(state, 40, 180, 4, 0)

    step(state, _controls())

    assert not state.blocks[32].active
    assert (state.ball.dx, state.ball.dy) == (-4, 0)


def test_only_one_block_per_tick():
    state = new_game(800, 600)
    # straddles the gap between row 3 (140..160) and row 4 (170..190)
    _place_ball(state, 85, 161, 0, 4)

    step(state, _controls())

    assert state.score == 10
    assert not state.blocks[24].active
    assert state.blocks[32].active


def test_block_bounce_keeps_speed():
    state = new_game(800, 600)
    _place_ball(state, 85, 164, 3, 4)
    speed_before = vec_len(state.ball.dx, state.ball.dy)
    step(state, _controls())
    assert vec_len(state.ball.dx, state.ball.dy) == pytest.approx(speed_before)


def test_inactive_blocks_are_skipped():
    state = new_game(800, 600)
    state.blocks[32].active = False
    _place_ball(state, 85, 164, 0, 4)
    events = step(state, _controls())
    assert state.score == 0
    assert state.ball.dy == 4
    assert events == []


def test_clearing_last_block_ends_game():
    state = new_game(800, 600)
    for block in state.blocks:
        block.active = False
    state.blocks[32].active = True
    _place_ball(state, 85, 164, 0, 4)

    events = step(state, _controls())

    assert state.game_over
    assert state.lives == 3
    assert state.score == 10
    assert _sounds(events) == [Sound.BLOCK_BREAK, Sound.GAME_OVER]


def test_score_counts_every_block():
    state = new_game(800, 600)
    for i, block in enumerate(state.blocks[32:36]):
        _place_ball(state, block.x + 40, 164, 0, 4)
        step(state, _controls())
        assert state.score == 10 * (i + 1)
