"""
Breakout simulation core
------------------------
- One discrete tick per ``step()`` call, no delta-time scaling
- Paddle movement from the left/right press flags (right wins a tie)
- Wall bounces, angled paddle bounces with paddle "spin"
- At most one block broken per tick, scanned in creation order
- Lives, score and the game-over transition

The state is mutated in place and the tick's side effects are returned as an
ordered list of ``SoundTrigger`` / ``DisplayUpdate`` records, so the core can
run without any window or audio device.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional, Union

from game.configs.breakout_config import GAME_CONFIG, LAYOUT_CONFIG
from .controls import InputState
from .entities import Ball, GameState, Paddle
from .events import DisplayUpdate, Sound, SoundTrigger
from .layout import make_blocks
from .utils import circle_intersects_rect, clamp, resolve_axis, vec_len

Event = Union[SoundTrigger, DisplayUpdate]


def new_game(
    width: float = 800,
    height: float = 600,
    layout: Optional[Dict[str, Any]] = None,
    **overrides,
) -> GameState:
    """
    Create a game in its initial state.

    Args:
        width: Playfield width
        height: Playfield height
        layout: Overrides for LAYOUT_CONFIG (block size, grid shape, palette)
        **overrides: Overrides for GAME_CONFIG (paddle, ball, scoring)
    """
    unknown = set(overrides) - set(GAME_CONFIG)
    if unknown:
        raise ValueError(f"Unknown game settings: {sorted(unknown)}")
    config = {**GAME_CONFIG, **overrides}
    layout_config = {**LAYOUT_CONFIG, **(layout or {})}

    grid_width = (layout_config["block_width"] + layout_config["padding"]) * layout_config["columns"] \
        - layout_config["padding"]
    if grid_width > width:
        raise ValueError(f"Playfield width {width} cannot hold a block grid {grid_width} wide")
    if config["paddle_width"] > width:
        raise ValueError(f"Paddle width {config['paddle_width']} exceeds playfield width {width}")
    if config["ball_bottom_offset"] >= height:
        raise ValueError(f"Playfield height {height} too small to serve the ball")

    paddle = Paddle(
        x=width / 2 - config["paddle_width"] / 2,
        y=height - config["paddle_bottom_offset"],
        width=config["paddle_width"],
        height=config["paddle_height"],
        speed=config["paddle_speed"],
    )
    ball = Ball(
        x=width / 2,
        y=height - config["ball_bottom_offset"],
        dx=config["ball_dx"],
        dy=config["ball_dy"],
        radius=config["ball_radius"],
    )
    state = GameState(
        width=width,
        height=height,
        paddle=paddle,
        ball=ball,
        blocks=make_blocks(width, **layout_config),
        lives=config["start_lives"],
        last_paddle_x=paddle.x,
        config=config,
        layout=layout_config,
    )
    return state


def reset_ball(state: GameState):
    """Serve the ball again from the fixed starting point"""
    ball = state.ball
    ball.x = state.width / 2
    ball.y = state.height - state.config["ball_bottom_offset"]
    ball.dx = state.config["ball_dx"]
    ball.dy = state.config["ball_dy"]


def restart(state: GameState) -> List[Event]:
    """Put ``state`` back to its initial values and rebuild the block grid"""
    state.score = 0
    state.lives = state.config["start_lives"]
    state.game_over = False

    state.paddle.x = state.width / 2 - state.paddle.width / 2
    state.paddle.dx = 0
    state.last_paddle_x = state.paddle.x

    reset_ball(state)
    state.blocks = make_blocks(state.width, **state.layout)

    return [
        DisplayUpdate("score", str(state.score)),
        DisplayUpdate("lives", str(state.lives)),
    ]


def step(state: GameState, controls: InputState) -> List[Event]:
    """
    Advance the game by one tick.

    A finished game is left untouched and produces no events.

    Returns:
        Events in the order they happened during the tick
    """
    if state.game_over:
        return []

    events: List[Event] = []

    _move_paddle(state, controls)
    _move_ball(state, events)
    _check_paddle_collision(state, events)
    _check_miss(state, events)

    # Paddle position carried into the next tick's spin computation
    state.last_paddle_x = state.paddle.x

    _check_block_collision(state, events)

    return events


# ----------------------------
# Tick phases
# ----------------------------

def _move_paddle(state: GameState, controls: InputState):
    paddle = state.paddle
    max_x = state.width - paddle.width

    if controls.right_pressed and paddle.x < max_x:
        paddle.x = clamp(paddle.x + paddle.speed, 0, max_x)
        paddle.dx = 1
    elif controls.left_pressed and paddle.x > 0:
        paddle.x = clamp(paddle.x - paddle.speed, 0, max_x)
        paddle.dx = -1
    else:
        paddle.dx = 0


def _move_ball(state: GameState, events: List[Event]):
    ball = state.ball
    ball.x += ball.dx
    ball.y += ball.dy

    # Side walls
    if ball.x + ball.radius > state.width or ball.x - ball.radius < 0:
        ball.dx = -ball.dx
        events.append(SoundTrigger(Sound.WALL_HIT))

    # Ceiling; the floor is a miss, not a bounce
    if ball.y - ball.radius < 0:
        ball.dy = -ball.dy
        events.append(SoundTrigger(Sound.WALL_HIT))


def _check_paddle_collision(state: GameState, events: List[Event]):
    ball, paddle = state.ball, state.paddle
    ball_bottom = ball.y + ball.radius

    if not (paddle.y < ball_bottom < paddle.y + paddle.height and
            paddle.x < ball.x < paddle.x + paddle.width):
        return

    # -1 at the left edge, 1 at the right edge
    relative_x = (ball.x - paddle.center_x) / (paddle.width / 2)
    bounce_angle = relative_x * state.config["max_bounce_angle"]

    speed = vec_len(ball.dx, ball.dy)
    ball.dx = speed * math.sin(bounce_angle)
    ball.dy = -speed * math.cos(bounce_angle)

    paddle_velocity = paddle.x - state.last_paddle_x
    ball.dx += paddle_velocity * state.config["paddle_influence"]

    events.append(SoundTrigger(Sound.PADDLE_HIT))


def _check_miss(state: GameState, events: List[Event]):
    ball = state.ball
    if ball.y + ball.radius <= state.height:
        return

    state.lives -= 1
    events.append(DisplayUpdate("lives", str(state.lives)))

    if state.lives == 0:
        state.game_over = True
        events.append(SoundTrigger(Sound.GAME_OVER))
    else:
        events.append(SoundTrigger(Sound.LIFE_LOST))
        reset_ball(state)


def _check_block_collision(state: GameState, events: List[Event]):
    ball = state.ball

    for block in state.blocks:
        if not block.active:
            continue
        if not circle_intersects_rect(ball, block):
            continue

        block.active = False
        state.score += state.config["points_per_block"]
        events.append(DisplayUpdate("score", str(state.score)))
        events.append(SoundTrigger(Sound.BLOCK_BREAK))

        axis = resolve_axis(ball, block)
        if axis.dy_flip:
            ball.dy = -ball.dy
        if axis.dx_flip:
            ball.dx = -ball.dx

        if all(not b.active for b in state.blocks):
            state.game_over = True
            events.append(SoundTrigger(Sound.GAME_OVER))

        break
