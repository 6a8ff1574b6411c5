"""
BreakoutEnv - single-screen block breaker as a Gymnasium environment
--------------------------------------------------------------------
- Fixed-step simulation core (one tick per env step, no dt scaling)
- Gymnasium API, Arcade for human rendering and interactive play
- Action space: MultiBinary(2) = [left_pressed, right_pressed]
- Vector observation: paddle, ball, lives and one flag per block

Install:
    pip install gymnasium arcade numpy

Play with the keyboard:
    python -m game.breakout.breakout_env --mode play

Headless random episode:
    python -m game.breakout.breakout_env --mode random --no-render
"""

from __future__ import annotations

import argparse
import time
from typing import Any, Dict, List, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from game.configs.breakout_config import ENV_CONFIG
from .controls import InputState
from .events import DisplayUpdate, SoundTrigger
from .simulation import Event, new_game, restart, step
from .utils import clamp


class BreakoutEnv(gym.Env):
    """Block breaker environment; ``reset()`` is the game's restart"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: int = 800,
        height: int = 600,
        max_steps: int = 10_000,
        render_fps: int = 60,
        **game_overrides,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode: {render_mode}"
        self.render_mode = render_mode
        self.metadata = {**self.metadata, "render_fps": render_fps}

        self.width = width
        self.height = height
        self.max_steps = max_steps

        # World state (validated here so bad settings fail at construction)
        self.state = new_game(width, height, **game_overrides)
        self.n_blocks = len(self.state.blocks)
        self._max_ball_speed = 2.0 * np.hypot(self.state.config["ball_dx"], self.state.config["ball_dy"])

        self.action_space = spaces.MultiBinary(2)

        # Paddle x(1) ball pos(2) ball vel(2) lives(1) + one flag per block
        obs_dim = 1 + 2 + 2 + 1 + self.n_blocks
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None
        self._step_count = 0
        self._last_events: List[Event] = []

        # Event counts for reward computation
        self._events: Dict[str, float] = {}

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)

        self._step_count = 0
        self._last_events = restart(self.state)

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, info

    def step(self, action):
        self._events = {"blocks": 0.0, "lives_lost": 0.0, "cleared": 0.0}

        controls = InputState.from_action(action)
        score_before = self.state.score
        lives_before = self.state.lives

        self._last_events = step(self.state, controls)

        self._events["blocks"] = (self.state.score - score_before) / self.state.config["points_per_block"]
        self._events["lives_lost"] = float(lives_before - self.state.lives)
        if self.state.game_over and not self.state.active_blocks:
            self._events["cleared"] = 1.0

        reward = self._compute_reward()

        terminated = self.state.game_over
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        paddle, ball = self.state.paddle, self.state.ball

        max_paddle_x = max(1e-6, self.width - paddle.width)
        px = paddle.x / max_paddle_x
        bx = ball.x / self.width
        by = ball.y / self.height
        bdx = ball.dx / self._max_ball_speed
        bdy = ball.dy / self._max_ball_speed
        lives = self.state.lives / max(1, self.state.config["start_lives"])

        obs_parts = [px * 2 - 1,  # map to [-1,1]
                     clamp(bx * 2 - 1, -1, 1), clamp(by * 2 - 1, -1, 1),
                     clamp(bdx, -1, 1), clamp(bdy, -1, 1),
                     lives * 2 - 1]
        obs_parts += [1.0 if b.active else 0.0 for b in self.state.blocks]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self) -> float:
        R_BLOCK = 1.0
        R_LIFE = 1.0
        R_CLEAR = 5.0

        reward = 0.0
        reward += R_BLOCK * self._events.get("blocks", 0.0)
        reward -= R_LIFE * self._events.get("lives_lost", 0.0)
        reward += R_CLEAR * self._events.get("cleared", 0.0)
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.state.score,
            "lives": self.state.lives,
            "active_blocks": len(self.state.active_blocks),
            "step": self._step_count,
            "events": list(self._last_events),
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            # Imported here so headless use never touches a display
            from .window import BreakoutWindow
            self._window = BreakoutWindow(self.state, title="BreakoutEnv - Arcade")

        for event in self._last_events:
            if isinstance(event, DisplayUpdate):
                self._window.update_display(event.field, event.text)
        self._window.draw(self.state)
        self._window.on_draw()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity run / entry point
# ----------------------------

def run_random_episode(render: bool = True, seed: Optional[int] = None, **env_overrides):
    """Play one episode with random paddle input"""
    config = {**ENV_CONFIG, **env_overrides}
    env = BreakoutEnv(render_mode="human" if render else None, **config)
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)

    terminated = False
    truncated = False
    total = 0.0
    sounds = 0

    print("Running episode... Close the window to exit early.")

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward
        sounds += sum(isinstance(e, SoundTrigger) for e in info["events"])

        if render and env._window:
            env._window.dispatch_events()
            env._window.flip()
            time.sleep(1 / env.metadata["render_fps"])

    print(f"Random episode return: {total:.1f}  score: {info['score']}  "
          f"lives: {info['lives']}  steps: {info['step']}  sounds: {sounds}")

    env.close()
    return total, info


def play(width: int = 800, height: int = 600, render_fps: int = 60, verbose: int = 1):
    """Open a window and play with the arrow keys (R or the button restarts)"""
    import arcade
    from .loop import GameLoop
    from .window import ArcadeAudio, BreakoutWindow

    state = new_game(width, height)
    controls = InputState()
    window = BreakoutWindow(state, controls=controls, update_rate=1 / render_fps)
    window.loop = GameLoop(state, controls, presenter=window, audio=ArcadeAudio(), verbose=verbose)
    arcade.run()


def main():
    parser = argparse.ArgumentParser(description="Breakout: play it or run a random agent")
    parser.add_argument(
        "--mode",
        type=str,
        default="play",
        choices=["play", "random"],
        help="Interactive window or random-action episode (default: play)",
    )
    parser.add_argument("--width", type=int, default=ENV_CONFIG["width"])
    parser.add_argument("--height", type=int, default=ENV_CONFIG["height"])
    parser.add_argument("--fps", type=int, default=ENV_CONFIG["render_fps"])
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help=f"Step limit for random episodes (default: {ENV_CONFIG['max_steps']})",
    )
    parser.add_argument("--no-render", action="store_true", help="Run random episodes headless")
    parser.add_argument("--quiet", action="store_true")

    args = parser.parse_args()

    if args.mode == "play":
        play(width=args.width, height=args.height, render_fps=args.fps, verbose=0 if args.quiet else 1)
    elif args.mode == "random":
        overrides = {"width": args.width, "height": args.height, "render_fps": args.fps}
        if args.max_steps is not None:
            overrides["max_steps"] = args.max_steps
        run_random_episode(render=not args.no_render, seed=args.seed, **overrides)


if __name__ == "__main__":
    main()
