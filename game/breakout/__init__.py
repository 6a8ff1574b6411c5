"""Breakout game module - block breaker simulation and environment"""

from .breakout_env import BreakoutEnv, run_random_episode
from .controls import InputState
from .loop import GameLoop
from .simulation import new_game, restart, step

__all__ = ['BreakoutEnv', 'run_random_episode', 'InputState', 'GameLoop', 'new_game', 'restart', 'step']
