"""
Effects emitted by the simulation for the audio and presentation collaborators
"""

from dataclasses import dataclass
from enum import Enum


class Sound(str, Enum):
    WALL_HIT = "wallHit"
    PADDLE_HIT = "paddleHit"
    BLOCK_BREAK = "blockBreak"
    LIFE_LOST = "lifeLost"
    GAME_OVER = "gameOver"


@dataclass(frozen=True)
class SoundTrigger:
    """Fire-and-forget request to play a named sound"""
    sound: Sound


@dataclass(frozen=True)
class DisplayUpdate:
    """New text for a HUD field ("score" or "lives")"""
    field: str
    text: str
