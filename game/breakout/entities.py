"""
Game entity dataclasses
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class Paddle:
    """Player paddle; y stays fixed for the whole session"""
    x: float
    y: float
    width: float = 100.0
    height: float = 20.0
    speed: float = 8.0
    dx: int = 0  # -1 left, 0 none, 1 right

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2


@dataclass
class Ball:
    """Ball entity, repositioned (never destroyed) on a miss"""
    x: float
    y: float
    dx: float = 4.0
    dy: float = -4.0
    radius: float = 8.0


@dataclass
class Block:
    """Destructible block; deactivated on hit until the next restart"""
    x: float
    y: float
    width: float
    height: float
    color: str
    active: bool = True


@dataclass
class GameState:
    """Everything that changes while playing, owned by a single controller"""
    width: float
    height: float
    paddle: Paddle
    ball: Ball
    blocks: List[Block] = field(default_factory=list)
    score: int = 0
    lives: int = 3
    game_over: bool = False
    last_paddle_x: float = 0.0
    # Resolved gameplay and block-grid settings, reused by restart
    config: Dict[str, Any] = field(default_factory=dict)
    layout: Dict[str, Any] = field(default_factory=dict)

    @property
    def active_blocks(self) -> List[Block]:
        return [b for b in self.blocks if b.active]
