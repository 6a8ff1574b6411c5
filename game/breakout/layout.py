"""
Block grid construction
"""

from typing import List, Sequence

from game.configs.breakout_config import LAYOUT_CONFIG
from .entities import Block


def grid_offset_left(width: float, block_width: float, padding: float, columns: int) -> float:
    """Left margin that centers ``columns`` blocks (and the gaps between them)"""
    return (width - (block_width + padding) * columns + padding) / 2


def make_blocks(
    width: float,
    block_width: float = LAYOUT_CONFIG["block_width"],
    block_height: float = LAYOUT_CONFIG["block_height"],
    padding: float = LAYOUT_CONFIG["padding"],
    offset_top: float = LAYOUT_CONFIG["offset_top"],
    columns: int = LAYOUT_CONFIG["columns"],
    rows: int = LAYOUT_CONFIG["rows"],
    palette: Sequence[str] = LAYOUT_CONFIG["palette"],
) -> List[Block]:
    """
    Build a fresh, fully active block grid.

    Blocks are returned row by row, left to right. That order is also the
    collision scan order, so upper-left blocks win ties within a tick.

    Args:
        width: Playfield width, used to center the grid horizontally
        palette: One color per row; must have at least ``rows`` entries
    """
    offset_left = grid_offset_left(width, block_width, padding, columns)

    blocks = []
    for row in range(rows):
        for col in range(columns):
            blocks.append(Block(
                x=col * (block_width + padding) + offset_left,
                y=row * (block_height + padding) + offset_top,
                width=block_width,
                height=block_height,
                color=palette[row],
            ))
    return blocks
