"""
Configuration for the breakout game
Playfield, entity and layout parameters plus presentation colors and sounds
"""

import math

# Environment parameters
ENV_CONFIG = {
    # "render_mode": None,  # headless unless a window is requested
    "width": 800,
    "height": 600,
    "max_steps": 10_000,
    "render_fps": 60,
}

# ==============================================================================
# GAMEPLAY
# ==============================================================================

GAME_CONFIG = {
    "paddle_width": 100,
    "paddle_height": 20,
    "paddle_speed": 8,
    "paddle_bottom_offset": 30,   # paddle.y = height - offset
    "ball_radius": 8,
    "ball_dx": 4,
    "ball_dy": -4,
    "ball_bottom_offset": 50,     # ball.y = height - offset on serve
    "start_lives": 3,
    "points_per_block": 10,
    "paddle_influence": 0.2,      # share of paddle motion added to ball dx
    "max_bounce_angle": math.pi / 3,
}

# ==============================================================================
# BLOCK GRID
# ==============================================================================

LAYOUT_CONFIG = {
    "block_width": 80,
    "block_height": 20,
    "padding": 10,
    "offset_top": 50,
    "columns": 8,
    "rows": 5,
    # One color per row, top to bottom
    "palette": ("#FF0000", "#FF7F00", "#FFFF00", "#00FF00", "#0000FF"),
}

# ==============================================================================
# PRESENTATION
# ==============================================================================

COLORS = {
    "background": (26, 26, 46),
    "paddle": "#4ecca3",
    "ball": "#4ecca3",
    "grid": (78, 204, 163, 26),   # rgba(78, 204, 163, 0.1)
    "block_outline": (0, 0, 0),
    "text": (255, 255, 255),
    "button": (78, 204, 163),
}

GRID_SPACING = 30

# Arcade ships these under its built-in resource handle
SOUND_CONFIG = {
    "wallHit": ":resources:sounds/hit3.wav",
    "paddleHit": ":resources:sounds/hit1.wav",
    "blockBreak": ":resources:sounds/explosion1.wav",
    "lifeLost": ":resources:sounds/lose1.wav",
    "gameOver": ":resources:sounds/gameover1.wav",
}
