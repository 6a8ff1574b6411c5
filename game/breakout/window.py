"""
Arcade collaborators: window (drawing, keyboard, frame schedule) and sounds
"""

from typing import Dict, Optional

import arcade
from arcade.types import Color

from game.configs.breakout_config import COLORS, GRID_SPACING, SOUND_CONFIG
from .controls import InputState
from .entities import GameState

# Arcade key codes -> names understood by InputState
KEY_NAMES = {
    arcade.key.LEFT: "ArrowLeft",
    arcade.key.RIGHT: "ArrowRight",
}

RESTART_BUTTON_SIZE = (100, 30)


def _color(value):
    if isinstance(value, str):
        return Color.from_hex_string(value)
    return value


class ArcadeAudio:
    """Plays the named game sounds through Arcade, fire-and-forget"""

    def __init__(self, sound_paths: Optional[Dict[str, str]] = None):
        paths = sound_paths if sound_paths is not None else SOUND_CONFIG
        self.sounds = {name: arcade.load_sound(path) for name, path in paths.items()}

    def play(self, name: str):
        sound = self.sounds.get(name)
        if sound is not None:
            arcade.play_sound(sound)


class BreakoutWindow(arcade.Window):
    """
    Arcade window for the breakout game.

    Playfield coordinates have y growing downwards; Arcade's y grows
    upwards, so every y is flipped against the window height when drawn.
    With a ``loop`` attached the window also drives it: ``on_update`` runs
    one tick per frame and the keyboard feeds ``controls``.
    """

    def __init__(
        self,
        state: GameState,
        controls: Optional[InputState] = None,
        loop=None,
        title: str = "Breakout",
        update_rate: float = 1 / 60,
    ):
        super().__init__(int(state.width), int(state.height), title, update_rate=update_rate)
        self.state = state
        self.controls = controls
        self.loop = loop

        bw, bh = RESTART_BUTTON_SIZE
        self.restart_button = (self.width - bw - 10, 10, bw, bh)  # x, y from top, w, h

        self.hud = {"score": str(state.score), "lives": str(state.lives)}

        # Colors
        self.BG = COLORS["background"]
        self.PADDLE_C = _color(COLORS["paddle"])
        self.BALL_C = _color(COLORS["ball"])
        self.GRID_C = COLORS["grid"]
        self.OUTLINE_C = COLORS["block_outline"]
        self.TEXT_C = COLORS["text"]
        self.BUTTON_C = COLORS["button"]
        self._block_colors: Dict[str, Color] = {}

    # ----------------------------
    # Presenter interface (called by GameLoop)
    # ----------------------------

    def update_display(self, field: str, text: str):
        self.hud[field] = text

    def draw(self, state: GameState):
        """Take the frame to show; Arcade calls on_draw to actually paint it"""
        self.state = state

    # ----------------------------
    # Arcade callbacks
    # ----------------------------

    def on_update(self, delta_time: float):
        if self.loop is not None:
            self.loop.tick()

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.R:
            self._restart()
        elif self.controls is not None and symbol in KEY_NAMES:
            self.controls.on_key_down(KEY_NAMES[symbol])

    def on_key_release(self, symbol: int, modifiers: int):
        if self.controls is not None and symbol in KEY_NAMES:
            self.controls.on_key_up(KEY_NAMES[symbol])

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        bx, by, bw, bh = self.restart_button
        top_y = self.height - y
        if bx <= x <= bx + bw and by <= top_y <= by + bh:
            self._restart()

    def on_draw(self):
        """Draw the current game state"""
        self.clear(color=self.BG)
        self._draw_grid()

        for block in self.state.blocks:
            if not block.active:
                continue
            color = self._block_colors.get(block.color)
            if color is None:
                color = self._block_colors[block.color] = _color(block.color)
            l, r, b, t = self._lrbt(block.x, block.y, block.width, block.height)
            arcade.draw_lrbt_rectangle_filled(l, r, b, t, color)
            arcade.draw_lrbt_rectangle_outline(l, r, b, t, self.OUTLINE_C, 1)

        paddle = self.state.paddle
        arcade.draw_lrbt_rectangle_filled(
            *self._lrbt(paddle.x, paddle.y, paddle.width, paddle.height), self.PADDLE_C
        )

        ball = self.state.ball
        arcade.draw_circle_filled(ball.x, self.height - ball.y, ball.radius, self.BALL_C)

        # HUD
        arcade.draw_text(f"Score: {self.hud['score']}", 12, self.height - 30, self.TEXT_C, 16)
        arcade.draw_text(f"Lives: {self.hud['lives']}", 160, self.height - 30, self.TEXT_C, 16)
        if self.loop is not None:
            bx, by, bw, bh = self.restart_button
            l, r, b, t = self._lrbt(bx, by, bw, bh)
            arcade.draw_lrbt_rectangle_outline(l, r, b, t, self.BUTTON_C, 2)
            arcade.draw_text("Restart", bx + bw / 2, self.height - by - bh / 2, self.BUTTON_C, 14,
                             anchor_x="center", anchor_y="center")

        if self.state.game_over:
            arcade.draw_text("GAME OVER!", self.width / 2, self.height / 2, self.TEXT_C, 52,
                             anchor_x="center", anchor_y="center", bold=True)

    # ----------------------------
    # Helpers
    # ----------------------------

    def _restart(self):
        if self.loop is not None:
            self.loop.restart()

    def _lrbt(self, x: float, y: float, w: float, h: float):
        """Top-left playfield rectangle -> Arcade (left, right, bottom, top)"""
        return x, x + w, self.height - (y + h), self.height - y

    def _draw_grid(self):
        for x in range(0, self.width, GRID_SPACING):
            arcade.draw_line(x, 0, x, self.height, self.GRID_C, 1)
        for y in range(0, self.height, GRID_SPACING):
            arcade.draw_line(0, self.height - y, self.width, self.height - y, self.GRID_C, 1)
