"""
Keyboard state tracking for the paddle
"""

# Browser-style names, including the legacy "Left"/"Right" spellings
LEFT_KEYS = frozenset({"ArrowLeft", "Left"})
RIGHT_KEYS = frozenset({"ArrowRight", "Right"})


class InputState:
    """Current left/right press flags built from raw key events.

    Both flags may be set at once; the simulation decides precedence.
    Unrecognized keys are ignored.
    """

    def __init__(self):
        self.left_pressed = False
        self.right_pressed = False

    def on_key_down(self, key: str):
        if key in RIGHT_KEYS:
            self.right_pressed = True
        elif key in LEFT_KEYS:
            self.left_pressed = True

    def on_key_up(self, key: str):
        if key in RIGHT_KEYS:
            self.right_pressed = False
        elif key in LEFT_KEYS:
            self.left_pressed = False

    @classmethod
    def from_action(cls, action) -> "InputState":
        controls = cls()
        controls.left_pressed = bool(action[0])
        controls.right_pressed = bool(action[1])
        return controls

    def __repr__(self):
        return f"InputState(left_pressed={self.left_pressed}, right_pressed={self.right_pressed})"
