"""
Frame-driven game loop
Connects the simulation to the presentation and audio collaborators
"""

from typing import List, Optional

from .controls import InputState
from .entities import GameState
from .events import DisplayUpdate, Sound, SoundTrigger
from .simulation import Event, restart, step


class GameLoop:
    """
    Runs one simulation tick per frame and forwards the tick's effects.

    The loop has no timing of its own: whatever calls ``tick()`` (an Arcade
    window's ``on_update``, a test, ``run()``) sets the pace.

    Collaborators:
        presenter: object with ``update_display(field, text)`` and ``draw(state)``
        audio: object with ``play(name)``
    Both are optional; missing ones are skipped.
    """

    def __init__(
        self,
        state: GameState,
        controls: Optional[InputState] = None,
        presenter=None,
        audio=None,
        verbose: int = 0,
    ):
        self.state = state
        self.controls = controls if controls is not None else InputState()
        self.presenter = presenter
        self.audio = audio
        self.verbose = verbose

        self.frame_count = 0
        self.tick_count = 0

    def tick(self) -> List[Event]:
        """Advance one frame: simulate (unless game over), dispatch, draw"""
        events: List[Event] = []
        if not self.state.game_over:
            events = step(self.state, self.controls)
            self.tick_count += 1
            self._dispatch(events)

        if self.presenter is not None:
            self.presenter.draw(self.state)
        self.frame_count += 1
        return events

    def restart(self) -> List[Event]:
        events = restart(self.state)
        self._dispatch(events)
        if self.verbose > 0:
            print(f"[GameLoop] Restarted after {self.tick_count} ticks")
        self.tick_count = 0
        return events

    def run(self, n_ticks: int) -> List[Event]:
        """Drive ``n_ticks`` frames back to back; returns every event emitted"""
        emitted: List[Event] = []
        for _ in range(n_ticks):
            emitted.extend(self.tick())
        return emitted

    def _dispatch(self, events: List[Event]):
        for event in events:
            if isinstance(event, SoundTrigger):
                if self.audio is not None:
                    self.audio.play(event.sound.value)
                if self.verbose > 0 and event.sound is Sound.LIFE_LOST:
                    print(f"[GameLoop] Life lost, {self.state.lives} remaining")
                elif self.verbose > 0 and event.sound is Sound.GAME_OVER:
                    print(f"[GameLoop] Game over at tick {self.tick_count}, score {self.state.score}")
            elif isinstance(event, DisplayUpdate):
                if self.presenter is not None:
                    self.presenter.update_display(event.field, event.text)
