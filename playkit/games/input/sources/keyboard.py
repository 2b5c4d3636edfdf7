"""
Keyboard Input Source - Arrow keys / A-D to move, SPACE to confirm.
"""
import time
from typing import Callable, Iterable, List, Sequence

import pygame

from playkit.games.input.input_event import InputFrame
from playkit.games.input.sources.base import InputSource


class KeyboardInputSource(InputSource):
    """Keyboard input source.

    Held keys are read from pygame's key state when a frame is polled.
    Confirm key presses are taken from KEYDOWN events so that holding the
    key does not repeat the confirm. Other events are re-posted to the
    pygame event queue for the main loop.
    """

    LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
    RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
    CONFIRM_KEYS = (pygame.K_SPACE,)

    def __init__(self, key_state: Callable[[], Sequence[bool]] = pygame.key.get_pressed):
        """Initialize the keyboard input source.

        Args:
            key_state: Callable returning the held state indexed by key code
        """
        self._key_state = key_state
        self._confirm_pending = False

    def handle_events(self, events: Iterable[pygame.event.Event]) -> List[pygame.event.Event]:
        """Consume confirm presses from an event batch.

        Returns:
            The events this source did not consume.
        """
        unhandled = []
        for event in events:
            if event.type == pygame.KEYDOWN and event.key in self.CONFIRM_KEYS:
                self._confirm_pending = True
            else:
                unhandled.append(event)
        return unhandled

    def update(self, dt: float) -> None:
        """Process pygame events, re-posting the ones not consumed."""
        for event in self.handle_events(pygame.event.get()):
            pygame.event.post(event)

    def poll_frame(self) -> InputFrame:
        """Snapshot held keys and consume the pending confirm press."""
        pressed = self._key_state()
        frame = InputFrame(
            move_left=any(pressed[k] for k in self.LEFT_KEYS),
            move_right=any(pressed[k] for k in self.RIGHT_KEYS),
            confirm=self._confirm_pending,
            timestamp=time.monotonic(),
        )
        self._confirm_pending = False
        return frame

    def clear(self) -> None:
        """Drop a pending confirm press."""
        self._confirm_pending = False
