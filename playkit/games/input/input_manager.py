"""
Input Manager - Collects input from the active source.
"""
from typing import Optional

from playkit.games.input.input_event import InputFrame
from playkit.games.input.sources.base import InputSource


class InputManager:
    """Manages the input source and hands out one InputFrame per frame.

    Games only see InputFrame snapshots, so the source can be swapped
    (keyboard, scripted playback) without changing game logic.
    """

    def __init__(self, source: Optional[InputSource] = None):
        """Initialize with an optional input source."""
        self._source = source

    def update(self, dt: float) -> None:
        """Update the active input source.

        Args:
            dt: Delta time in seconds since last update.
        """
        if self._source is not None:
            self._source.update(dt)

    def get_frame(self) -> InputFrame:
        """Get the control snapshot for this frame (idle if no source)."""
        if self._source is None:
            return InputFrame()
        return self._source.poll_frame()
