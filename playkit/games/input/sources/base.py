"""
Base Input Source - Abstract interface for input backends.
"""
from abc import ABC, abstractmethod

from playkit.games.input.input_event import InputFrame


class InputSource(ABC):
    """Abstract base class for input sources."""

    @abstractmethod
    def poll_frame(self) -> InputFrame:
        """Snapshot the controls and consume pending edge-triggered input.

        Returns:
            InputFrame for the current frame.
        """

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update the input source, collecting device events.

        Args:
            dt: Delta time in seconds since last update.
        """
