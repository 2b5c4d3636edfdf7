"""Player paddle entity.

The paddle slides left or right while a direction is held and stops as
soon as it is released. It never leaves the horizontal play field.
"""

from dataclasses import dataclass
from typing import Optional

from models import Rectangle
from playkit.games.input import InputFrame
from games.Breakout.config import (
    PLAYER_WIDTH, PLAYER_HEIGHT, PLAYER_SPEED, PLAYER_BOTTOM_OFFSET,
)


@dataclass
class PlayerConfig:
    """Paddle configuration."""

    width: float = PLAYER_WIDTH
    height: float = PLAYER_HEIGHT
    speed: float = PLAYER_SPEED
    bottom_offset: float = PLAYER_BOTTOM_OFFSET  # Paddle top = screen height - offset


class Player:
    """Keyboard-driven paddle."""

    def __init__(
        self,
        screen_width: float,
        screen_height: float,
        config: Optional[PlayerConfig] = None,
    ):
        """Create a paddle centered horizontally near the bottom of the screen.

        Args:
            screen_width: Screen width in pixels
            screen_height: Screen height in pixels
            config: Paddle configuration
        """
        self._config = config or PlayerConfig()
        self.rect = Rectangle(
            x=screen_width * 0.5 - self._config.width * 0.5,
            y=screen_height - self._config.bottom_offset,
            width=self._config.width,
            height=self._config.height,
        )

    @property
    def config(self) -> PlayerConfig:
        return self._config

    @property
    def center_x(self) -> float:
        """Get paddle center X position."""
        return self.rect.x + self.rect.width / 2

    def update(self, dt: float, frame: InputFrame, screen_width: float) -> None:
        """Move the paddle from the held controls, then clamp to the screen.

        Args:
            dt: Delta time in seconds
            frame: Controls for this frame
            screen_width: Current screen width
        """
        self.rect.x += frame.horizontal * dt * self._config.speed

        if self.rect.x < 0:
            # Hit left wall
            self.rect.x = 0.0
        elif self.rect.x > screen_width - self.rect.width:
            # Hit right wall
            self.rect.x = screen_width - self.rect.width

    def __repr__(self) -> str:
        return f"Player({self.rect})"
