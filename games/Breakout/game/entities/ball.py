"""Ball entity.

A ball is a square moving at constant speed along a direction vector.
The direction is unit length when the ball is created; collisions only
flip or overwrite single components.
"""

import random
from dataclasses import dataclass
from typing import Optional

from models import Point2D, Rectangle, Vector2D
from games.Breakout.config import BALL_SIZE, BALL_SPEED


@dataclass
class BallConfig:
    """Ball configuration."""

    size: float = BALL_SIZE
    speed: float = BALL_SPEED  # Pixels/second along the direction vector


class Ball:
    """Ball with velocity-based movement and wall containment."""

    def __init__(
        self,
        position: Point2D,
        velocity: Vector2D,
        config: Optional[BallConfig] = None,
    ):
        """Initialize ball.

        Args:
            position: Top-left corner of the ball
            velocity: Direction of travel (speed is applied separately)
            config: Ball configuration
        """
        self._config = config or BallConfig()
        self.rect = Rectangle(
            x=position.x,
            y=position.y,
            width=self._config.size,
            height=self._config.size,
        )
        self.velocity = velocity

    @classmethod
    def spawn(
        cls,
        position: Point2D,
        rng: random.Random,
        config: Optional[BallConfig] = None,
    ) -> 'Ball':
        """Create a ball heading down at a random horizontal angle.

        Args:
            position: Top-left corner of the new ball
            rng: Random source for the direction
            config: Ball configuration

        Returns:
            New Ball with a unit-length direction
        """
        direction = Vector2D(x=rng.uniform(-1.0, 1.0), y=1.0).normalized()
        return cls(position, direction, config)

    @property
    def config(self) -> BallConfig:
        return self._config

    @property
    def speed(self) -> float:
        return self._config.speed

    def update(self, dt: float, screen_width: float) -> None:
        """Advance the ball and keep it inside the left, right and top walls.

        The bottom is open: a ball leaving through it is handled by the
        simulation as lost.

        Args:
            dt: Delta time in seconds
            screen_width: Current screen width
        """
        self.rect.x += self.velocity.x * dt * self._config.speed
        self.rect.y += self.velocity.y * dt * self._config.speed

        if self.rect.x < 0:
            self.velocity.x = 1.0
        elif self.rect.x > screen_width - self.rect.width:
            self.velocity.x = -1.0
        elif self.rect.y < 0:
            self.velocity.y = 1.0

    def __repr__(self) -> str:
        return f"Ball({self.rect}, {self.velocity})"
