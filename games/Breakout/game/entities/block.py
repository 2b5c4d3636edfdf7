"""Block entity.

Blocks are static targets laid out in a grid. A block loses one life per
ball contact and is destroyed at zero lives. What happens on destruction
depends on its kind.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from models import Point2D, Rectangle
from games.Breakout.config import BLOCK_WIDTH, BLOCK_HEIGHT, BLOCK_LIVES, BLOCK_POINTS


class BlockKind(Enum):
    """Closed set of block kinds."""

    REGULAR = "regular"
    SPAWN_BALL_ON_DEATH = "spawn_ball_on_death"


@dataclass(frozen=True)
class BlockConfig:
    """Block configuration."""

    width: float = BLOCK_WIDTH
    height: float = BLOCK_HEIGHT
    lives: int = BLOCK_LIVES
    points: int = BLOCK_POINTS


class Block:
    """A block in the grid."""

    def __init__(
        self,
        position: Point2D,
        kind: BlockKind = BlockKind.REGULAR,
        config: BlockConfig = BlockConfig(),
        grid_position: Tuple[int, int] = (0, 0),
    ):
        """Initialize block.

        Args:
            position: Top-left corner
            kind: Block kind
            config: Block configuration
            grid_position: (row, col) position in grid
        """
        self.rect = Rectangle(
            x=position.x,
            y=position.y,
            width=config.width,
            height=config.height,
        )
        self.lives = config.lives
        self.kind = kind
        self._points = config.points
        self._grid_position = grid_position

    @property
    def points(self) -> int:
        """Score awarded when the block is destroyed."""
        return self._points

    @property
    def grid_position(self) -> Tuple[int, int]:
        """Get grid position (row, col)."""
        return self._grid_position

    @property
    def is_destroyed(self) -> bool:
        return self.lives <= 0

    @property
    def spawns_ball(self) -> bool:
        """Whether destroying this block releases an extra ball."""
        if self.kind is BlockKind.SPAWN_BALL_ON_DEATH:
            return True
        if self.kind is BlockKind.REGULAR:
            return False
        raise ValueError(f"Unhandled block kind: {self.kind}")

    def hit(self) -> bool:
        """Take one life from the block.

        A block already at zero lives keeps counting down but is not
        destroyed a second time.

        Returns:
            True if this hit destroyed the block
        """
        was_alive = self.lives > 0
        self.lives -= 1
        return was_alive and self.lives <= 0

    def __repr__(self) -> str:
        return f"Block({self.kind.value}, lives={self.lives}, {self.rect})"
