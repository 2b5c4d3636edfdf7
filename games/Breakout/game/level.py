"""Block grid generation.

Builds the level layout: a centered grid of blocks below the top edge,
with a few blocks picked at random to release an extra ball when they
are destroyed.
"""

import random
from typing import List, Optional

from models import Point2D
from games.Breakout.config import (
    GRID_COLUMNS, GRID_ROWS, GRID_PADDING, GRID_TOP, SPECIAL_BLOCK_COUNT,
)
from .entities.block import Block, BlockConfig, BlockKind


def build_block_grid(
    screen_width: float,
    rng: random.Random,
    columns: int = GRID_COLUMNS,
    rows: int = GRID_ROWS,
    padding: float = GRID_PADDING,
    top: float = GRID_TOP,
    special_count: int = SPECIAL_BLOCK_COUNT,
    config: Optional[BlockConfig] = None,
) -> List[Block]:
    """Create a fresh grid of blocks in row-major order.

    Args:
        screen_width: Current screen width, used to center the grid
        rng: Random source for special block placement
        columns: Blocks per row
        rows: Number of rows
        padding: Gap added after each block on both axes
        top: Y position of the first row
        special_count: How many distinct blocks become SPAWN_BALL_ON_DEATH
        config: Block configuration

    Returns:
        List of blocks, row by row
    """
    config = config or BlockConfig()
    cell_width = config.width + padding
    cell_height = config.height + padding
    start_x = (screen_width - cell_width * columns) * 0.5

    blocks = []
    for i in range(columns * rows):
        row, col = divmod(i, columns)
        position = Point2D(
            x=start_x + col * cell_width,
            y=top + row * cell_height,
        )
        blocks.append(Block(position, BlockKind.REGULAR, config, (row, col)))

    for index in rng.sample(range(len(blocks)), min(special_count, len(blocks))):
        blocks[index].kind = BlockKind.SPAWN_BALL_ON_DEATH

    return blocks
