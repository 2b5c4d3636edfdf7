"""Game session - the full mutable state of one playthrough.

The session owns the paddle, the blocks, the balls, the score, the lives
and the active state. The simulation step and the state machine receive
it explicitly; entities never refer back to it.
"""

import random
from typing import List, Optional

from models import Point2D
from playkit.games import GameState, can_transition
from playkit.logging import emit_record, get_logger
from games.Breakout.config import (
    BALL_SPAWN_HEIGHT, BALL_START_OFFSET_Y, STARTING_LIVES,
)
from .entities import Ball, BallConfig, Block, BlockConfig, Player, PlayerConfig
from .level import build_block_grid

log = get_logger('breakout.session')


class GameSession:
    """Score, lives, entities and state of the current round."""

    def __init__(
        self,
        screen_width: float,
        screen_height: float,
        rng: Optional[random.Random] = None,
        starting_lives: int = STARTING_LIVES,
        player_config: Optional[PlayerConfig] = None,
        ball_config: Optional[BallConfig] = None,
        block_config: Optional[BlockConfig] = None,
    ):
        """Create the session shown behind the title screen.

        The first ball starts below the middle of the screen.

        Args:
            screen_width: Screen width in pixels
            screen_height: Screen height in pixels
            rng: Random source (a fresh unseeded one if omitted)
            starting_lives: Lives at start and after every reset
            player_config: Paddle configuration
            ball_config: Ball configuration
            block_config: Block configuration
        """
        if starting_lives < 1:
            raise ValueError(f'starting_lives must be at least 1, got {starting_lives}')

        self.rng = rng or random.Random()
        self.starting_lives = starting_lives
        self.player_config = player_config or PlayerConfig()
        self.ball_config = ball_config or BallConfig()
        self.block_config = block_config or BlockConfig()

        self.state = GameState.MENU
        self.score = 0
        self.lives = starting_lives
        self.player = Player(screen_width, screen_height, self.player_config)
        self.blocks: List[Block] = build_block_grid(
            screen_width, self.rng, config=self.block_config,
        )
        self.balls: List[Ball] = [
            self.spawn_ball(Point2D(
                x=(screen_width - self.ball_config.size) * 0.5,
                y=screen_height * 0.5 + BALL_START_OFFSET_Y,
            ))
        ]

    def spawn_ball(self, position: Point2D) -> Ball:
        """Create a ball at `position` with a random downward direction.

        The ball is not added to the session.
        """
        return Ball.spawn(position, self.rng, self.ball_config)

    def ball_above_player(self) -> Ball:
        """Create a ball horizontally centered just above the paddle."""
        rect = self.player.rect
        return self.spawn_ball(Point2D(
            x=rect.x + (rect.width - self.ball_config.size) * 0.5,
            y=rect.y - BALL_SPAWN_HEIGHT,
        ))

    def loss_threshold(self, screen_height: float) -> float:
        """Y position at or below which a ball counts as lost."""
        return screen_height - self.player_config.bottom_offset

    def transition(self, target: GameState) -> None:
        """Move the state machine to `target`.

        Raises:
            ValueError: If the transition is not allowed
        """
        if not can_transition(self.state, target):
            raise ValueError(f'Invalid transition {self.state.value} -> {target.value}')
        log.info("State %s -> %s (score=%d, lives=%d)",
                 self.state.value, target.value, self.score, self.lives)
        emit_record('session', {
            'type': 'transition',
            'from': self.state.value,
            'to': target.value,
            'score': self.score,
            'lives': self.lives,
        })
        self.state = target

    def reset(self, screen_width: float, screen_height: float) -> None:
        """Start a new round: zero score, full lives, new grid, one ball.

        The state is left unchanged.
        """
        self.player = Player(screen_width, screen_height, self.player_config)
        self.score = 0
        self.lives = self.starting_lives
        self.balls = [self.ball_above_player()]
        self.blocks = build_block_grid(screen_width, self.rng, config=self.block_config)
        log.info("Session reset (%d blocks)", len(self.blocks))
        emit_record('session', {'type': 'reset', 'blocks': len(self.blocks)})

    def __repr__(self) -> str:
        return (f"GameSession(state={self.state.value}, score={self.score}, "
                f"lives={self.lives}, balls={len(self.balls)}, blocks={len(self.blocks)})")
