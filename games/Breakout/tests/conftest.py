"""Pytest fixtures for Breakout tests."""
import random

import pytest

from models import Point2D, Vector2D
from playkit.games import GameState
from games.Breakout.game.entities import Ball, Block, BlockKind
from games.Breakout.game.session import GameSession

SCREEN_WIDTH = 800.0
SCREEN_HEIGHT = 600.0


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def session(rng):
    """Fresh 800x600 session on the title screen."""
    return GameSession(SCREEN_WIDTH, SCREEN_HEIGHT, rng=rng)


@pytest.fixture
def playing_session(session):
    """Session already switched to the GAME state."""
    session.transition(GameState.GAME)
    return session


@pytest.fixture
def make_ball():
    """Factory for a ball at (x, y) with an explicit direction."""
    def _make(x: float, y: float, vx: float = 0.0, vy: float = 1.0) -> Ball:
        return Ball(Point2D(x=x, y=y), Vector2D(x=vx, y=vy))
    return _make


@pytest.fixture
def make_block():
    """Factory for a block at (x, y)."""
    def _make(x: float, y: float, kind: BlockKind = BlockKind.REGULAR) -> Block:
        return Block(Point2D(x=x, y=y), kind)
    return _make
