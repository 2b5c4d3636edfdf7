"""Breakout game entities."""

from .player import Player, PlayerConfig
from .ball import Ball, BallConfig
from .block import Block, BlockConfig, BlockKind

__all__ = [
    'Player', 'PlayerConfig',
    'Ball', 'BallConfig',
    'Block', 'BlockConfig', 'BlockKind',
]
