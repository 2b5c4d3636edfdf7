"""
Playkit Game Framework.

Provides:
- base_game: BaseGame class that all games inherit from
- game_state: GameState enum and its transition table
- input: Keyboard input sources and per-frame InputFrame snapshots
"""

from playkit.games.game_state import GameState, can_transition
from playkit.games.base_game import BaseGame

__all__ = [
    'GameState',
    'can_transition',
    'BaseGame',
]
