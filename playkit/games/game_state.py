"""Common GameState enum for playkit games.

The state machine of a game is a closed set of states; games report the
active one via their `state` property and dispatch on it every frame.
"""
from enum import Enum


class GameState(Enum):
    """Game states used by the frame loop.

    States:
        MENU: Title screen, waiting for the confirm input
        GAME: Active gameplay in progress
        LEVEL_COMPLETED: Every block destroyed (terminal until confirm)
        DEAD: All lives lost (terminal until confirm)

    Only MENU -> GAME, GAME -> LEVEL_COMPLETED, GAME -> DEAD,
    LEVEL_COMPLETED -> MENU and DEAD -> MENU are valid transitions.
    """
    MENU = "menu"
    GAME = "game"
    LEVEL_COMPLETED = "level_completed"
    DEAD = "dead"

    @property
    def is_terminal(self) -> bool:
        """True for the end-of-round states."""
        return self in (GameState.LEVEL_COMPLETED, GameState.DEAD)


TRANSITIONS = {
    GameState.MENU: frozenset({GameState.GAME}),
    GameState.GAME: frozenset({GameState.LEVEL_COMPLETED, GameState.DEAD}),
    GameState.LEVEL_COMPLETED: frozenset({GameState.MENU}),
    GameState.DEAD: frozenset({GameState.MENU}),
}


def can_transition(current: GameState, target: GameState) -> bool:
    """Check whether moving from `current` to `target` is allowed."""
    return target in TRANSITIONS[current]
