"""Game state machine.

MENU -> GAME on confirm, GAME -> LEVEL_COMPLETED / DEAD from the
simulation step, LEVEL_COMPLETED / DEAD -> MENU on confirm (with a full
session reset). Only GAME runs the simulation.
"""

from typing import Optional

from playkit.games import GameState
from playkit.games.input import InputFrame
from .session import GameSession
from .simulation import StepReport, step


def advance(
    session: GameSession,
    frame: InputFrame,
    dt: float,
    screen_width: float,
    screen_height: float,
) -> Optional[StepReport]:
    """Run one frame of the active state's logic.

    Args:
        session: Session to drive
        frame: Controls for this frame
        dt: Delta time in seconds
        screen_width: Current screen width
        screen_height: Current screen height

    Returns:
        The simulation report when a GAME frame ran, otherwise None
    """
    state = session.state

    if state is GameState.MENU:
        if frame.confirm:
            session.transition(GameState.GAME)
        return None

    if state is GameState.GAME:
        return step(session, frame, dt, screen_width, screen_height)

    if state.is_terminal:
        if frame.confirm:
            session.transition(GameState.MENU)
            session.reset(screen_width, screen_height)
        return None

    raise ValueError(f"Unhandled game state: {state}")
