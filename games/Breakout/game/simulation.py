"""Per-frame simulation step for the GAME state.

Order of operations within a frame:
1. Move the paddle from the held controls.
2. Move every ball (with wall containment).
3. Bounce every ball off the paddle.
4. Bounce every ball off the blocks, in block order, applying damage,
   score and extra-ball spawns. Spawned balls are buffered and only
   joined to the ball list once every ball has been processed.
5. Drop lost balls; losing the last one costs a life and respawns a
   ball above the paddle.
6. Drop destroyed blocks.

When several blocks overlap one ball in the same frame they are resolved
in block insertion order, each correction seeing the previous one's
result. This is deterministic but not physically exact.

A block is scored, and releases its ball, only on the hit that takes it
from positive lives to zero or below. Earlier versions of the game
re-checked `lives <= 0` after every hit, so two balls striking the same
block in one frame scored it twice and released two balls; here a block
is worth its points exactly once.
"""

from dataclasses import dataclass
from typing import List, Optional

from playkit.games import GameState
from playkit.games.input import InputFrame
from playkit.logging import emit_record, get_logger
from .entities import Ball
from .physics import resolve_collision
from .session import GameSession

log = get_logger('breakout.simulation')


@dataclass
class StepReport:
    """What happened during one simulation step."""

    blocks_destroyed: int = 0
    score_gained: int = 0
    balls_spawned: int = 0
    balls_lost: int = 0
    life_lost: bool = False
    next_state: Optional[GameState] = None


def step(
    session: GameSession,
    frame: InputFrame,
    dt: float,
    screen_width: float,
    screen_height: float,
) -> StepReport:
    """Advance the session by one frame of gameplay.

    Args:
        session: Session to mutate
        frame: Controls for this frame
        dt: Delta time in seconds
        screen_width: Current screen width
        screen_height: Current screen height

    Returns:
        StepReport describing the frame's consequences
    """
    report = StepReport()

    session.player.update(dt, frame, screen_width)
    for ball in session.balls:
        ball.update(dt, screen_width)

    spawn_later: List[Ball] = []
    for ball in session.balls:
        resolve_collision(ball.rect, ball.velocity, session.player.rect)
        for block in session.blocks:
            if not resolve_collision(ball.rect, ball.velocity, block.rect):
                continue
            if not block.hit():
                continue
            session.score += block.points
            report.blocks_destroyed += 1
            report.score_gained += block.points
            log.debug("Block %s destroyed, score %d", block.grid_position, session.score)
            emit_record('session', {
                'type': 'block_destroyed',
                'grid_position': list(block.grid_position),
                'kind': block.kind.value,
                'score': session.score,
            })
            if block.spawns_ball:
                spawn_later.append(session.spawn_ball(ball.rect.point))

    session.balls.extend(spawn_later)
    report.balls_spawned = len(spawn_later)
    if spawn_later:
        log.debug("Spawned %d extra ball(s), %d in play", len(spawn_later), len(session.balls))

    threshold = session.loss_threshold(screen_height)
    balls_before = len(session.balls)
    session.balls = [ball for ball in session.balls if ball.rect.y < threshold]
    report.balls_lost = balls_before - len(session.balls)

    if report.balls_lost and not session.balls:
        session.lives -= 1
        report.life_lost = True
        session.balls.append(session.ball_above_player())
        log.debug("Life lost, %d remaining", session.lives)
        emit_record('session', {'type': 'life_lost', 'lives': session.lives})
        if session.lives <= 0:
            report.next_state = GameState.DEAD

    session.blocks = [block for block in session.blocks if block.lives > 0]
    if not session.blocks:
        report.next_state = GameState.LEVEL_COMPLETED

    if report.next_state is not None:
        session.transition(report.next_state)

    return report
