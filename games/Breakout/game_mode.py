"""Breakout - classic paddle and blocks game.

Features:
- Keyboard paddle: hold left/right to slide, SPACE to start and restart
- Blocks that release an extra ball when destroyed
- Resizable window: the play field follows the current screen size
"""

from typing import Dict, Optional

import pygame

from playkit.games import BaseGame, GameState
from playkit.games.input import InputFrame
from playkit.logging import get_logger

from .config import SCREEN_WIDTH, SCREEN_HEIGHT, STARTING_LIVES
from .game.session import GameSession
from .game.simulation import StepReport
from .game.state_machine import advance
from .game.skins import BreakoutSkin, ClassicSkin

log = get_logger('breakout.game_mode')


class BreakoutMode(BaseGame):
    """Breakout game mode.

    Holds the session, feeds it the controls and screen size each frame
    and draws the result through a skin.
    """

    # Game metadata
    NAME = "Breakout"
    DESCRIPTION = "Knock out every block without losing all your balls."
    VERSION = "1.0.0"
    AUTHOR = "Breakout Team"

    # CLI arguments
    ARGUMENTS = [
        {
            'name': '--skin',
            'type': str,
            'default': 'classic',
            'choices': ['classic'],
            'help': 'Visual skin'
        },
        {
            'name': '--lives',
            'type': int,
            'default': STARTING_LIVES,
            'help': 'Starting lives'
        },
    ]

    SKINS: Dict[str, type] = {
        'classic': ClassicSkin,
    }

    def __init__(
        self,
        skin: str = 'classic',
        lives: int = STARTING_LIVES,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        **kwargs,
    ):
        """Initialize Breakout.

        Args:
            skin: Visual skin to use
            lives: Starting lives
            width: Screen width
            height: Screen height
            **kwargs: Base game args (seed)
        """
        super().__init__(**kwargs)

        self._screen_width = float(width)
        self._screen_height = float(height)
        self._frame = InputFrame()
        self._last_report: Optional[StepReport] = None

        if skin not in self.SKINS:
            log.warning("Unknown skin '%s', using classic", skin)
        skin_class = self.SKINS.get(skin, ClassicSkin)
        self._skin: BreakoutSkin = skin_class()

        self._session = GameSession(
            self._screen_width,
            self._screen_height,
            rng=self.rng,
            starting_lives=lives,
        )
        log.info("Breakout ready (%dx%d, lives=%d, seed=%s)",
                 width, height, lives, self._seed)

    @property
    def session(self) -> GameSession:
        """The live session (score, lives, entities, state)."""
        return self._session

    @property
    def last_report(self) -> Optional[StepReport]:
        """Report of the most recent GAME frame, None otherwise."""
        return self._last_report

    def _get_internal_state(self) -> GameState:
        return self._session.state

    def get_score(self) -> int:
        return self._session.score

    def set_screen_size(self, width: float, height: float) -> None:
        """Track the current window size; read every frame."""
        self._screen_width = float(width)
        self._screen_height = float(height)

    def handle_input(self, frame: InputFrame) -> None:
        """Store this frame's controls for the next update."""
        self._frame = frame

    def update(self, dt: float) -> None:
        """Run the active state's logic for one frame.

        Args:
            dt: Delta time in seconds
        """
        frame, self._frame = self._frame, InputFrame()
        self._last_report = advance(
            self._session,
            frame,
            dt,
            self._screen_width,
            self._screen_height,
        )

    def render(self, screen: pygame.Surface) -> None:
        """Render the game.

        Args:
            screen: Pygame surface to draw on
        """
        session = self._session
        self._skin.clear(screen)

        self._skin.render_player(session.player, screen)
        for block in session.blocks:
            self._skin.render_block(block, screen)
        for ball in session.balls:
            self._skin.render_ball(ball, screen)

        state = session.state
        if state is GameState.MENU:
            self._skin.render_title(screen, "Press SPACE to start")
        elif state is GameState.GAME:
            self._skin.render_hud(screen, session.score, session.lives)
        elif state is GameState.LEVEL_COMPLETED:
            self._skin.render_title(screen, f"You win! {session.score} Score")
        elif state is GameState.DEAD:
            self._skin.render_title(screen, f"You lose! {session.score} Score")

