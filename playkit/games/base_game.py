"""Base class for all playkit games.

Game metadata (NAME, DESCRIPTION, etc.) and CLI arguments (ARGUMENTS)
are declared as class attributes, so launchers can build their argument
parser from the game class alone.
"""
import random
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import pygame

from playkit.games.game_state import GameState
from playkit.games.input.input_event import InputFrame


class BaseGame(ABC):
    """Abstract base class for all playkit games.

    Class Attributes (metadata):
        NAME: Display name for the game
        DESCRIPTION: Short description of gameplay
        VERSION: Semantic version string
        AUTHOR: Author/team name
        ARGUMENTS: List of CLI argument definitions for argparse

    Subclasses must implement:
        - _get_internal_state() -> GameState: Report the active state
        - get_score() -> int: Return current score
        - handle_input(frame): Process this frame's controls
        - update(dt): Update game logic
        - render(screen): Draw the game

    Optional overrides:
        - set_screen_size(width, height): React to window size changes

    Usage:
        class MyGame(BaseGame):
            NAME = "My Game"

            ARGUMENTS = [
                {'name': '--lives', 'type': int, 'default': 3,
                 'help': 'Starting lives'},
            ]

            def __init__(self, lives=3, **kwargs):
                super().__init__(**kwargs)
                self._lives = lives
    """

    # =========================================================================
    # Game Metadata (override in subclasses)
    # =========================================================================

    NAME: str = "Unnamed Game"
    DESCRIPTION: str = "No description"
    VERSION: str = "1.0.0"
    AUTHOR: str = "Unknown"

    # CLI argument definitions for argparse
    # Each entry is a dict with keys: name, type, default, help, choices (optional), action (optional)
    ARGUMENTS: List[Dict[str, Any]] = []

    # =========================================================================
    # Standard Arguments (automatically available to all games)
    # =========================================================================

    _BASE_ARGUMENTS: List[Dict[str, Any]] = [
        {
            'name': '--seed',
            'type': int,
            'default': None,
            'help': 'Seed the random source for a reproducible session'
        },
    ]

    @classmethod
    def get_arguments(cls) -> List[Dict[str, Any]]:
        """Get all CLI arguments for this game (game-specific + base).

        Game-specific arguments come first, then base arguments.
        Duplicates by name are removed (game-specific takes precedence).
        """
        seen_names = set()
        result = []

        for arg in list(cls.ARGUMENTS) + list(cls._BASE_ARGUMENTS):
            name = arg.get('name', '')
            if name and name not in seen_names:
                seen_names.add(name)
                result.append(arg)

        return result

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        """Get game metadata as a dictionary.

        Returns:
            Dict with keys: name, description, version, author, arguments
        """
        return {
            'name': cls.NAME,
            'description': cls.DESCRIPTION,
            'version': cls.VERSION,
            'author': cls.AUTHOR,
            'arguments': cls.get_arguments(),
        }

    # =========================================================================
    # Instance Initialization
    # =========================================================================

    def __init__(self, seed: Optional[int] = None, **kwargs):
        """Initialize base game.

        Args:
            seed: Seed for the game's random source (None = unseeded)
        """
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def rng(self) -> random.Random:
        """Random source for every draw the game makes."""
        return self._rng

    @property
    def state(self) -> GameState:
        """Current game state.

        Games should not override this - override _get_internal_state instead.
        """
        return self._get_internal_state()

    @abstractmethod
    def _get_internal_state(self) -> GameState:
        """Report the active state of the game's state machine."""

    @abstractmethod
    def get_score(self) -> int:
        """Get current score."""

    @abstractmethod
    def handle_input(self, frame: InputFrame) -> None:
        """Process this frame's controls.

        Args:
            frame: Control snapshot for the frame
        """

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update game logic.

        Args:
            dt: Delta time in seconds since last frame
        """

    @abstractmethod
    def render(self, screen: pygame.Surface) -> None:
        """Render the game.

        Args:
            screen: Pygame surface to draw on
        """

    # =========================================================================
    # Optional Methods
    # =========================================================================

    def set_screen_size(self, width: float, height: float) -> None:
        """Receive the current window size. Called once per frame."""
