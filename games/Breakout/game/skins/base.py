"""Base class for Breakout skins.

Skins handle ALL rendering - the game only manages state. Entities hand
over logical geometry and a color tag, the skin decides the pixels.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Tuple

import pygame

from games.Breakout.config import COLORS
from ..entities.block import BlockKind

if TYPE_CHECKING:
    from ..entities.player import Player
    from ..entities.ball import Ball
    from ..entities.block import Block
    from models import Rectangle


class BreakoutSkin(ABC):
    """Base class for game skins.

    Subclasses implement the two drawing primitives; the entity and text
    helpers are built on top of them.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    def color(self, tag: str) -> Tuple[int, int, int]:
        """Resolve a color tag to RGB."""
        return COLORS[tag].as_rgb_tuple

    @abstractmethod
    def draw_rect(self, screen: pygame.Surface, rect: 'Rectangle', tag: str) -> None:
        """Draw a filled rectangle.

        Args:
            screen: Pygame surface to draw on
            rect: Rectangle in screen coordinates
            tag: Color tag
        """

    @abstractmethod
    def draw_text(
        self,
        screen: pygame.Surface,
        text: str,
        position: Tuple[float, float],
        size: int,
        tag: str,
        centered: bool = False,
    ) -> None:
        """Draw a line of text.

        Args:
            screen: Pygame surface to draw on
            text: Text to draw
            position: Top-left corner, or center when `centered`
            size: Font size in pixels
            tag: Color tag
            centered: Treat position as the text's center
        """

    def clear(self, screen: pygame.Surface) -> None:
        """Fill the screen with the background color."""
        screen.fill(self.color('background'))

    def render_player(self, player: 'Player', screen: pygame.Surface) -> None:
        """Render the paddle."""
        self.draw_rect(screen, player.rect, 'player')

    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        """Render a ball."""
        self.draw_rect(screen, ball.rect, 'ball')

    def render_block(self, block: 'Block', screen: pygame.Surface) -> None:
        """Render a block colored by kind and remaining lives."""
        self.draw_rect(screen, block.rect, block_color_tag(block))

    def render_hud(self, screen: pygame.Surface, score: int, lives: int) -> None:
        """Render the heads-up display (score, lives)."""

    def render_title(self, screen: pygame.Surface, text: str) -> None:
        """Render a message in the middle of the screen."""


def block_color_tag(block: 'Block') -> str:
    """Pick the color tag for a block."""
    if block.kind is BlockKind.SPAWN_BALL_ON_DEATH:
        return 'block_spawner'
    if block.kind is BlockKind.REGULAR:
        return 'block_tough' if block.lives == 2 else 'block'
    raise ValueError(f"Unhandled block kind: {block.kind}")
