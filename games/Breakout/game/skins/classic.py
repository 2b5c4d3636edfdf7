"""Classic skin - flat rectangles on a white background."""

from typing import TYPE_CHECKING, Dict, Tuple

import pygame

from games.Breakout.config import (
    HUD_FONT_SIZE, HUD_MARGIN, HUD_TOP, TITLE_FONT_SIZE,
)
from .base import BreakoutSkin

if TYPE_CHECKING:
    from models import Rectangle


class ClassicSkin(BreakoutSkin):
    """Renders the game as filled rectangles with black text.

    - Paddle: Blue
    - Balls: Dark gray
    - Blocks: Orange, green for blocks that release a ball
    """

    NAME = "classic"
    DESCRIPTION = "Flat rectangles, default font"

    def __init__(self):
        """Initialize classic skin."""
        self._fonts: Dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        """Get the default font at `size`, loading it on first use."""
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def draw_rect(self, screen: pygame.Surface, rect: 'Rectangle', tag: str) -> None:
        pygame.draw.rect(
            screen,
            self.color(tag),
            pygame.Rect(round(rect.x), round(rect.y), round(rect.width), round(rect.height)),
        )

    def draw_text(
        self,
        screen: pygame.Surface,
        text: str,
        position: Tuple[float, float],
        size: int,
        tag: str,
        centered: bool = False,
    ) -> None:
        surface = self._font(size).render(text, True, self.color(tag))
        if centered:
            rect = surface.get_rect(center=(round(position[0]), round(position[1])))
        else:
            rect = surface.get_rect(topleft=(round(position[0]), round(position[1])))
        screen.blit(surface, rect)

    def render_hud(self, screen: pygame.Surface, score: int, lives: int) -> None:
        """Score centered at the top, lives on the left."""
        width = screen.get_width()
        self.draw_text(screen, f"score: {score}", (width * 0.5, HUD_TOP),
                       HUD_FONT_SIZE, 'text', centered=True)
        self.draw_text(screen, f"lives: {lives}", (HUD_MARGIN, HUD_TOP),
                       HUD_FONT_SIZE, 'text')

    def render_title(self, screen: pygame.Surface, text: str) -> None:
        width, height = screen.get_size()
        self.draw_text(screen, text, (width * 0.5, height * 0.5),
                       TITLE_FONT_SIZE, 'text', centered=True)
