"""Breakout visual skins."""

from .base import BreakoutSkin, block_color_tag
from .classic import ClassicSkin

__all__ = ['BreakoutSkin', 'ClassicSkin', 'block_color_tag']
