"""
Input source implementations.
"""

from playkit.games.input.sources.base import InputSource
from playkit.games.input.sources.keyboard import KeyboardInputSource

__all__ = ['InputSource', 'KeyboardInputSource']
