"""
Input abstraction layer for playkit games.

Games consume InputFrame snapshots; sources translate device state into them.
"""

from playkit.games.input.input_event import InputFrame
from playkit.games.input.input_manager import InputManager

__all__ = ['InputFrame', 'InputManager']
