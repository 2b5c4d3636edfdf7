"""
Playkit - small frame-loop game framework.

Provides the logging system, the BaseGame contract, the shared GameState
enum and keyboard input handling used by the games under games/.
"""

from playkit.logging import get_logger

logger = get_logger('playkit')

__all__ = ['logger', 'get_logger']
