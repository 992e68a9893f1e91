"""
Core abstractions for the Tetris engine.

Provides the interfaces that games and renderers implement. The renderer
interface depends on pygame and is imported from its own module.
"""

from .game_interface import GameInterface, GameMetadata

__all__ = [
    'GameInterface',
    'GameMetadata',
]
