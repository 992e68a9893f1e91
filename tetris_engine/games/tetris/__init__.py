"""
Tetris game module.

The renderer and key bindings need pygame and are imported from their own
modules by front ends.
"""

from .board import Board, COLS, ROWS, VISIBLE_ROWS, HIDDEN_ROWS
from .clock import LogicClock
from .config import TetrisConfig
from .game import TetrisGame, GamePhase, InputEvent, ActivePiece, GameSession
from .pieces import PieceType, PieceShape, PIECES, get_shape

__all__ = [
    'TetrisGame',
    'TetrisConfig',
    'GamePhase',
    'InputEvent',
    'ActivePiece',
    'GameSession',
    'Board',
    'LogicClock',
    'PieceType',
    'PieceShape',
    'PIECES',
    'get_shape',
    'COLS',
    'ROWS',
    'VISIBLE_ROWS',
    'HIDDEN_ROWS',
]
