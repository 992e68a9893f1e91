"""
Pytest configuration and fixtures for the Tetris engine tests.

This module sets up pygame mocking to allow testing the renderer and key
bindings without requiring a display, and provides a controllable time
source so the logic clock can be driven deterministically.
"""

import sys
from pathlib import Path
from typing import Callable, List, Optional
from unittest.mock import MagicMock

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def create_mock_pygame():
    """Create a mock of the parts of pygame the front end uses."""
    mock_pygame = MagicMock()

    mock_pygame.init.return_value = (6, 0)  # (success, fail) count
    mock_pygame.quit.return_value = None

    # Display
    mock_surface = MagicMock()
    mock_surface.get_width.return_value = 450
    mock_surface.get_height.return_value = 490
    mock_pygame.display.set_mode.return_value = mock_surface

    # Fonts
    mock_text = MagicMock()
    mock_text.get_width.return_value = 80
    mock_text.get_height.return_value = 16
    mock_font = MagicMock()
    mock_font.render.return_value = mock_text
    mock_pygame.font.Font.return_value = mock_font
    mock_pygame.font.SysFont.return_value = mock_font

    # Drawing
    mock_pygame.draw.rect.return_value = None
    mock_pygame.draw.line.return_value = None

    # Events
    mock_pygame.event.get.return_value = []

    # Constants
    mock_pygame.QUIT = 256
    mock_pygame.KEYDOWN = 768
    mock_pygame.KEYUP = 769
    mock_pygame.MOUSEBUTTONDOWN = 1025
    mock_pygame.K_ESCAPE = 27
    mock_pygame.K_RETURN = 13
    mock_pygame.K_SPACE = 32
    mock_pygame.K_UP = 273
    mock_pygame.K_DOWN = 274
    mock_pygame.K_RIGHT = 275
    mock_pygame.K_LEFT = 276
    mock_pygame.K_a = 97
    mock_pygame.K_d = 100
    mock_pygame.K_e = 101
    mock_pygame.K_p = 112
    mock_pygame.K_q = 113
    mock_pygame.K_s = 115
    mock_pygame.K_w = 119

    # Time
    mock_clock = MagicMock()
    mock_clock.tick.return_value = 20  # 50fps
    mock_pygame.time.Clock.return_value = mock_clock

    mock_pygame.Surface.return_value = mock_surface

    return mock_pygame


@pytest.fixture(scope="session", autouse=True)
def mock_pygame_module():
    """
    Session-scoped fixture that mocks pygame before any imports.

    Renderer tests additionally patch the module attribute, since the
    front-end modules may already be bound to another pygame.
    """
    mock_pygame = create_mock_pygame()

    original_pygame = sys.modules.get('pygame')
    sys.modules['pygame'] = mock_pygame

    yield mock_pygame

    if original_pygame:
        sys.modules['pygame'] = original_pygame
    else:
        del sys.modules['pygame']


class FakeTime:
    """Manually advanced millisecond clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, millis: float) -> None:
        self.now += millis


@pytest.fixture
def fake_time():
    """Provide a manually advanced time source."""
    return FakeTime()


@pytest.fixture
def make_game(fake_time):
    """
    Factory for games driven by the fake time source.

    Accepts an optional list of piece types; the sequence repeats so the
    generator never runs dry.
    """
    from tetris_engine.games.tetris.config import TetrisConfig
    from tetris_engine.games.tetris.game import TetrisGame

    def _make(pieces: Optional[List] = None, config: Optional[TetrisConfig] = None):
        source: Optional[Callable] = None
        if pieces:
            sequence = list(pieces)
            counter = {"i": 0}

            def source():
                piece = sequence[counter["i"] % len(sequence)]
                counter["i"] += 1
                return piece

        return TetrisGame(config=config or TetrisConfig(seed=7),
                          piece_source=source, time_source=fake_time)

    return _make


@pytest.fixture
def drop_piece(fake_time):
    """Run gravity cycles until the current piece locks."""

    def _drop(game, max_cycles: int = 100) -> int:
        placed = game.session.pieces_placed
        for _ in range(max_cycles):
            fake_time.advance(game.clock.millis_per_cycle)
            game.tick()
            if game.session.pieces_placed != placed:
                return game.session.last_clear
        raise AssertionError("Piece never locked")

    return _drop
