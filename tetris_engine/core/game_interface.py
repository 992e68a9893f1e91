"""
Abstract game interface for the Tetris engine.

A game owns its rules and session state. Front ends drive it with tick()
once per frame, feed it input events, and read get_state() to draw.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any, Optional


@dataclass
class GameMetadata:
    """Metadata describing a game."""

    name: str                           # Display name (e.g., "Tetris")
    id: str                             # Unique identifier (e.g., "tetris")
    description: str                    # Brief description for UI
    version: str = "1.0.0"              # Game version


class GameInterface(ABC):
    """
    Abstract base class for frame-driven games.

    Games handle the core logic, rules, and state management.
    They are separate from rendering and input plumbing.
    """

    @classmethod
    @abstractmethod
    def get_metadata(cls) -> GameMetadata:
        """
        Return metadata about this game.

        Returns:
            GameMetadata describing the game
        """
        pass

    @abstractmethod
    def reset(self) -> Dict[str, Any]:
        """
        Start a fresh session.

        Returns:
            Initial game state dictionary
        """
        pass

    @abstractmethod
    def tick(self, now: Optional[float] = None) -> None:
        """
        Advance the game by one rendered frame.

        Args:
            now: Current monotonic time in milliseconds (defaults to the
                game's own time source)
        """
        pass

    @abstractmethod
    def handle_input(self, event: Any) -> None:
        """
        Apply one discrete input event immediately.

        Args:
            event: Game-specific input event
        """
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """
        Get the current game state for rendering.

        Returns:
            Dictionary containing all state needed for rendering
        """
        pass

    def get_score(self) -> int:
        """
        Get the current score.

        Returns:
            Current game score
        """
        return 0
