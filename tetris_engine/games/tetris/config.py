"""
Tetris game configuration.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional


@dataclass
class TetrisConfig:
    """Configuration for Tetris game."""

    # Gravity (cycles per second)
    initial_rate: float = 1.0
    rate_increment: float = 0.035     # Added after every locked piece
    soft_drop_rate: float = 25.0

    # Frames before a new piece may be soft dropped
    drop_cooldown: int = 25

    # Display level = floor(rate * level_factor)
    level_factor: float = 1.70

    # Random seed for the piece generator (None = nondeterministic)
    seed: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "initial_rate": self.initial_rate,
            "rate_increment": self.rate_increment,
            "soft_drop_rate": self.soft_drop_rate,
            "drop_cooldown": self.drop_cooldown,
            "level_factor": self.level_factor,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TetrisConfig":
        """Create config from dictionary."""
        return cls(
            initial_rate=float(data.get("initial_rate", 1.0)),
            rate_increment=float(data.get("rate_increment", 0.035)),
            soft_drop_rate=float(data.get("soft_drop_rate", 25.0)),
            drop_cooldown=int(data.get("drop_cooldown", 25)),
            level_factor=float(data.get("level_factor", 1.70)),
            seed=data.get("seed"),
        )
