"""
Tetris Game Core - spawn, gravity, rotation with edge correction, scoring.
"""

from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Deque, Dict, Optional
import logging
import random

from ...core.game_interface import GameInterface, GameMetadata
from .board import Board, COLS, ROWS, VISIBLE_ROWS, HIDDEN_ROWS
from .clock import LogicClock, monotonic_millis
from .config import TetrisConfig
from .pieces import PieceType, ROTATION_COUNT, get_shape


logger = logging.getLogger(__name__)


class GamePhase(IntEnum):
    """Session state machine."""
    NEW_GAME = 0
    PLAYING = 1
    PAUSED = 2
    GAME_OVER = 3


class InputEvent(IntEnum):
    """Discrete input events accepted by the game."""
    MOVE_LEFT = 0
    MOVE_RIGHT = 1
    ROTATE_CW = 2
    ROTATE_CCW = 3
    SOFT_DROP_START = 4
    SOFT_DROP_END = 5
    TOGGLE_PAUSE = 6
    START_GAME = 7


@dataclass
class ActivePiece:
    """The falling piece. Not part of the board until it locks."""
    piece_type: PieceType
    col: int  # Board column of the piece frame's left edge
    row: int  # Board row of the piece frame's top edge
    rotation: int  # 0-3

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for rendering."""
        return {
            "type": int(self.piece_type),
            "x": self.col,
            "y": self.row,
            "rotation": self.rotation,
        }


@dataclass
class GameSession:
    """Score and speed state of one game."""
    score: int = 0
    level: int = 1
    gravity_rate: float = 1.0
    drop_cooldown: int = 0
    phase: GamePhase = GamePhase.NEW_GAME
    lines_cleared: int = 0
    pieces_placed: int = 0
    last_clear: int = 0  # Lines cleared by the most recent lock


class TetrisGame(GameInterface):
    """
    Falling-block game controller.

    Owns the board, the logic clock, the active piece and the session, and
    is the only thing that mutates them. tick() is called once per rendered
    frame; gravity runs at the clock's rate independently of the frame rate.

    Features:
    - 10x20 visible board plus 2 hidden spawn rows
    - 7 tetrominoes with 4 precomputed rotations each
    - Edge-clamp correction on rotation (no kick tables)
    - Soft drop with a cooldown after every lock
    - Linear speed ramp per locked piece
    """

    @classmethod
    def get_metadata(cls) -> GameMetadata:
        """Return metadata about Tetris game."""
        return GameMetadata(
            name="Tetris",
            id="tetris",
            description="Classic block-stacking puzzle - clear lines, score points, survive!",
            version="1.0.0",
        )

    def __init__(
        self,
        config: Optional[TetrisConfig] = None,
        piece_source: Optional[Callable[[], PieceType]] = None,
        time_source: Callable[[], float] = monotonic_millis
    ):
        """
        Initialize Tetris game in the NEW_GAME phase.

        Args:
            config: Game tuning (gravity, cooldown, level factor, seed)
            piece_source: Optional callable producing the next piece type;
                defaults to a uniform random draw
            time_source: Monotonic time in milliseconds for the logic clock
        """
        self.config = config or TetrisConfig()
        self.board = Board()
        self.session = GameSession(gravity_rate=self.config.initial_rate)
        self.clock = LogicClock(self.config.initial_rate, time_source)
        # Nothing falls until the first START_GAME
        self.clock.set_paused(True)

        self._rng = random.Random(self.config.seed)
        self._piece_source = piece_source or self._random_piece

        self.current_piece: Optional[ActivePiece] = None
        self.next_piece: Optional[PieceType] = None
        self.frame_count: int = 0

        self._soft_drop_held = False
        self._input_queue: Deque[InputEvent] = deque()

    # Read-only accessors for front ends

    @property
    def phase(self) -> GamePhase:
        return self.session.phase

    @property
    def is_new_game(self) -> bool:
        return self.session.phase == GamePhase.NEW_GAME

    @property
    def is_paused(self) -> bool:
        return self.session.phase == GamePhase.PAUSED

    @property
    def is_game_over(self) -> bool:
        return self.session.phase == GamePhase.GAME_OVER

    @property
    def score(self) -> int:
        return self.session.score

    @property
    def level(self) -> int:
        return self.session.level

    def get_score(self) -> int:
        """Get current score."""
        return self.session.score

    def reset(self) -> Dict[str, Any]:
        """Start a new game: empty board, base speed, fresh pieces."""
        self.board.clear()

        self.session = GameSession(
            gravity_rate=self.config.initial_rate,
            phase=GamePhase.PLAYING,
        )
        self._soft_drop_held = False
        self._input_queue.clear()

        self.clock.set_rate(self.session.gravity_rate)
        self.clock.reset()

        self.next_piece = self._piece_source()
        self._spawn_piece()

        logger.info("New game started")
        return self.get_state()

    def _random_piece(self) -> PieceType:
        return self._rng.choice(list(PieceType))

    def _spawn_piece(self) -> bool:
        """
        Promote the next piece to current and draw a new next piece.

        Returns:
            True if spawn successful, False if blocked (game over)
        """
        piece_type = self.next_piece
        shape = get_shape(piece_type)

        self.current_piece = ActivePiece(
            piece_type=piece_type,
            col=shape.spawn_column,
            row=shape.spawn_row,
            rotation=0,
        )
        self.next_piece = self._piece_source()

        if not self._fits(self.current_piece.col, self.current_piece.row,
                          self.current_piece.rotation):
            self.session.phase = GamePhase.GAME_OVER
            self.clock.set_paused(True)
            logger.info("Game over - score %d, level %d, lines %d",
                        self.session.score, self.session.level,
                        self.session.lines_cleared)
            return False

        return True

    def _fits(self, col: int, row: int, rotation: int) -> bool:
        piece = self.current_piece
        return self.board.is_valid_and_empty(piece.piece_type, col, row, rotation)

    # Frame loop

    def tick(self, now: Optional[float] = None) -> None:
        """
        Advance one frame.

        Queued input is applied first, then the clock advances and at most
        one pending gravity cycle is consumed. Any backlog drains one cycle
        per frame.

        Args:
            now: Current time in milliseconds (defaults to the clock's source)
        """
        self.frame_count += 1
        self._drain_input()

        self.clock.update(now)

        if self.session.phase != GamePhase.PLAYING:
            return

        if self.clock.has_elapsed_cycle():
            self._gravity_step()

        if self.session.phase != GamePhase.PLAYING:
            return

        if self.session.drop_cooldown > 0:
            self.session.drop_cooldown -= 1

        self._apply_soft_drop()

    def _gravity_step(self) -> int:
        """
        Move the current piece down one row, or lock it if it cannot fall.

        Returns:
            Number of lines cleared by this step
        """
        piece = self.current_piece
        if self._fits(piece.col, piece.row + 1, piece.rotation):
            piece.row += 1
            return 0

        return self._lock_piece()

    def _lock_piece(self) -> int:
        """Lock the current piece, score lines, speed up and spawn the next."""
        piece = self.current_piece
        self.board.add_piece(piece.piece_type, piece.col, piece.row, piece.rotation)
        self.session.pieces_placed += 1

        cleared = self.board.check_lines()
        self.session.last_clear = cleared
        if cleared > 0:
            self.session.score += 50 << cleared
            self.session.lines_cleared += cleared
            logger.debug("Cleared %d line(s), score %d", cleared, self.session.score)

        # A rate change always restarts the countdown to the next cycle
        self.session.gravity_rate += self.config.rate_increment
        self.clock.set_rate(self.session.gravity_rate)
        self.clock.reset()

        level = int(self.session.gravity_rate * self.config.level_factor)
        if level != self.session.level:
            logger.debug("Level %d -> %d", self.session.level, level)
        self.session.level = level

        self.session.drop_cooldown = self.config.drop_cooldown
        self._spawn_piece()
        return cleared

    def _apply_soft_drop(self) -> None:
        """Switch to the soft-drop rate while held and the cooldown is over."""
        if (self._soft_drop_held and self.session.drop_cooldown == 0
                and self.clock.rate != self.config.soft_drop_rate):
            self.clock.set_rate(self.config.soft_drop_rate)

    # Input

    def push_input(self, event: InputEvent) -> None:
        """Queue an input event to be applied at the start of the next tick."""
        self._input_queue.append(InputEvent(event))

    def _drain_input(self) -> None:
        while self._input_queue:
            self.handle_input(self._input_queue.popleft())

    def handle_input(self, event: InputEvent) -> None:
        """
        Apply one input event immediately.

        Requests that are not allowed in the current phase, or that would
        put the piece somewhere invalid, are ignored.
        """
        event = InputEvent(event)

        if event == InputEvent.START_GAME:
            if self.session.phase in (GamePhase.NEW_GAME, GamePhase.GAME_OVER):
                self.reset()
        elif event == InputEvent.TOGGLE_PAUSE:
            self._toggle_pause()
        elif event == InputEvent.SOFT_DROP_START:
            self._soft_drop_held = True
            if self.session.phase == GamePhase.PLAYING:
                self._apply_soft_drop()
        elif event == InputEvent.SOFT_DROP_END:
            self._release_soft_drop()
        elif self.session.phase != GamePhase.PLAYING:
            return
        elif event == InputEvent.MOVE_LEFT:
            self._move(-1)
        elif event == InputEvent.MOVE_RIGHT:
            self._move(1)
        elif event == InputEvent.ROTATE_CW:
            self._rotate(1)
        elif event == InputEvent.ROTATE_CCW:
            self._rotate(-1)

    def _toggle_pause(self) -> None:
        if self.session.phase == GamePhase.PLAYING:
            self.session.phase = GamePhase.PAUSED
            self.clock.set_paused(True)
        elif self.session.phase == GamePhase.PAUSED:
            self.session.phase = GamePhase.PLAYING
            self.clock.set_paused(False)

    def _release_soft_drop(self) -> None:
        self._soft_drop_held = False
        self.clock.set_rate(self.session.gravity_rate)
        # reset() unpauses, so only restart the countdown mid-game
        if self.session.phase == GamePhase.PLAYING:
            self.clock.reset()

    def _move(self, dx: int) -> bool:
        """Try to shift the current piece sideways. Returns True if moved."""
        piece = self.current_piece
        if self._fits(piece.col + dx, piece.row, piece.rotation):
            piece.col += dx
            return True
        return False

    def _rotate(self, direction: int) -> bool:
        """
        Try to rotate the current piece, clamping it back inside the board.

        The target rotation's empty margins decide how far the piece must
        shift so its tiles stay within the columns and rows. The rotation is
        committed only if the corrected position is free; there is no search
        for alternate offsets.

        Args:
            direction: 1 for CW, -1 for CCW

        Returns:
            True if rotation successful
        """
        piece = self.current_piece
        shape = get_shape(piece.piece_type)
        d = shape.dimension
        rotation = (piece.rotation + direction) % ROTATION_COUNT

        left = shape.left_empty(rotation)
        right = shape.right_empty(rotation)
        top = shape.above_empty(rotation)
        bottom = shape.below_empty(rotation)

        col = piece.col
        row = piece.row

        if col < -left:
            col = -left
        elif col + d - right >= COLS:
            col = COLS - 1 - (d - right)

        if row < -top:
            row = -top
        elif row + d - bottom >= ROWS:
            row = ROWS - 1 - (d - bottom)

        if not self._fits(col, row, rotation):
            return False

        piece.col = col
        piece.row = row
        piece.rotation = rotation
        return True

    def get_state(self) -> Dict[str, Any]:
        """Get current game state for rendering."""
        return {
            "phase": int(self.session.phase),
            "is_new_game": self.is_new_game,
            "is_paused": self.is_paused,
            "is_game_over": self.is_game_over,
            "score": self.session.score,
            "level": self.session.level,
            "lines_cleared": self.session.lines_cleared,
            "pieces_placed": self.session.pieces_placed,
            "current_piece": self.current_piece.to_dict() if self.current_piece else None,
            "next_piece": int(self.next_piece) if self.next_piece is not None else -1,
            "board": self.board.to_list(),
            "width": COLS,
            "height": VISIBLE_ROWS,
            "hidden_rows": HIDDEN_ROWS,
            "frame": self.frame_count,
        }
