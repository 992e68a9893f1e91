"""
Tetris board - occupancy grid, collision testing and line clearing.
"""

from typing import List, Optional

import numpy as np

from .pieces import PieceType, get_shape


COLS = 10
VISIBLE_ROWS = 20
HIDDEN_ROWS = 2  # Spawn buffer above the visible field
ROWS = VISIBLE_ROWS + HIDDEN_ROWS

EMPTY = -1


class Board:
    """
    The playfield grid.

    Cells are stored in a (ROWS, COLS) int8 array, row 0 at the top. Each
    cell holds EMPTY or the integer value of the PieceType locked there.
    """

    def __init__(self):
        self._cells = np.full((ROWS, COLS), EMPTY, dtype=np.int8)

    def clear(self) -> None:
        """Empty every cell."""
        self._cells.fill(EMPTY)

    def is_occupied(self, x: int, y: int) -> bool:
        self._check_bounds(x, y)
        return bool(self._cells[y, x] != EMPTY)

    def get_cell(self, x: int, y: int) -> Optional[PieceType]:
        """Get the piece type locked at (x, y), or None if empty."""
        self._check_bounds(x, y)
        value = int(self._cells[y, x])
        return None if value == EMPTY else PieceType(value)

    def set_cell(self, x: int, y: int, piece_type: Optional[PieceType]) -> None:
        """Write a single cell directly."""
        self._check_bounds(x, y)
        self._cells[y, x] = EMPTY if piece_type is None else int(piece_type)

    def is_valid_and_empty(self, piece_type: PieceType, x: int, y: int, rotation: int) -> bool:
        """
        Check whether a piece fits at (x, y) in the given rotation.

        Only the occupied bounding box has to lie inside the grid; the
        empty margin of the piece's frame may hang over an edge.

        Args:
            piece_type: The piece variant
            x: Board column of the piece frame's left edge
            y: Board row of the piece frame's top edge
            rotation: Rotation index (0-3)

        Returns:
            True if every tile is inside the grid and on an empty cell
        """
        shape = get_shape(piece_type)
        d = shape.dimension

        if x < -shape.left_empty(rotation) or x + d - shape.right_empty(rotation) >= COLS:
            return False

        if y < -shape.above_empty(rotation) or y + d - shape.below_empty(rotation) >= ROWS:
            return False

        for col, row in shape.cells(rotation):
            if self._cells[y + row, x + col] != EMPTY:
                return False
        return True

    def add_piece(self, piece_type: PieceType, x: int, y: int, rotation: int) -> None:
        """
        Lock a piece into the grid.

        Overwrites whatever is under the piece's tiles. The caller is
        responsible for validating the position first.
        """
        shape = get_shape(piece_type)
        for col, row in shape.cells(rotation):
            self._cells[y + row, x + col] = int(piece_type)

    def check_lines(self) -> int:
        """
        Remove every complete row, dropping the rows above it.

        Rows are scanned top to bottom. Each cleared row shifts everything
        above it down by one and empties the vacated top row.

        Returns:
            Number of rows cleared (0-4)
        """
        cleared = 0
        for row in range(ROWS):
            if self._check_line(row):
                cleared += 1
        return cleared

    def _check_line(self, row: int) -> bool:
        """Clear a row if it is complete. Returns True if it was cleared."""
        if np.any(self._cells[row] == EMPTY):
            return False

        if row > 0:
            self._cells[1:row + 1] = self._cells[0:row].copy()
        self._cells[0].fill(EMPTY)
        return True

    def occupied_count(self) -> int:
        """Total number of occupied cells."""
        return int(np.count_nonzero(self._cells != EMPTY))

    def visible_rows(self) -> np.ndarray:
        """Read-only view of the visible rows (hidden spawn rows excluded)."""
        view = self._cells[HIDDEN_ROWS:]
        view.flags.writeable = False
        return view

    def to_list(self, visible_only: bool = True) -> List[List[int]]:
        """Board as nested lists of ints (-1 for empty)."""
        cells = self._cells[HIDDEN_ROWS:] if visible_only else self._cells
        return cells.tolist()

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < COLS and 0 <= y < ROWS):
            raise IndexError(f"Cell ({x}, {y}) is outside the {COLS}x{ROWS} board")
