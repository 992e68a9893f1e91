"""
Tetris piece catalogue - the 7 tetrominoes and their rotation bitmaps.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Tuple


class PieceType(IntEnum):
    """The 7 standard Tetris pieces."""
    I = 0
    J = 1
    L = 2
    O = 3
    S = 4
    T = 5
    Z = 6


ROTATION_COUNT = 4


def _bitmap(*rows: str) -> Tuple[bool, ...]:
    """Build a row-major bitmap from strings of '#' (tile) and '.' (empty)."""
    return tuple(ch == "#" for row in rows for ch in row)


@dataclass(frozen=True)
class PieceShape:
    """
    Immutable geometry of one piece variant.

    Each rotation is a row-major tuple of dimension * dimension booleans.
    Edge margins are precomputed per rotation so collision tests only look
    at the occupied bounding box.
    """
    piece_type: PieceType
    color: Tuple[int, int, int]
    dimension: int
    cols: int  # Occupied columns at rotation 0
    rows: int  # Occupied rows at rotation 0
    tiles: Tuple[Tuple[bool, ...], ...]

    _margins: Tuple[Tuple[int, int, int, int], ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self):
        margins = tuple(self._scan_margins(r) for r in range(ROTATION_COUNT))
        object.__setattr__(self, "_margins", margins)

    @property
    def spawn_column(self) -> int:
        return 5 - (self.dimension >> 1)

    @property
    def spawn_row(self) -> int:
        return 0

    def is_tile(self, x: int, y: int, rotation: int) -> bool:
        """Check whether local cell (x, y) is occupied in the given rotation."""
        assert 0 <= rotation < ROTATION_COUNT, f"Invalid rotation: {rotation}"
        return self.tiles[rotation][y * self.dimension + x]

    def left_empty(self, rotation: int) -> int:
        """Number of empty columns left of the tiles."""
        return self._margins[rotation][0]

    def right_empty(self, rotation: int) -> int:
        """Dimension minus the index of the rightmost occupied column."""
        return self._margins[rotation][1]

    def above_empty(self, rotation: int) -> int:
        """Number of empty rows above the tiles."""
        return self._margins[rotation][2]

    def below_empty(self, rotation: int) -> int:
        """Dimension minus the index of the lowest occupied row."""
        return self._margins[rotation][3]

    def cells(self, rotation: int) -> List[Tuple[int, int]]:
        """Get local (x, y) offsets of all tiles in a rotation."""
        d = self.dimension
        return [
            (x, y)
            for y in range(d)
            for x in range(d)
            if self.is_tile(x, y, rotation)
        ]

    def tile_count(self, rotation: int) -> int:
        return sum(self.tiles[rotation])

    def _scan_margins(self, rotation: int) -> Tuple[int, int, int, int]:
        """
        Scan a rotation for the first occupied cell from each edge.

        Returns (left, right, above, below). A rotation with no tiles
        reports -1 for every edge.
        """
        d = self.dimension
        occupied = [(x, y) for y in range(d) for x in range(d)
                    if self.tiles[rotation][y * d + x]]
        if not occupied:
            return (-1, -1, -1, -1)

        xs = [x for x, _ in occupied]
        ys = [y for _, y in occupied]
        return (min(xs), d - max(xs), min(ys), d - max(ys))


PIECES: Dict[PieceType, PieceShape] = {
    PieceType.I: PieceShape(
        PieceType.I, (35, 220, 220), dimension=4, cols=4, rows=1,
        tiles=(
            _bitmap("....", "####", "....", "...."),
            _bitmap("..#.", "..#.", "..#.", "..#."),
            _bitmap("....", "....", "####", "...."),
            _bitmap(".#..", ".#..", ".#..", ".#.."),
        ),
    ),
    PieceType.J: PieceShape(
        PieceType.J, (35, 35, 220), dimension=3, cols=3, rows=2,
        tiles=(
            _bitmap("#..", "###", "..."),
            _bitmap(".##", ".#.", ".#."),
            _bitmap("...", "###", "..#"),
            _bitmap(".#.", ".#.", "##."),
        ),
    ),
    PieceType.L: PieceShape(
        PieceType.L, (220, 127, 35), dimension=3, cols=3, rows=2,
        tiles=(
            _bitmap("..#", "###", "..."),
            _bitmap(".#.", ".#.", ".##"),
            _bitmap("...", "###", "#.."),
            _bitmap("##.", ".#.", ".#."),
        ),
    ),
    PieceType.O: PieceShape(
        PieceType.O, (220, 220, 35), dimension=2, cols=2, rows=2,
        tiles=(
            _bitmap("##", "##"),
            _bitmap("##", "##"),
            _bitmap("##", "##"),
            _bitmap("##", "##"),
        ),
    ),
    PieceType.S: PieceShape(
        PieceType.S, (35, 220, 35), dimension=3, cols=3, rows=2,
        tiles=(
            _bitmap(".##", "##.", "..."),
            _bitmap(".#.", ".##", "..#"),
            _bitmap("...", ".##", "##."),
            _bitmap("#..", "##.", ".#."),
        ),
    ),
    PieceType.T: PieceShape(
        PieceType.T, (128, 35, 128), dimension=3, cols=3, rows=2,
        tiles=(
            _bitmap(".#.", "###", "..."),
            _bitmap(".#.", ".##", ".#."),
            _bitmap("...", "###", ".#."),
            _bitmap(".#.", "##.", ".#."),
        ),
    ),
    PieceType.Z: PieceShape(
        PieceType.Z, (220, 35, 35), dimension=3, cols=3, rows=2,
        tiles=(
            _bitmap("##.", ".##", "..."),
            _bitmap("..#", ".##", ".#."),
            _bitmap("...", "##.", ".##"),
            _bitmap(".#.", "##.", "#.."),
        ),
    ),
}


def get_shape(piece_type: PieceType) -> PieceShape:
    """Look up the shape of a piece variant."""
    return PIECES[PieceType(piece_type)]
