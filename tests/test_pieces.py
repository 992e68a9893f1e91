"""
Tests for the piece catalogue.
Tests verify rotation bitmaps, edge margins and spawn positions.
"""

import pytest

from tetris_engine.games.tetris.pieces import (
    PIECES, PieceType, ROTATION_COUNT, get_shape
)


class TestCatalogue:
    """Tests for the set of piece variants."""

    def test_seven_variants(self):
        """Test every piece type has a shape."""
        assert len(PIECES) == 7
        assert set(PIECES) == set(PieceType)

    @pytest.mark.parametrize("piece_type", list(PieceType))
    def test_rotation_preserves_tile_count(self, piece_type):
        """Test all 4 rotations of a piece have the same number of tiles."""
        shape = get_shape(piece_type)

        counts = [shape.tile_count(r) for r in range(ROTATION_COUNT)]

        assert counts == [4, 4, 4, 4]

    @pytest.mark.parametrize("piece_type", list(PieceType))
    def test_bitmaps_are_square(self, piece_type):
        """Test every rotation has dimension * dimension cells."""
        shape = get_shape(piece_type)

        assert shape.dimension in (2, 3, 4)
        assert len(shape.tiles) == ROTATION_COUNT
        for bitmap in shape.tiles:
            assert len(bitmap) == shape.dimension ** 2

    @pytest.mark.parametrize("piece_type", list(PieceType))
    def test_margins_never_sentinel(self, piece_type):
        """Test no catalogue rotation is empty (margin scan never fails)."""
        shape = get_shape(piece_type)

        for r in range(ROTATION_COUNT):
            assert shape.left_empty(r) >= 0
            assert shape.right_empty(r) >= 1
            assert shape.above_empty(r) >= 0
            assert shape.below_empty(r) >= 1

    def test_colors_are_distinct(self):
        """Test each piece has its own color."""
        colors = {shape.color for shape in PIECES.values()}

        assert len(colors) == 7


class TestGeometry:
    """Tests for tile lookup and margin values."""

    def test_i_piece_horizontal_margins(self):
        """Test I rotation 0 occupies the second row across the full width."""
        shape = get_shape(PieceType.I)

        assert shape.left_empty(0) == 0
        assert shape.right_empty(0) == 1
        assert shape.above_empty(0) == 1
        assert shape.below_empty(0) == 3

    def test_i_piece_vertical_margins(self):
        """Test I rotation 1 occupies the third column."""
        shape = get_shape(PieceType.I)

        assert shape.left_empty(1) == 2
        assert shape.right_empty(1) == 2
        assert shape.above_empty(1) == 0
        assert shape.below_empty(1) == 1

    def test_is_tile_row_major(self):
        """Test is_tile reads the bitmap row by row."""
        shape = get_shape(PieceType.J)

        # J rotation 0:  #.. / ### / ...
        assert shape.is_tile(0, 0, 0)
        assert not shape.is_tile(1, 0, 0)
        assert shape.is_tile(2, 1, 0)
        assert not shape.is_tile(2, 2, 0)

    def test_cells_match_is_tile(self):
        """Test cells() lists exactly the occupied local cells."""
        shape = get_shape(PieceType.T)

        assert shape.cells(0) == [(1, 0), (0, 1), (1, 1), (2, 1)]

    def test_o_piece_never_changes(self):
        """Test O has the same bitmap in every rotation."""
        shape = get_shape(PieceType.O)

        assert len(set(shape.tiles)) == 1

    def test_invalid_rotation_fails_loudly(self):
        """Test an out-of-range rotation is rejected rather than wrapped."""
        shape = get_shape(PieceType.S)

        with pytest.raises(AssertionError):
            shape.is_tile(0, 0, 4)
        with pytest.raises(AssertionError):
            shape.is_tile(0, 0, -1)


class TestSpawn:
    """Tests for spawn positions."""

    @pytest.mark.parametrize("piece_type,column", [
        (PieceType.I, 3),
        (PieceType.O, 4),
        (PieceType.T, 4),
        (PieceType.J, 4),
    ])
    def test_spawn_column(self, piece_type, column):
        """Test spawn column is 5 - dimension // 2."""
        assert get_shape(piece_type).spawn_column == column

    def test_spawn_row_is_top(self):
        """Test every piece spawns at row 0."""
        assert all(shape.spawn_row == 0 for shape in PIECES.values())

    def test_preview_extent(self):
        """Test rotation-0 extents used by the preview."""
        i_shape = get_shape(PieceType.I)
        o_shape = get_shape(PieceType.O)

        assert (i_shape.cols, i_shape.rows) == (4, 1)
        assert (o_shape.cols, o_shape.rows) == (2, 2)
