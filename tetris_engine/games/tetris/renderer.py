"""
Tetris Game Renderer - Pygame-based visualization implementing RendererInterface.
"""

import pygame
from typing import Dict, Any, Tuple, List

from ...core.renderer_interface import RendererInterface
from .pieces import PieceType, get_shape


# Colors
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GRID_COLOR = (30, 30, 30)
BORDER_COLOR = (128, 128, 128)
PANEL_TEXT_COLOR = (128, 192, 128)

BORDER_WIDTH = 5
SIDE_PANEL_WIDTH = 200
PREVIEW_TILE_COUNT = 5

CONTROLS: List[str] = [
    "A - Move Left",
    "D - Move Right",
    "Q - Rotate Anticlockwise",
    "E - Rotate Clockwise",
    "S - Drop",
    "P - Pause Game",
]


class TetrisRenderer(RendererInterface):
    """
    Renders Tetris game using Pygame, implementing RendererInterface.

    Layout:
    [Main Board] [Next Piece / Stats / Controls]
    """

    def __init__(self, cell_size: int = 24, board_width: int = 10, board_height: int = 20):
        """
        Initialize the renderer.

        Args:
            cell_size: Size of each grid cell in pixels
            board_width: Board width in cells
            board_height: Visible board height in cells
        """
        self._cell_size = cell_size
        self._board_width = board_width
        self._board_height = board_height

        self._panel_width = board_width * cell_size + BORDER_WIDTH * 2
        self._panel_height = board_height * cell_size + BORDER_WIDTH * 2

        self._large_font = None
        self._small_font = None

    def get_preferred_size(self) -> Tuple[int, int]:
        """Get the preferred render size."""
        return (self._panel_width + SIDE_PANEL_WIDTH, self._panel_height)

    def _fonts(self):
        # Fonts can only be created after pygame.font.init()
        if self._large_font is None:
            self._large_font = pygame.font.SysFont("Tahoma", 16, bold=True)
            self._small_font = pygame.font.SysFont("Tahoma", 12, bold=True)
        return self._large_font, self._small_font

    def render(self, game_state: Dict[str, Any], surface: pygame.Surface) -> None:
        """
        Render the game state to a surface.

        Args:
            game_state: Dictionary from TetrisGame.get_state()
            surface: Pygame surface to draw on
        """
        surface.fill(BLACK)

        self._draw_board(surface, game_state)

        if game_state.get("is_new_game") or game_state.get("is_game_over"):
            title = "TETRIS" if game_state.get("is_new_game") else "GAME OVER"
            self._draw_overlay(surface, title, "Press Enter to Play")
        elif game_state.get("is_paused"):
            self._draw_overlay(surface, "PAUSED", None)
        elif game_state.get("current_piece"):
            self._draw_piece(surface, game_state)

        self._draw_side_panel(surface, game_state)

    def _draw_board(self, surface: pygame.Surface, game_state: Dict[str, Any]) -> None:
        """Draw locked tiles and the grid."""
        cs = self._cell_size
        board = game_state.get("board", [])

        if not (game_state.get("is_paused") or game_state.get("is_new_game")):
            for row_idx, row in enumerate(board):
                for col_idx, cell in enumerate(row):
                    if cell >= 0:  # -1 means empty
                        self._draw_tile(surface,
                                        BORDER_WIDTH + col_idx * cs,
                                        BORDER_WIDTH + row_idx * cs,
                                        get_shape(PieceType(cell)).color)

        for x in range(self._board_width):
            for y in range(self._board_height):
                pygame.draw.rect(surface, GRID_COLOR,
                                 (BORDER_WIDTH + x * cs, BORDER_WIDTH + y * cs, cs, cs), 1)

        pygame.draw.rect(surface, BORDER_COLOR,
                         (0, 0, self._panel_width, self._panel_height), BORDER_WIDTH)

    def _draw_piece(self, surface: pygame.Surface, game_state: Dict[str, Any]) -> None:
        """Draw the falling piece, skipping tiles still in the hidden rows."""
        piece = game_state["current_piece"]
        shape = get_shape(PieceType(piece["type"]))
        hidden_rows = game_state.get("hidden_rows", 2)
        cs = self._cell_size

        for dx, dy in shape.cells(piece["rotation"]):
            row = piece["y"] + dy - hidden_rows
            if row >= 0:
                self._draw_tile(surface,
                                BORDER_WIDTH + (piece["x"] + dx) * cs,
                                BORDER_WIDTH + row * cs,
                                shape.color)

    def _draw_tile(self, surface: pygame.Surface, x: int, y: int,
                   color: Tuple[int, int, int], size: int = 0) -> None:
        """Draw a single tile with a bevelled edge."""
        cs = size or self._cell_size
        pygame.draw.rect(surface, color, (x, y, cs, cs))

        shadow = tuple(max(0, c - 50) for c in color)
        highlight = tuple(min(255, c + 50) for c in color)
        pygame.draw.line(surface, shadow, (x, y + cs - 1), (x + cs - 1, y + cs - 1))
        pygame.draw.line(surface, shadow, (x + cs - 1, y), (x + cs - 1, y + cs - 1))
        pygame.draw.line(surface, highlight, (x, y), (x + cs - 1, y))
        pygame.draw.line(surface, highlight, (x, y), (x, y + cs - 1))

    def _draw_overlay(self, surface: pygame.Surface, title: str, subtitle) -> None:
        """Draw centred message text over the board."""
        large, small = self._fonts()
        center_x = self._panel_width // 2
        center_y = self._panel_height // 2

        label = large.render(title, True, WHITE)
        surface.blit(label, (center_x - label.get_width() // 2, center_y - 25))

        if subtitle:
            label = small.render(subtitle, True, WHITE)
            surface.blit(label, (center_x - label.get_width() // 2, center_y + 10))

    def _draw_side_panel(self, surface: pygame.Surface, game_state: Dict[str, Any]) -> None:
        """Draw next-piece preview, stats and the controls list."""
        large, small = self._fonts()
        x = self._panel_width
        offset = 25

        surface.blit(large.render("Next Piece:", True, PANEL_TEXT_COLOR), (x + 20, 55))
        self._draw_preview(surface, x + 130, 65, game_state)

        y = 175
        surface.blit(large.render("Stats", True, PANEL_TEXT_COLOR), (x + 20, y))
        for text in (f"Level: {game_state.get('level', 1)}",
                     f"Score: {game_state.get('score', 0)}"):
            y += offset
            surface.blit(small.render(text, True, PANEL_TEXT_COLOR), (x + 30, y))

        y = 300
        surface.blit(large.render("Controls", True, PANEL_TEXT_COLOR), (x + 20, y))
        for text in CONTROLS:
            y += offset
            surface.blit(small.render(text, True, PANEL_TEXT_COLOR), (x + 40, y))

    def _draw_preview(self, surface: pygame.Surface, cx: int, cy: int,
                      game_state: Dict[str, Any]) -> None:
        """Draw the next piece centred in its preview box."""
        tile = self._cell_size >> 1
        half = tile * PREVIEW_TILE_COUNT >> 1
        pygame.draw.rect(surface, PANEL_TEXT_COLOR, (cx - half, cy - half, half * 2, half * 2), 1)

        next_piece = game_state.get("next_piece", -1)
        if game_state.get("is_game_over") or next_piece < 0:
            return

        shape = get_shape(PieceType(next_piece))
        start_x = cx - shape.cols * tile // 2
        start_y = cy - shape.rows * tile // 2
        left = shape.left_empty(0)
        top = shape.above_empty(0)

        for dx, dy in shape.cells(0):
            self._draw_tile(surface,
                            start_x + (dx - left) * tile,
                            start_y + (dy - top) * tile,
                            shape.color, size=tile)
