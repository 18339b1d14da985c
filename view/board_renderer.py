"""
Board renderer for TicTacToe.
Turns a board snapshot into a Pillow image and maps clicks back to cells.
"""

from typing import Optional, Sequence, Tuple
from PIL import Image, ImageDraw

from logic.game_state import (
    Cell,
    Line,
    Mark,
    BOARD_SIZE,
    check_board,
    index_to_row_col,
    row_col_to_index,
)
from .config import ViewConfig


class BoardRenderer:
    """
    Draws the 3x3 grid, the marks, and the winning line if there is one.
    """

    def __init__(self, config: Optional[ViewConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: View configuration. Uses defaults if not provided.
        """
        self.config = config or ViewConfig()

    @property
    def size(self) -> int:
        """Width and height of the rendered image in pixels."""
        return self.config.CELL_SIZE_PX * BOARD_SIZE + self.config.MARGIN_PX * 2

    def cell_box(self, index: int) -> Tuple[int, int, int, int]:
        """
        Pixel box (left, top, right, bottom) of a cell.
        """
        row, col = index_to_row_col(index)
        cell = self.config.CELL_SIZE_PX
        left = self.config.MARGIN_PX + col * cell
        top = self.config.MARGIN_PX + row * cell
        return left, top, left + cell, top + cell

    def cell_center(self, index: int) -> Tuple[float, float]:
        left, top, right, bottom = self.cell_box(index)
        return (left + right) / 2, (top + bottom) / 2

    def hit_test(self, x: float, y: float) -> Optional[int]:
        """
        Find the cell under a pixel position.

        Returns:
            Cell index, or None if the point is outside the grid.
        """
        cell = self.config.CELL_SIZE_PX
        gx = x - self.config.MARGIN_PX
        gy = y - self.config.MARGIN_PX
        if gx < 0 or gy < 0:
            return None

        col = int(gx // cell)
        row = int(gy // cell)
        if col >= BOARD_SIZE or row >= BOARD_SIZE:
            return None
        return row_col_to_index(row, col)

    def render(
        self,
        board: Sequence[Cell],
        winning_line: Optional[Line] = None
    ) -> Image.Image:
        """
        Draw the board.

        Args:
            board: 9-cell board snapshot.
            winning_line: Cells to highlight, if the game is won.

        Returns:
            RGB image of size x size pixels.
        """
        check_board(board)
        cfg = self.config

        image = Image.new("RGB", (self.size, self.size), cfg.BOARD_BG)
        draw = ImageDraw.Draw(image)

        if winning_line:
            for index in winning_line:
                draw.rectangle(self.cell_box(index), fill=cfg.WIN_CELL_BG)

        self._draw_grid(draw)

        for index, cell in enumerate(board):
            if cell == Mark.X:
                self._draw_x(draw, index)
            elif cell == Mark.O:
                self._draw_o(draw, index)

        if winning_line:
            start = self.cell_center(winning_line[0])
            end = self.cell_center(winning_line[-1])
            draw.line([start, end], fill=cfg.WIN_HIGHLIGHT, width=cfg.MARK_LINE_WIDTH // 2)

        return image

    def _draw_grid(self, draw: ImageDraw.ImageDraw):
        cfg = self.config
        start = cfg.MARGIN_PX
        end = cfg.MARGIN_PX + cfg.CELL_SIZE_PX * BOARD_SIZE

        # Inner lines only
        for i in range(1, BOARD_SIZE):
            offset = cfg.MARGIN_PX + i * cfg.CELL_SIZE_PX
            draw.line([(offset, start), (offset, end)], fill=cfg.GRID_COLOR, width=cfg.GRID_LINE_WIDTH)
            draw.line([(start, offset), (end, offset)], fill=cfg.GRID_COLOR, width=cfg.GRID_LINE_WIDTH)

    def _mark_box(self, index: int) -> Tuple[float, float, float, float]:
        left, top, right, bottom = self.cell_box(index)
        pad = self.config.CELL_SIZE_PX * self.config.MARK_PADDING
        return left + pad, top + pad, right - pad, bottom - pad

    def _draw_x(self, draw: ImageDraw.ImageDraw, index: int):
        left, top, right, bottom = self._mark_box(index)
        width = self.config.MARK_LINE_WIDTH
        draw.line([(left, top), (right, bottom)], fill=self.config.X_COLOR, width=width)
        draw.line([(left, bottom), (right, top)], fill=self.config.X_COLOR, width=width)

    def _draw_o(self, draw: ImageDraw.ImageDraw, index: int):
        draw.ellipse(
            self._mark_box(index),
            outline=self.config.O_COLOR,
            width=self.config.MARK_LINE_WIDTH
        )
