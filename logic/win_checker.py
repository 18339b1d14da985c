"""
Win checker for TicTacToe.
Checks if a mark has won, if the game is a draw, and which cells are free.
"""

from typing import Optional, List, Sequence
from .game_state import (
    Cell,
    Line,
    WinResult,
    GameStatus,
    NO_WINNER,
    check_board,
)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 equal marks in a row
    (horizontally, vertically, or diagonally)

    All methods are pure: they only read the board they are given.
    """

    # All possible winning lines, checked in this order
    WINNING_LINES: List[Line] = [
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    ]

    def evaluate(self, board: Sequence[Cell]) -> WinResult:
        """
        Check if there's a winner.

        Args:
            board: 9-cell board.

        Returns:
            WinResult with the winning mark and line, or NO_WINNER.
        """
        check_board(board)

        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return WinResult(winner=winner, line=line)

        return NO_WINNER

    def _check_line(self, board: Sequence[Cell], line: Line) -> Optional[Cell]:
        """Return the mark filling the whole line, or None."""
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
        return None

    def available_moves(self, board: Sequence[Cell]) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            Cell indices in ascending order. Empty when the board is full.
        """
        check_board(board)
        return [index for index, cell in enumerate(board) if cell is None]

    def is_draw(self, board: Sequence[Cell]) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        if self.evaluate(board).has_winner:
            return False

        return len(self.available_moves(board)) == 0

    def get_status(self, board: Sequence[Cell]) -> GameStatus:
        """
        Fold the winner and draw checks into one status value.
        """
        result = self.evaluate(board)

        if result.has_winner:
            return GameStatus.won(result.winner, result.line)
        if not self.available_moves(board):
            return GameStatus.draw()
        return GameStatus.in_progress()

    def get_winning_line(self, board: Sequence[Cell]) -> Optional[Line]:
        """Get the winning line if there is one."""
        return self.evaluate(board).line
