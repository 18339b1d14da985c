"""
Move validator for TicTacToe.
Validates that a requested move follows the rules.
"""

from typing import Optional, List, Sequence
from dataclasses import dataclass
from .game_state import Cell, GameMode, Mark, CELL_COUNT
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Index must be 0-8
    3. Can only place on empty cells
    4. Against the computer, the human may not move on the computer's turn
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()

    def validate_move(
        self,
        board: Sequence[Cell],
        index: int,
        next_to_move: Mark,
        mode: GameMode = GameMode.PLAYER_VS_PLAYER,
        computer_mark: Optional[Mark] = None,
        by_computer: bool = False
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            index: Cell to place the next mark on.
            next_to_move: Mark whose turn it is.
            mode: Current game mode.
            computer_mark: Mark played by the computer (PLAYER_VS_COMPUTER only).
            by_computer: True when the computer itself is moving, which skips
                the turn-ownership rule.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if self.win_checker.get_status(board).is_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if index is in valid range
        if not isinstance(index, int) or not 0 <= index < CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index!r}. Must be 0-{CELL_COUNT - 1}."
            )

        # Check if cell is empty
        if board[index] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {board[index].value}"
            )

        # Check that a human is not playing the computer's mark
        if (
            not by_computer
            and mode == GameMode.PLAYER_VS_COMPUTER
            and next_to_move == computer_mark
        ):
            return ValidationResult(
                is_valid=False,
                error_message=f"It's the computer's turn ({next_to_move.value})!"
            )

        # All checks passed!
        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Sequence[Cell]) -> List[int]:
        """
        Get all valid moves for the player to move.

        Returns:
            Cell indices; empty once the game is over.
        """
        if self.win_checker.get_status(board).is_over:
            return []

        return self.win_checker.available_moves(board)
