"""
AI player for TicTacToe.
Picks a move with a fixed list of priorities: win, block, center, corner, side.
"""

import random
from typing import Optional, List, Sequence
from .game_state import Cell, Mark, place
from .win_checker import WinChecker


class AIPlayer:
    """
    A beatable TicTacToe opponent.

    Rules are tried in order and the first one that applies wins:
    1. Win now
    2. Block the other mark's immediate win
    3. Take the center
    4. Take a random free corner
    5. Take a random free side
    6. Take the first free cell
    """

    CENTER = 4
    CORNERS = (0, 2, 6, 8)
    SIDES = (1, 3, 5, 7)

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        win_checker: Optional[WinChecker] = None,
        verbose: bool = False
    ):
        """
        Initialize the AI player.

        Args:
            rng: Random source for corner/side tie-breaking.
                 Pass a seeded random.Random for reproducible games.
            win_checker: Rules engine used to test hypothetical moves.
            verbose: Print each decision to the console.
        """
        self.rng = rng or random.Random()
        self.win_checker = win_checker or WinChecker()
        self.verbose = verbose

        # Name of the rule that produced the last move (for debugging)
        self.last_rule: Optional[str] = None

    def select_move(self, board: Sequence[Cell], computer_mark: Mark) -> Optional[int]:
        """
        Choose a move for computer_mark.

        Args:
            board: Current 9-cell board. Never modified.
            computer_mark: The mark the computer plays.

        Returns:
            Cell index, or None if the board is full.
        """
        self.last_rule = None
        moves = self.win_checker.available_moves(board)

        if not moves:
            return None

        opponent_mark = computer_mark.opposite()

        move = self._find_winning_move(board, moves, computer_mark)
        if move is not None:
            return self._chose(move, "win", computer_mark)

        move = self._find_winning_move(board, moves, opponent_mark)
        if move is not None:
            return self._chose(move, "block", computer_mark)

        if board[self.CENTER] is None:
            return self._chose(self.CENTER, "center", computer_mark)

        corners = [i for i in self.CORNERS if board[i] is None]
        if corners:
            return self._chose(self.rng.choice(corners), "corner", computer_mark)

        sides = [i for i in self.SIDES if board[i] is None]
        if sides:
            return self._chose(self.rng.choice(sides), "side", computer_mark)

        return self._chose(moves[0], "fallback", computer_mark)

    def _find_winning_move(
        self,
        board: Sequence[Cell],
        moves: List[int],
        mark: Mark
    ) -> Optional[int]:
        """First move (ascending) that would complete a line for mark."""
        for index in moves:
            result = self.win_checker.evaluate(place(board, index, mark))
            if result.winner == mark:
                return index
        return None

    def _chose(self, index: int, rule: str, mark: Mark) -> int:
        self.last_rule = rule
        if self.verbose:
            print(f"AI ({mark.value}) plays {index} [{rule}]")
        return index
