"""
Game state types for TicTacToe.
Marks, game modes, board helpers and the derived win/status values.
"""

from enum import Enum
from typing import Optional, List, Tuple, Sequence
from dataclasses import dataclass


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class BoardContractError(ValueError):
    """Raised when a board or cell index breaks the 9-cell contract."""


class Mark(Enum):
    """The two marks. Used both as a cell value and as a player identity."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other mark."""
        return Mark.O if self == Mark.X else Mark.X


class GameMode(Enum):
    """Who is playing."""
    PLAYER_VS_PLAYER = "pvp"
    PLAYER_VS_COMPUTER = "ai"


class Outcome(Enum):
    """Where a board stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


# A cell is either empty (None) or holds a Mark
Cell = Optional[Mark]
Board = List[Cell]
Line = Tuple[int, int, int]


@dataclass(frozen=True)
class WinResult:
    """
    Result of evaluating a board.

    winner is None when nobody has three in a row; line is then None too.
    """
    winner: Optional[Mark] = None
    line: Optional[Line] = None

    @property
    def has_winner(self) -> bool:
        return self.winner is not None


NO_WINNER = WinResult()


@dataclass(frozen=True)
class GameStatus:
    """
    Status of a game, derived from the board every time it is asked for.
    """
    outcome: Outcome
    winner: Optional[Mark] = None
    line: Optional[Line] = None

    @property
    def is_over(self) -> bool:
        return self.outcome != Outcome.IN_PROGRESS

    @classmethod
    def in_progress(cls) -> "GameStatus":
        return cls(Outcome.IN_PROGRESS)

    @classmethod
    def won(cls, mark: Mark, line: Line) -> "GameStatus":
        return cls(Outcome.WON, winner=mark, line=line)

    @classmethod
    def draw(cls) -> "GameStatus":
        return cls(Outcome.DRAW)


def new_board() -> Board:
    """Create an empty 9-cell board."""
    return [None] * CELL_COUNT


def check_board(board: Sequence[Cell]) -> None:
    """Fail loudly if the board is not exactly 9 cells."""
    if len(board) != CELL_COUNT:
        raise BoardContractError(
            f"Board must have {CELL_COUNT} cells, got {len(board)}"
        )


def check_index(index: int) -> None:
    """Fail loudly if a cell index is outside 0-8."""
    if not 0 <= index < CELL_COUNT:
        raise BoardContractError(
            f"Invalid cell index {index}. Must be 0-{CELL_COUNT - 1}."
        )


def place(board: Sequence[Cell], index: int, mark: Mark) -> Board:
    """
    Return a copy of the board with mark placed at index.

    The input board is never modified.
    """
    check_board(board)
    check_index(index)
    copy = list(board)
    copy[index] = mark
    return copy


def index_to_row_col(index: int) -> Tuple[int, int]:
    """Convert a cell index to (row, col)."""
    check_index(index)
    return divmod(index, BOARD_SIZE)


def row_col_to_index(row: int, col: int) -> int:
    """Convert (row, col) to a cell index."""
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise BoardContractError(f"Invalid position ({row}, {col}). Must be 0-2.")
    return row * BOARD_SIZE + col


def format_board(board: Sequence[Cell]) -> str:
    """
    Render a board as text, empty cells showing their index.

      X | 1 | O
     ---+---+---
      3 | X | 5
     ---+---+---
      6 | 7 | 8
    """
    check_board(board)
    rows = []
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            index = row * BOARD_SIZE + col
            cell = board[index]
            cells.append(cell.value if cell is not None else str(index))
        rows.append(" " + " | ".join(cells))
    return "\n ---+---+---\n".join(rows)
