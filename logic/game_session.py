"""
Game session for TicTacToe.
Owns the board, whose turn it is, the game mode and the computer's mark,
and drives the computer opponent through a scheduler.
"""

import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple
from .game_state import (
    Cell,
    GameMode,
    GameStatus,
    Line,
    Mark,
    Outcome,
    new_board,
    format_board,
)
from .config import GameConfig
from .win_checker import WinChecker
from .move_validator import MoveValidator
from .ai_player import AIPlayer
from .scheduler import Scheduler, ScheduledCall, ManualScheduler


@dataclass(frozen=True)
class GameEvent:
    """
    A change to the session, sent to subscribers.

    kind is one of: "move", "computer_move", "reset", "restart_swap",
    "mode", "computer_mark".
    """
    kind: str
    status: GameStatus
    index: Optional[int] = None
    mark: Optional[Mark] = None


Subscriber = Callable[["GameSession", GameEvent], None]


class GameSession:
    """
    The TicTacToe state machine.

    Status (in progress / won / draw) is never stored: it is recomputed
    from the board on every call, so it cannot drift from the board.

    Game flow against the computer:
    1. The human asks for a move with request_move()
    2. If it is now the computer's turn, a computer move is scheduled
    3. When the delay elapses the AI picks a cell and it is played
    4. Any reset or board change cancels a computer move still waiting
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        scheduler: Optional[Scheduler] = None,
        ai_player: Optional[AIPlayer] = None,
        win_checker: Optional[WinChecker] = None
    ):
        """
        Initialize the session with an empty board.

        Args:
            config: Game settings. Uses defaults if not provided.
            scheduler: Runs the delayed computer move. Defaults to a
                ManualScheduler, which only runs when told to.
            ai_player: Opponent policy. Built from config if not provided.
            win_checker: Rules engine shared with the validator and AI.
        """
        self.config = config or GameConfig()
        self.scheduler = scheduler or ManualScheduler()
        self.win_checker = win_checker or WinChecker()
        self.validator = MoveValidator(self.win_checker)
        self.ai = ai_player or AIPlayer(
            rng=random.Random(self.config.RANDOM_SEED),
            win_checker=self.win_checker,
            verbose=self.config.VERBOSE
        )

        self._board = new_board()
        self._next_to_move = self.config.STARTING_MARK
        self._mode = self.config.DEFAULT_MODE
        self._computer_mark = self.config.DEFAULT_COMPUTER_MARK

        self._subscribers: List[Subscriber] = []
        self._pending: Optional[ScheduledCall] = None

        # Bumped on every board change so a late computer move can tell
        # that the board it was scheduled for is gone
        self._generation = 0

        self._schedule_computer_turn()

    # ==================== READ-ONLY VIEW ====================

    def get_board(self) -> Tuple[Cell, ...]:
        """Snapshot of the board."""
        return tuple(self._board)

    def get_status(self) -> GameStatus:
        """Current status, derived from the board."""
        return self.win_checker.get_status(self._board)

    @property
    def next_to_move(self) -> Mark:
        return self._next_to_move

    @property
    def mode(self) -> GameMode:
        return self._mode

    @property
    def computer_mark(self) -> Mark:
        return self._computer_mark

    def winning_line(self) -> Optional[Line]:
        return self.get_status().line

    def is_computer_turn(self) -> bool:
        """True when the computer should be the next to play."""
        return (
            self._mode == GameMode.PLAYER_VS_COMPUTER
            and self._next_to_move == self._computer_mark
            and not self.get_status().is_over
        )

    def has_pending_computer_move(self) -> bool:
        return self._pending is not None

    def status_message(self) -> str:
        """One-line status for display."""
        status = self.get_status()
        if status.outcome == Outcome.WON:
            return f"Winner: {status.winner.value}"
        if status.outcome == Outcome.DRAW:
            return "It's a draw"
        return f"Turn: {self._next_to_move.value}"

    # ==================== SUBSCRIPTIONS ====================

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback for every state change.

        Args:
            callback: Called as callback(session, event).

        Returns:
            A function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self, kind: str, index: Optional[int] = None, mark: Optional[Mark] = None):
        event = GameEvent(kind=kind, status=self.get_status(), index=index, mark=mark)
        for callback in list(self._subscribers):
            callback(self, event)

    # ==================== TRANSITIONS ====================

    def request_move(self, index: int) -> bool:
        """
        Play the current mark at index on behalf of a human.

        Returns:
            True if the move was applied, False if it was rejected.
        """
        result = self.validator.validate_move(
            self._board,
            index,
            self._next_to_move,
            mode=self._mode,
            computer_mark=self._computer_mark
        )

        if not result.is_valid:
            if self.config.VERBOSE:
                print(f"Move rejected: {result.error_message}")
            return False

        self._apply_move(index, "move")
        return True

    def reset(self):
        """Clear the board; the starting mark moves first."""
        self._restart(self.config.STARTING_MARK, "reset")

    def restart_and_swap(self):
        """Clear the board and hand the first move to the other mark."""
        self._restart(self._next_to_move.opposite(), "restart_swap")

    def set_mode(self, mode: GameMode):
        """Switch game mode and reset."""
        self._mode = mode
        self._restart(self.config.STARTING_MARK, "mode")

    def set_computer_mark(self, mark: Mark):
        """Choose which mark the computer plays and reset. No-op if unchanged."""
        if mark == self._computer_mark:
            return
        self._computer_mark = mark
        self._restart(self.config.STARTING_MARK, "computer_mark")

    def toggle_computer_mark(self):
        """Give the computer the other mark and reset."""
        self.set_computer_mark(self._computer_mark.opposite())

    # ==================== INTERNALS ====================

    def _apply_move(self, index: int, kind: str):
        mark = self._next_to_move
        self._board[index] = mark
        self._next_to_move = mark.opposite()
        self._board_changed()

        self._schedule_computer_turn()
        self._notify(kind, index=index, mark=mark)

    def _restart(self, first: Mark, kind: str):
        self._board = new_board()
        self._next_to_move = first
        self._board_changed()

        self._schedule_computer_turn()
        self._notify(kind)

    def _board_changed(self):
        """Invalidate any computer move scheduled for the old board."""
        self._generation += 1
        if self._pending is not None:
            self.scheduler.cancel(self._pending)
            self._pending = None

    def _schedule_computer_turn(self):
        if not self.is_computer_turn():
            return

        generation = self._generation
        self._pending = self.scheduler.schedule(
            self.config.COMPUTER_MOVE_DELAY_MS,
            lambda: self._computer_turn(generation)
        )

    def _computer_turn(self, generation: int):
        """Run the computer's move if the board is still the one it was scheduled for."""
        if generation != self._generation:
            return
        self._pending = None

        if not self.is_computer_turn():
            return

        move = self.ai.select_move(self.get_board(), self._computer_mark)
        if move is None:
            return

        result = self.validator.validate_move(
            self._board,
            move,
            self._next_to_move,
            mode=self._mode,
            computer_mark=self._computer_mark,
            by_computer=True
        )
        if not result.is_valid:
            if self.config.VERBOSE:
                print(f"Warning: computer move rejected: {result.error_message}")
            return

        self._apply_move(move, "computer_move")

    def print_board(self):
        """Print the board and status to console."""
        print()
        print(format_board(self._board))
        print(f"\n{self.status_message()}")
