"""
Logic module for TicTacToe.
Handles game state, rules, the session state machine and the AI opponent.
"""

__version__ = "1.0.0"

from .game_state import (
    BoardContractError,
    GameMode,
    GameStatus,
    Mark,
    Outcome,
    WinResult,
    NO_WINNER,
    new_board,
)
from .config import GameConfig
from .move_validator import MoveValidator
from .win_checker import WinChecker
from .ai_player import AIPlayer
from .scheduler import ManualScheduler, TkScheduler
from .game_session import GameEvent, GameSession
