"""
Game configuration for TicTacToe.
Defaults for the session, the computer opponent and diagnostics.
"""

from .game_state import GameMode, Mark


class GameConfig:
    """
    Configuration class for game settings.
    Override on an instance (or subclass) to change a single value.
    """

    # ==================== SESSION SETTINGS ====================
    # Mode and computer side used when a session is created
    DEFAULT_MODE = GameMode.PLAYER_VS_COMPUTER
    DEFAULT_COMPUTER_MARK = Mark.O

    # Who moves first after a plain reset
    STARTING_MARK = Mark.X

    # ==================== COMPUTER SETTINGS ====================
    # Pause before the computer plays, in milliseconds
    COMPUTER_MOVE_DELAY_MS = 350

    # Seed for corner/side tie-breaking (None = unseeded)
    RANDOM_SEED = None

    # ==================== DIAGNOSTICS ====================
    # Print rejected moves and computer decisions to the console
    VERBOSE = True

    def __init__(self, **overrides):
        """
        Create a config, optionally overriding class defaults.

        Args:
            **overrides: Upper-case setting names and their values.
        """
        for name, value in overrides.items():
            if not hasattr(type(self), name):
                raise AttributeError(f"Unknown game setting: {name}")
            setattr(self, name, value)

    @property
    def computer_move_delay_seconds(self) -> float:
        """The computer pause in seconds."""
        return self.COMPUTER_MOVE_DELAY_MS / 1000
