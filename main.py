"""
Main entry point for TicTacToe.

Launches the Tkinter window by default, or a console game with --no-ui.
Both drive the same GameSession.
"""

import argparse
import sys
import time
from typing import List, Optional

from logic.config import GameConfig
from logic.game_state import GameMode, Mark
from logic.game_session import GameSession
from logic.scheduler import ManualScheduler


MODES = {
    "pvp": GameMode.PLAYER_VS_PLAYER,
    "ai": GameMode.PLAYER_VS_COMPUTER,
}

CONSOLE_HELP = """\
Commands:
  0-8  play that cell
  r    reset
  s    restart and swap who starts
  m    switch between 2 players and vs AI
  c    switch which mark the AI plays
  q    quit"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tic Tac Toe")
    parser.add_argument(
        "--mode",
        choices=sorted(MODES),
        default="ai",
        help="pvp for two players, ai to play the computer (default: ai)"
    )
    parser.add_argument(
        "--computer-mark",
        choices=[m.value for m in Mark],
        default=GameConfig.DEFAULT_COMPUTER_MARK.value,
        help="Mark the computer plays (default: O)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's tie-breaking"
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=GameConfig.COMPUTER_MOVE_DELAY_MS,
        help="Pause before the computer moves, in ms"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in the console instead of a window"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Don't print AI decisions and rejected moves"
    )
    return parser


def config_from_args(args: argparse.Namespace) -> GameConfig:
    """Build a GameConfig from parsed command line arguments."""
    return GameConfig(
        DEFAULT_MODE=MODES[args.mode],
        DEFAULT_COMPUTER_MARK=Mark(args.computer_mark),
        RANDOM_SEED=args.seed,
        COMPUTER_MOVE_DELAY_MS=args.delay,
        VERBOSE=not args.quiet,
    )


def handle_command(session: GameSession, command: str) -> bool:
    """
    Apply one console command to the session.

    Returns:
        False when the player asked to quit.
    """
    command = command.strip().lower()

    if command == "q":
        return False
    if command == "r":
        session.reset()
    elif command == "s":
        session.restart_and_swap()
    elif command == "m":
        other = (
            GameMode.PLAYER_VS_PLAYER
            if session.mode == GameMode.PLAYER_VS_COMPUTER
            else GameMode.PLAYER_VS_COMPUTER
        )
        session.set_mode(other)
    elif command == "c":
        session.toggle_computer_mark()
    elif command.isdigit():
        if not session.request_move(int(command)):
            print("That move is not allowed.")
    else:
        print(CONSOLE_HELP)

    return True


def run_console(config: GameConfig):
    """Play in the terminal."""
    scheduler = ManualScheduler()
    session = GameSession(config=config, scheduler=scheduler)

    print("\n" + "=" * 40)
    print("   Tic Tac Toe")
    print("=" * 40)
    print(CONSOLE_HELP)

    while True:
        # Let the computer move after its pause
        if session.has_pending_computer_move():
            time.sleep(config.computer_move_delay_seconds)
            scheduler.run_pending()

        session.print_board()

        try:
            command = input("> ")
        except EOFError:
            break

        if not handle_command(session, command):
            break

    print("Goodbye!")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    config = config_from_args(args)

    if args.no_ui:
        try:
            run_console(config)
        except KeyboardInterrupt:
            print("\n\nGame interrupted by user.")
        return 0

    from ui import TicTacToeUI
    ui = TicTacToeUI(game_config=config)
    ui.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
