import pytest

import main
from logic.config import GameConfig
from logic.game_state import GameMode, Mark
from logic.game_session import GameSession
from logic.scheduler import ManualScheduler


def test_parser_defaults():
    args = main.build_parser().parse_args([])
    assert args.mode == "ai"
    assert args.computer_mark == "O"
    assert args.seed is None
    assert args.delay == 350
    assert args.no_ui is False
    assert args.quiet is False


def test_config_from_args():
    args = main.build_parser().parse_args(
        ["--mode", "pvp", "--computer-mark", "X", "--seed", "5", "--delay", "0", "--quiet"]
    )
    config = main.config_from_args(args)
    assert config.DEFAULT_MODE == GameMode.PLAYER_VS_PLAYER
    assert config.DEFAULT_COMPUTER_MARK == Mark.X
    assert config.RANDOM_SEED == 5
    assert config.COMPUTER_MOVE_DELAY_MS == 0
    assert config.VERBOSE is False


def test_parser_rejects_unknown_mode():
    with pytest.raises(SystemExit):
        main.build_parser().parse_args(["--mode", "online"])


def test_config_rejects_unknown_setting():
    with pytest.raises(AttributeError):
        GameConfig(BOARD_SIZE=4)


@pytest.fixture
def session():
    config = GameConfig(VERBOSE=False, DEFAULT_MODE=GameMode.PLAYER_VS_PLAYER)
    return GameSession(config=config, scheduler=ManualScheduler())


def test_console_commands(session, capsys):
    assert main.handle_command(session, "4") is True
    assert session.get_board()[4] == Mark.X

    main.handle_command(session, "4")
    assert "not allowed" in capsys.readouterr().out

    main.handle_command(session, "s")
    assert session.next_to_move == Mark.X  # O was to move before the swap

    main.handle_command(session, "m")
    assert session.mode == GameMode.PLAYER_VS_COMPUTER

    main.handle_command(session, "c")
    assert session.computer_mark == Mark.X

    main.handle_command(session, "r")
    assert session.get_board() == (None,) * 9


def test_console_quit_and_help(session, capsys):
    assert main.handle_command(session, "q") is False
    assert main.handle_command(session, "help") is True
    assert "Commands:" in capsys.readouterr().out
