import pytest

from logic.config import GameConfig
from logic.game_state import GameMode
from logic.game_session import GameSession
from logic.scheduler import ManualScheduler


@pytest.fixture
def quiet_config():
    return GameConfig(VERBOSE=False, RANDOM_SEED=1234)


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def pvp_session(quiet_config, scheduler):
    quiet_config.DEFAULT_MODE = GameMode.PLAYER_VS_PLAYER
    return GameSession(config=quiet_config, scheduler=scheduler)


@pytest.fixture
def ai_session(quiet_config, scheduler):
    # Computer plays O by default
    return GameSession(config=quiet_config, scheduler=scheduler)
