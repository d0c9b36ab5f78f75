"""
Global pytest configuration and fixtures.
Provides a clean configuration and fresh fixture factories for each test.
"""

import pytest


@pytest.fixture(scope="function", autouse=True)
def reset_global_config():
    """Reset the global configuration before each test to ensure clean state."""
    from config_factory import reset_config

    reset_config()
    yield
    reset_config()


@pytest.fixture(scope="function")
def record_factory():
    """Factory whose create function returns the resolved attribute dict."""
    from factory_kit import Factory
    return Factory(lambda attrs: dict(attrs), name='RecordFactory')


@pytest.fixture(scope="function")
def player_factory():
    """Provide a fresh PlayerData factory."""
    from tests.factories.room_factory import player_factory as make_player_factory
    return make_player_factory()


@pytest.fixture(scope="function")
def room_factory():
    """Provide a fresh RoomData factory."""
    from tests.factories.room_factory import room_factory as make_room_factory
    return make_room_factory()


@pytest.fixture(scope="function")
def prompt_factory():
    """Provide a fresh PromptData factory."""
    from tests.factories.game_factory import prompt_factory as make_prompt_factory
    return make_prompt_factory()


@pytest.fixture(scope="function")
def score_factory():
    """Provide a fresh ScoreData factory."""
    from tests.factories.game_factory import score_factory as make_score_factory
    return make_score_factory()
