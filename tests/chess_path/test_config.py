import pytest
from pydantic import ValidationError

from chess_path.config import DEFAULT_TARGETS, SearchConfig
from chess_path.exceptions import UnknownTargetError


def test_defaults():
    config = SearchConfig()
    assert config.max_depth == 5
    assert config.games_per_user == 100
    assert config.perf_type == "classical"
    assert config.max_api_calls is None
    assert set(config.targets) == {"Magnus Carlsen", "Hikaru Nakamura", "Alireza Firouzja"}


def test_default_target_aliases():
    assert DEFAULT_TARGETS["Magnus Carlsen"].accounts == ["MagnusCarlsen", "DrNykterstein", "DrDrunkenstein"]
    assert DEFAULT_TARGETS["Alireza Firouzja"].accounts == ["alireza2003"]


@pytest.mark.parametrize("field", ["max_depth", "games_per_user", "max_api_calls"])
def test_limits_must_be_positive(field):
    with pytest.raises(ValidationError):
        SearchConfig(**{field: 0})


def test_config_is_immutable():
    config = SearchConfig()
    with pytest.raises(ValidationError):
        config.max_depth = 10


def test_get_target_case_insensitive():
    assert SearchConfig().get_target("magnus carlsen").name == "Magnus Carlsen"


def test_get_target_unknown():
    with pytest.raises(UnknownTargetError) as exc_info:
        SearchConfig().get_target("Bobby Fischer")
    assert exc_info.value.target_name == "Bobby Fischer"


def test_from_env(monkeypatch):
    monkeypatch.setenv("CHESS_PATH_MAX_DEPTH", "3")
    monkeypatch.setenv("CHESS_PATH_GAMES_PER_USER", "20")
    monkeypatch.setenv("CHESS_PATH_BASE_URL", "http://localhost:8080/")
    monkeypatch.setenv("CHESS_PATH_MAX_API_CALLS", "500")
    monkeypatch.delenv("CHESS_PATH_SEARCH_TIMEOUT", raising=False)

    config = SearchConfig.from_env()

    assert config.max_depth == 3
    assert config.games_per_user == 20
    assert config.base_url == "http://localhost:8080"
    assert config.max_api_calls == 500
    assert config.search_timeout_seconds is None
