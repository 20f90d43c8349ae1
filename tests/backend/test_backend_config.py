import pytest
from pydantic import ValidationError

from backend.config import BackendConfig
from chess_path.config import SearchConfig

API_VARS = [
    "CHESS_PATH_API_HOST",
    "CHESS_PATH_API_PORT",
    "CHESS_PATH_API_DEBUG",
    "CHESS_PATH_API_LOG_LEVEL",
    "CHESS_PATH_API_CORS_ORIGINS",
    "CHESS_PATH_API_SEARCH_TIMEOUT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in API_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = BackendConfig.from_env()

    assert config.host == "0.0.0.0"
    assert config.port == 8000
    assert config.debug is False
    assert config.log_level is None
    assert config.cors_origins == ["http://localhost:3000", "http://localhost:5173"]
    assert config.search_timeout_seconds == 60.0


def test_from_env(monkeypatch):
    monkeypatch.setenv("CHESS_PATH_API_HOST", "127.0.0.1")
    monkeypatch.setenv("CHESS_PATH_API_PORT", "9001")
    monkeypatch.setenv("CHESS_PATH_API_DEBUG", "TRUE")
    monkeypatch.setenv("CHESS_PATH_API_LOG_LEVEL", "warning")
    monkeypatch.setenv("CHESS_PATH_API_CORS_ORIGINS", "https://chess.example.com, ,http://localhost:3000 ")
    monkeypatch.setenv("CHESS_PATH_API_SEARCH_TIMEOUT", "15")

    config = BackendConfig.from_env()

    assert config.host == "127.0.0.1"
    assert config.port == 9001
    assert config.debug is True
    assert config.log_level == "warning"
    assert config.cors_origins == ["https://chess.example.com", "http://localhost:3000"]
    assert config.search_timeout_seconds == 15.0


def test_search_timeout_must_be_positive(monkeypatch):
    monkeypatch.setenv("CHESS_PATH_API_SEARCH_TIMEOUT", "0")

    with pytest.raises(ValidationError):
        BackendConfig.from_env()


def test_cors_origins_must_be_strings():
    with pytest.raises(ValidationError):
        BackendConfig(cors_origins=[3000])


def test_search_config_gets_http_timeout():
    search_config = BackendConfig(search_timeout_seconds=30).search_config(SearchConfig(max_depth=3))

    assert search_config.search_timeout_seconds == 30
    assert search_config.max_depth == 3


def test_search_config_keeps_explicit_timeout():
    base = SearchConfig(search_timeout_seconds=5)

    assert BackendConfig(search_timeout_seconds=30).search_config(base) is base
