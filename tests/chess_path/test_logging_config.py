import logging

import pytest
from rich.logging import RichHandler

from chess_path.logging_config import LOG_LEVEL_ENV, NOISY_LOGGERS, resolve_level, setup_logging


@pytest.fixture
def root_logger():
    """Restore the root logger and the quietened loggers after each test."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    saved_noisy = {name: logging.getLogger(name).level for name in NOISY_LOGGERS}
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)
    for name, level in saved_noisy.items():
        logging.getLogger(name).setLevel(level)


@pytest.mark.parametrize("name, expected", [
    ("debug", logging.DEBUG),
    (" Warning ", logging.WARNING),
    ("ERROR", logging.ERROR),
    ("chatty", logging.INFO),
])
def test_resolve_level(name, expected):
    assert resolve_level(name) == expected


def test_resolve_level_from_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "error")
    assert resolve_level() == logging.ERROR

    monkeypatch.delenv(LOG_LEVEL_ENV)
    assert resolve_level() == logging.INFO


def test_single_rich_handler(root_logger):
    setup_logging(level="DEBUG")
    setup_logging(level="DEBUG")

    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0], RichHandler)
    assert root_logger.level == logging.DEBUG


def test_plain_handler_and_quiet_http_client(root_logger):
    setup_logging(level="INFO", use_rich=False)

    handler = root_logger.handlers[0]
    assert type(handler) is logging.StreamHandler
    assert handler.level == logging.INFO
    assert logging.getLogger("httpx").level == logging.WARNING
