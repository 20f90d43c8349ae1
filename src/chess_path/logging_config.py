"""
Logging setup shared by the chess-path CLI and the HTTP API.

Search progress is logged per explored player, so DEBUG output grows with the
size of the opponent graph. Results go to stdout and logs to stderr so that
CLI output stays pipeable.
"""

import logging
import os
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "CHESS_PATH_LOG_LEVEL"

# Per-request chatter from the HTTP client stack and the ASGI server
NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def resolve_level(level: Optional[str] = None) -> int:
    """
    Turn a level name into a logging level.

    Falls back to CHESS_PATH_LOG_LEVEL, then INFO. Unknown names map to INFO.

    Examples:
        "debug" -> logging.DEBUG
        None    -> value of CHESS_PATH_LOG_LEVEL, or logging.INFO
    """
    name = (level or os.getenv(LOG_LEVEL_ENV) or "INFO").strip().upper()
    numeric_level = logging.getLevelName(name)
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def setup_logging(
    level: Optional[str] = None,
    use_rich: bool = True,
) -> None:
    """
    Replace the root logger's handlers with a single stderr handler.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR), None for the environment default
        use_rich: Colored RichHandler output for terminals, plain lines otherwise
    """
    numeric_level = resolve_level(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if use_rich:
        handler = RichHandler(
            console=Console(file=sys.stderr),
            level=numeric_level,
            show_path=False,
            rich_tracebacks=True,
            markup=False,
            log_time_format="[%H:%M:%S]",
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        ))

    handler.setLevel(numeric_level)
    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    logging.getLogger(__name__).debug(
        f"Logging configured: level={logging.getLevelName(numeric_level)}, rich={use_rich}"
    )


def setup_dev_logging(level: Optional[str] = "DEBUG") -> None:
    """Verbose colored logs for local runs."""
    setup_logging(level=level, use_rich=True)


def setup_prod_logging(level: Optional[str] = None) -> None:
    setup_logging(level=level, use_rich=False)
