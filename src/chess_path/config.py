import os
from typing import Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from chess_path.exceptions import UnknownTargetError
from chess_path.models import TargetIdentity

load_dotenv()

DEFAULT_TARGET_NAME = "Magnus Carlsen"

DEFAULT_TARGETS: Dict[str, TargetIdentity] = {
    "Magnus Carlsen": TargetIdentity(
        name="Magnus Carlsen",
        accounts=["MagnusCarlsen", "DrNykterstein", "DrDrunkenstein"],
        description="Discover your connection to Magnus Carlsen through Lichess games",
    ),
    "Hikaru Nakamura": TargetIdentity(
        name="Hikaru Nakamura",
        accounts=["Hikaru"],
        description="Find your connection to Hikaru Nakamura through Lichess games",
    ),
    "Alireza Firouzja": TargetIdentity(
        name="Alireza Firouzja",
        accounts=["alireza2003"],
        description="Explore your connection to Alireza Firouzja through Lichess games",
    ),
}


def _optional_int(value: Optional[str]) -> Optional[int]:
    return int(value) if value else None


def _optional_float(value: Optional[str]) -> Optional[float]:
    return float(value) if value else None


class SearchConfig(BaseModel):
    """Read-only settings for path searches."""
    model_config = ConfigDict(frozen=True)

    # Search bounds
    max_depth: int = Field(5, gt=0)
    games_per_user: int = Field(100, gt=0)
    perf_type: str = "classical"

    # Data source
    base_url: str = "https://lichess.org"
    request_timeout_seconds: float = Field(10.0, gt=0)

    # Optional hard limits for a single search
    max_api_calls: Optional[int] = Field(None, gt=0)
    search_timeout_seconds: Optional[float] = Field(None, gt=0)

    targets: Dict[str, TargetIdentity] = Field(default_factory=lambda: dict(DEFAULT_TARGETS))

    def get_target(self, name: str) -> TargetIdentity:
        """Look up a target identity by name, falling back to a case-insensitive match."""
        if name in self.targets:
            return self.targets[name]
        folded = name.strip().casefold()
        for key, identity in self.targets.items():
            if key.casefold() == folded:
                return identity
        raise UnknownTargetError(name)

    @classmethod
    def from_env(cls) -> "SearchConfig":
        """Create config from environment variables."""
        return cls(
            max_depth=int(os.getenv("CHESS_PATH_MAX_DEPTH", "5")),
            games_per_user=int(os.getenv("CHESS_PATH_GAMES_PER_USER", "100")),
            perf_type=os.getenv("CHESS_PATH_PERF_TYPE", "classical"),
            base_url=os.getenv("CHESS_PATH_BASE_URL", "https://lichess.org").rstrip("/"),
            request_timeout_seconds=float(os.getenv("CHESS_PATH_REQUEST_TIMEOUT", "10.0")),
            max_api_calls=_optional_int(os.getenv("CHESS_PATH_MAX_API_CALLS")),
            search_timeout_seconds=_optional_float(os.getenv("CHESS_PATH_SEARCH_TIMEOUT")),
        )
