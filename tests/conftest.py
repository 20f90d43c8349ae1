"""
Pytest configuration and shared fixtures for path search testing.
"""

import pytest
import logging
from typing import Dict, Iterable, List, Optional, Union

from chess_path.config import SearchConfig
from chess_path.exceptions import GatewayError, PlayerNotFoundError
from chess_path.lichess.gateway import GameDataGateway
from chess_path.models import GameRecord, Profile, TargetIdentity
from chess_path.utils.username_helpers import normalize_username

# Configure logging for tests
logging.basicConfig(level=logging.INFO)


class FakeGateway(GameDataGateway):
    """
    In-memory game data source over a synthetic opponent graph.

    `games` maps a username to its games, newest first. A plain string entry is
    a game against that opponent with the player as white. Every username
    exists unless listed in `missing`.
    """

    def __init__(
        self,
        games: Optional[Dict[str, List[Union[str, GameRecord]]]] = None,
        ratings: Optional[Dict[str, int]] = None,
        missing: Iterable[str] = (),
        profile_errors: Optional[Dict[str, GatewayError]] = None,
        games_errors: Optional[Dict[str, GatewayError]] = None,
    ):
        self.games = {normalize_username(k): v for k, v in (games or {}).items()}
        self.ratings = {normalize_username(k): v for k, v in (ratings or {}).items()}
        self.missing = {normalize_username(u) for u in missing}
        self.profile_errors = {normalize_username(k): v for k, v in (profile_errors or {}).items()}
        self.games_errors = {normalize_username(k): v for k, v in (games_errors or {}).items()}
        self.profile_calls: List[str] = []
        self.games_calls: List[str] = []

    async def fetch_profile(self, username: str) -> Profile:
        self.profile_calls.append(username)
        key = normalize_username(username)
        if key in self.profile_errors:
            raise self.profile_errors[key]
        if key in self.missing:
            raise PlayerNotFoundError(username)
        return Profile(username=username, classical_rating=self.ratings.get(key))

    async def fetch_recent_games(self, username: str, limit: int) -> List[GameRecord]:
        self.games_calls.append(username)
        key = normalize_username(username)
        if key in self.games_errors:
            raise self.games_errors[key]
        records = []
        for entry in self.games.get(key, []):
            if isinstance(entry, GameRecord):
                records.append(entry)
            else:
                records.append(GameRecord(white=username, black=entry))
        return records[:limit]


def chain_games(length: int, prefix: str = "p") -> Dict[str, List[str]]:
    """Games for a chain p0 -> p1 -> ... -> p{length}, where only neighbours have played."""
    return {f"{prefix}{i}": [f"{prefix}{i + 1}"] for i in range(length)}


@pytest.fixture
def magnus() -> TargetIdentity:
    """The default Magnus Carlsen identity."""
    return TargetIdentity(
        name="Magnus Carlsen",
        accounts=["MagnusCarlsen", "DrNykterstein", "DrDrunkenstein"],
        description="Discover your connection to Magnus Carlsen through Lichess games",
    )

@pytest.fixture
def target_a() -> TargetIdentity:
    """A synthetic identity with the single alias 'A'."""
    return TargetIdentity(name="Player A", accounts=["A"], description="Synthetic target")

@pytest.fixture
def search_config() -> SearchConfig:
    """Default search bounds."""
    return SearchConfig()
