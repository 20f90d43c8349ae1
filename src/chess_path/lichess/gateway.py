"""
Game Data Gateway Interface

Defines what the path search needs from a chess game data source without
coupling to a specific site or transport.
"""

from abc import ABC, abstractmethod
from typing import List

from chess_path.models import GameRecord, Profile


class GameDataGateway(ABC):
    """
    Game data source interface.

    Implementations keep no state between calls. Failures are reported with the
    GatewayError subclasses from chess_path.exceptions.
    """

    @abstractmethod
    async def fetch_profile(self, username: str) -> Profile:
        """
        Fetch a player's profile.

        Raises:
            PlayerNotFoundError: No such player
            TransportError: The request failed
            ParseError: The response body was malformed
        """
        pass

    @abstractmethod
    async def fetch_recent_games(self, username: str, limit: int) -> List[GameRecord]:
        """
        Fetch up to `limit` of the player's most recent games, newest first.
        `limit` must be positive; SearchConfig.games_per_user guarantees this
        for the search engine.

        Returns an empty list when the player has no qualifying games.

        Raises:
            TransportError: The request failed
            ParseError: The response body was malformed
            ValueError: `limit` is not positive, a caller error rather than a data source failure
        """
        pass
