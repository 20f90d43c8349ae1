import json
import logging
import httpx
from typing import Any, Dict, List, Optional
from pydantic import ValidationError

from chess_path.config import SearchConfig
from chess_path.exceptions import ParseError, PlayerNotFoundError, TransportError
from chess_path.lichess.gateway import GameDataGateway
from chess_path.models import GameRecord, Profile
from chess_path.utils.username_helpers import get_quoted_username

USER_AGENT = "chess-path/0.1.0"

class LichessService(GameDataGateway):
    """
    Game data gateway backed by the public Lichess API.
    All methods are asynchronous and open a fresh client per call.
    """
    def __init__(
            self,
            base_url: str = "https://lichess.org",
            perf_type: str = "classical",
            timeout: float = 10.0,
            transport: Optional[httpx.AsyncBaseTransport] = None,
        ):
        self.base_url = base_url.rstrip("/")
        self.perf_type = perf_type
        self.timeout = timeout
        self.transport = transport
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config: SearchConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> "LichessService":
        return cls(
            base_url=config.base_url,
            perf_type=config.perf_type,
            timeout=config.request_timeout_seconds,
            transport=transport,
        )

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={"User-Agent": USER_AGENT},
            transport=self.transport,
        )

    async def _get(self, url: str, username: str, **kwargs) -> httpx.Response:
        try:
            async with self._client() as client:
                return await client.get(url, **kwargs)
        except httpx.RequestError as e:
            self.logger.warning(f"Lichess request failed for '{username}': {e}")
            raise TransportError(f"Lichess request failed for '{username}': {e}")

    async def fetch_profile(self, username: str) -> Profile:
        """Fetch a player's profile and classical rating."""
        response = await self._get(f"/api/user/{get_quoted_username(username)}", username)

        if response.status_code == 404:
            raise PlayerNotFoundError(username)
        if response.is_error:
            raise TransportError(
                f"Lichess returned HTTP {response.status_code} for profile '{username}'",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ParseError(f"Malformed profile response for '{username}': {e}")
        if not isinstance(data, dict):
            raise ParseError(f"Unexpected profile response format for '{username}'")
        if data.get("disabled"):
            self.logger.debug(f"Account '{username}' is closed")
            raise PlayerNotFoundError(username)

        reported_username = data.get("username")
        if not isinstance(reported_username, str) or not reported_username.strip():
            reported_username = username
        try:
            profile = Profile(
                username=reported_username,
                classical_rating=self._classical_rating(data),
            )
        except ValidationError as e:
            raise ParseError(f"Unexpected profile response format for '{username}': {e}") from e
        self.logger.debug(f"Fetched profile '{profile.username}' (classical={profile.classical_rating})")
        return profile

    async def fetch_recent_games(self, username: str, limit: int) -> List[GameRecord]:
        """
        Fetch the player's most recent games of the configured perf type.
        The games endpoint streams one JSON object per line (NDJSON).
        """
        if limit <= 0:
            raise ValueError(f"Invalid game limit {limit}. Limit must be a positive integer.")

        response = await self._get(
            f"/api/games/user/{get_quoted_username(username)}",
            username,
            params={"max": str(limit), "perfType": self.perf_type},
            headers={"Accept": "application/x-ndjson"},
        )

        if response.status_code == 404:
            self.logger.debug(f"No game history for '{username}'")
            return []
        if response.is_error:
            raise TransportError(
                f"Lichess returned HTTP {response.status_code} for games of '{username}'",
                status_code=response.status_code,
            )

        games = []
        for line_number, line in enumerate(response.text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                raw = json.loads(line)
            except json.JSONDecodeError as e:
                raise ParseError(f"Malformed game on line {line_number} for '{username}': {e}")
            games.append(self._parse_game(raw, username))

        self.logger.debug(f"Fetched {len(games)} {self.perf_type} games for '{username}'")
        return games[:limit]

    @staticmethod
    def _classical_rating(data: Dict[str, Any]) -> Optional[int]:
        perfs = data.get("perfs")
        if not isinstance(perfs, dict):
            return None
        classical = perfs.get("classical")
        if not isinstance(classical, dict):
            return None
        rating = classical.get("rating")
        if isinstance(rating, int) and not isinstance(rating, bool):
            return rating
        return None

    @staticmethod
    def _participant(side: Any) -> Optional[str]:
        """Username of one side of a game, None for anonymous and AI players or unusable names."""
        if not isinstance(side, dict):
            return None
        user = side.get("user")
        if not isinstance(user, dict):
            return None
        for key in ("name", "id"):
            name = user.get(key)
            if isinstance(name, str) and name.strip():
                return name
        return None

    def _parse_game(self, raw: Any, username: str) -> GameRecord:
        if not isinstance(raw, dict) or not isinstance(raw.get("players"), dict):
            raise ParseError(f"Unexpected game format for '{username}'")
        players = raw["players"]
        try:
            return GameRecord(
                white=self._participant(players.get("white")),
                black=self._participant(players.get("black")),
                game_id=raw.get("id"),
            )
        except ValidationError as e:
            raise ParseError(f"Unexpected game format for '{username}': {e}") from e
