"""
PathSearchEngine - depth-first search over the Lichess opponent graph.

Nodes are usernames and edges are "played a game against". The graph is never
materialized: each node's edges are discovered on demand through the game data
gateway, one player at a time. The first branch that reaches a target account
wins, so the returned chain is not necessarily the shortest one.
"""

import logging
from typing import Optional

from chess_path.config import SearchConfig
from chess_path.exceptions import GatewayError, ParseError, PlayerNotFoundError
from chess_path.lichess.gateway import GameDataGateway
from chess_path.models import GameRecord, PlayerNode
from chess_path.search.matcher import is_target
from chess_path.search.models import BranchReason, BranchResult, SearchContext, SearchState
from chess_path.utils.username_helpers import normalize_username

logger = logging.getLogger(__name__)


def resolve_opponent(game: GameRecord, username: str) -> Optional[str]:
    """
    Return the other participant of `game`, or None if it cannot be determined.

    A game played against oneself resolves to the player, which the cycle guard
    then prunes.
    """
    player = normalize_username(username)
    if game.white is not None and normalize_username(game.white) == player:
        return game.black
    if game.black is not None and normalize_username(game.black) == player:
        return game.white
    return None


def _reason_for(error: GatewayError) -> BranchReason:
    if isinstance(error, PlayerNotFoundError):
        return BranchReason.PLAYER_NOT_FOUND
    if isinstance(error, ParseError):
        return BranchReason.PARSE
    return BranchReason.TRANSPORT


class PathSearchEngine:
    """Depth-bounded, first-match explorer of the opponent graph."""

    def __init__(self, gateway: GameDataGateway, config: Optional[SearchConfig] = None):
        self.gateway = gateway
        self.config = config or SearchConfig()

    async def search(self, username: str, state: SearchState, context: SearchContext) -> BranchResult:
        """
        Explore the branch rooted at `username`.

        Args:
            username: Player to expand
            state: Depth, visited trail and target identity for this branch
            context: Counters and limits shared by the whole search

        Returns:
            BranchResult with the path from `username` to a target account when found
        """
        if state.depth > self.config.max_depth:
            return BranchResult.pruned(BranchReason.DEPTH_LIMIT)
        if username in state.visited:
            logger.debug(f"Skipping '{username}': already on this branch")
            return BranchResult.pruned(BranchReason.CYCLE)

        child_state = state.descend(username)

        abort_reason = context.abort_reason()
        if abort_reason is not None:
            return BranchResult.aborted(abort_reason)
        context.record_call()
        context.nodes_explored += 1
        try:
            profile = await self.gateway.fetch_profile(username)
        except GatewayError as e:
            logger.debug(f"Pruning '{username}' at depth {state.depth}: {e.message}")
            return BranchResult.pruned(_reason_for(e))

        node = PlayerNode(username=username, rating=profile.classical_rating)

        # Checked before fetching games so a target is recognized even when its history is unavailable
        if is_target(username, state.identity):
            logger.info(f"Reached target account '{username}' at depth {state.depth}")
            return BranchResult.found([node])

        # Opponents of a player at the maximum depth would all be pruned by the depth guard
        if state.depth >= self.config.max_depth:
            return BranchResult.pruned(BranchReason.DEPTH_LIMIT)

        abort_reason = context.abort_reason()
        if abort_reason is not None:
            return BranchResult.aborted(abort_reason)
        context.record_call()
        try:
            games = await self.gateway.fetch_recent_games(username, self.config.games_per_user)
        except GatewayError as e:
            logger.warning(f"Could not fetch games for '{username}': {e.message}")
            return BranchResult.pruned(_reason_for(e))

        logger.debug(f"Expanding '{username}' at depth {state.depth}: {len(games)} games")

        for game in games:
            opponent = resolve_opponent(game, username)
            if opponent is None:
                logger.debug(f"Skipping game {game.game_id}: opponent of '{username}' unknown")
                continue

            result = await self.search(opponent, child_state, context)
            if result.is_found:
                return BranchResult.found([node] + result.path)
            if result.is_aborted:
                return result

        return BranchResult.pruned(BranchReason.EXHAUSTED)
