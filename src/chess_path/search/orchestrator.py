"""
PathFinder - entry point for finding a chain of games between a player and a
target identity.
"""

import asyncio
import logging
import time
from typing import Optional

from chess_path.config import SearchConfig
from chess_path.lichess.gateway import GameDataGateway
from chess_path.models import SearchOutcome, SearchStatus, TargetIdentity
from chess_path.search.engine import PathSearchEngine
from chess_path.search.models import BranchReason, SearchContext, SearchState
from chess_path.utils.username_helpers import validate_username

logger = logging.getLogger(__name__)

_ABORT_MESSAGES = {
    BranchReason.CANCELLED: "Search was cancelled",
    BranchReason.BUDGET_EXHAUSTED: "Search stopped after reaching the limit of {max_api_calls} API calls",
}


class PathFinder:
    """Seeds searches and turns engine results into SearchOutcomes."""

    def __init__(self, gateway: GameDataGateway, config: Optional[SearchConfig] = None):
        self.config = config or SearchConfig()
        self.engine = PathSearchEngine(gateway, self.config)

    async def find_path_to(
        self,
        username: str,
        target_name: str,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> SearchOutcome:
        """
        Find a path to a configured target identity by name.

        Raises:
            UnknownTargetError: If no identity with that name is configured
        """
        identity = self.config.get_target(target_name)
        return await self.find_path(username, identity, cancel_event=cancel_event)

    async def find_path(
        self,
        username: str,
        identity: TargetIdentity,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> SearchOutcome:
        """
        Find a chain of games from `username` to one of `identity`'s accounts.

        Never raises: failures are reported through the outcome's status.
        """
        request_start_time = time.time()
        context = SearchContext(max_api_calls=self.config.max_api_calls, cancel_event=cancel_event)

        def outcome(status: SearchStatus, **kwargs) -> SearchOutcome:
            return SearchOutcome(
                status=status,
                target_name=identity.name,
                max_depth=self.config.max_depth,
                api_calls=context.api_calls,
                nodes_explored=context.nodes_explored,
                computation_time_ms=(time.time() - request_start_time) * 1000,
                **kwargs,
            )

        try:
            validate_username(username)
        except ValueError:
            return outcome(SearchStatus.ERROR, reason="Username must be a non-empty string")

        username = username.strip()
        logger.info(f"Searching for a path from '{username}' to {identity.name} (max depth {self.config.max_depth})")

        try:
            search = self.engine.search(username, SearchState(identity=identity), context)
            if self.config.search_timeout_seconds is not None:
                result = await asyncio.wait_for(search, timeout=self.config.search_timeout_seconds)
            else:
                result = await search
        except asyncio.TimeoutError:
            logger.warning(f"Search from '{username}' timed out after {self.config.search_timeout_seconds}s")
            return outcome(
                SearchStatus.ABORTED,
                reason=f"Search timed out after {self.config.search_timeout_seconds} seconds",
            )
        except Exception as e:
            logger.error(f"Unexpected error searching from '{username}': {e}", exc_info=True)
            return outcome(SearchStatus.ERROR, reason="An unexpected error occurred during the search")

        if result.is_found:
            found = outcome(SearchStatus.FOUND, path=result.path)
            logger.info(
                f"SEARCH SUMMARY for {username} -> {identity.name}: "
                f"Degree: {found.degree}, "
                f"Path: {' -> '.join(node.username for node in result.path)}, "
                f"API calls: {found.api_calls}, "
                f"Total time: {found.computation_time_ms:.1f}ms"
            )
            return found

        if result.is_aborted:
            reason = _ABORT_MESSAGES[result.reason].format(max_api_calls=self.config.max_api_calls)
            logger.warning(f"Search from '{username}' aborted: {reason}")
            return outcome(SearchStatus.ABORTED, reason=reason)

        reason = f"No path found within {self.config.max_depth} degrees of separation to {identity.name}"
        logger.info(f"{reason} (root pruned: {result.reason.value}, API calls: {context.api_calls})")
        return outcome(SearchStatus.NOT_FOUND, reason=reason)
