"""
Search models for path finding functionality.
"""

import asyncio
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional

from chess_path.models import PlayerNode, TargetIdentity
from chess_path.search.visited import VisitedSet


class BranchStatus(Enum):
    """How exploration of a single branch ended."""
    FOUND = "found"
    PRUNED = "pruned"    # this branch is unusable, try the next one
    ABORTED = "aborted"  # stop the whole search


class BranchReason(str, Enum):
    DEPTH_LIMIT = "depth_limit"
    CYCLE = "cycle"
    PLAYER_NOT_FOUND = "player_not_found"
    TRANSPORT = "transport"
    PARSE = "parse"
    EXHAUSTED = "exhausted"
    CANCELLED = "cancelled"
    BUDGET_EXHAUSTED = "budget_exhausted"


@dataclass(frozen=True)
class BranchResult:
    """Result of exploring one branch of the opponent graph."""
    status: BranchStatus
    path: Optional[List[PlayerNode]] = None
    reason: Optional[BranchReason] = None

    @classmethod
    def found(cls, path: List[PlayerNode]) -> "BranchResult":
        return cls(status=BranchStatus.FOUND, path=path)

    @classmethod
    def pruned(cls, reason: BranchReason) -> "BranchResult":
        return cls(status=BranchStatus.PRUNED, reason=reason)

    @classmethod
    def aborted(cls, reason: BranchReason) -> "BranchResult":
        return cls(status=BranchStatus.ABORTED, reason=reason)

    @property
    def is_found(self) -> bool:
        return self.status == BranchStatus.FOUND and self.path is not None

    @property
    def is_aborted(self) -> bool:
        return self.status == BranchStatus.ABORTED


@dataclass(frozen=True)
class SearchState:
    """Per-branch state. Each recursive call gets its own copy."""
    identity: TargetIdentity
    depth: int = 0
    visited: VisitedSet = field(default_factory=VisitedSet)

    def descend(self, username: str) -> "SearchState":
        """State for the opponents of `username`: one level deeper, with `username` visited."""
        return replace(self, depth=self.depth + 1, visited=self.visited.with_added(username))


@dataclass
class SearchContext:
    """Bookkeeping shared by every branch of a single search invocation."""
    max_api_calls: Optional[int] = None
    cancel_event: Optional[asyncio.Event] = None
    api_calls: int = 0
    nodes_explored: int = 0

    def abort_reason(self) -> Optional[BranchReason]:
        """Checked before each gateway call."""
        if self.cancel_event is not None and self.cancel_event.is_set():
            return BranchReason.CANCELLED
        if self.max_api_calls is not None and self.api_calls >= self.max_api_calls:
            return BranchReason.BUDGET_EXHAUSTED
        return None

    def record_call(self) -> None:
        self.api_calls += 1
