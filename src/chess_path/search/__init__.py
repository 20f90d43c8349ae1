# Path search over the opponent graph

from .engine import PathSearchEngine, resolve_opponent
from .matcher import is_target
from .models import BranchReason, BranchResult, BranchStatus, SearchContext, SearchState
from .orchestrator import PathFinder
from .visited import VisitedSet

__all__ = [
    "PathSearchEngine",
    "PathFinder",
    "VisitedSet",
    "is_target",
    "resolve_opponent",
    "BranchReason",
    "BranchResult",
    "BranchStatus",
    "SearchContext",
    "SearchState",
]
