from fastapi import APIRouter, HTTPException, Depends
from typing import List
import logging

from chess_path.config import SearchConfig
from chess_path.exceptions import UnknownTargetError
from chess_path.models import SearchOutcome, SearchStatus
from chess_path.search import PathFinder
from backend.dependencies import get_path_finder, get_search_config
from backend.models.api_models import PathRequest, TargetInfo

router = APIRouter(prefix="/api", tags=["paths"])
logger = logging.getLogger(__name__)

_STATUS_CODES = {
    SearchStatus.NOT_FOUND: 404,
    SearchStatus.ABORTED: 504,
    SearchStatus.ERROR: 500,
}

@router.post("/path", response_model=SearchOutcome)
async def find_path(
    request: PathRequest,
    finder: PathFinder = Depends(get_path_finder)
) -> SearchOutcome:
    """
    Find a chain of Lichess games from a player to a target identity.

    This endpoint runs a depth-first search that stops at the first chain found.
    """
    try:
        outcome = await finder.find_path_to(request.username, request.target)
    except UnknownTargetError as e:
        logger.warning(f"Path request for unknown target: {e.message}")
        raise HTTPException(status_code=404, detail=e.message)

    if outcome.found:
        logger.info(
            f"Path found: {request.username} -> {request.target} "
            f"(degree {outcome.degree}, {outcome.api_calls} API calls, {outcome.computation_time_ms:.1f}ms)"
        )
        return outcome

    logger.warning(f"Path finding failed: {outcome.reason}")
    raise HTTPException(status_code=_STATUS_CODES[outcome.status], detail=outcome.reason)

@router.get("/targets", response_model=List[TargetInfo])
async def list_targets(config: SearchConfig = Depends(get_search_config)) -> List[TargetInfo]:
    """List the target identities a path can be searched for."""
    return [
        TargetInfo(name=identity.name, accounts=list(identity.accounts), description=identity.description)
        for identity in config.targets.values()
    ]
