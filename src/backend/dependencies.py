from fastapi import Request
from chess_path.config import SearchConfig
from chess_path.search import PathFinder

async def get_path_finder(request: Request) -> PathFinder:
    """Dependency provider to get the shared PathFinder instance."""
    return request.app.state.path_finder

async def get_search_config(request: Request) -> SearchConfig:
    """Dependency provider to get the shared SearchConfig instance."""
    return request.app.state.search_config
