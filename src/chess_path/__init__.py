"""
Chess Path - Core Library

Finds a chain of Lichess games connecting any player to a celebrity account.
"""

from .config import SearchConfig
from .models import PlayerNode, SearchOutcome, SearchStatus, TargetIdentity
from .search import PathFinder

__all__ = ['SearchConfig', 'PlayerNode', 'SearchOutcome', 'SearchStatus', 'TargetIdentity', 'PathFinder']
