"""
Lichess module for chess_path.

This module contains the game data gateway interface and its implementation
over the public Lichess API.
"""

from .gateway import GameDataGateway
from .live_service import LichessService

__all__ = [
    'GameDataGateway',
    'LichessService'
]
