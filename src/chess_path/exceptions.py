"""
Custom exceptions for the chess_path package.
"""

from typing import Optional


class ChessPathException(Exception):
    """Base exception for the application."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class GatewayError(ChessPathException):
    """Raised when the game data source cannot answer a request."""
    pass


class PlayerNotFoundError(GatewayError):
    """Raised when a profile lookup returns no such user."""
    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Player not found: {username}")


class TransportError(GatewayError):
    """Raised when the data source is unreachable or returns a non-success status."""
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class ParseError(GatewayError):
    """Raised when a response body is malformed."""
    pass


class UnknownTargetError(ChessPathException):
    """Raised when a requested target identity is not configured."""
    def __init__(self, target_name: str):
        self.target_name = target_name
        super().__init__(f"Unknown target identity: '{target_name}'")
