"""
Helper functions for Lichess username normalization and validation.
"""

import urllib.parse


def normalize_username(username: str) -> str:
    """Returns the form of a username used for identity comparisons.

    Lichess usernames are case-insensitive, so two usernames refer to the same
    player when their normalized forms are equal.

    Args:
      username: The username to normalize.

    Returns:
      The stripped, case-folded username.

    Examples:
      "MagnusCarlsen"     =>   "magnuscarlsen"
      "  DrNykterstein "  =>   "drnykterstein"
    """
    return username.strip().casefold()


def get_quoted_username(username: str) -> str:
    """Validates and returns the username percent-encoded for use in a URL path.

    Args:
      username: The username to validate and encode.

    Returns:
      The percent-encoded username. Slashes are encoded too.

    Examples:
      "Hikaru"       =>   "Hikaru"
      "a/b c"        =>   "a%2Fb%20c"

    Raises:
      ValueError: If the provided username is invalid.
    """
    validate_username(username)
    return urllib.parse.quote(username.strip(), safe="")


def is_str(val) -> bool:
    """Returns whether or not the provided value is a string type."""
    return isinstance(val, str)


def validate_username(username: str):
    """Validates the provided value is a usable username.

    Args:
      username: The username to validate.

    Returns:
      None

    Raises:
      ValueError: If the provided username is invalid.
    """
    if not is_str(username) or not username.strip():
        raise ValueError(
            f'Invalid username "{username}" provided. Username must be a non-empty string.'
        )
