from chess_path.models import TargetIdentity
from chess_path.utils.username_helpers import normalize_username


def is_target(username: str, identity: TargetIdentity) -> bool:
    """Check whether a username is one of the identity's known accounts."""
    normalized = normalize_username(username)
    return any(normalize_username(alias) == normalized for alias in identity.accounts)
