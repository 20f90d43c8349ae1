from typing import FrozenSet, Iterable

from chess_path.utils.username_helpers import normalize_username


class VisitedSet:
    """
    Usernames already explored along one root-to-node branch.

    Instances never change. `with_added` hands each child branch its own copy,
    so sibling branches never see each other's trails.
    """

    __slots__ = ("_usernames",)

    def __init__(self, usernames: Iterable[str] = ()):
        self._usernames: FrozenSet[str] = frozenset(normalize_username(u) for u in usernames)

    def contains(self, username: str) -> bool:
        return normalize_username(username) in self._usernames

    def with_added(self, username: str) -> "VisitedSet":
        child = VisitedSet()
        child._usernames = self._usernames | {normalize_username(username)}
        return child

    def __contains__(self, username: str) -> bool:
        return self.contains(username)

    def __len__(self) -> int:
        return len(self._usernames)

    def __repr__(self) -> str:
        return f"VisitedSet({sorted(self._usernames)!r})"
