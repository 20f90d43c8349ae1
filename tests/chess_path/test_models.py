import pytest
from pydantic import ValidationError

from chess_path.models import PlayerNode, SearchOutcome, SearchStatus, TargetIdentity


class TestTargetIdentity:

    def test_requires_at_least_one_account(self):
        with pytest.raises(ValidationError):
            TargetIdentity(name="Nobody", accounts=[])

    def test_rejects_blank_alias(self):
        with pytest.raises(ValidationError, match="Account aliases must be non-empty"):
            TargetIdentity(name="Nobody", accounts=["ok", "  "])

    def test_is_immutable(self, magnus: TargetIdentity):
        with pytest.raises(ValidationError):
            magnus.name = "Someone else"


class TestPlayerNode:

    def test_rated_label(self):
        assert PlayerNode(username="Hikaru", rating=2700).rating_label == "2700"

    def test_unrated_label(self):
        assert PlayerNode(username="newbie").rating_label == "Unrated"


class TestSearchOutcome:

    def test_degree_is_path_length_minus_one(self):
        outcome = SearchOutcome(
            status=SearchStatus.FOUND,
            target_name="Magnus Carlsen",
            max_depth=5,
            path=[PlayerNode(username="a"), PlayerNode(username="b"), PlayerNode(username="DrNykterstein")],
        )
        assert outcome.found
        assert outcome.degree == 2
        assert outcome.headline() == "Your Magnus Carlsen Number: 2"

    def test_serializes_status_as_value(self):
        outcome = SearchOutcome(status=SearchStatus.NOT_FOUND, target_name="X", max_depth=5, reason="nope")
        data = outcome.model_dump(mode="json")
        assert data["status"] == "not_found"
        assert data["path"] is None
