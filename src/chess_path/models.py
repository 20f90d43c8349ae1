from typing import List, Optional
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator

UNRATED_LABEL = "Unrated"

# --- Enums ---

class SearchStatus(str, Enum):
    """Represents the final status of a path search."""
    FOUND = "found"
    NOT_FOUND = "not_found"
    ABORTED = "aborted"
    ERROR = "error"

# --- Data Models ---

class TargetIdentity(BaseModel):
    """A celebrity player that searches try to reach."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Human-readable name of the player.")
    accounts: List[str] = Field(..., min_length=1, description="Known account aliases, matched case-insensitively.")
    description: str = Field("", description="Display description for this target.")

    @field_validator("accounts")
    @classmethod
    def accounts_must_be_non_blank(cls, v: List[str]):
        if any(not alias.strip() for alias in v):
            raise ValueError("Account aliases must be non-empty.")
        return v

class Profile(BaseModel):
    """The parts of a player profile the search needs."""
    username: str = Field(..., description="The username as reported by the data source.")
    classical_rating: Optional[int] = Field(None, description="Classical rating, or None if unrated.")

class GameRecord(BaseModel):
    """A single completed game. Only the participants matter for connectivity."""
    white: Optional[str] = Field(None, description="Username of the white player, None for anonymous or AI players.")
    black: Optional[str] = Field(None, description="Username of the black player, None for anonymous or AI players.")
    game_id: Optional[str] = Field(None, description="Identifier of the game at the data source.")

class PlayerNode(BaseModel):
    """One step in a discovered path."""
    username: str = Field(..., description="The player's username.")
    rating: Optional[int] = Field(None, description="Classical rating; None marks an unrated player.")

    @property
    def rating_label(self) -> str:
        return str(self.rating) if self.rating is not None else UNRATED_LABEL

class SearchOutcome(BaseModel):
    """Summarizes the result of one path search."""
    status: SearchStatus = Field(..., description="How the search ended.")
    target_name: str = Field(..., description="Name of the target identity that was searched for.")
    max_depth: int = Field(..., description="Maximum search depth in effect.")
    path: Optional[List[PlayerNode]] = Field(None, description="Chain from the starting player to a target account.")
    reason: Optional[str] = Field(None, description="Human-readable explanation when no path was returned.")
    api_calls: int = Field(0, description="Number of data source requests made.")
    nodes_explored: int = Field(0, description="Number of players whose profile was requested.")
    computation_time_ms: float = Field(0.0, description="Wall-clock duration of the search in milliseconds.")

    @property
    def found(self) -> bool:
        return self.status == SearchStatus.FOUND and bool(self.path)

    @property
    def degree(self) -> Optional[int]:
        """Number of connections between the starting player and the target."""
        if not self.found:
            return None
        return len(self.path) - 1

    def headline(self) -> str:
        if not self.found:
            return self.reason or f"No path found to {self.target_name}"
        if self.degree == 0:
            return f"That's {self.target_name}!"
        return f"Your {self.target_name} Number: {self.degree}"
