from typing import List
from pydantic import BaseModel, Field, field_validator

from chess_path.config import DEFAULT_TARGET_NAME


class PathRequest(BaseModel):
    """Request model for finding a path to a target identity."""
    username: str = Field(..., min_length=1, description="Lichess username to start from")
    target: str = Field(DEFAULT_TARGET_NAME, min_length=1, description="Name of the target identity")

    @field_validator("username")
    @classmethod
    def username_must_be_non_blank(cls, v: str):
        if not v.strip():
            raise ValueError("Username must be non-empty")
        return v.strip()


class TargetInfo(BaseModel):
    """Public description of a configured target identity."""
    name: str
    accounts: List[str]
    description: str
