"""
Pydantic models for the search layer.

Positions and directions are plain NamedTuples so they compare and print like
coordinate pairs; MatchResult is what the searcher hands to the reporter.
"""

from typing import NamedTuple, Optional
from pydantic import BaseModel


class Position(NamedTuple):
    """Zero-based grid coordinates."""
    row: int
    col: int


class Direction(NamedTuple):
    """A unit step across the grid."""
    name: str
    d_row: int
    d_col: int


class MatchResult(BaseModel):
    """Outcome of searching the grid for one word."""
    word: str
    found: bool = False
    start: Optional[Position] = None
    end: Optional[Position] = None
    direction: Optional[str] = None

    @classmethod
    def not_found(cls, word: str) -> "MatchResult":
        return cls(word=word)
