"""Data models for grid and word list verification."""

from typing import List, Optional
from pydantic import BaseModel, Field


# Rows of single-character strings
Grid = List[List[str]]


class ValidationError(BaseModel):
    """A single validation finding (error or warning)."""
    code: str
    message: str
    row: Optional[int] = None
    col: Optional[int] = None
    word: Optional[str] = None


class ValidationResult(BaseModel):
    """Result of grid and word list validation."""
    valid: bool
    errors: List[ValidationError] = Field(default_factory=list)
    warnings: List[ValidationError] = Field(default_factory=list)
    grid_valid: bool = False
    rows: int = 0
    cols: int = 0
