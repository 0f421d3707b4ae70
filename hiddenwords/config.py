"""Run configuration for hidden-words."""

from typing import List, Literal
from pydantic import BaseModel, Field, field_validator


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_LEVELS: List[str] = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_WORDS: List[str] = [
    "HELLO",
    "WORLD",
    "FIND",
    "HORIZONTAL",
    "VERTICAL",
    "DIAGONAL",
    "GOLDORAK",
]


class SearchConfig(BaseModel):
    """Configuration for a search run."""
    grid_path: str = "data/grid.txt"
    words: List[str] = Field(default_factory=lambda: list(DEFAULT_WORDS))
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value
