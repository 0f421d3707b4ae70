"""Eight-direction word search for hidden-words."""

from .models import Position, Direction, MatchResult
from .searcher import DIRECTIONS, match_at, search_word, search_all_words

__all__ = [
    "Position",
    "Direction",
    "MatchResult",
    "DIRECTIONS",
    "match_at",
    "search_word",
    "search_all_words",
]
