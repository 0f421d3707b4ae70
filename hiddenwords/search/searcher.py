"""
Word search over a validated grid.

Every cell is tried as a start position, in row-major order, and from each
cell every direction in DIRECTIONS order. The first full match wins.
"""

from typing import List, Optional, Sequence, Tuple

from .models import Direction, MatchResult, Position


# Scan order matters: it decides which occurrence is reported
DIRECTIONS: Tuple[Direction, ...] = (
    Direction("right", 0, 1),
    Direction("down", 1, 0),
    Direction("left", 0, -1),
    Direction("up", -1, 0),
    Direction("down-right", 1, 1),
    Direction("down-left", 1, -1),
    Direction("up-right", -1, 1),
    Direction("up-left", -1, -1),
)


def match_at(
    grid: Sequence[Sequence[str]],
    word: str,
    start: Position,
    direction: Direction
) -> Optional[Position]:
    """
    Try to read `word` from `start` stepping along `direction`.

    Returns the position of the last matched character, or None if the walk
    leaves the grid or hits a different character. Comparison is case-sensitive.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    end = start

    for k, ch in enumerate(word):
        row = start.row + k * direction.d_row
        col = start.col + k * direction.d_col

        if row < 0 or col < 0 or row >= rows or col >= cols:
            return None

        if grid[row][col] != ch:
            return None

        end = Position(row, col)

    return end


def search_word(grid: Sequence[Sequence[str]], word: str) -> MatchResult:
    """Find the first occurrence of `word` in the grid."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0

    for i in range(rows):
        for j in range(cols):
            start = Position(i, j)
            for direction in DIRECTIONS:
                end = match_at(grid, word, start, direction)
                if end is not None:
                    return MatchResult(
                        word=word,
                        found=True,
                        start=start,
                        end=end,
                        direction=direction.name,
                    )

    return MatchResult.not_found(word)


def search_all_words(grid: Sequence[Sequence[str]], words: Sequence[str]) -> List[MatchResult]:
    """Search for each word independently, keeping the order of `words`."""
    return [search_word(grid, word) for word in words]
