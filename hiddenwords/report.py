"""Plain-text rendering of grids, validation findings and search results."""

import sys
from typing import List, Optional, Sequence, TextIO

from .search.models import MatchResult, Position
from .verifiers.models import ValidationResult


def format_grid(grid: Sequence[Sequence[str]]) -> str:
    """Render the grid with each character followed by a space, one row per line."""
    return "".join("".join(f"{ch} " for ch in row) + "\n" for row in grid)


def format_position(position: Position) -> str:
    return f"({position.row}, {position.col})"


def format_match(result: MatchResult) -> str:
    """Render one search result."""
    if result.found and result.start is not None and result.end is not None:
        return (
            f"Word '{result.word}' found from "
            f"{format_position(result.start)} to {format_position(result.end)}"
        )
    return f"Word '{result.word}' not found"


def format_results(results: Sequence[MatchResult]) -> str:
    """Render search results in the order the words were supplied."""
    return "\n".join(format_match(r) for r in results)


def format_validation(result: ValidationResult) -> List[str]:
    """Render validation warnings, then errors, one line each."""
    lines = [f"Warning: {w.message}" for w in result.warnings]
    lines.extend(f"Error: {e.message}" for e in result.errors)
    return lines


def print_grid(grid: Sequence[Sequence[str]], stream: Optional[TextIO] = None) -> None:
    print(format_grid(grid), file=stream or sys.stdout)


def print_results(results: Sequence[MatchResult], stream: Optional[TextIO] = None) -> None:
    if results:
        print(format_results(results), file=stream or sys.stdout)
