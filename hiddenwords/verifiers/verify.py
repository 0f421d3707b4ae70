"""
Grid and word list verification.

Validates:
1. Grid structure (non-empty, non-empty first row, rectangular)
2. Grid content (every character alphabetic)
3. Word list content (every word alphabetic)
4. Word lengths against the grid's larger dimension (warning only)

Each check stops at its first failure. Findings are returned as data, never raised.
"""

from typing import List, Sequence, Tuple

from .models import ValidationError, ValidationResult
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def is_alphabetic(text: str) -> bool:
    """True if every character is alphabetic. The empty string qualifies."""
    return all(ch.isalpha() for ch in text)


def grid_dimensions(grid: Sequence[Sequence[str]]) -> Tuple[int, int]:
    """Return (rows, cols), taking the column count from the first row."""
    if not grid:
        return 0, 0
    return len(grid), len(grid[0])


def validate_grid(grid: Sequence[Sequence[str]]) -> List[ValidationError]:
    """Validate grid shape and content."""
    if not grid:
        return [ValidationError(code="EMPTY_GRID", message="Grid is empty.")]

    row_length = len(grid[0])

    if row_length == 0:
        return [ValidationError(code="EMPTY_ROW", message="Grid has an empty row.", row=0)]

    # Rectangular: every row as long as the first
    for i, row in enumerate(grid):
        if len(row) != row_length:
            return [ValidationError(
                code="INCONSISTENT_ROW_LENGTH",
                message=(
                    f"Row {i} has inconsistent length "
                    f"(expected {row_length}, found {len(row)})."
                ),
                row=i
            )]

    for i, row in enumerate(grid):
        for j, ch in enumerate(row):
            if not ch.isalpha():
                return [ValidationError(
                    code="NON_ALPHABETIC",
                    message=f"Grid contains a non-alphabetic character '{ch}'.",
                    row=i,
                    col=j
                )]

    return []


def validate_word_list(
    words: Sequence[str],
    grid: Sequence[Sequence[str]]
) -> Tuple[List[ValidationError], List[ValidationError]]:
    """
    Validate the word list against the grid.

    Returns a tuple of (errors, warnings). A word longer than the grid's
    larger dimension can never be found, but only produces a warning.
    """
    errors: List[ValidationError] = []
    warnings: List[ValidationError] = []

    max_grid_len = max(grid_dimensions(grid))

    for word in words:
        if not is_alphabetic(word):
            errors.append(ValidationError(
                code="INVALID_WORD",
                message=f"Word '{word}' contains invalid characters.",
                word=word
            ))
            break

        if len(word) > max_grid_len:
            LOGGER.debug("'%s' (%d) exceeds max dimension %d", word, len(word), max_grid_len)
            warnings.append(ValidationError(
                code="WORD_TOO_LONG",
                message=f"Word '{word}' is longer than the grid's max dimension ({max_grid_len}).",
                word=word
            ))

    return errors, warnings


def verify(grid: Sequence[Sequence[str]], words: Sequence[str]) -> ValidationResult:
    """
    Main verification function: validates a grid and the words to search for.

    Returns a ValidationResult with:
    - valid: True if both the grid and the word list pass
    - errors: Grid errors, or word list errors when the grid is valid
    - warnings: Advisory findings (words too long to ever be found)
    - grid_valid: True if the grid passed, so the word list was checked
    - rows, cols: Grid dimensions
    """
    rows, cols = grid_dimensions(grid)

    grid_errors = validate_grid(grid)
    if grid_errors:
        return ValidationResult(valid=False, errors=grid_errors, rows=rows, cols=cols)

    word_errors, word_warnings = validate_word_list(words, grid)

    return ValidationResult(
        valid=len(word_errors) == 0,
        errors=word_errors,
        warnings=word_warnings,
        grid_valid=True,
        rows=rows,
        cols=cols,
    )
