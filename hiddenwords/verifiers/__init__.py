"""Grid and word list verification for hidden-words."""

from .verify import verify, validate_grid, validate_word_list, is_alphabetic, grid_dimensions
from .models import Grid, ValidationError, ValidationResult
from .parsing import load_grid, read_grid_lines, split_lines

__all__ = [
    # Main verification
    "verify",
    "validate_grid",
    "validate_word_list",
    "is_alphabetic",
    "grid_dimensions",
    # Models
    "Grid",
    "ValidationError",
    "ValidationResult",
    # Loading
    "load_grid",
    "read_grid_lines",
    "split_lines",
]
