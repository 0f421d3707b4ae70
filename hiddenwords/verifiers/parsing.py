"""Grid loading utilities."""

from pathlib import Path
from typing import Iterable, Iterator, Union

from .models import Grid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def split_lines(data: bytes) -> Iterator[bytes]:
    """
    Split raw file content into lines.

    Lines end at '\\n' with an optional '\\r' before it. A trailing newline
    does not produce an extra empty line. A last line with no '\\n' is kept
    as-is, including any '\\r' at its end.
    """
    if not data:
        return
    pieces = data.split(b'\n')
    last = pieces.pop()
    for piece in pieces:
        if piece.endswith(b'\r'):
            piece = piece[:-1]
        yield piece
    if last:
        yield last


def read_grid_lines(lines: Iterable[Union[str, bytes]]) -> Grid:
    """
    Convert lines of text into a grid of characters.

    Each line becomes one row, character for character: no trimming and no
    case normalization. Byte lines that are not valid UTF-8 are skipped.
    """
    grid: Grid = []

    for i, line in enumerate(lines):
        if isinstance(line, bytes):
            try:
                line = line.decode('utf-8')
            except UnicodeDecodeError as e:
                LOGGER.warning("Skipping undecodable line %d: %s", i, e)
                continue
        grid.append(list(line))

    return grid


def load_grid(path: Union[str, Path]) -> Grid:
    """Read the grid from a file. Raises OSError if it cannot be read."""
    path = Path(path)
    grid = read_grid_lines(split_lines(path.read_bytes()))
    LOGGER.debug("Loaded %d rows from %s", len(grid), path)
    return grid
