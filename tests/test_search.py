"""Test suite for the eight-direction word search."""

import pytest

from hiddenwords.search import (
    DIRECTIONS,
    Direction,
    MatchResult,
    Position,
    match_at,
    search_word,
    search_all_words,
)


def make_grid(*rows):
    return [list(row) for row in rows]


ALPHABET = make_grid("ABCD", "EFGH", "IJKL", "MNOP")


class TestDirections:
    """Test the fixed scan order."""

    def test_scan_order(self):
        """Directions are tried right, down, left, up, then the diagonals."""
        assert [(d.d_row, d.d_col) for d in DIRECTIONS] == [
            (0, 1), (1, 0), (0, -1), (-1, 0),
            (1, 1), (1, -1), (-1, 1), (-1, -1),
        ]
        assert DIRECTIONS[0].name == "right"
        assert DIRECTIONS[-1].name == "up-left"


class TestSearchWord:
    """Test finding a single word."""

    def test_hello_left_to_right(self):
        """HELLO is found on row 0, not confused with OLLEH on row 1."""
        result = search_word(make_grid("HELLO", "OLLEH"), "HELLO")
        assert result.found is True
        assert result.start == Position(0, 0)
        assert result.end == Position(0, 4)
        assert result.direction == "right"

    def test_reversed_word_found_on_first_row(self):
        """OLLEH reads right-to-left on row 0 before row 1 is reached."""
        result = search_word(make_grid("HELLO", "OLLEH"), "OLLEH")
        assert result.start == (0, 4)
        assert result.end == (0, 0)
        assert result.direction == "left"

    @pytest.mark.parametrize("word,start,end,direction", [
        ("AFKP", (0, 0), (3, 3), "down-right"),
        ("PKFA", (3, 3), (0, 0), "up-left"),
        ("DGJM", (0, 3), (3, 0), "down-left"),
        ("MJGD", (3, 0), (0, 3), "up-right"),
        ("AEIM", (0, 0), (3, 0), "down"),
        ("MIEA", (3, 0), (0, 0), "up"),
        ("LKJ", (2, 3), (2, 1), "left"),
        ("FG", (1, 1), (1, 2), "right"),
    ])
    def test_all_directions(self, word, start, end, direction):
        """Each direction is searched."""
        result = search_word(ALPHABET, word)
        assert result.found is True
        assert result.start == start
        assert result.end == end
        assert result.direction == direction

    def test_not_found(self):
        """A letter absent from the grid is not found."""
        result = search_word(make_grid("AAAA", "AAAA"), "B")
        assert result == MatchResult.not_found("B")
        assert result.found is False
        assert result.start is None
        assert result.end is None

    def test_single_character_at_origin(self):
        """A one-letter word matches its own cell."""
        result = search_word(make_grid("AAAA", "AAAA"), "A")
        assert result.start == (0, 0)
        assert result.end == (0, 0)
        assert result.direction == "right"

    def test_single_character_elsewhere(self):
        """A one-letter word starts and ends at the same cell."""
        result = search_word(ALPHABET, "G")
        assert result.start == result.end == (1, 2)

    def test_empty_word(self):
        """The empty word trivially matches at (0, 0)."""
        result = search_word(ALPHABET, "")
        assert result.found is True
        assert result.start == (0, 0)
        assert result.end == (0, 0)

    def test_empty_grid(self):
        """An empty grid finds nothing and does not raise."""
        assert search_word([], "A").found is False
        assert search_word([[]], "A").found is False

    def test_case_sensitive(self):
        """Characters are compared exactly."""
        assert search_word(make_grid("HELLO"), "hello").found is False

    def test_first_match_prefers_earlier_direction(self):
        """At the same start cell, down is tried before left."""
        result = search_word(make_grid("AB", "BA"), "BA")
        assert result.start == (0, 1)
        assert result.end == (1, 1)
        assert result.direction == "down"

    def test_first_match_prefers_earlier_cell(self):
        """Earlier rows win over later rows."""
        result = search_word(make_grid("XYZ", "ABC", "ABC"), "ABC")
        assert result.start == (1, 0)


class TestBoundaries:
    """Test words at the edges of the grid."""

    def test_word_as_long_as_row(self):
        """A word spanning the full width is found."""
        result = search_word(ALPHABET, "ABCD")
        assert result.start == (0, 0)
        assert result.end == (0, 3)

    def test_word_as_long_as_column(self):
        """A word spanning the full height of a wide grid is found."""
        result = search_word(make_grid("ABCDE", "FGHIJ"), "EJ")
        assert result.start == (0, 4)
        assert result.end == (1, 4)

    def test_word_one_longer_than_grid(self):
        """A word longer than any dimension is not found and does not raise."""
        assert search_word(ALPHABET, "ABCDE").found is False
        assert search_word(make_grid("ABCDE", "FGHIJ"), "ABCDEF").found is False

    def test_match_at_out_of_bounds(self):
        """Walking off the grid aborts the candidate."""
        right = Direction("right", 0, 1)
        assert match_at(ALPHABET, "CDX", Position(0, 2), right) is None
        assert match_at(ALPHABET, "CD", Position(0, 2), right) == Position(0, 3)

    def test_match_at_negative_index(self):
        """Negative coordinates never wrap around."""
        up = Direction("up", -1, 0)
        assert match_at(ALPHABET, "AM", Position(0, 0), up) is None


class TestSearchAllWords:
    """Test searching for a list of words."""

    def test_order_preserved(self):
        """Results follow the order of the word list."""
        results = search_all_words(make_grid("HELLO", "OLLEH"), ["OLLEH", "XYZ", "HELLO"])
        assert [r.word for r in results] == ["OLLEH", "XYZ", "HELLO"]
        assert [r.found for r in results] == [True, False, True]

    def test_independent_results(self):
        """Duplicate words get identical, independent results."""
        results = search_all_words(ALPHABET, ["AFKP", "AFKP"])
        assert results[0] == results[1]

    def test_idempotent(self):
        """Repeated searches give the same result."""
        first = search_word(ALPHABET, "DGJM")
        second = search_word(ALPHABET, "DGJM")
        assert first == second

    def test_empty_word_list(self):
        assert search_all_words(ALPHABET, []) == []
