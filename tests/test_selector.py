"""Tests for tagcloud.generator.selector module."""

import random

import pytest

from tagcloud.generator.counter import WordCount
from tagcloud.generator.errors import InvalidCountError
from tagcloud.generator.selector import Selection, select_top


@pytest.fixture
def counts() -> dict[str, int]:
    """Frequency mapping of 'the cat sat on the mat. The cat ran.'"""
    return {"the": 3, "cat": 2, "sat": 1, "on": 1, "mat": 1, "ran": 1}


class TestSelectTop:
    """Tests for select_top function."""

    def test_top_three_breaks_ties_alphabetically(self, counts: dict[str, int]) -> None:
        """Test that the third word is the alphabetically first count-1 word."""
        selection = select_top(3, counts)
        assert selection.by_count == (
            WordCount("the", 3),
            WordCount("cat", 2),
            WordCount("mat", 1),
        )

    def test_alphabetical_view(self, counts: dict[str, int]) -> None:
        """Test that the alphabetical view holds the same entries sorted by word."""
        selection = select_top(3, counts)
        assert [e.word for e in selection.alphabetical] == ["cat", "mat", "the"]
        assert set(selection.alphabetical) == set(selection.by_count)

    def test_full_order_of_ties(self, counts: dict[str, int]) -> None:
        """Test the total order over all entries."""
        selection = select_top(6, counts)
        assert [e.word for e in selection.by_count] == ["the", "cat", "mat", "on", "ran", "sat"]

    def test_independent_of_insertion_order(self, counts: dict[str, int]) -> None:
        """Test that equivalent mappings built in different orders select the same words."""
        items = list(counts.items())
        expected = select_top(4, counts)
        rng = random.Random(7)
        for _ in range(10):
            rng.shuffle(items)
            assert select_top(4, dict(items)) == expected

    def test_n_larger_than_distinct_words_is_clamped(self, counts: dict[str, int]) -> None:
        """Test that asking for too many words returns each word once."""
        selection = select_top(100, counts)
        assert len(selection) == 6
        assert len({e.word for e in selection}) == 6

    def test_zero_selects_nothing(self, counts: dict[str, int]) -> None:
        """Test that n=0 gives an empty selection."""
        selection = select_top(0, counts)
        assert len(selection) == 0
        assert selection.alphabetical == ()

    def test_empty_mapping(self) -> None:
        """Test selecting from no words."""
        selection = select_top(5, {})
        assert selection == Selection(by_count=(), alphabetical=())

    def test_negative_n_raises(self, counts: dict[str, int]) -> None:
        """Test that a negative count is rejected."""
        with pytest.raises(InvalidCountError, match="non-negative"):
            select_top(-1, counts)

    def test_non_integer_n_raises(self, counts: dict[str, int]) -> None:
        """Test that a non-integer count is rejected."""
        with pytest.raises(InvalidCountError, match="integer"):
            select_top(2.5, counts)  # type: ignore[arg-type]
        with pytest.raises(InvalidCountError):
            select_top(True, counts)

    def test_case_insensitive_tie_break(self) -> None:
        """Test that ties compare words ignoring case."""
        selection = select_top(3, {"Beta": 1, "alpha": 1, "gamma": 1})
        assert [e.word for e in selection.by_count] == ["alpha", "Beta", "gamma"]


class TestSelection:
    """Tests for Selection dataclass."""

    def test_min_and_max_count(self, counts: dict[str, int]) -> None:
        """Test the count bounds of a selection."""
        selection = select_top(3, counts)
        assert selection.max_count == 3
        assert selection.min_count == 1

    def test_empty_bounds(self) -> None:
        """Test count bounds of an empty selection."""
        selection = select_top(0, {"a": 1})
        assert selection.max_count == 0
        assert selection.min_count == 0

    def test_iterates_in_count_order(self, counts: dict[str, int]) -> None:
        """Test that iterating a selection follows the count order."""
        selection = select_top(2, counts)
        assert [e.word for e in selection] == ["the", "cat"]
