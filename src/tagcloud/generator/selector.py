"""Selecting the most frequent words."""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from .counter import WordCount
from .errors import InvalidCountError

logger = logging.getLogger(__name__)


def _by_count_key(entry: WordCount) -> tuple[int, str, str]:
    return (-entry.count, entry.word.casefold(), entry.word)


def _alphabetical_key(entry: WordCount) -> tuple[str, str]:
    return (entry.word.casefold(), entry.word)


@dataclass(frozen=True)
class Selection:
    """The top words of a frequency mapping, in two orders.

    Attributes:
        by_count: Selected entries, highest count first, ties alphabetical.
        alphabetical: The same entries ordered alphabetically for display.
    """

    by_count: tuple[WordCount, ...]
    alphabetical: tuple[WordCount, ...]

    def __len__(self) -> int:
        return len(self.by_count)

    def __iter__(self) -> Iterator[WordCount]:
        return iter(self.by_count)

    @property
    def max_count(self) -> int:
        """Highest count in the selection (0 if empty)."""
        return self.by_count[0].count if self.by_count else 0

    @property
    def min_count(self) -> int:
        """Lowest count in the selection (0 if empty)."""
        return self.by_count[-1].count if self.by_count else 0


def select_top(n: int, counts: Mapping[str, int]) -> Selection:
    """Select the ``n`` most frequent words.

    Ordering is by count descending, then word ascending case-insensitively,
    so the result does not depend on the mapping's iteration order. ``n`` is
    clamped to the number of distinct words.

    Args:
        n: Number of words to select, ``n >= 0``.
        counts: Mapping of word to count.

    Returns:
        Selection holding both the count-ordered and alphabetical views.

    Raises:
        InvalidCountError: If ``n`` is negative or not an integer.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidCountError(f"Word count must be an integer, got {n!r}")
    if n < 0:
        raise InvalidCountError(f"Word count must be non-negative, got {n}")

    entries = sorted((WordCount(word, count) for word, count in counts.items()), key=_by_count_key)
    top = tuple(entries[:n])
    if n > len(entries):
        logger.info("Requested %d words but only %d distinct words exist", n, len(entries))

    return Selection(by_count=top, alphabetical=tuple(sorted(top, key=_alphabetical_key)))
