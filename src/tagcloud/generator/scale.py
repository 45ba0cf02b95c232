"""Mapping word counts to font-size tiers."""

from collections.abc import Iterable

from .counter import WordCount
from .selector import Selection

MIN_FONT = 11
MAX_FONT = 48
# Used when every selected word has the same count
DEFAULT_FONT = 20


def compute_font_sizes(selected: Iterable[WordCount]) -> dict[str, int]:
    """Assign each selected word a font tier scaled linearly by its count.

    The least frequent selected word gets ``MIN_FONT`` and the most frequent
    ``MAX_FONT``, truncating in between. If all counts are equal every word
    gets ``DEFAULT_FONT``.

    Args:
        selected: Selected word counts.

    Returns:
        Mapping of word to font tier.
    """
    entries = list(selected)
    if not entries:
        return {}

    if isinstance(selected, Selection):
        most, least = selected.max_count, selected.min_count
    else:
        most = max(entry.count for entry in entries)
        least = min(entry.count for entry in entries)
    if most == least:
        return {entry.word: DEFAULT_FONT for entry in entries}

    span = MAX_FONT - MIN_FONT
    return {
        entry.word: MIN_FONT + span * (entry.count - least) // (most - least)
        for entry in entries
    }
