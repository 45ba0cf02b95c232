"""Splitting text into words and separator runs."""

from collections.abc import Iterator

# Characters that delimit words
SEPARATORS = frozenset(" \t\n\r,-.!?[]';:/()`*\"")


def is_separator(char: str) -> bool:
    """Check if a single character is a word separator."""
    return char in SEPARATORS


def next_token(text: str, position: int) -> str:
    """Return the word or separator run starting at ``position``.

    The run is the longest slice of ``text`` beginning at ``position`` whose
    characters are all separators or all non-separators, matching the kind
    of ``text[position]``.

    Args:
        text: Text to read from.
        position: Start index, ``0 <= position < len(text)``.

    Returns:
        The token found at ``position``.

    Raises:
        ValueError: If position is outside the text.
    """
    if not 0 <= position < len(text):
        raise ValueError(f"Position {position} out of range for text of length {len(text)}")

    separator_run = is_separator(text[position])
    end = position + 1
    while end < len(text) and is_separator(text[end]) == separator_run:
        end += 1
    return text[position:end]


def iter_tokens(text: str) -> Iterator[str]:
    """Yield consecutive tokens partitioning ``text`` with no gaps or overlaps."""
    position = 0
    while position < len(text):
        token = next_token(text, position)
        position += len(token)
        yield token
