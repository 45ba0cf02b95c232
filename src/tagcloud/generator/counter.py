"""Word frequency counting."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .errors import InputOpenError, ReadError
from .tokenizer import is_separator, iter_tokens

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordCount:
    """A lowercase word and the number of times it occurred."""

    word: str
    count: int


def count_lines(lines: Iterable[str], counts: dict[str, int] | None = None) -> dict[str, int]:
    """Count case-insensitive word occurrences across lines of text.

    Separator runs are skipped. If ``counts`` is given it is updated in place,
    so a caller keeps whatever was accumulated if iterating ``lines`` fails.

    Args:
        lines: Lines (or any chunks that do not split words) of text.
        counts: Existing mapping to add to.

    Returns:
        Mapping of lowercase word to occurrence count.
    """
    if counts is None:
        counts = {}
    for line in lines:
        for token in iter_tokens(line):
            if is_separator(token[0]):
                continue
            word = token.lower()
            counts[word] = counts.get(word, 0) + 1
    return counts


def count_file(
    path: Path,
    encoding: str = "utf-8",
    counts: dict[str, int] | None = None,
) -> dict[str, int]:
    """Count words in a text file, reading it line by line.

    Args:
        path: Text file to read.
        encoding: Text encoding of the file.
        counts: Existing mapping to add to; left partially filled on a read fault.

    Returns:
        Mapping of lowercase word to occurrence count.

    Raises:
        InputOpenError: If the file cannot be opened.
        ReadError: If reading or decoding fails part way through.
    """
    if counts is None:
        counts = {}

    try:
        f = open(path, encoding=encoding)
    except (OSError, LookupError) as e:
        raise InputOpenError(f"Cannot open input file {path}: {e}") from e

    with f:
        try:
            count_lines(f, counts)
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(f"Failed reading input file {path}: {e}") from e

    logger.debug(
        "Counted %d words (%d distinct) in %s", sum(counts.values()), len(counts), path
    )
    return counts
