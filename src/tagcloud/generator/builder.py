"""End-to-end tag cloud generation.

The builder runs the stages in order:

- count words in the input file
- select the top words
- scale their counts to font tiers
- render the HTML page and write it

The input is read completely before anything is written. The page is
written to a temporary file next to the destination and moved into place,
so a failed run never leaves a partial document behind.
"""

import logging
import os
import stat
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from .config import CloudConfig
from .counter import count_file
from .errors import InputOpenError, InvalidCountError, OutputOpenError
from .render import render_document
from .scale import compute_font_sizes
from .selector import Selection, select_top

logger = logging.getLogger(__name__)


def check_count(requested: int, available: int) -> int:
    """Validate a requested word count against the distinct words available.

    Args:
        requested: Number of words asked for.
        available: Number of distinct words in the input.

    Returns:
        The requested count.

    Raises:
        InvalidCountError: If requested is not an integer in ``[0, available]``.
    """
    if isinstance(requested, bool) or not isinstance(requested, int):
        raise InvalidCountError(f"Word count must be an integer, got {requested!r}")
    if requested < 0:
        raise InvalidCountError(f"Word count must be non-negative, got {requested}")
    if requested > available:
        raise InvalidCountError(
            f"Word count {requested} exceeds the {available} distinct words in the input"
        )
    return requested


@dataclass
class BuildResult:
    """Outcome of a tag cloud run."""

    input_path: Path
    output_path: Path | None
    total_words: int
    distinct_words: int
    selection: Selection
    font_sizes: dict[str, int] = field(default_factory=dict)
    written: bool = False


class CloudBuilder:
    """Generates a tag cloud page from a CloudConfig."""

    def __init__(self, config: CloudConfig, dry_run: bool = False) -> None:
        """Initialize builder.

        Args:
            config: Run configuration. ``input`` must be set before counting,
                ``output`` and ``count`` before building.
            dry_run: If True, compute everything but do not write the page.
        """
        self.config = config
        self.dry_run = dry_run
        self._counts: dict[str, int] | None = None

    @property
    def input_path(self) -> Path:
        if not self.config.input:
            raise InputOpenError("No input file given")
        return self.config.resolve_path(self.config.input)

    def load_counts(self) -> dict[str, int]:
        """Count the words of the input file, once per builder."""
        if self._counts is None:
            self._counts = count_file(self.input_path, encoding=self.config.encoding)
            logger.info(
                "Read %d words (%d distinct) from %s",
                sum(self._counts.values()),
                len(self._counts),
                self.input_path,
            )
        return self._counts

    def build(self) -> BuildResult:
        """Run all stages and write the page.

        Raises:
            TagCloudError: Subclass naming the stage that failed.
        """
        counts = self.load_counts()

        requested = self.config.count
        if requested is None:
            raise InvalidCountError("No word count given")
        if self.config.strict_count:
            check_count(requested, len(counts))

        selection = select_top(requested, counts)
        font_sizes = compute_font_sizes(selection)
        page = render_document(
            len(selection),
            str(self.config.input),
            selection.alphabetical,
            font_sizes,
            escape=self.config.escape_html,
        )

        result = BuildResult(
            input_path=self.input_path,
            output_path=None,
            total_words=sum(counts.values()),
            distinct_words=len(counts),
            selection=selection,
            font_sizes=font_sizes,
        )

        if self.config.output:
            result.output_path = self.config.resolve_path(self.config.output)

        if self.dry_run:
            logger.info("Dry run, not writing %s", result.output_path)
            return result
        if result.output_path is None:
            raise OutputOpenError("No output file given")

        write_page(result.output_path, page)
        result.written = True
        logger.info("Wrote %d words to %s", len(selection), result.output_path)
        return result


def _target_mode(path: Path) -> int:
    """Mode for the written page: that of the file it replaces, else per umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_page(path: Path, text: str) -> None:
    """Write text to path atomically.

    Raises:
        OutputOpenError: If the file cannot be created or written. No file
            is left at ``path`` or next to it in that case.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    except OSError as e:
        raise OutputOpenError(f"Cannot create output file {path}: {e}") from e

    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        tmp_path.chmod(_target_mode(path))
        os.replace(tmp_path, path)
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        raise OutputOpenError(f"Cannot write output file {path}: {e}") from e
