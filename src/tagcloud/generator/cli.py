#!/usr/bin/env python3
"""Tag cloud generator CLI."""

import argparse
import logging
import sys
from pathlib import Path

from .builder import BuildResult, CloudBuilder
from .config import CloudConfig, parse_key_value_args
from .errors import TagCloudError


def main() -> int:
    """Generate a tag cloud page."""
    parser = argparse.ArgumentParser(
        description="Generate an HTML tag cloud of the most frequent words in a text file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                   # Prompt for everything
  %(prog)s book.txt -o cloud.html -n 100     # Top 100 words of book.txt
  %(prog)s --config cloud.yml                # Settings from YAML
  %(prog)s --config cloud.yml --set count=20
  %(prog)s book.txt -n 50 --dry-run --top-preview 10
        """,
    )

    parser.add_argument("input", nargs="?", help="Path to input text file")
    parser.add_argument("-o", "--output", help="Path to output HTML file")
    parser.add_argument("-n", "--count", type=int, metavar="N", help="Number of words to show")
    parser.add_argument("--config", type=Path, help="Path to YAML config file")
    parser.add_argument(
        "--set",
        nargs="+",
        metavar="KEY=VALUE",
        help="Override config values (e.g., --set count=20 escape_html=false)",
    )
    parser.add_argument(
        "--no-escape",
        action="store_true",
        help="Write words into the page without HTML escaping",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject a count larger than the number of distinct words instead of clamping",
    )
    parser.add_argument("--dry-run", action="store_true", help="Compute the cloud without writing")
    parser.add_argument(
        "--top-preview",
        type=int,
        default=0,
        metavar="K",
        help="Print the K most frequent selected words",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Load config
    if args.config is not None:
        if not args.config.exists():
            print(f"Error: Config file not found: {args.config}", file=sys.stderr)
            return 1
        try:
            config = CloudConfig.from_yaml(args.config)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    else:
        config = CloudConfig()

    # Apply overrides
    try:
        if args.set:
            config.override(parse_key_value_args(args.set))
        if args.input:
            config.input = _cli_path(args.input, config)
        if args.output:
            config.output = _cli_path(args.output, config)
        if args.count is not None:
            config.count = args.count
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.no_escape:
        config.escape_html = False
    if args.strict:
        config.strict_count = True

    try:
        if not config.input:
            config.input = _cli_path(_prompt("Input File Location: "), config)
        builder = CloudBuilder(config, dry_run=args.dry_run)
        counts = builder.load_counts()

        if not config.output and not args.dry_run:
            config.output = _cli_path(_prompt("Output File Location: "), config)
        if config.count is None:
            config.count = prompt_count(len(counts))

        result = builder.build()
    except TagCloudError as e:
        print(f"Error ({e.stage}): {e}", file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        print("\nCancelled.", file=sys.stderr)
        return 1

    _report(result, args.dry_run, args.top_preview)
    return 0


def _cli_path(value: str, config: CloudConfig) -> str:
    """Anchor a path typed by the user to the working directory.

    Paths from a config file resolve against the file's directory, so a
    relative path given on the command line or at a prompt is made absolute
    when that directory is not the working directory.
    """
    path = Path(value).expanduser()
    if path.is_absolute() or config.base_dir == Path.cwd():
        return value
    return str(Path.cwd() / path)


def _prompt(message: str) -> str:
    """Ask for a non-empty line of input."""
    while True:
        response = input(message).strip()
        if response:
            return response


def prompt_count(available: int) -> int:
    """Ask for a word count until a valid one is entered.

    Args:
        available: Number of distinct words; the largest valid answer.

    Returns:
        An integer in ``[0, available]``.
    """
    while True:
        response = input("Number of Words: ").strip()
        try:
            value = int(response)
        except ValueError:
            print(f"Invalid number: {response!r}", file=sys.stderr)
            continue
        if 0 <= value <= available:
            return value
        print(f"Enter a number between 0 and {available}.", file=sys.stderr)


def _report(result: BuildResult, dry_run: bool, top_preview: int) -> None:
    """Print a summary of the run."""
    selected = len(result.selection)
    if dry_run:
        print(
            f"[DRY RUN] {selected} of {result.distinct_words} distinct words"
            f" from {result.input_path}"
        )
    else:
        print(f"[SUCCESS] {selected} words -> {result.output_path}")

    for entry in result.selection.by_count[:top_preview]:
        print(f"  {entry.word}: {entry.count} (f{result.font_sizes[entry.word]})")


if __name__ == "__main__":
    sys.exit(main())
