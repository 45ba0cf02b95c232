"""Tag cloud generation from word frequencies."""

from .builder import BuildResult, CloudBuilder, check_count, write_page
from .cli import main
from .config import CloudConfig, parse_key_value_args
from .counter import WordCount, count_file, count_lines
from .errors import (
    InputOpenError,
    InvalidCountError,
    OutputOpenError,
    ReadError,
    TagCloudError,
)
from .render import (
    LOCAL_STYLESHEET,
    REMOTE_STYLESHEET,
    render_body,
    render_document,
    render_head,
)
from .scale import DEFAULT_FONT, MAX_FONT, MIN_FONT, compute_font_sizes
from .selector import Selection, select_top
from .tokenizer import SEPARATORS, is_separator, iter_tokens, next_token

__all__ = [
    "CloudBuilder",
    "BuildResult",
    "check_count",
    "write_page",
    "main",
    "CloudConfig",
    "parse_key_value_args",
    "WordCount",
    "count_file",
    "count_lines",
    "TagCloudError",
    "InputOpenError",
    "ReadError",
    "OutputOpenError",
    "InvalidCountError",
    "render_head",
    "render_body",
    "render_document",
    "REMOTE_STYLESHEET",
    "LOCAL_STYLESHEET",
    "compute_font_sizes",
    "MIN_FONT",
    "MAX_FONT",
    "DEFAULT_FONT",
    "Selection",
    "select_top",
    "SEPARATORS",
    "is_separator",
    "iter_tokens",
    "next_token",
]
