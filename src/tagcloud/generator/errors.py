"""Errors raised while generating a tag cloud."""


class TagCloudError(Exception):
    """Base error for a failed run.

    Attributes:
        stage: Short name of the stage that failed (e.g. "open input").
    """

    stage = "generate"


class InputOpenError(TagCloudError):
    """Input file is missing or cannot be opened."""

    stage = "open input"


class ReadError(TagCloudError):
    """Input file failed while being read."""

    stage = "read input"


class OutputOpenError(TagCloudError):
    """Output file cannot be created or written."""

    stage = "write output"


class InvalidCountError(TagCloudError):
    """Requested word count is not a usable non-negative integer."""

    stage = "count"
