"""HTML output for the tag cloud page."""

import html
from collections.abc import Iterable, Mapping

from .counter import WordCount

REMOTE_STYLESHEET = (
    "http://web.cse.ohio-state.edu/software/2231/web-sw2/"
    "assignments/projects/tag-cloud-generator/data/tagcloud.css"
)
LOCAL_STYLESHEET = "tagcloud.css"


def _text(value: str, escape: bool) -> str:
    return html.escape(value, quote=True) if escape else value


def render_head(count: int, source_label: str, escape: bool = True) -> str:
    """Render the opening ``<html>`` tag and the ``<head>`` section.

    Args:
        count: Number of words shown, used in the title.
        source_label: Name of the input, used in the title.
        escape: HTML-escape the source label.

    Returns:
        Head markup, one tag per line.
    """
    title = f"Top {count} words in {_text(source_label, escape)}"
    lines = [
        "<html>",
        "<head>",
        f"<title>{title}</title>",
        f'<link href="{REMOTE_STYLESHEET}" rel="stylesheet" type="text/css">',
        f'<link href="{LOCAL_STYLESHEET}" rel="stylesheet" type="text/css">',
        "</head>",
    ]
    return "\n".join(lines) + "\n"


def render_body(
    count: int,
    source_label: str,
    alphabetical: Iterable[WordCount],
    font_sizes: Mapping[str, int],
    escape: bool = True,
) -> str:
    """Render the ``<body>`` section and close the document.

    Args:
        count: Number of words shown, used in the heading.
        source_label: Name of the input, used in the heading.
        alphabetical: Selected words in display order.
        font_sizes: Font tier for every selected word.
        escape: HTML-escape word text and the source label. With ``False``
            words are written verbatim.

    Returns:
        Body markup, one tag per line.
    """
    lines = [
        "<body>",
        f"<h2>Top {count} words in {_text(source_label, escape)}</h2>",
        "<hr>",
        '<div class="cdiv">',
        '<p class="cbox">',
    ]
    for entry in alphabetical:
        lines.append(
            f'<span style="cursor:default" class="f{font_sizes[entry.word]}"'
            f' title="count: {entry.count}">{_text(entry.word, escape)}</span>'
        )
    lines.extend(["</p>", "</div>", "</body>", "</html>"])
    return "\n".join(lines) + "\n"


def render_document(
    count: int,
    source_label: str,
    alphabetical: Iterable[WordCount],
    font_sizes: Mapping[str, int],
    escape: bool = True,
) -> str:
    """Render the complete tag cloud page."""
    return render_head(count, source_label, escape=escape) + render_body(
        count, source_label, alphabetical, font_sizes, escape=escape
    )
