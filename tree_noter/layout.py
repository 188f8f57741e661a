"""
Layout engine for tree-noter.

The functions here compute the shared alignment width, wrap comments
and render split lines in either aligned or decorator style. They
operate purely on domain models and the Config; writing the result is
left to the pipeline.
"""

from __future__ import annotations

import textwrap
from typing import List, Sequence

from .config import Config
from .domain import SplitLine

# Minimum distance between the widest tree line and the comment column.
ALIGNMENT_MARGIN = 3

# Two separating spaces around the decorator plus one column of margin.
DECORATOR_RESERVED = 3

DECORATOR_FALLBACK = "-"


def compute_alignment_width(lines: Sequence[SplitLine], gap: int) -> int:
    """
    Return the column at which aligned comments start.

    Every non-blank line contributes its tree content length, including
    lines without a comment marker (their whole text counts).
    """

    widest = 0
    for line in lines:
        if line.is_blank:
            continue
        widest = max(widest, len(line.tree_content))
    return max(gap, widest + ALIGNMENT_MARGIN)


def comment_max_width(max_width: int, alignment_width: int) -> int:
    """
    Return the wrap limit for comment fragments, clamped at zero.
    """

    return max(0, max_width - alignment_width - 1)


def wrap_comment(comment: str, max_line_length: int, enabled: bool) -> List[str]:
    """
    Greedily pack the words of comment into lines of max_line_length.

    Wrapping is opt-in: when disabled, or for an empty comment, the
    comment is returned unchanged as the only fragment. Words are never
    split, so a word longer than the limit gets a line of its own.
    """

    if not enabled or not comment:
        return [comment]

    words = comment.split()
    if not words:
        return [""]

    # textwrap rejects widths below 1; at 1 every word already gets its own line.
    return textwrap.wrap(
        " ".join(words),
        width=max(max_line_length, 1),
        break_long_words=False,
        break_on_hyphens=False,
    )


def build_decorator(pattern: str, width: int) -> str:
    """
    Repeat pattern and truncate it to exactly width characters.

    A non-positive width (or an empty pattern) yields the one-character
    fallback, so the decorator is never empty.
    """

    if width <= 0 or not pattern:
        return DECORATOR_FALLBACK

    repeats = -(-width // len(pattern))
    return (pattern * repeats)[:width]


def render_aligned(
    line: SplitLine,
    fragments: Sequence[str],
    alignment_width: int,
    config: Config,
) -> List[str]:
    """
    Render a line with its comment starting at alignment_width.

    line must carry a comment. Continuation fragments are indented to
    the comment column plus config.wrap_indent.
    """

    padding = " " * max(0, alignment_width - len(line.tree_content))
    rendered = [f"{line.tree_content}{padding}{fragments[0]}"]

    indent = " " * alignment_width + " " * config.wrap_indent
    for fragment in fragments[1:]:
        rendered.append(f"{indent}{fragment}")
    return rendered


def render_decorated(
    line: SplitLine,
    fragments: Sequence[str],
    config: Config,
) -> List[str]:
    """
    Render a line as `tree <decorator> comment`.

    The decorator fills the space left by config.max_width after the
    tree content, the first comment fragment and the reserved columns.
    line must carry a comment.
    """

    first = fragments[0]
    available = config.max_width - len(line.tree_content) - len(first) - DECORATOR_RESERVED
    decorator = build_decorator(config.separator, available)
    rendered = [f"{line.tree_content} {decorator} {first}"]

    if len(fragments) > 1:
        base_indent = " " * len(line.tree_content)
        comment_indent = " " * (len(decorator) + 1)
        extra = " " * config.wrap_indent
        for fragment in fragments[1:]:
            rendered.append(f"{base_indent} {comment_indent}{extra}{fragment}")
    return rendered


def render_line(
    line: SplitLine,
    alignment_width: int,
    wrap_limit: int,
    config: Config,
) -> List[str]:
    """
    Wrap the comment of line and render it in the configured style.

    Blank lines and lines without a comment are handled here for both
    styles. wrap_limit is the comment_max_width of the run and applies
    to both styles. Returns the output lines without trailing newlines.
    """

    if line.is_blank:
        return [""]
    if not line.has_comment:
        return [line.text]

    fragments = wrap_comment(line.comment, wrap_limit, config.wrap)

    if config.decorator:
        return render_decorated(line, fragments, config)
    return render_aligned(line, fragments, alignment_width, config)
