"""
Line classification for tree-noter.
"""

from __future__ import annotations

from .domain import SplitLine


def split_line(line: str, marker: str) -> SplitLine:
    """
    Split one line of tree output at the first occurrence of marker.

    The text before the marker is right-trimmed and the comment after it
    is stripped on both sides. A line without the marker is kept verbatim
    as tree content, trailing whitespace included.
    """

    if not line.strip():
        return SplitLine(text=line, tree_content="", is_blank=True)

    pos = line.find(marker)
    if pos < 0:
        return SplitLine(text=line, tree_content=line)

    return SplitLine(
        text=line,
        tree_content=line[:pos].rstrip(),
        has_comment=True,
        comment=line[pos + len(marker) :].strip(),
    )
