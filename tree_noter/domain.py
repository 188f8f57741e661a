"""
Core domain models for tree-noter.

These dataclasses describe one classified input line and the layout
computed for a whole run. They carry no I/O so the splitter, layout
engine and pipeline can share them freely.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SplitLine:
    """
    A single input line split into tree content and comment.

    text is the original line without its newline. For lines without
    the comment marker, tree_content equals text and comment is empty.
    Blank lines (empty or whitespace only) have is_blank set and are
    never padded or rendered with a comment.
    """

    text: str
    tree_content: str
    has_comment: bool = False
    comment: str = ""
    is_blank: bool = False


@dataclass(frozen=True)
class Layout:
    """
    Result of the first pass over the input.

    alignment_width is the shared column where aligned comments start;
    comment_max_width is the wrap limit for comment fragments.
    """

    lines: Tuple[SplitLine, ...]
    alignment_width: int
    comment_max_width: int
