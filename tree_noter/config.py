"""
Configuration model for tree-noter.

The CLI constructs a Config instance and passes it down into the
splitter, layout engine and pipeline so behavior can be adjusted
without relying on global state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_COMMENT_MARKER = "#"
DEFAULT_GAP = 30
DEFAULT_MAX_WIDTH = 80
DEFAULT_SEPARATOR = "-----"


@dataclass(frozen=True)
class Config:
    """
    Resolved configuration for a single tree-noter run.

    max_width is already resolved here (explicit flag or detected
    terminal width); the core never probes the terminal itself.
    """

    comment_marker: str = DEFAULT_COMMENT_MARKER
    gap: int = DEFAULT_GAP
    max_width: int = DEFAULT_MAX_WIDTH
    decorator: bool = False
    separator: str = DEFAULT_SEPARATOR
    wrap: bool = False
    wrap_indent: int = 0
    input_path: Optional[str] = None
    output_path: Optional[str] = None
    verbosity: int = 0
