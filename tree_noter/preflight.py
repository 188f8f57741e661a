"""
Configuration checks for tree-noter runs.

These checks run after the CLI resolves a Config and before any stream
is opened, so an unusable configuration fails fast with an actionable
error.
"""

from __future__ import annotations

from typing import List

from .config import Config
from .errors import ConfigError


def validate_config(config: Config) -> None:
    """
    Validate the invariants of a resolved Config.

    A max width too small to leave room for comments is accepted; the
    layout engine clamps the wrap limit instead of failing.
    """

    problems: List[str] = []
    if not config.comment_marker:
        problems.append("comment marker must not be empty")
    if not config.separator:
        problems.append("separator must not be empty")
    if config.gap < 0:
        problems.append(f"gap must be non-negative (got {config.gap})")
    if config.wrap_indent < 0:
        problems.append(f"indent must be non-negative (got {config.wrap_indent})")
    if config.max_width <= 0:
        problems.append(f"max width must be positive (got {config.max_width})")

    if problems:
        raise ConfigError(f"invalid configuration: {'; '.join(problems)}")
