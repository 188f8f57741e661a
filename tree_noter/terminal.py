"""
Terminal width detection for tree-noter.

The layout engine only ever sees a resolved max width; this module is
the CLI-side collaborator that resolves it.
"""

from __future__ import annotations

import logging
import os
import re
import subprocess
import sys
from typing import Optional, TextIO

from .config import DEFAULT_MAX_WIDTH

LOG = logging.getLogger(__name__)

_STTY_SIZE_RE = re.compile(r"\d+ (\d+)")


def resolve_max_width(explicit: Optional[int], stream: Optional[TextIO] = None) -> int:
    """
    Return the effective max output width.

    An explicit value wins. Otherwise the column count of stream (stdout
    by default) is used when it is a terminal, then the output of
    `stty size`, and finally DEFAULT_MAX_WIDTH.
    """

    if explicit:
        return explicit

    columns = _tty_columns(stream if stream is not None else sys.stdout)
    if columns:
        return columns

    columns = _stty_columns()
    if columns:
        return columns

    LOG.debug("Could not detect terminal width; using %d", DEFAULT_MAX_WIDTH)
    return DEFAULT_MAX_WIDTH


def _tty_columns(stream: TextIO) -> Optional[int]:
    try:
        if not stream.isatty():
            return None
        columns = os.get_terminal_size(stream.fileno()).columns
    except (OSError, ValueError) as exc:
        LOG.debug("Terminal size query failed: %s", exc)
        return None
    return columns or None


def _stty_columns() -> Optional[int]:
    cmd = ["stty", "size"]
    LOG.debug("Running command: %s", " ".join(cmd))
    try:
        completed = subprocess.run(
            cmd,
            check=False,
            text=True,
            capture_output=True,
        )
    except OSError as exc:
        LOG.debug("failed to execute stty: %s", exc)
        return None

    if completed.returncode != 0:
        LOG.debug("stty stderr: %s", completed.stderr)
        return None

    match = _STTY_SIZE_RE.search(completed.stdout)
    if not match:
        return None
    return int(match.group(1)) or None
