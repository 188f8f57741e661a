"""
Input and output stream handling for tree-noter.

This module opens the input source and output sink selected on the
command line and translates I/O failures into StreamReadError and
StreamWriteError so the CLI can report them uniformly.
"""

from __future__ import annotations

import io
import logging
import sys
from contextlib import contextmanager
from typing import Iterator, List, Optional, TextIO

from .errors import StreamReadError, StreamWriteError

LOG = logging.getLogger(__name__)


@contextmanager
def open_input(path: Optional[str]) -> Iterator[TextIO]:
    """
    Yield a UTF-8 text stream for path, or for stdin when path is None.

    Standard input is never closed here.
    """

    if path is None:
        LOG.debug("Reading from standard input")
        with _utf8_std_stream(sys.stdin) as stream:
            yield stream
        return

    LOG.debug("Reading from %s", path)
    try:
        handle = open(path, "r", encoding="utf-8")
    except OSError as exc:
        raise StreamReadError(f"error reading input: {exc}") from exc

    with handle:
        yield handle


@contextmanager
def open_output(path: Optional[str]) -> Iterator[TextIO]:
    """
    Yield a UTF-8 text stream for path, or for stdout when path is None.

    Standard output is never closed here.
    """

    if path is None:
        LOG.debug("Writing to standard output")
        with _utf8_std_stream(sys.stdout) as stream:
            yield stream
        return

    LOG.debug("Writing to %s", path)
    try:
        handle = open(path, "w", encoding="utf-8")
    except OSError as exc:
        raise StreamWriteError(f"error writing output: {exc}") from exc

    with handle:
        yield handle


@contextmanager
def _utf8_std_stream(stream: TextIO) -> Iterator[TextIO]:
    """
    Re-wrap the byte buffer of a standard stream as UTF-8 text,
    whatever the locale encoding is.

    Streams without a byte buffer (such as io.StringIO) are already
    decoded text and are yielded unchanged. The wrapper is detached on
    exit so the underlying standard stream stays open.
    """

    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        yield stream
        return

    stream.flush()
    wrapper = io.TextIOWrapper(buffer, encoding="utf-8")
    try:
        yield wrapper
    finally:
        try:
            wrapper.detach()
        except OSError as exc:
            raise StreamWriteError(f"error writing output: {exc}") from exc


def read_lines(source: TextIO) -> List[str]:
    """
    Read every line from source with its line terminator removed.
    """

    try:
        return [raw.rstrip("\r\n") for raw in source]
    except (OSError, UnicodeError) as exc:
        raise StreamReadError(f"error reading input: {exc}") from exc


def write_line(sink: TextIO, text: str) -> None:
    """
    Write text followed by a newline to sink.
    """

    try:
        sink.write(text + "\n")
    except (OSError, UnicodeError) as exc:
        raise StreamWriteError(f"error writing output: {exc}") from exc


def flush(sink: TextIO) -> None:
    try:
        sink.flush()
    except OSError as exc:
        raise StreamWriteError(f"error writing output: {exc}") from exc
