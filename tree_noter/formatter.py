"""
High-level orchestration for tree-noter.

Formatting runs in two phases:
  - prepare() splits every input line and computes the alignment width,
    which depends on the widest tree line in the whole input;
  - iter_rendered() maps each split line to its output lines.

format_stream() ties both phases to a source and a sink, writing each
rendered line as soon as it is produced.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, TextIO

from .config import Config
from .domain import Layout
from .layout import comment_max_width, compute_alignment_width, render_line
from .splitter import split_line
from .streams import flush, open_input, open_output, read_lines, write_line

LOG = logging.getLogger(__name__)


def prepare(raw_lines: Iterable[str], config: Config) -> Layout:
    """
    Split all lines and compute the shared layout for the run.
    """

    lines = tuple(split_line(raw, config.comment_marker) for raw in raw_lines)
    alignment_width = compute_alignment_width(lines, config.gap)
    LOG.debug("Alignment width %d for %d lines", alignment_width, len(lines))
    return Layout(
        lines=lines,
        alignment_width=alignment_width,
        comment_max_width=comment_max_width(config.max_width, alignment_width),
    )


def iter_rendered(layout: Layout, config: Config) -> Iterator[str]:
    """
    Yield output lines, without newlines, in input order.
    """

    for line in layout.lines:
        yield from render_line(
            line, layout.alignment_width, layout.comment_max_width, config
        )


def format_lines(raw_lines: Iterable[str], config: Config) -> List[str]:
    """
    Format a sequence of lines and return the output lines.
    """

    return list(iter_rendered(prepare(raw_lines, config), config))


def write_rendered(layout: Layout, sink: TextIO, config: Config) -> int:
    """
    Write the rendered lines of layout to sink as they are produced.

    Returns the number of lines written.
    """

    written = 0
    for text in iter_rendered(layout, config):
        write_line(sink, text)
        written += 1
    flush(sink)
    return written


def format_stream(source: TextIO, sink: TextIO, config: Config) -> int:
    """
    Read all of source, then write the formatted lines to sink.
    """

    layout = prepare(read_lines(source), config)
    return write_rendered(layout, sink, config)


def run_format(config: Config) -> int:
    """
    Entry point for the main CLI command.

    The input is read completely before the output is opened, so a read
    failure never truncates an existing output file. Returns the number
    of output lines.
    """

    LOG.debug("Starting tree-noter with config: %s", config)

    with open_input(config.input_path) as source:
        layout = prepare(read_lines(source), config)

    with open_output(config.output_path) as sink:
        written = write_rendered(layout, sink, config)

    LOG.info(
        "Wrote %d lines in %s style",
        written,
        "decorator" if config.decorator else "aligned",
    )
    return written
