"""
Custom exception types used across tree-noter.

Line splitting and layout are total functions over strings and never
raise; only stream I/O and configuration problems surface as errors.
"""

from __future__ import annotations


class TreeNoterError(Exception):
    """Base class for all tree-noter specific errors."""


class StreamReadError(TreeNoterError):
    """Raised when the input source cannot be opened or read."""


class StreamWriteError(TreeNoterError):
    """Raised when the output sink cannot be opened or written."""


class ConfigError(TreeNoterError):
    """Raised when a resolved configuration violates its invariants."""
