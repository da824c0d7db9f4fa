"""Exceptions for obtaining diff text on the host side.

The analyzer itself never raises; these cover the input surface only.
"""


class DiffFocusError(Exception):
    """Base exception for all diff-focus host operations."""


class DiffSourceError(DiffFocusError):
    """Raised when the diff file cannot be read or git diff fails."""


class NoInputError(DiffFocusError):
    """Raised when no input surface is available to read a diff from."""


class EmptyDiffError(DiffFocusError):
    """Raised when the supplied diff text is empty or whitespace-only."""
