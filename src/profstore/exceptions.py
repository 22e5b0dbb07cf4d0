"""Public exception types for profstore."""

from __future__ import annotations


class ProfstoreError(Exception):
    """Base class for all profstore exceptions."""


class RunLoadError(ProfstoreError):
    """Raised when a stored run payload cannot be parsed."""


class RunWriteError(ProfstoreError):
    """Raised when a run cannot be written to its destination."""
