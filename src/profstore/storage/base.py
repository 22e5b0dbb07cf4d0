"""Storage backend abstractions."""

from __future__ import annotations

from typing import Protocol

from ..models import Run, RunListing


class RunStore(Protocol):
    """Protocol for getting and saving profiler runs.

    ``get_run`` accepts a comma-separated list of run types and returns the
    first match in listed order, together with a short description of the
    run. ``save_run`` generates a unique run id when the caller does not
    supply one and returns the id the run was saved under.
    """

    def get_run(self, run_id: str, run_type: str) -> tuple[Run | None, str]: ...
    def save_run(self, run: Run, run_type: str, run_id: str | None = None) -> str: ...
    def list_runs(self) -> RunListing: ...


def split_types(run_type: str) -> list[str]:
    """Split a comma-separated run type list, preserving order."""
    return run_type.split(",")


def check_name(value: str, what: str) -> None:
    """Reject names that would escape the run directory or break file name parsing."""
    if not value:
        raise ValueError(f"{what} must not be empty")
    if any(char in value for char in "/\\."):
        raise ValueError(f"{what} must not contain '/', '\\' or '.': {value!r}")


def describe_run(suffix: str, run_type: str) -> str:
    return f"{suffix} Run (Namespace={run_type})"


def describe_missing(run_id: str) -> str:
    return f"Invalid Run Id = {run_id}"
