"""Listing models for stored runs and run sub-directories."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


def _mtime(path: Path) -> datetime:
    return datetime.fromtimestamp(path.stat().st_mtime, tz=UTC)


class RunEntry(BaseModel):
    """A single stored run as seen in a listing."""

    model_config = ConfigDict(extra="ignore")

    run_id: str
    run_type: str
    name: str
    modified: datetime
    path: Path | None = None

    @classmethod
    def from_path(cls, path: Path, suffix: str) -> RunEntry | None:
        """Parse ``{run_id}.{type}.{suffix}``. Returns None for foreign names."""
        parts = path.name.split(".")
        if len(parts) != 3 or parts[2] != suffix or not parts[0] or not parts[1]:
            return None
        return cls(
            run_id=parts[0],
            run_type=parts[1],
            name=path.name,
            modified=_mtime(path),
            path=path,
        )


class DirEntry(BaseModel):
    """A sub-directory of the run directory."""

    model_config = ConfigDict(extra="ignore")

    name: str
    modified: datetime
    path: Path | None = None

    @classmethod
    def from_path(cls, path: Path) -> DirEntry:
        return cls(name=path.name, modified=_mtime(path), path=path)


class RunListing(BaseModel):
    """Sub-directories and runs, each ordered newest first."""

    directories: list[DirEntry] = Field(default_factory=list)
    runs: list[RunEntry] = Field(default_factory=list)
    sub_dir: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.directories and not self.runs
