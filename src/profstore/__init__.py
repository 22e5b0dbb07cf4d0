"""profstore — filesystem storage for profiler runs.

Convenience API:
    profstore.open_store(...)  -> FileRunStore for a directory
    store.save_run(run, "profile")          -> run id
    store.get_run(run_id, "profile")        -> (run, description)
    store.list_runs()                       -> RunListing

DI API (construct your own store):
    from profstore.core import StoreConfig
    from profstore.storage import FileRunStore
    store = FileRunStore(config=StoreConfig(output_dir="/tmp/runs"))
"""

from __future__ import annotations

from pathlib import Path

from .core import StoreConfig
from .exceptions import ProfstoreError, RunLoadError, RunWriteError
from .models import DirEntry, Run, RunEntry, RunListing
from .renderers import render_listing, render_listing_html
from .storage import FileRunStore, MemoryRunStore, RunStore


def open_store(
    directory: str | Path | None = None,
    *,
    sub_dir: str | None = None,
    suffix: str | None = None,
) -> FileRunStore:
    """Open a FileRunStore, filling unset options from the environment."""
    config = StoreConfig.from_env()
    if suffix is not None:
        config = StoreConfig.model_validate({**config.model_dump(), "suffix": suffix})
    return FileRunStore(directory, config=config, sub_dir=sub_dir)


__all__ = [
    "DirEntry",
    "FileRunStore",
    "MemoryRunStore",
    "ProfstoreError",
    "Run",
    "RunEntry",
    "RunListing",
    "RunLoadError",
    "RunStore",
    "RunWriteError",
    "StoreConfig",
    "open_store",
    "render_listing",
    "render_listing_html",
]
